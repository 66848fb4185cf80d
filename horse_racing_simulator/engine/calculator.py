import random
from collections.abc import Sequence

from horse_racing_simulator.core.state import Horse, RaceResult

BASE_SPEED_MPS = 16.0


def finishing_time(
    horse: Horse,
    distance: int,
    rng: random.Random,
    base_speed: float = BASE_SPEED_MPS,
) -> float:
    condition_factor = (100 - horse.condition) / 100
    base_time = distance / base_speed
    time_variation = condition_factor * (distance / 20)
    random_variation = rng.uniform(-1.0, 1.0)
    return max(1.0, base_time + time_variation + random_variation)


def compute_results(
    horses: Sequence[Horse],
    distance: int,
    rng: random.Random,
    *,
    base_speed: float = BASE_SPEED_MPS,
) -> list[RaceResult]:
    """Time every horse and rank them, fastest first."""
    if distance <= 0:
        raise ValueError(f"Distance must be positive, got {distance}")

    times = [finishing_time(h, distance, rng, base_speed) for h in horses]
    # sorted() is stable, so exact ties keep entry order.
    order = sorted(range(len(horses)), key=lambda i: times[i])
    return [
        RaceResult(horse=horses[i], position=rank, time=times[i], distance=distance)
        for rank, i in enumerate(order, start=1)
    ]


def race_duration_ms(
    results: Sequence[RaceResult],
    animation_speed_multiplier: float,
) -> float:
    if not results:
        return 0.0
    slowest = max(r.time for r in results)
    return (slowest * 1000) / animation_speed_multiplier


def format_round_results(
    round_number: int,
    distance: int,
    results: Sequence[RaceResult],
) -> list[str]:
    return [
        f"Round {round_number} ({distance}m):",
        *(f"{r.position}. {r.horse.name} - {r.time:.2f}s" for r in results),
        "",
    ]
