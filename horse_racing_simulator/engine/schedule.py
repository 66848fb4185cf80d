import logging
import random
from collections.abc import Sequence

from horse_racing_simulator.core.constants import HORSES_PER_ROUND, ROUNDS, TOTAL_HORSES
from horse_racing_simulator.core.errors import RaceScheduleError
from horse_racing_simulator.core.state import Horse, RaceSchedule, Round

logger = logging.getLogger(__name__)


def select_random_horses(
    horses: Sequence[Horse],
    rng: random.Random,
    count: int = HORSES_PER_ROUND,
) -> list[Horse]:
    if len(horses) <= count:
        return list(horses)
    return rng.sample(list(horses), count)


def build_schedule(
    horses: Sequence[Horse],
    rng: random.Random,
    *,
    rounds: Sequence[tuple[int, int]] = ROUNDS,
    horses_per_round: int = HORSES_PER_ROUND,
) -> RaceSchedule:
    """
    Build one round per (round_number, distance) pair.

    Every round draws from the full roster independently of the others, so a
    horse can run in several rounds or in none.
    """
    if not horses:
        raise RaceScheduleError("No horses available. Please generate horses first.")

    if len(horses) != TOTAL_HORSES:
        raise RaceScheduleError(
            f"Expected exactly {TOTAL_HORSES} horses, but found {len(horses)}. "
            "Please regenerate horses.",
        )

    schedule: list[Round] = []
    for round_number, distance in rounds:
        selected = select_random_horses(horses, rng, horses_per_round)
        if len(selected) != horses_per_round:
            raise RaceScheduleError(
                f"Expected {horses_per_round} horses per round, but got {len(selected)}",
            )
        schedule.append(
            Round(round_number=round_number, distance=distance, horses=tuple(selected)),
        )

    logger.info(
        f"Built schedule: {len(schedule)} rounds "
        f"({', '.join(f'{r.distance}m' for r in schedule)})",
    )
    return tuple(schedule)
