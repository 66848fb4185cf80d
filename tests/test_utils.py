import asyncio
import random
from collections.abc import Coroutine
from typing import Any

from horse_racing_simulator.core.state import GameState, Horse
from horse_racing_simulator.core.types import CommitName
from horse_racing_simulator.engine.game_engine import GameEngine
from horse_racing_simulator.simulation.config import RaceTiming


def make_horse(idx: int, condition: int = 50) -> Horse:
    return Horse(
        id=f"horse-{idx}",
        name=f"First{idx} Second{idx}",
        color=f"#0000{idx:02d}",
        condition=condition,
    )


def make_horses(count: int = 20, condition: int = 50) -> list[Horse]:
    return [make_horse(i + 1, condition) for i in range(count)]


# Rounds take 75-250ms of real time, long enough to pause mid-round.
PAUSABLE_TIMING = RaceTiming(
    animation_speed_multiplier=1000.0,
    reset_delay_ms=0,
    dom_settle_delay_ms=0,
    round_delay_ms=0,
    poll_interval_ms=5,
)


class GameScenario:
    """
    A reusable harness that wraps the GameEngine for testing.
    """

    def __init__(self, seed: int = 0, timing: RaceTiming | None = None):
        self.rng: random.Random = random.Random(seed)
        self.engine: GameEngine = GameEngine(
            rng=self.rng,
            timing=timing if timing is not None else RaceTiming.fast(),
        )
        self.commit_log: list[CommitName] = []
        _ = self.engine.store.subscribe(lambda name, _state: self.commit_log.append(name))

    @property
    def state(self) -> GameState:
        return self.engine.state

    def run[T](self, coro: Coroutine[Any, Any, T]) -> T:
        return asyncio.run(coro)

    async def prepare(self) -> None:
        """Generate horses and a schedule."""
        await self.engine.generate_horses()
        await self.engine.generate_schedule()

    def completed_rounds(self) -> int:
        schedule = self.state.race_schedule or ()
        return sum(1 for r in schedule if r.is_completed)
