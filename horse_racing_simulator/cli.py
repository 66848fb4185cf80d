"""Command-line front end: runs one full game in the terminal."""

import asyncio
import logging
import random
import sys
from dataclasses import dataclass
from pathlib import Path

import cappa
from tqdm import tqdm

from horse_racing_simulator.core import queries
from horse_racing_simulator.core.errors import GameError
from horse_racing_simulator.core.state import GameState
from horse_racing_simulator.core.types import CommitName
from horse_racing_simulator.engine.game_engine import GameEngine
from horse_racing_simulator.engine.logging import configure_logging
from horse_racing_simulator.simulation.config import RaceTiming


@dataclass
class Args:
    """Generate a roster, build the schedule and race all rounds."""

    config: Path | None = None
    """Path to a TOML file with race timing"""

    seed: int | None = None
    """Seed for horse generation, scheduling and race outcomes"""

    fast: bool = False
    """Skip all delays and finish rounds instantly"""

    verbose: bool = False
    """Show engine logs"""

    def __call__(self) -> int:
        if self.config is not None and not self.config.exists():
            print(f"Error: Config file not found: {self.config}", file=sys.stderr)
            return 1

        if self.fast:
            timing = RaceTiming.fast()
        elif self.config is not None:
            timing = RaceTiming.from_toml(self.config)
        else:
            timing = RaceTiming()

        engine = GameEngine(rng=random.Random(self.seed), timing=timing)
        configure_logging(
            engine,
            level=logging.INFO if self.verbose else logging.WARNING,
        )

        try:
            asyncio.run(run_game(engine))
        except GameError as e:
            print(f"Error: {e.message}", file=sys.stderr)
            return 1

        for line in queries.race_results(engine.state):
            print(line)
        return 0


async def run_game(engine: GameEngine) -> None:
    await engine.generate_horses()
    await engine.generate_schedule()

    schedule = queries.race_schedule(engine.state) or ()
    with tqdm(total=len(schedule), desc="Racing", unit="round") as pbar:

        def on_commit(name: CommitName, state: GameState) -> None:
            if name == "COMPLETE_ROUND":
                pbar.update(1)
            elif name == "SET_CURRENT_ROUND":
                round_ = queries.current_round(state)
                if round_ is not None:
                    pbar.set_postfix_str(f"{round_.distance}m")

        unsubscribe = engine.store.subscribe(on_commit)
        try:
            await engine.start_race()
        finally:
            unsubscribe()


def main():
    """Entry point for CLI."""
    return cappa.invoke(Args)


if __name__ == "__main__":
    sys.exit(main())
