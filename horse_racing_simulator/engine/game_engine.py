import asyncio
import logging
import random

from horse_racing_simulator.core import queries
from horse_racing_simulator.core.errors import (
    RaceCancelled,
    RaceExecutionError,
    RaceScheduleError,
)
from horse_racing_simulator.core.state import GameState
from horse_racing_simulator.core.types import GamePhase
from horse_racing_simulator.engine.calculator import (
    compute_results,
    format_round_results,
    race_duration_ms,
)
from horse_racing_simulator.engine.generator import generate_horses
from horse_racing_simulator.engine.schedule import build_schedule
from horse_racing_simulator.engine.store import GameStore
from horse_racing_simulator.engine.timing import RaceControl, pausable_delay
from horse_racing_simulator.simulation.config import RaceTiming

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Drives one game session.

    The engine is the only writer to its store. A race run is a single
    asyncio task that walks the schedule round by round; pause, resume and
    reset only flip signals that the run observes at its next delay.
    """

    def __init__(
        self,
        store: GameStore | None = None,
        rng: random.Random | None = None,
        timing: RaceTiming | None = None,
    ) -> None:
        self.store: GameStore = store if store is not None else GameStore()
        self.rng: random.Random = rng if rng is not None else random.Random()
        self.timing: RaceTiming = timing if timing is not None else RaceTiming()
        self._control: RaceControl | None = None
        self._run_task: asyncio.Task[None] | None = None

    @property
    def state(self) -> GameState:
        return self.store.state

    @property
    def phase(self) -> GamePhase:
        return queries.game_phase(self.state)

    # ------------------------------
    # Setup
    # ------------------------------

    async def generate_horses(self) -> None:
        horses = generate_horses(self.rng)
        self.store.commit("SET_HORSES", horses)

    async def generate_schedule(self) -> None:
        if self.state.is_racing:
            raise RaceScheduleError(
                "Cannot generate a new schedule while a race is running.",
            )
        schedule = build_schedule(self.state.horses, self.rng)
        self.store.commit("SET_RACE_SCHEDULE", schedule)

    # ------------------------------
    # Race run
    # ------------------------------

    async def start_race(self) -> None:
        if self.state.race_schedule is None:
            raise RaceExecutionError(
                "No race schedule available. Please generate schedule first.",
            )
        if self.state.is_racing:
            raise RaceExecutionError("A race is already in progress.")

        control = RaceControl(poll_interval_ms=self.timing.poll_interval_ms)
        self._control = control

        self.store.commit("SET_IS_RACING", True)
        self.store.commit("SET_IS_PAUSED", False)
        self.store.commit("SET_CURRENT_ROUND", -1)
        logger.info(f"Race started ({len(self.state.race_schedule)} rounds)")

        task = asyncio.create_task(self._run_race(control))
        self._run_task = task
        try:
            await task
        finally:
            if self._run_task is task:
                self._run_task = None

    async def _run_race(self, control: RaceControl) -> None:
        try:
            control.raise_if_cancelled()
            round_count = len(self.state.race_schedule or ())
            for index in range(round_count):
                schedule = self.state.race_schedule
                if schedule is None or schedule[index].is_completed:
                    continue

                await pausable_delay(self.timing.reset_delay_ms, control)
                self.store.commit("SET_CURRENT_ROUND", index)

                await pausable_delay(self.timing.dom_settle_delay_ms, control)
                await self._run_round(index, control)

                await pausable_delay(self.timing.round_delay_ms, control)
        except RaceCancelled:
            logger.warning("Race run abandoned after reset")
            return
        except asyncio.CancelledError:
            self._stop_racing(control)
            raise
        except Exception as e:
            logger.error(f"Race execution failed: {e}", exc_info=True)
            self._stop_racing(control)
            raise RaceExecutionError(f"Race execution failed: {e}") from e

        self._stop_racing(control)
        logger.info("Race finished")

    async def _run_round(self, index: int, control: RaceControl) -> None:
        assert self.state.race_schedule is not None
        round_ = self.state.race_schedule[index]
        try:
            results = compute_results(
                round_.horses,
                round_.distance,
                self.rng,
                base_speed=self.timing.base_speed_mps,
            )
            # Results are visible before completion so a track view can pace itself.
            self.store.commit("SET_ROUND_RESULTS", index, results)

            duration_ms = race_duration_ms(
                results,
                self.timing.animation_speed_multiplier,
            )
            logger.debug(f"Round {round_.round_number} runs for {duration_ms:.0f}ms")
            await pausable_delay(duration_ms, control)

            lines = format_round_results(round_.round_number, round_.distance, results)
            self.store.commit("COMPLETE_ROUND", index, lines)
        except RaceCancelled:
            raise
        except Exception as e:
            raise RaceExecutionError(f"Round {index + 1} failed: {e}") from e

        if results:
            winner = results[0]
            logger.info(
                f"Round {round_.round_number} ({round_.distance}m) complete, "
                f"winner {winner.horse.name} in {winner.time:.2f}s",
            )

    def _stop_racing(self, control: RaceControl) -> None:
        if self._control is not control:
            return
        self.store.commit("SET_IS_RACING", False)
        self.store.commit("SET_IS_PAUSED", False)
        self._control = None

    async def wait_until_finished(self) -> None:
        task = self._run_task
        if task is not None and not task.done():
            _ = await asyncio.wait({task})

    # ------------------------------
    # Controls
    # ------------------------------

    async def pause_race(self) -> None:
        if not queries.can_pause(self.state):
            return
        self.store.commit("SET_IS_PAUSED", True)
        if self._control is not None:
            self._control.pause()
        logger.info("Race paused")

    async def resume_race(self) -> None:
        if not queries.can_resume(self.state):
            return
        self.store.commit("SET_IS_PAUSED", False)
        if self._control is not None:
            self._control.resume()
        logger.info("Race resumed")

    async def reset_race_state(self) -> None:
        self._cancel_run()
        self.store.commit("RESET_GAME")
        logger.info("Race state reset")

    async def reset_game(self) -> None:
        self._cancel_run()
        self.store.commit("RESET_GAME")
        self.store.commit("SET_HORSES", [])
        logger.info("Game reset")

    def _cancel_run(self) -> None:
        if self._control is not None:
            self._control.cancel()
            self._control = None
