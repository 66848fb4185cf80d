"""
Pausable, cancellable delays for the race loop.

All waiting in a race run goes through `pausable_delay`. Only time spent
unpaused counts toward the requested duration, and a cancelled control makes
every pending or future delay raise `RaceCancelled`.
"""

import asyncio
import contextlib
from dataclasses import dataclass, field

from horse_racing_simulator.core.errors import RaceCancelled

DEFAULT_POLL_INTERVAL_MS = 100


@dataclass(slots=True)
class RaceControl:
    """Pause and cancellation signals for a single race run."""

    poll_interval_ms: float = DEFAULT_POLL_INTERVAL_MS
    _resumed: asyncio.Event = field(default_factory=asyncio.Event)
    _cancelled: asyncio.Event = field(default_factory=asyncio.Event)

    def __post_init__(self) -> None:
        self._resumed.set()

    @property
    def paused(self) -> bool:
        return not self._resumed.is_set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def pause(self) -> None:
        self._resumed.clear()

    def resume(self) -> None:
        self._resumed.set()

    def cancel(self) -> None:
        self._cancelled.set()
        # wake anything parked on a pause
        self._resumed.set()

    def raise_if_cancelled(self) -> None:
        if self.cancelled:
            raise RaceCancelled

    async def wait_resumed(self, timeout_s: float) -> None:
        with contextlib.suppress(TimeoutError):
            await asyncio.wait_for(self._resumed.wait(), timeout_s)

    async def wait_cancelled(self, timeout_s: float) -> None:
        with contextlib.suppress(TimeoutError):
            await asyncio.wait_for(self._cancelled.wait(), timeout_s)


async def pausable_delay(ms: float, control: RaceControl) -> None:
    loop = asyncio.get_running_loop()
    poll_s = control.poll_interval_ms / 1000
    remaining = ms / 1000

    # always give other tasks a turn, even for zero-length delays
    await asyncio.sleep(0)

    while True:
        control.raise_if_cancelled()
        if remaining <= 0:
            return

        if control.paused:
            await control.wait_resumed(poll_s)
            continue

        step = min(poll_s, remaining)
        started = loop.time()
        await control.wait_cancelled(step)
        remaining -= loop.time() - started
