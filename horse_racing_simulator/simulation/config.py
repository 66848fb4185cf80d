"""Timing configuration for race runs using msgspec."""

from __future__ import annotations

from pathlib import Path

import msgspec

from horse_racing_simulator.engine.calculator import BASE_SPEED_MPS


class RaceTiming(msgspec.Struct, frozen=True, forbid_unknown_fields=True):
    """
    TOML-backed pacing of a race run.

    Roster size, round count and distances live in core.constants.
    """

    base_speed_mps: float = BASE_SPEED_MPS
    # Real time runs this many times faster than simulated race time.
    animation_speed_multiplier: float = 100.0

    reset_delay_ms: float = 100
    dom_settle_delay_ms: float = 50
    round_delay_ms: float = 500
    poll_interval_ms: float = 100

    def __post_init__(self) -> None:
        if self.base_speed_mps <= 0:
            raise ValueError("base_speed_mps must be positive")
        if self.animation_speed_multiplier <= 0:
            raise ValueError("animation_speed_multiplier must be positive")
        if self.poll_interval_ms <= 0:
            raise ValueError("poll_interval_ms must be positive")

    @classmethod
    def from_toml(cls, path: str | Path) -> RaceTiming:
        """Load timing from a TOML file path."""
        with Path(path).open("rb") as f:
            return msgspec.toml.decode(f.read(), type=cls)

    @classmethod
    def fast(cls, poll_interval_ms: float = 5) -> RaceTiming:
        """Zero delays and near-instant rounds, for tests and headless runs."""
        return cls(
            animation_speed_multiplier=1_000_000.0,
            reset_delay_ms=0,
            dom_settle_delay_ms=0,
            round_delay_ms=0,
            poll_interval_ms=poll_interval_ms,
        )
