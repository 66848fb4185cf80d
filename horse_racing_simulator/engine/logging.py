from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, override

from rich.logging import RichHandler

from horse_racing_simulator.core import queries

if TYPE_CHECKING:
    from horse_racing_simulator.engine.game_engine import GameEngine

ROUND_PATTERN = re.compile(r"\bRound \d+\b")
DISTANCE_PATTERN = re.compile(r"\b\d+m\b")
TIME_PATTERN = re.compile(r"\b\d+\.\d{2}s\b")
CONTROL_PATTERN = re.compile(r"\b(paused|resumed|reset|abandoned)\b")


# Simple color theme for Rich
COLOR = {
    "round": "bold green",
    "distance": "cyan",
    "time": "yellow",
    "control": "bold magenta",
    "warning": "bold red",
    "prefix": "dim",
}


class RaceContextFilter(logging.Filter):
    """Inject the engine's current round and phase into every log record."""

    def __init__(self, engine: GameEngine, name: str = "") -> None:
        super().__init__(name)
        self.engine: GameEngine = engine

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        round_ = queries.current_round(self.engine.state)
        record.round_number = round_.round_number if round_ is not None else 0
        record.phase = self.engine.phase
        return True


class RichMarkupFormatter(logging.Formatter):
    @override
    def format(self, record: logging.LogRecord) -> str:
        round_number = getattr(record, "round_number", 0)
        phase = getattr(record, "phase", "_")
        prefix = f"R{round_number} {phase}"

        styled = record.getMessage()
        styled = ROUND_PATTERN.sub(
            lambda m: f"[{COLOR['round']}]{m.group(0)}[/{COLOR['round']}]", styled
        )
        styled = DISTANCE_PATTERN.sub(
            lambda m: f"[{COLOR['distance']}]{m.group(0)}[/{COLOR['distance']}]",
            styled,
        )
        styled = TIME_PATTERN.sub(
            lambda m: f"[{COLOR['time']}]{m.group(0)}[/{COLOR['time']}]", styled
        )
        styled = CONTROL_PATTERN.sub(
            rf"[{COLOR['control']}]\1[/{COLOR['control']}]", styled
        )

        if record.levelno >= logging.WARNING:
            styled = f"[{COLOR['warning']}]{styled}[/{COLOR['warning']}]"

        return f"[{COLOR['prefix']}]{prefix}[/{COLOR['prefix']}]  {styled}"


def configure_logging(
    engine: GameEngine | None = None,
    level: int = logging.INFO,
) -> None:
    logger = logging.getLogger("horse_racing_simulator")
    logger.setLevel(level)
    handler = RichHandler(markup=True, show_path=False, show_time=False)
    handler.setFormatter(RichMarkupFormatter())
    if engine is not None:
        handler.addFilter(RaceContextFilter(engine))
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
