"""Error taxonomy shared by the generator, the schedule builder and the race engine."""

from enum import StrEnum
from typing import ClassVar


class ErrorCode(StrEnum):
    HORSE_GENERATION_ERROR = "HORSE_GENERATION_ERROR"
    RACE_SCHEDULE_ERROR = "RACE_SCHEDULE_ERROR"
    RACE_EXECUTION_ERROR = "RACE_EXECUTION_ERROR"


class GameError(Exception):
    """Base class for every error surfaced to the presentation layer."""

    code: ClassVar[ErrorCode]

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code.value!r}, message={self.message!r})"


class HorseGenerationError(GameError):
    """A candidate pool cannot supply a full roster."""

    code = ErrorCode.HORSE_GENERATION_ERROR


class RaceScheduleError(GameError):
    """The roster cannot be turned into a schedule."""

    code = ErrorCode.RACE_SCHEDULE_ERROR


class RaceExecutionError(GameError):
    """Starting or running the race failed."""

    code = ErrorCode.RACE_EXECUTION_ERROR


class RaceCancelled(Exception):
    """Raised inside a running race once the game has been reset."""
