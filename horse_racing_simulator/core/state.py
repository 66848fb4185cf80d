from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Horse:
    id: str
    name: str
    color: str
    condition: int

    @property
    def first_name(self) -> str:
        return self.name.split(" ", 1)[0]

    @property
    def second_name(self) -> str:
        return self.name.split(" ", 1)[1]


@dataclass(frozen=True, slots=True)
class RaceResult:
    horse: Horse
    position: int
    time: float
    distance: int


@dataclass(frozen=True, slots=True)
class Round:
    round_number: int
    distance: int
    horses: tuple[Horse, ...]
    results: tuple[RaceResult, ...] | None = None
    is_completed: bool = False

    @property
    def slowest_time(self) -> float | None:
        if not self.results:
            return None
        return max(r.time for r in self.results)


RaceSchedule = tuple[Round, ...]


@dataclass(frozen=True, slots=True)
class GameState:
    """Immutable snapshot of one game session. Commits produce new snapshots."""

    horses: tuple[Horse, ...] = ()
    race_schedule: RaceSchedule | None = None
    current_round_index: int = -1
    is_racing: bool = False
    is_paused: bool = False
    race_results: tuple[str, ...] = ()
