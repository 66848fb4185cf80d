"""Read-only queries over a GameState snapshot."""

from horse_racing_simulator.core.state import GameState, Horse, RaceSchedule, Round
from horse_racing_simulator.core.types import GamePhase


def all_horses(state: GameState) -> tuple[Horse, ...]:
    return state.horses


def race_schedule(state: GameState) -> RaceSchedule | None:
    return state.race_schedule


def current_round(state: GameState) -> Round | None:
    schedule = state.race_schedule
    if schedule is not None and 0 <= state.current_round_index < len(schedule):
        return schedule[state.current_round_index]
    return None


def current_round_horses(state: GameState) -> tuple[Horse, ...]:
    round_ = current_round(state)
    return round_.horses if round_ is not None else ()


def is_racing(state: GameState) -> bool:
    return state.is_racing


def is_paused(state: GameState) -> bool:
    return state.is_paused


def race_results(state: GameState) -> tuple[str, ...]:
    return state.race_results


def can_generate_schedule(state: GameState) -> bool:
    return len(state.horses) > 0


def can_start_race(state: GameState) -> bool:
    return (
        state.race_schedule is not None
        and not state.is_racing
        and any(not r.is_completed for r in state.race_schedule)
    )


def can_pause(state: GameState) -> bool:
    return state.is_racing and not state.is_paused


def can_resume(state: GameState) -> bool:
    return state.is_racing and state.is_paused


def can_reset_race(state: GameState) -> bool:
    return state.is_racing and state.is_paused


def is_race_finished(state: GameState) -> bool:
    if not state.race_schedule:
        return False
    return all(r.is_completed for r in state.race_schedule)


def game_phase(state: GameState) -> GamePhase:
    if state.is_racing:
        return "paused" if state.is_paused else "racing"
    if is_race_finished(state):
        return "finished"
    if state.race_schedule is not None:
        return "scheduled"
    if state.horses:
        return "horses_ready"
    return "idle"
