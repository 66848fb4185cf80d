"""
Named state transitions.

Each commit is a pure, total function that takes the current snapshot plus a
payload and returns the next snapshot. Invalid round indices or a missing
schedule leave the state as it is.
"""

from collections.abc import Callable, Sequence
from dataclasses import replace
from typing import Any

from horse_racing_simulator.core.state import (
    GameState,
    Horse,
    RaceResult,
    RaceSchedule,
)
from horse_racing_simulator.core.types import CommitName


def set_horses(state: GameState, horses: Sequence[Horse]) -> GameState:
    return replace(state, horses=tuple(horses))


def set_race_schedule(state: GameState, schedule: RaceSchedule) -> GameState:
    return replace(
        state,
        race_schedule=tuple(schedule),
        current_round_index=-1,
        race_results=(),
    )


def set_current_round(state: GameState, index: int) -> GameState:
    return replace(state, current_round_index=index)


def set_is_racing(state: GameState, is_racing: bool) -> GameState:
    return replace(state, is_racing=is_racing)


def set_is_paused(state: GameState, is_paused: bool) -> GameState:
    return replace(state, is_paused=is_paused)


def set_race_results(state: GameState, results: Sequence[str]) -> GameState:
    return replace(state, race_results=tuple(results))


def _has_round(state: GameState, index: int) -> bool:
    return state.race_schedule is not None and 0 <= index < len(state.race_schedule)


def set_round_results(
    state: GameState,
    round_index: int,
    results: Sequence[RaceResult],
) -> GameState:
    if not _has_round(state, round_index):
        return state
    assert state.race_schedule is not None
    schedule = list(state.race_schedule)
    schedule[round_index] = replace(schedule[round_index], results=tuple(results))
    return replace(state, race_schedule=tuple(schedule))


def complete_round(
    state: GameState,
    round_index: int,
    result_lines: Sequence[str],
) -> GameState:
    if not _has_round(state, round_index):
        return state
    assert state.race_schedule is not None
    schedule = list(state.race_schedule)
    schedule[round_index] = replace(schedule[round_index], is_completed=True)
    return replace(
        state,
        race_schedule=tuple(schedule),
        race_results=state.race_results + tuple(result_lines),
    )


def reset_game(state: GameState) -> GameState:
    # Horses survive; a full reset follows up with SET_HORSES.
    return GameState(horses=state.horses)


COMMITS: dict[CommitName, Callable[..., GameState]] = {
    "SET_HORSES": set_horses,
    "SET_RACE_SCHEDULE": set_race_schedule,
    "SET_CURRENT_ROUND": set_current_round,
    "SET_IS_RACING": set_is_racing,
    "SET_IS_PAUSED": set_is_paused,
    "SET_RACE_RESULTS": set_race_results,
    "SET_ROUND_RESULTS": set_round_results,
    "COMPLETE_ROUND": complete_round,
    "RESET_GAME": reset_game,
}


def apply_commit(state: GameState, name: CommitName, *payload: Any) -> GameState:
    return COMMITS[name](state, *payload)
