import logging
from collections.abc import Callable
from typing import Any

from horse_racing_simulator.core.commits import apply_commit
from horse_racing_simulator.core.state import GameState
from horse_racing_simulator.core.types import CommitName

logger = logging.getLogger(__name__)

Subscriber = Callable[[CommitName, GameState], None]


class GameStore:
    """
    Holds the current GameState snapshot.

    Every write goes through `commit`, which swaps in the next snapshot in a
    single assignment, so a reader never sees a half-applied update.
    """

    def __init__(self, state: GameState | None = None) -> None:
        self._state: GameState = state if state is not None else GameState()
        self._subscribers: list[Subscriber] = []

    @property
    def state(self) -> GameState:
        return self._state

    def commit(self, name: CommitName, *payload: Any) -> GameState:
        self._state = apply_commit(self._state, name, *payload)
        logger.debug(f"Commit {name}")
        for subscriber in list(self._subscribers):
            subscriber(name, self._state)
        return self._state

    def subscribe(self, subscriber: Subscriber) -> Callable[[], None]:
        self._subscribers.append(subscriber)

        def unsubscribe() -> None:
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)

        return unsubscribe
