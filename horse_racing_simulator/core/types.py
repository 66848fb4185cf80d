from typing import Literal

CommitName = Literal[
    "SET_HORSES",
    "SET_RACE_SCHEDULE",
    "SET_CURRENT_ROUND",
    "SET_IS_RACING",
    "SET_IS_PAUSED",
    "SET_RACE_RESULTS",
    "SET_ROUND_RESULTS",
    "COMPLETE_ROUND",
    "RESET_GAME",
]

GamePhase = Literal[
    "idle",
    "horses_ready",
    "scheduled",
    "racing",
    "paused",
    "finished",
]
