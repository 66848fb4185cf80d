from typing import Final

TOTAL_HORSES: Final = 20
HORSES_PER_ROUND: Final = 10
ROUND_COUNT: Final = 6

MIN_CONDITION: Final = 1
MAX_CONDITION: Final = 100

# (round_number, distance in meters)
ROUNDS: Final[tuple[tuple[int, int], ...]] = (
    (1, 1200),
    (2, 1400),
    (3, 1600),
    (4, 1800),
    (5, 2000),
    (6, 2200),
)

HORSE_COLORS: Final[tuple[str, ...]] = (
    "#e6194b",
    "#3cb44b",
    "#ffe119",
    "#4363d8",
    "#f58231",
    "#911eb4",
    "#46f0f0",
    "#f032e6",
    "#bcf60c",
    "#fabebe",
    "#008080",
    "#e6beff",
    "#9a6324",
    "#fffac8",
    "#800000",
    "#aaffc3",
    "#808000",
    "#ffd8b1",
    "#000075",
    "#808080",
    "#ff7f50",
    "#2f4f4f",
    "#daa520",
    "#8b008b",
)

HORSE_FIRST_NAMES: Final[tuple[str, ...]] = (
    "Silver",
    "Golden",
    "Midnight",
    "Thunder",
    "Wild",
    "Royal",
    "Crimson",
    "Shadow",
    "Lucky",
    "Swift",
    "Brave",
    "Misty",
    "Iron",
    "Storm",
    "Noble",
    "Dancing",
    "Blazing",
    "Frosty",
    "Velvet",
    "Copper",
    "Scarlet",
    "Hidden",
    "Desert",
    "Northern",
)

HORSE_SECOND_NAMES: Final[tuple[str, ...]] = (
    "Arrow",
    "Comet",
    "Spirit",
    "Dream",
    "Runner",
    "Star",
    "Legend",
    "Flame",
    "Wind",
    "Prince",
    "Dancer",
    "Hawk",
    "Glory",
    "Storm",
    "Rocket",
    "Echo",
    "Whisper",
    "Charm",
    "Blaze",
    "Voyager",
    "Monarch",
    "Falcon",
    "Mirage",
    "Rebel",
)
