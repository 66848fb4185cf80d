import logging
import random
from collections.abc import Sequence

from horse_racing_simulator.core.constants import (
    HORSE_COLORS,
    HORSE_FIRST_NAMES,
    HORSE_SECOND_NAMES,
    MAX_CONDITION,
    MIN_CONDITION,
    TOTAL_HORSES,
)
from horse_racing_simulator.core.errors import HorseGenerationError
from horse_racing_simulator.core.state import Horse

logger = logging.getLogger(__name__)


def _check_pool(label: str, pool: Sequence[str], count: int) -> None:
    unique = len(set(pool))
    if unique < count:
        raise HorseGenerationError(
            f"Insufficient {label}: need {count}, have {unique}",
        )


def generate_horses(
    rng: random.Random,
    *,
    colors: Sequence[str] = HORSE_COLORS,
    first_names: Sequence[str] = HORSE_FIRST_NAMES,
    second_names: Sequence[str] = HORSE_SECOND_NAMES,
    count: int = TOTAL_HORSES,
) -> list[Horse]:
    """
    Draw a fresh roster.

    Colors and both name parts are sampled without replacement, so no color,
    first name or second name repeats within the roster. Ids are sequential
    and therefore stable across regenerations.
    """
    _check_pool("colors", colors, count)
    _check_pool("first names", first_names, count)
    _check_pool("second names", second_names, count)

    picked_colors = rng.sample(sorted(set(colors)), count)
    picked_first = rng.sample(sorted(set(first_names)), count)
    picked_second = rng.sample(sorted(set(second_names)), count)

    horses = [
        Horse(
            id=f"horse-{i + 1}",
            name=f"{picked_first[i]} {picked_second[i]}",
            color=picked_colors[i],
            condition=rng.randint(MIN_CONDITION, MAX_CONDITION),
        )
        for i in range(count)
    ]
    logger.info(f"Generated {len(horses)} horses")
    return horses
