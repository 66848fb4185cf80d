from typing import Callable

import pytest

from horse_racing_simulator.simulation.config import RaceTiming
from tests.test_utils import GameScenario


@pytest.fixture
def scenario() -> Callable[..., GameScenario]:
    """Factory fixture to create scenarios."""

    def _builder(seed: int = 0, timing: RaceTiming | None = None) -> GameScenario:
        return GameScenario(seed, timing)

    return _builder
