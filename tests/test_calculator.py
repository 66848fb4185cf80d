import random
from unittest.mock import MagicMock

import pytest

from horse_racing_simulator.engine.calculator import (
    compute_results,
    finishing_time,
    format_round_results,
    race_duration_ms,
)
from tests.test_utils import make_horse, make_horses


def fixed_rng(*values: float) -> MagicMock:
    rng = MagicMock()
    rng.uniform.side_effect = list(values)
    return rng


@pytest.mark.parametrize("distance", [1, 1200, 2200])
@pytest.mark.parametrize("seed", [0, 7])
def test_results_form_a_ranking(distance: int, seed: int):
    rng = random.Random(seed)
    horses = [make_horse(i + 1, condition=rng.randint(1, 100)) for i in range(10)]

    results = compute_results(horses, distance, rng)

    assert len(results) == len(horses)
    assert all(r.time > 0 for r in results)
    assert all(r.distance == distance for r in results)
    assert sorted(r.position for r in results) == list(range(1, 11))
    assert [r.position for r in results] == list(range(1, 11))
    by_time = sorted(results, key=lambda r: r.time)
    by_position = sorted(results, key=lambda r: r.position)
    assert by_time == by_position
    assert {r.horse for r in results} == set(horses)


def test_formula():
    horse = make_horse(1, condition=60)
    time = finishing_time(horse, 1600, fixed_rng(0.5), base_speed=16.0)
    # 1600/16 + 0.4 * 80 + 0.5
    assert time == pytest.approx(132.5)


def test_lower_condition_is_slower():
    fit = make_horse(1, condition=100)
    tired = make_horse(2, condition=1)

    results = compute_results([tired, fit], 1200, fixed_rng(0.0, 0.0))

    assert results[0].horse == fit
    assert results[1].horse == tired
    assert results[0].time == pytest.approx(75.0)


def test_time_has_a_floor_of_one_second():
    results = compute_results([make_horse(1, condition=100)], 1, fixed_rng(-1.0))
    assert results[0].time == 1.0


def test_ties_keep_entry_order():
    horses = make_horses(3, condition=50)

    results = compute_results(horses, 1200, fixed_rng(0.0, 0.0, 0.0))

    assert [r.horse.id for r in results] == ["horse-1", "horse-2", "horse-3"]
    assert [r.position for r in results] == [1, 2, 3]


def test_empty_field_and_bad_distance():
    assert compute_results([], 1200, random.Random(0)) == []
    with pytest.raises(ValueError):
        compute_results(make_horses(2), 0, random.Random(0))


def test_format_round_results():
    horses = [make_horse(1, 100), make_horse(2, 1)]
    results = compute_results(horses, 1200, fixed_rng(0.25, 0.0))

    lines = format_round_results(3, 1200, results)

    assert lines == [
        "Round 3 (1200m):",
        "1. First1 Second1 - 75.25s",
        "2. First2 Second2 - 134.40s",
        "",
    ]


def test_race_duration_ms():
    results = compute_results(make_horses(2, condition=100), 1600, fixed_rng(0.0, 1.0))
    assert race_duration_ms(results, 100.0) == pytest.approx(1010.0)
    assert race_duration_ms([], 100.0) == 0.0
