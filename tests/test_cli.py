from pathlib import Path

import pytest

from horse_racing_simulator.cli import Args


def test_fast_run_prints_every_round(capsys: pytest.CaptureFixture[str]):
    code = Args(seed=4, fast=True)()

    out = capsys.readouterr().out
    assert code == 0
    headers = [line for line in out.splitlines() if line.startswith("Round ")]
    assert headers == [
        "Round 1 (1200m):",
        "Round 2 (1400m):",
        "Round 3 (1600m):",
        "Round 4 (1800m):",
        "Round 5 (2000m):",
        "Round 6 (2200m):",
    ]


def test_same_seed_same_results(capsys: pytest.CaptureFixture[str]):
    Args(seed=12, fast=True)()
    first = capsys.readouterr().out
    Args(seed=12, fast=True)()
    second = capsys.readouterr().out

    assert first == second


def test_config_file_is_used(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    path = tmp_path / "timing.toml"
    path.write_text(
        "animation_speed_multiplier = 1000000.0\n"
        "reset_delay_ms = 0\n"
        "dom_settle_delay_ms = 0\n"
        "round_delay_ms = 0\n"
        "poll_interval_ms = 5\n",
    )

    assert Args(config=path, seed=1)() == 0
    assert "Round 6 (2200m):" in capsys.readouterr().out


def test_missing_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    code = Args(config=tmp_path / "nope.toml")()

    assert code == 1
    assert "Config file not found" in capsys.readouterr().err
