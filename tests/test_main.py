from __future__ import annotations

import json

import pytest

from speedrays.config.settings import Settings, get_settings
from speedrays.core.session import GameMode, PlayerProfile
from speedrays.main import build_parser, main, run_headless
from speedrays.utils.score_log import ScoreLog


@pytest.fixture
def app_settings(tmp_path) -> Settings:
    return Settings(scores_path=tmp_path / "scores.json", seed=7)


@pytest.fixture
def fresh_settings(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SPEEDRAYS_SCORES_PATH", str(tmp_path / "scores.json"))
    monkeypatch.setenv("SPEEDRAYS_SEED", "7")
    get_settings.cache_clear()
    yield tmp_path / "scores.json"
    get_settings.cache_clear()


def test_parser_defaults() -> None:
    args = build_parser().parse_args([])
    assert args.mode == "race"
    assert not args.headless
    assert args.max_ticks == 7200


def test_headless_race_ends_in_a_crash_and_is_logged(app_settings) -> None:
    profile = PlayerProfile.from_form("Ana", "12")
    record = run_headless(app_settings, profile, GameMode.RACE, max_ticks=7200)

    assert record is not None
    assert record["name"] == "Ana"
    assert record["badges"] == []
    assert record["score"] > 0

    logged = ScoreLog(app_settings.scores_path).read()
    assert len(logged) == 1
    assert logged[0].score == record["score"]


def test_headless_park_without_input_never_finishes(app_settings) -> None:
    record = run_headless(app_settings, PlayerProfile(), GameMode.PARK, max_ticks=10)
    assert record is None
    assert not app_settings.scores_path.exists()


def test_main_headless_prints_the_record(fresh_settings, capsys) -> None:
    assert main(["--headless", "--name", "Bo"]) == 0
    printed = json.loads(capsys.readouterr().out)
    assert printed["name"] == "Bo"
    assert fresh_settings.exists()


def test_main_headless_returns_error_when_run_does_not_end(fresh_settings) -> None:
    assert main(["--headless", "--mode", "park", "--max-ticks", "5"]) == 1


def test_main_prints_high_scores(fresh_settings, capsys) -> None:
    main(["--headless", "--name", "Bo"])
    capsys.readouterr()

    assert main(["--scores"]) == 0
    out = capsys.readouterr().out.strip().splitlines()
    assert len(out) == 1
    assert out[0].startswith("#1 Bo (18) - ")
