from __future__ import annotations

import json

from speedrays.core.session import PARKED_BADGE, RunRecord
from speedrays.utils.score_log import ScoreLog, format_highscores


def _record(name: str, score: int, badges=None) -> RunRecord:
    return RunRecord(
        name=name,
        age=12,
        avatar="😎",
        car="sport",
        color="#4cc9f0",
        score=score,
        badges=badges or [],
        time=10,
        at="2026-10-19T09:56:00+00:00",
    )


def test_missing_file_reads_empty(tmp_path) -> None:
    assert ScoreLog(tmp_path / "scores.json").read() == []


def test_records_are_appended_in_order(tmp_path) -> None:
    path = tmp_path / "nested" / "scores.json"
    log = ScoreLog(path)
    log.record(_record("Ana", 100))
    log.record(_record("Bo", 50, [PARKED_BADGE]))

    records = log.read()
    assert [r.name for r in records] == ["Ana", "Bo"]
    assert records[1].badges == [PARKED_BADGE]

    raw = json.loads(path.read_text(encoding="utf-8"))
    assert isinstance(raw, list) and len(raw) == 2
    assert raw[0]["score"] == 100
    assert list(tmp_path.joinpath("nested").glob(".scores-*")) == []


def test_top_sorts_by_score(tmp_path) -> None:
    log = ScoreLog(tmp_path / "scores.json")
    for name, score in [("a", 10), ("b", 300), ("c", 120), ("d", 5)]:
        log.record(_record(name, score))

    assert [r.name for r in log.top(3)] == ["b", "c", "a"]
    assert len(log.top()) == 4


def test_corrupt_file_reads_empty_and_is_replaced(tmp_path) -> None:
    path = tmp_path / "scores.json"
    path.write_text("{not json", encoding="utf-8")
    log = ScoreLog(path)
    assert log.read() == []

    log.record(_record("Ana", 1))
    assert [r.name for r in log.read()] == ["Ana"]


def test_non_list_and_bad_items_are_skipped(tmp_path) -> None:
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({"name": "x"}), encoding="utf-8")
    assert ScoreLog(path).read() == []

    path.write_text(json.dumps([1, "two", {"name": "Ok", "score": 7}, {"score": "NaN?"}]), encoding="utf-8")
    records = ScoreLog(path).read()
    assert [r.name for r in records] == ["Ok"]


def test_format_highscores() -> None:
    lines = format_highscores([_record("Ana", 812, [PARKED_BADGE]), _record("Bo", 90)])
    assert lines == [
        f"#1 Ana (12) - 812 - {PARKED_BADGE}",
        "#2 Bo (12) - 90",
    ]
