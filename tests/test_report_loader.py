from __future__ import annotations

import json
from pathlib import Path

import pytest

from stats_tools.report_loader import load_reports


def _write(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_loads_single_report_and_report_lists(tmp_path: Path) -> None:
    single = _write(tmp_path / "a.json", {"audits": {}, "categories": {"seo": {"score": 0.5}}})
    many = _write(tmp_path / "b.json", [{"audits": {}}, {"categories": {}}])

    reports = load_reports([single, many])

    assert len(reports) == 3
    assert reports[0]["categories"]["seo"]["score"] == 0.5


def test_directory_contents_are_sorted_by_name(tmp_path: Path) -> None:
    batch = tmp_path / "batch"
    batch.mkdir()
    _write(batch / "2.json", {"id": 2})
    _write(batch / "1.json", {"id": 1})
    (batch / "notes.txt").write_text("ignored", encoding="utf-8")

    assert [report["id"] for report in load_reports([batch])] == [1, 2]


def test_missing_path_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_reports([tmp_path / "missing.json"])


def test_non_report_payload_raises(tmp_path: Path) -> None:
    path = _write(tmp_path / "bad.json", [1, 2, 3])

    with pytest.raises(ValueError, match="report object"):
        load_reports([path])
