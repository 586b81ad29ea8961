"""Load audit report JSON files from disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from audit_stats.utils.logging import get_logger

_log = get_logger("stats_tools.report_loader")


def load_reports(paths: Iterable[Path]) -> list[dict[str, Any]]:
    """Read reports from files or directories of `*.json` files.

    A file may hold one report object or a list of report objects. Reports are
    returned in path order; directory contents are sorted by file name.
    """

    reports: list[dict[str, Any]] = []
    for path in paths:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Report path not found: {path}")
        files = sorted(path.glob("*.json")) if path.is_dir() else [path]
        for file_path in files:
            reports.extend(_load_report_file(file_path))
    _log.info("Loaded %d reports", len(reports))
    return reports


def _load_report_file(path: Path) -> list[dict[str, Any]]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        return [payload]
    if isinstance(payload, list) and all(isinstance(item, dict) for item in payload):
        return list(payload)
    raise ValueError(f"{path}: expected a report object or a list of report objects")
