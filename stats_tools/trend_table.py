"""Tabulate statistics across report batches for trend charts."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

import numpy as np
import pandas as pd

from audit_stats.registry import DEFINITIONS, compute_statistics
from audit_stats.models import NO_DATA_VALUE, Report


def build_trend_table(
    batches: Mapping[str, Sequence[Report]],
    names: Iterable[str] | None = None,
    *,
    mask_no_data: bool = False,
) -> pd.DataFrame:
    """One row per batch label, one column per statistic.

    With `mask_no_data`, the no-data sentinel becomes NaN so charts leave gaps.
    """

    columns = list(DEFINITIONS) if names is None else list(names)
    rows: list[dict[str, float]] = []
    for reports in batches.values():
        results = compute_statistics(reports, columns)
        rows.append({name: result.value for name, result in results.items()})

    frame = pd.DataFrame(rows, columns=columns, index=pd.Index(list(batches.keys()), name="batch"), dtype=float)
    if mask_no_data:
        frame = frame.mask(frame == NO_DATA_VALUE, np.nan)
    return frame


def write_trend_csv(frame: pd.DataFrame, path: Path) -> None:
    """Write a trend table to CSV, creating parent directories."""

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(target)


def sanitize_json(obj: Any) -> Any:
    """Convert NaN/Inf to None and numpy scalars to Python numbers for JSON output."""
    if isinstance(obj, (float, np.floating)):
        value = float(obj)
        return value if math.isfinite(value) else None
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, dict):
        return {k: sanitize_json(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [sanitize_json(v) for v in obj]
    return obj
