"""Numeric field extraction from audit reports.

Missing containers, missing ids and non-numeric or non-finite values all
read as "no data point" for a report; nothing here raises on report shape.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Mapping

import numpy as np

from audit_stats.models import FieldKind, Report

_VALUE_KEYS = {
    FieldKind.AUDIT: ("audits", "numericValue"),
    FieldKind.CATEGORY: ("categories", "score"),
}


def extract_value(report: Report, kind: FieldKind, field_id: str) -> float | None:
    """Return the finite numeric field for `field_id`, or None when absent."""

    container_key, value_key = _VALUE_KEYS[kind]
    container = _get_mapping(report, container_key)
    if container is None:
        return None
    entry = _get_mapping(container, field_id)
    if entry is None:
        return None
    return _finite_number(entry.get(value_key))


def extract_values(reports: Iterable[Report], kind: FieldKind, field_id: str) -> list[float]:
    """Extract the field from every report, keeping input order and dropping absences."""

    values: list[float] = []
    for report in reports:
        value = extract_value(report, kind, field_id)
        if value is not None:
            values.append(value)
    return values


def _get_mapping(parent: Any, key: str) -> Mapping[str, Any] | None:
    if not isinstance(parent, Mapping):
        return None
    child = parent.get(key)
    return child if isinstance(child, Mapping) else None


def _finite_number(raw: Any) -> float | None:
    if isinstance(raw, (bool, np.bool_)):
        return None
    if not isinstance(raw, (int, float, np.integer, np.floating)):
        return None
    try:
        value = float(raw)
    except (OverflowError, TypeError):
        return None
    return value if math.isfinite(value) else None
