from __future__ import annotations

import math

import numpy as np

from audit_stats.extract import extract_value, extract_values
from audit_stats.models import FieldKind


def _audit_report(value: object) -> dict:
    return {"audits": {"interactive": {"numericValue": value}}, "categories": {}}


def _category_report(score: object) -> dict:
    return {"audits": {}, "categories": {"performance": {"score": score}}}


def test_extracts_audit_numeric_value() -> None:
    assert extract_value(_audit_report(1234.5), FieldKind.AUDIT, "interactive") == 1234.5


def test_extracts_category_score() -> None:
    assert extract_value(_category_report(0.85), FieldKind.CATEGORY, "performance") == 0.85


def test_missing_id_or_container_is_absent() -> None:
    assert extract_value({"audits": {}}, FieldKind.AUDIT, "interactive") is None
    assert extract_value({}, FieldKind.AUDIT, "interactive") is None
    assert extract_value({"categories": None}, FieldKind.CATEGORY, "performance") is None
    assert extract_value({"audits": {"interactive": {}}}, FieldKind.AUDIT, "interactive") is None


def test_malformed_shapes_do_not_raise() -> None:
    assert extract_value({"audits": ["interactive"]}, FieldKind.AUDIT, "interactive") is None
    assert extract_value({"audits": {"interactive": 5}}, FieldKind.AUDIT, "interactive") is None
    assert extract_value("not a report", FieldKind.AUDIT, "interactive") is None  # type: ignore[arg-type]


def test_non_numeric_and_non_finite_values_are_absent() -> None:
    for raw in ("N/A", "0.5", None, True, False, [1.0], float("nan"), float("inf"), -math.inf, 10**400):
        assert extract_value(_category_report(raw), FieldKind.CATEGORY, "performance") is None


def test_numpy_scalars_and_ints_are_accepted() -> None:
    assert extract_value(_category_report(np.float64(0.25)), FieldKind.CATEGORY, "performance") == 0.25
    assert extract_value(_audit_report(np.int64(3)), FieldKind.AUDIT, "interactive") == 3.0
    assert extract_value(_audit_report(0), FieldKind.AUDIT, "interactive") == 0.0
    assert extract_value(_category_report(np.nan), FieldKind.CATEGORY, "performance") is None


def test_extract_values_keeps_order_and_drops_absences() -> None:
    reports = [
        _category_report(0.9),
        _category_report("N/A"),
        {"audits": {}},
        _category_report(0.1),
        _category_report(float("nan")),
        _category_report(0.5),
    ]

    assert extract_values(reports, FieldKind.CATEGORY, "performance") == [0.9, 0.1, 0.5]


def test_extract_values_does_not_mutate_reports() -> None:
    report = _audit_report(100)
    snapshot = {"audits": {"interactive": {"numericValue": 100}}, "categories": {}}

    extract_values([report, report], FieldKind.AUDIT, "interactive")

    assert report == snapshot


def test_complex_values_are_absent() -> None:
    assert extract_value(_category_report(np.complex128(0.5 + 0j)), FieldKind.CATEGORY, "performance") is None
    assert extract_value(_category_report(0.5 + 0j), FieldKind.CATEGORY, "performance") is None
