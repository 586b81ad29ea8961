"""Statistic aggregation registry for audit reports."""

from audit_stats.config import StatsConfig, load_config
from audit_stats.registry import (
    DEFINITIONS,
    VERSION,
    StatisticDefinition,
    UnknownStatisticError,
    build_definitions,
    compute_statistics,
    definitions,
    evaluate,
    get_statistic,
    is_stale,
)
from audit_stats.models import NO_DATA_VALUE, FieldKind, ReducerKind, StatisticResult

__all__ = [
    "DEFINITIONS",
    "FieldKind",
    "NO_DATA_VALUE",
    "ReducerKind",
    "StatisticDefinition",
    "StatisticResult",
    "StatsConfig",
    "UnknownStatisticError",
    "VERSION",
    "build_definitions",
    "compute_statistics",
    "definitions",
    "evaluate",
    "get_statistic",
    "is_stale",
    "load_config",
]
