"""Core data models for statistic aggregation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

# Parsed report JSON. Only `audits` and `categories` are read.
Report = Mapping[str, Any]

NO_DATA_VALUE = -1.0


class FieldKind(Enum):
    AUDIT = "audit"
    CATEGORY = "category"


class ReducerKind(Enum):
    AVERAGE = "average"
    MIN = "min"
    MAX = "max"


@dataclass(frozen=True)
class StatisticResult:
    """Single aggregate value; `NO_DATA_VALUE` when no report carried data."""

    value: float

    @property
    def has_data(self) -> bool:
        return self.value != NO_DATA_VALUE

    def to_dict(self) -> dict[str, float]:
        return {"value": self.value}


NO_DATA = StatisticResult(NO_DATA_VALUE)
