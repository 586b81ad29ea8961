"""Registry binding stable statistic names to aggregation definitions.

Each entry is a small configuration record (field kind, field id, reducer)
and a single `evaluate` function interprets it. Adding an entry never
changes the output of an existing one; bump `VERSION` only when the meaning
of an existing result changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Sequence

from audit_stats.extract import extract_values
from audit_stats.models import FieldKind, ReducerKind, Report, StatisticResult
from audit_stats.reducers import reduce_values
from audit_stats.utils.logging import get_logger

VERSION = 1

AUDIT_IDS = ("interactive", "speed-index", "first-contentful-paint")
CATEGORY_IDS = ("performance", "pwa", "seo", "accessibility", "best-practices")

_log = get_logger(__name__)


class UnknownStatisticError(KeyError):
    """Raised when a statistic name is not in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"No such statistic: {self.name!r}"


@dataclass(frozen=True)
class StatisticDefinition:
    """Field locator plus reducer kind for one named statistic."""

    field_kind: FieldKind
    field_id: str
    reducer: ReducerKind

    @property
    def name(self) -> str:
        return f"{self.field_kind.value}_{self.field_id}_{self.reducer.value}"

    def __call__(self, reports: Sequence[Report]) -> StatisticResult:
        return evaluate(self, reports)

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "field_kind": self.field_kind.value,
            "field_id": self.field_id,
            "reducer": self.reducer.value,
        }


def evaluate(definition: StatisticDefinition, reports: Iterable[Report]) -> StatisticResult:
    """Extract the definition's field from every report and reduce the survivors."""

    reports = list(reports)
    values = extract_values(reports, definition.field_kind, definition.field_id)
    _log.debug("%s: %d of %d reports carry data", definition.name, len(values), len(reports))
    return reduce_values(definition.reducer, values)


def build_definitions(entries: Iterable[StatisticDefinition]) -> Mapping[str, StatisticDefinition]:
    """Build a read-only name -> definition mapping, rejecting duplicate names."""

    table: dict[str, StatisticDefinition] = {}
    for entry in entries:
        if entry.field_kind is FieldKind.AUDIT and entry.reducer is not ReducerKind.AVERAGE:
            raise ValueError(f"Audit statistics only support the average reducer: {entry.name}")
        if entry.name in table:
            raise ValueError(f"Duplicate statistic name: {entry.name}")
        table[entry.name] = entry
    return MappingProxyType(table)


def _default_entries() -> list[StatisticDefinition]:
    entries = [StatisticDefinition(FieldKind.AUDIT, audit_id, ReducerKind.AVERAGE) for audit_id in AUDIT_IDS]
    for reducer in (ReducerKind.AVERAGE, ReducerKind.MIN, ReducerKind.MAX):
        entries.extend(StatisticDefinition(FieldKind.CATEGORY, category_id, reducer) for category_id in CATEGORY_IDS)
    return entries


DEFINITIONS = build_definitions(_default_entries())
definitions = DEFINITIONS


def get_statistic(name: str) -> StatisticDefinition:
    """Look up a statistic by name."""

    try:
        return DEFINITIONS[name]
    except KeyError:
        raise UnknownStatisticError(name) from None


def compute_statistics(
    reports: Iterable[Report],
    names: Iterable[str] | None = None,
) -> dict[str, StatisticResult]:
    """Evaluate every registered statistic (or the named subset) over one batch."""

    reports = list(reports)
    selected = list(DEFINITIONS) if names is None else list(names)
    definitions_to_run = [get_statistic(name) for name in selected]
    _log.debug("Computing %d statistics over %d reports", len(definitions_to_run), len(reports))
    return {definition.name: evaluate(definition, reports) for definition in definitions_to_run}


def is_stale(stored_version: int | None) -> bool:
    """Return True when results stored under `stored_version` must be recomputed."""

    return stored_version != VERSION
