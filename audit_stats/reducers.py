"""Reducers folding extracted values into a single `StatisticResult`."""

from __future__ import annotations

import math
from typing import Callable, Sequence

from audit_stats.models import NO_DATA, ReducerKind, StatisticResult


def average(values: Sequence[float]) -> StatisticResult:
    if not values:
        return NO_DATA
    count = len(values)
    total = 0.0
    for value in values:
        total += value
    if not math.isfinite(total):
        # Large finite inputs overflow the plain sum; scale each term instead.
        total = 0.0
        for value in values:
            total += value / count
        return StatisticResult(total)
    return StatisticResult(total / count)


def minimum(values: Sequence[float]) -> StatisticResult:
    return _fold(values, lambda current, value: value < current)


def maximum(values: Sequence[float]) -> StatisticResult:
    return _fold(values, lambda current, value: value > current)


def reduce_values(kind: ReducerKind, values: Sequence[float]) -> StatisticResult:
    """Apply the reducer selected by `kind`."""

    return _REDUCERS[kind](values)


def _fold(values: Sequence[float], replaces: Callable[[float, float], bool]) -> StatisticResult:
    if not values:
        return NO_DATA
    current = values[0]
    for value in values[1:]:
        if replaces(current, value):
            current = value
    return StatisticResult(float(current))


_REDUCERS: dict[ReducerKind, Callable[[Sequence[float]], StatisticResult]] = {
    ReducerKind.AVERAGE: average,
    ReducerKind.MIN: minimum,
    ReducerKind.MAX: maximum,
}
