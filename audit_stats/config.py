"""Configuration objects for statistic computation."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from audit_stats.registry import DEFINITIONS


@dataclass(frozen=True)
class StatsConfig:
    """Statistic computation defaults."""

    statistics: tuple[str, ...] = ()  # Empty selects every registered statistic.
    mask_no_data: bool = False
    log_level: str = "INFO"

    def selected_names(self) -> list[str]:
        return list(self.statistics) if self.statistics else list(DEFINITIONS)

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level.upper())


def load_config(path: Path) -> StatsConfig:
    """Load a `StatsConfig` from a JSON object file."""

    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError(f"Config {path} must be a JSON object")
    return build_config(raw, source=str(path))


def build_config(raw: dict[str, Any], *, source: str = "<config>") -> StatsConfig:
    known = {field.name for field in fields(StatsConfig)}
    unknown = set(raw) - known
    if unknown:
        raise ValueError(f"Unknown config keys in {source}: {sorted(unknown)}")

    kwargs: dict[str, Any] = {}
    if "statistics" in raw:
        names = raw["statistics"]
        if isinstance(names, str) or not isinstance(names, list):
            raise ValueError(f"{source}: statistics must be a list of names")
        missing = [name for name in names if name not in DEFINITIONS]
        if missing:
            raise ValueError(f"{source}: unknown statistics {missing}")
        kwargs["statistics"] = tuple(str(name) for name in names)
    if "mask_no_data" in raw:
        if not isinstance(raw["mask_no_data"], bool):
            raise ValueError(f"{source}: mask_no_data must be true or false")
        kwargs["mask_no_data"] = raw["mask_no_data"]
    if "log_level" in raw:
        level = str(raw["log_level"]).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"{source}: invalid log_level '{raw['log_level']}'")
        kwargs["log_level"] = level
    return StatsConfig(**kwargs)
