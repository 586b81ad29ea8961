"""Command-line entry point for audit statistics.

Usage:
  audit-stats list [--json]
  audit-stats compute --report <path> [--statistic <name>] [--out <file>]
  audit-stats trend --batch <dir> --out <file.csv>
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from audit_stats.config import StatsConfig, load_config
from audit_stats.registry import DEFINITIONS, VERSION, compute_statistics
from audit_stats.utils.logging import get_logger
from stats_tools.report_loader import load_reports
from stats_tools.trend_table import build_trend_table, sanitize_json, write_trend_csv

_log = get_logger("stats_tools.cli")


def _config_from_args(args: argparse.Namespace) -> StatsConfig:
    cfg = load_config(Path(args.config)) if args.config else StatsConfig()
    get_logger("audit_stats", cfg.log_level_value)
    get_logger("stats_tools", cfg.log_level_value)
    return cfg


def _selected_names(args: argparse.Namespace, cfg: StatsConfig) -> list[str]:
    names = list(args.statistic) if args.statistic else cfg.selected_names()
    unknown = [name for name in names if name not in DEFINITIONS]
    if unknown:
        raise SystemExit(f"Unknown statistics: {unknown}. Use 'list' to see available names.")
    return names


def _cmd_list(args: argparse.Namespace) -> None:
    if args.json:
        payload = {
            "version": VERSION,
            "definitions": [definition.to_dict() for definition in DEFINITIONS.values()],
        }
        print(json.dumps(payload, indent=2))
        return
    for name in DEFINITIONS:
        print(name)


def _cmd_compute(args: argparse.Namespace) -> None:
    cfg = _config_from_args(args)
    if not args.report:
        raise SystemExit("No reports provided. Use --report path.json (repeatable).")
    names = _selected_names(args, cfg)
    reports = load_reports([Path(p) for p in args.report])
    results = compute_statistics(reports, names)

    payload = {
        "version": VERSION,
        "report_count": len(reports),
        "statistics": {name: result.to_dict() for name, result in results.items()},
    }
    text = json.dumps(sanitize_json(payload), indent=2, allow_nan=False)
    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding="utf-8")
        _log.info("Wrote %s", out_path)
    else:
        print(text)


def _cmd_trend(args: argparse.Namespace) -> None:
    cfg = _config_from_args(args)
    if not args.batch:
        raise SystemExit("No batches provided. Use --batch dir (repeatable).")
    names = _selected_names(args, cfg)
    batches = {}
    for raw in args.batch:
        path = Path(raw)
        label = path.stem if path.is_file() else path.name
        if label in batches:
            raise SystemExit(f"Duplicate batch label: {label} ({path})")
        batches[label] = load_reports([path])
    frame = build_trend_table(batches, names, mask_no_data=cfg.mask_no_data)
    out_path = Path(args.out)
    write_trend_csv(frame, out_path)
    _log.info("Wrote %s (%d batches x %d statistics)", out_path, len(frame.index), len(frame.columns))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="audit-stats", description="Aggregate statistics over audit reports")
    sub = parser.add_subparsers(dest="cmd", required=True)

    lst = sub.add_parser("list", help="List registered statistic names")
    lst.add_argument("--json", action="store_true", help="Print definitions and registry version as JSON")
    lst.set_defaults(func=_cmd_list)

    comp = sub.add_parser("compute", help="Compute statistics over one batch of reports")
    comp.add_argument("--report", action="append", help="Report JSON file or directory (repeatable)")
    comp.add_argument("--statistic", action="append", help="Statistic name (repeatable, default: all)")
    comp.add_argument("--config", type=str, default=None, help="Path to a JSON config file")
    comp.add_argument("--out", type=str, default=None, help="Write JSON here instead of stdout")
    comp.set_defaults(func=_cmd_compute)

    trend = sub.add_parser("trend", help="Tabulate statistics per batch directory into a CSV")
    trend.add_argument("--batch", action="append", help="Batch directory or file of reports (repeatable)")
    trend.add_argument("--statistic", action="append", help="Statistic name (repeatable, default: all)")
    trend.add_argument("--config", type=str, default=None, help="Path to a JSON config file")
    trend.add_argument("--out", type=str, required=True, help="Output CSV path")
    trend.set_defaults(func=_cmd_trend)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
