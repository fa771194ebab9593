"""speedo CLI entry point.

Usage: uv run speedo report aggregates.json [--archive] [--verbose]
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import TYPE_CHECKING, NoReturn

if TYPE_CHECKING:
    from speedo.domain.checkpoint import MeasurementAggregate


def _add_report_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "report",
        help="Render a profiling report from a JSON list of aggregates.",
    )
    p.add_argument(
        "path",
        help="JSON file holding a list of aggregates ('-' reads stdin)",
    )
    p.add_argument(
        "--archive", action="store_true",
        help="Also save the report under the log directory.",
    )
    p.add_argument(
        "--log-dir", default=None,
        help="Directory for archived reports (default: ~/.speedo/log)",
    )
    p.add_argument(
        "--stdout", action="store_true",
        help="Write the report to stdout instead of stderr.",
    )
    # SUPPRESS keeps a top-level `speedo -v report ...` from being reset
    p.add_argument(
        "-v", "--verbose", action="store_true", default=argparse.SUPPRESS,
        help="Enable debug logging.",
    )


def _load_aggregates(path: str) -> list[MeasurementAggregate]:
    from speedo.domain.checkpoint import MeasurementAggregate

    if path == "-":
        data = json.load(sys.stdin)
    else:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)

    if not isinstance(data, list):
        raise ValueError("expected a JSON list of aggregates")
    return [MeasurementAggregate.from_dict(item) for item in data]


def _fail(exc: Exception) -> NoReturn:
    print(f"error: {exc}", file=sys.stderr)
    sys.exit(1)


def _run_report(args: argparse.Namespace) -> None:
    from speedo.report.archive import LogArchiver
    from speedo.report.renderer import ReportRenderer

    try:
        aggregates = _load_aggregates(args.path)
    except (OSError, ValueError) as exc:
        # json.JSONDecodeError is a ValueError
        _fail(exc)

    archiver = LogArchiver(log_dir=args.log_dir) if args.archive else None
    renderer = ReportRenderer(
        sink=sys.stdout if args.stdout else sys.stderr,
        archiver=archiver,
    )
    for aggregate in aggregates:
        renderer.add(aggregate)
    try:
        renderer.render()
    except OSError as exc:
        _fail(exc)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="speedo",
        description="Fixed-width profiling reports for checkpoint timings.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_report_parser(subparsers)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "report":
        _run_report(args)
