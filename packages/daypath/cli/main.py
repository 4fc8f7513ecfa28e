"""Command-line interface for daypath.

Loads a curve document (JSON or YAML) and answers time/point queries
against it.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from daypath.core.config.loader import configure_logging, load_app_config
from daypath.core.config.models import AppConfig
from daypath.core.curves.mapping import DAY_SECONDS
from daypath.core.geometry.models import Point2D
from daypath.core.persistence.io import load_document
from daypath.core.persistence.models import CurveDocument
from daypath.core.timeline import CurveTimeline
from daypath.core.utils.logging import get_logger

console = Console()
logger = logging.getLogger(__name__)


def _format_time(seconds: float) -> str:
    """Format seconds in day as HH:MM:SS."""
    total = int(round(seconds))
    hours, rem = divmod(total, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def _load(doc_path: str) -> CurveDocument | None:
    path = Path(doc_path).resolve()
    if not path.exists():
        console.print(f"[red]ERROR: Curve document not found: {path}[/red]")
        return None
    try:
        document = load_document(path)
    except (ValueError, ValidationError) as e:
        console.print(f"[red]ERROR: Invalid curve document {path}:[/red] {escape(str(e))}")
        return None
    get_logger(__name__, document=str(path)).debug("Loaded %d nodes", len(document.nodes))
    return document


def cmd_point(args: argparse.Namespace, app_config: AppConfig) -> int:
    document = _load(args.document)
    if document is None:
        return 1
    timeline = CurveTimeline.from_document(document, app_config.mapping)
    p = timeline.point_at(args.time)
    console.print_json(data={"time": args.time, "x": p.x, "y": p.y})
    return 0


def cmd_time(args: argparse.Namespace, app_config: AppConfig) -> int:
    document = _load(args.document)
    if document is None:
        return 1
    timeline = CurveTimeline.from_document(document, app_config.mapping)
    time = timeline.time_at(Point2D(x=args.x, y=args.y))
    console.print_json(data={"x": args.x, "y": args.y, "time": time, "clock": _format_time(time)})
    return 0


def cmd_nodes(args: argparse.Namespace, app_config: AppConfig) -> int:
    document = _load(args.document)
    if document is None:
        return 1
    timeline = CurveTimeline.from_document(document, app_config.mapping)
    table = Table(title=f"Nodes ({len(document.nodes)})")
    table.add_column("id")
    table.add_column("label")
    table.add_column("time", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    for node in document.nodes:
        p = timeline.point_at(node.time)
        table.add_row(node.id, node.label, _format_time(node.time), f"{p.x:.2f}", f"{p.y:.2f}")
    console.print(table)
    return 0


def cmd_lut(args: argparse.Namespace, app_config: AppConfig) -> int:
    document = _load(args.document)
    if document is None:
        return 1
    timeline = CurveTimeline.from_document(document, app_config.mapping)
    lut = timeline.lut

    if args.json:
        console.print_json(data=lut.to_dict())
        return 0

    console.print(f"[bold]Segments:[/bold] {len(lut.segments)}")
    console.print(f"[bold]Samples:[/bold] {lut.size}")
    console.print(f"[bold]Length:[/bold] {lut.length:.3f}")
    console.print(f"[bold]Strategy:[/bold] {app_config.mapping.fit_strategy.value}")
    return 0


def cmd_path(args: argparse.Namespace, app_config: AppConfig) -> int:
    document = _load(args.document)
    if document is None:
        return 1
    timeline = CurveTimeline.from_document(document, app_config.mapping)
    console.print(timeline.svg_path(args.precision), markup=False, highlight=False, soft_wrap=True)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="daypath",
        description="daypath - map times of day to positions along a user-drawn curve",
    )
    p.add_argument(
        "--config",
        default=None,
        help="Path to app config JSON/YAML (default: daypath.json if present)",
    )
    p.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    point = sub.add_parser("point", help="Point on the curve at a time of day")
    point.add_argument("document", help="Curve document (.json/.yaml)")
    point.add_argument("--time", type=float, required=True, help=f"Seconds in day (0-{DAY_SECONDS:.0f})")

    time = sub.add_parser("time", help="Time of day at the curve point nearest (x, y)")
    time.add_argument("document", help="Curve document (.json/.yaml)")
    time.add_argument("--x", type=float, required=True)
    time.add_argument("--y", type=float, required=True)

    nodes = sub.add_parser("nodes", help="Positions of the document's nodes")
    nodes.add_argument("document", help="Curve document (.json/.yaml)")

    lut = sub.add_parser("lut", help="Summarize or dump the lookup table")
    lut.add_argument("document", help="Curve document (.json/.yaml)")
    lut.add_argument("--json", action="store_true", help="Dump the full table as JSON")

    path = sub.add_parser("path", help="SVG path data of the fitted curve")
    path.add_argument("document", help="Curve document (.json/.yaml)")
    path.add_argument("--precision", type=int, default=2, help="Decimal places (default: 2)")

    return p


_COMMANDS = {
    "point": cmd_point,
    "time": cmd_time,
    "nodes": cmd_nodes,
    "lut": cmd_lut,
    "path": cmd_path,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    try:
        app_config = load_app_config(args.config)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        console.print(f"[red]ERROR: Could not load config:[/red] {escape(str(e))}")
        return 1

    if args.log_level:
        app_config = app_config.model_copy(
            update={"logging": app_config.logging.model_copy(update={"level": args.log_level})}
        )
    configure_logging(app_config)
    logger.debug("Running command %s", args.cmd)

    return _COMMANDS[args.cmd](args, app_config)


if __name__ == "__main__":
    sys.exit(main())
