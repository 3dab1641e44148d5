"""Command-line runner: parse an employee export and print the dashboard views."""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from hr_analytics.config import OUTPUT_FORMATS, load_analytics_config
from hr_analytics.ingest import read_employee_csv
from hr_analytics.report import DashboardViews, build_dashboard, render_dashboard
from hr_analytics.utils.io import output_suffix, write_output
from hr_analytics.utils.types import ValidationOutcome
from hr_analytics.validation import validate_records, validate_views

type CheckResults = dict[str, ValidationOutcome]

logger = logging.getLogger(__name__)
console = Console()


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def export_views(views: DashboardViews, output_dir: Path, fmt: str) -> list[Path]:
    """Write every view to ``output_dir`` in the requested format."""
    suffix = output_suffix(fmt)
    return [
        write_output(frame, output_dir / f"{name}{suffix}", fmt=fmt)
        for name, frame in views.to_frames().items()
    ]


def print_validation(results: CheckResults) -> bool:
    table = Table(title="Validation Results")
    table.add_column("Check")
    table.add_column("Valid")
    table.add_column("Details")

    for name, r in results.items():
        match r["status"]:
            case "warning":
                status = "[yellow]![/yellow]"
            case _ if r["valid"]:
                status = "[green]✓[/green]"
            case _:
                status = "[red]✗[/red]"
        detail = "; ".join(r["errors"][:3]) or str(r["status"])
        table.add_row(name, status, detail)

    console.print(table)
    return all(r["valid"] for r in results.values())


def _parse_date_arg(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid date: {value!r} (expected YYYY-MM-DD)") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Summarize an HR employee export")
    parser.add_argument("csv", nargs="?", type=Path, help="Employee CSV export (defaults to the configured path)")
    parser.add_argument("--env", default="production", help="Configuration environment")
    parser.add_argument("--top", type=int, help="Number of top performers to list")
    parser.add_argument("--as-of", type=_parse_date_arg, help="Measure tenure as of this date (YYYY-MM-DD)")
    parser.add_argument("--validate", action="store_true", help="Run data-quality checks")
    parser.add_argument("--output", type=Path, help="Directory to export the views to")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, help="Export format")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = load_analytics_config(args.env)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        return 1

    csv_path = args.csv or config.data.data_path
    as_of = args.as_of or config.data.as_of
    top = args.top if args.top is not None else config.report.top_performers

    try:
        records = read_employee_csv(csv_path, as_of=as_of)
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[red]Failed to load employee data: {exc}[/red]")
        return 1

    console.print(f"[bold]Loaded {len(records)} employees from {csv_path}[/bold]")
    views = build_dashboard(records, top_limit=top)
    render_dashboard(views, console)

    if args.output:
        fmt = args.format or config.report.output_format
        paths = export_views(views, args.output, fmt)
        logger.info("Exported %d views to %s", len(paths), args.output)

    if args.validate:
        results = {**validate_records(records), **validate_views(views)}
        if not print_validation(results):
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
