"""Bundle the analytics views and present them.

``build_dashboard`` runs every view over one record set. The resulting
``DashboardViews`` can be turned into JSON-ready dicts or DataFrames for
export, or rendered as rich tables for the terminal.
"""

import logging
from collections.abc import Sequence
from dataclasses import asdict, dataclass
from datetime import date

import pandas as pd
from rich.console import Console
from rich.table import Table

from hr_analytics.correlations import (
    get_engagement_performance_correlation,
    get_performance_by_tenure,
)
from hr_analytics.departments import compute_department_stats
from hr_analytics.metrics import compute_dashboard_metrics
from hr_analytics.models import (
    DashboardMetrics,
    DepartmentStats,
    EmployeeRecord,
    EngagementPerformancePoint,
    PerformanceDistributionEntry,
    TenurePerformancePoint,
)
from hr_analytics.performance import (
    DEFAULT_TOP_PERFORMERS,
    compute_performance_distribution,
    get_top_performers,
)

logger = logging.getLogger(__name__)

type ViewName = str

TOP_PERFORMER_COLUMNS = [
    "employee_id",
    "name",
    "department",
    "position",
    "performance_category",
    "performance_score",
    "tenure_years",
    "engagement",
    "salary",
    "hire_date",
]


@dataclass(frozen=True)
class DashboardViews:
    metrics: DashboardMetrics
    departments: list[DepartmentStats]
    distribution: list[PerformanceDistributionEntry]
    top_performers: list[EmployeeRecord]
    tenure_performance: list[TenurePerformancePoint]
    engagement_performance: list[EngagementPerformancePoint]

    def to_dict(self) -> dict[ViewName, object]:
        return {
            "dashboard_metrics": asdict(self.metrics),
            "department_stats": [asdict(d) for d in self.departments],
            "performance_distribution": [asdict(e) for e in self.distribution],
            "top_performers": [_top_performer_row(r) for r in self.top_performers],
            "performance_by_tenure": [asdict(p) for p in self.tenure_performance],
            "engagement_vs_performance": [_engagement_point_row(p) for p in self.engagement_performance],
        }

    def to_frames(self) -> dict[ViewName, pd.DataFrame]:
        """One DataFrame per view, keyed by the export name."""
        frames = {}
        for name, rows in self.to_dict().items():
            match rows:
                case dict():
                    frames[name] = pd.DataFrame([rows])
                case list() if name == "top_performers":
                    frames[name] = pd.DataFrame(rows, columns=TOP_PERFORMER_COLUMNS)
                case list():
                    frames[name] = pd.DataFrame(rows)
        return frames


def _iso(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None


def _top_performer_row(record: EmployeeRecord) -> dict[str, object]:
    return {
        "employee_id": record.employee_id,
        "name": record.name,
        "department": record.department,
        "position": record.position,
        "performance_category": record.performance_category,
        "performance_score": record.performance_score,
        "tenure_years": record.tenure_years,
        "engagement": record.engagement,
        "salary": record.salary,
        "hire_date": _iso(record.hire_date),
    }


def _engagement_point_row(point: EngagementPerformancePoint) -> dict[str, object]:
    # Chart payloads key the engagement score as "satisfaction"
    return {
        "name": point.name,
        "satisfaction": point.engagement,
        "performance": point.performance,
        "tenure": point.tenure,
        "department": point.department,
    }


def build_dashboard(
    records: Sequence[EmployeeRecord],
    top_limit: int = DEFAULT_TOP_PERFORMERS,
) -> DashboardViews:
    views = DashboardViews(
        metrics=compute_dashboard_metrics(records),
        departments=compute_department_stats(records),
        distribution=compute_performance_distribution(records),
        top_performers=get_top_performers(records, limit=top_limit),
        tenure_performance=get_performance_by_tenure(records),
        engagement_performance=get_engagement_performance_correlation(records),
    )
    logger.info("Built dashboard views for %d records", len(records))
    return views


def format_number(value: float, decimals: int = 1) -> str:
    return f"{value:.{decimals}f}"


def format_currency(value: float | None) -> str:
    """Whole US dollars with thousands separators, e.g. ``$62,500``."""
    if value is None:
        return "n/a"
    amount = round(value)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,}"


def format_percentage(value: float) -> str:
    return f"{value:.1f}%"


def _kpi_table(metrics: DashboardMetrics) -> Table:
    table = Table(title="Workforce KPIs")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Total employees", str(metrics.total_employees))
    table.add_row("Active employees", str(metrics.active_employees))
    table.add_row("Average performance", format_number(metrics.average_performance))
    table.add_row("Turnover rate", format_percentage(metrics.turnover_rate))
    table.add_row("Average tenure (years)", format_number(metrics.average_tenure))
    table.add_row("Average engagement", format_number(metrics.average_engagement))
    table.add_row("High performers", str(metrics.high_performers))
    table.add_row("Average salary", format_currency(metrics.average_salary))
    return table


def _department_table(departments: list[DepartmentStats]) -> Table:
    table = Table(title="Departments")
    table.add_column("Department", style="cyan")
    table.add_column("Headcount", justify="right")
    table.add_column("Avg performance", justify="right")
    table.add_column("Avg salary", justify="right")
    table.add_column("Avg engagement", justify="right")
    table.add_column("Turnover", justify="right")

    for d in departments:
        table.add_row(
            d.department,
            str(d.employee_count),
            format_number(d.average_performance),
            format_currency(d.average_salary),
            format_number(d.average_engagement),
            format_percentage(d.turnover_rate),
        )
    return table


def _distribution_table(distribution: list[PerformanceDistributionEntry]) -> Table:
    table = Table(title="Performance Distribution")
    table.add_column("Category")
    table.add_column("Count", justify="right")
    table.add_column("Share", justify="right")

    for entry in distribution:
        table.add_row(
            f"[{entry.color}]{entry.category}[/]",
            str(entry.count),
            format_percentage(entry.percentage),
        )
    return table


def _top_performer_table(records: list[EmployeeRecord]) -> Table:
    table = Table(title="Top Performers")
    table.add_column("#", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Department")
    table.add_column("Position")
    table.add_column("Rating")
    table.add_column("Tenure", justify="right")

    for rank, r in enumerate(records, start=1):
        table.add_row(
            str(rank),
            r.name or r.employee_id,
            r.department or "",
            r.position or "",
            r.performance_category or "",
            format_number(r.tenure_years),
        )
    return table


def render_dashboard(views: DashboardViews, console: Console | None = None) -> None:
    """Print the dashboard views as rich tables."""
    console = console or Console()
    console.print(_kpi_table(views.metrics))
    console.print(_department_table(views.departments))
    console.print(_distribution_table(views.distribution))
    console.print(_top_performer_table(views.top_performers))
    console.print(
        f"[dim]{len(views.tenure_performance)} tenure/performance points, "
        f"{len(views.engagement_performance)} engagement/performance points[/dim]"
    )
