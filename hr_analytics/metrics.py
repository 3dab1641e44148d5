"""Dashboard-wide KPIs over the full record set."""

import logging
from collections.abc import Sequence

import pandas as pd

from hr_analytics.categories import is_high_performer
from hr_analytics.models import DashboardMetrics, EmployeeRecord
from hr_analytics.transform import records_to_frame
from hr_analytics.utils.types import EmploymentStatus

logger = logging.getLogger(__name__)


def safe_mean(values: pd.Series) -> float:
    """Mean of the non-null values, or 0.0 when there are none."""
    present = values.dropna()
    if present.empty:
        return 0.0
    return float(present.mean())


def turnover_rate(total: int, active: int) -> float:
    """Percentage of a group no longer active; 0.0 for an empty group."""
    if total == 0:
        return 0.0
    return (total - active) / total * 100


def compute_dashboard_metrics(records: Sequence[EmployeeRecord]) -> DashboardMetrics:
    """Compute the headline KPIs for the dashboard.

    Performance averages only rated records. Engagement only counts scores
    above zero, since a zero in the survey column means the survey was not
    taken.
    """
    df = records_to_frame(records)
    total = len(df)
    active = int((df["status"] == EmploymentStatus.ACTIVE).sum())

    rated = df[df["performance_score"].notna()]
    tenure = df.loc[df["tenure_years"] >= 0, "tenure_years"]
    engagement = df.loc[df["engagement"] > 0, "engagement"]

    metrics = DashboardMetrics(
        total_employees=total,
        active_employees=active,
        average_performance=safe_mean(rated["performance_score"]),
        turnover_rate=turnover_rate(total, active),
        average_tenure=safe_mean(tenure),
        average_engagement=safe_mean(engagement),
        high_performers=int(rated["performance_category"].map(is_high_performer).sum()),
        average_salary=safe_mean(df["salary"]),
    )
    logger.info(
        "Dashboard metrics: %d employees, %d active, %.1f%% turnover",
        metrics.total_employees,
        metrics.active_employees,
        metrics.turnover_rate,
    )
    return metrics
