"""Per-department headcount, performance, pay, and turnover."""

import logging
from collections.abc import Sequence

import pandas as pd

from hr_analytics.metrics import safe_mean, turnover_rate
from hr_analytics.models import DepartmentStats, EmployeeRecord
from hr_analytics.transform import records_to_frame
from hr_analytics.utils.types import EmploymentStatus

logger = logging.getLogger(__name__)


def _department_stats(department: str, group: pd.DataFrame) -> DepartmentStats:
    active = group[group["status"] == EmploymentStatus.ACTIVE]
    headcount = len(active)

    # Missing salaries count as zero but stay in the denominator
    average_salary = float(active["salary"].fillna(0).sum() / headcount) if headcount else 0.0

    return DepartmentStats(
        department=department,
        employee_count=headcount,
        average_performance=safe_mean(active["performance_score"]),
        average_salary=average_salary,
        average_engagement=safe_mean(active.loc[active["engagement"] > 0, "engagement"]),
        turnover_rate=turnover_rate(len(group), headcount),
    )


def compute_department_stats(records: Sequence[EmployeeRecord]) -> list[DepartmentStats]:
    """Aggregate each non-blank department.

    Headcount, performance, salary and engagement cover active employees
    only; turnover covers everyone who was ever in the department. Results
    are ordered by active headcount, largest first.
    """
    df = records_to_frame(records)
    named = df[df["department"].notna() & (df["department"].str.strip() != "")]

    stats = [
        _department_stats(dept, group)
        for dept, group in named.groupby("department", sort=False)
    ]
    stats.sort(key=lambda s: s.employee_count, reverse=True)

    logger.info("Computed stats for %d departments", len(stats))
    return stats
