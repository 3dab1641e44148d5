"""Paired-metric projections for scatter-style charts."""

from collections.abc import Sequence

from hr_analytics.models import (
    EmployeeRecord,
    EngagementPerformancePoint,
    TenurePerformancePoint,
)


def get_performance_by_tenure(records: Sequence[EmployeeRecord]) -> list[TenurePerformancePoint]:
    """One point per rated record: tenure against rating."""
    return [
        TenurePerformancePoint(
            name=r.name,
            tenure=r.tenure_years,
            performance=r.performance_score,
            salary=r.salary,
            department=r.department,
        )
        for r in records
        if r.tenure_years is not None and r.performance_score is not None
    ]


def get_engagement_performance_correlation(
    records: Sequence[EmployeeRecord],
) -> list[EngagementPerformancePoint]:
    """One point per rated record with an engagement score.

    A zero engagement score means the survey was not taken, so those
    records are left out like missing ones.
    """
    return [
        EngagementPerformancePoint(
            name=r.name,
            engagement=r.engagement,
            performance=r.performance_score,
            tenure=r.tenure_years,
            department=r.department,
        )
        for r in records
        if r.engagement is not None and r.engagement > 0 and r.performance_score is not None
    ]


get_satisfaction_performance_correlation = get_engagement_performance_correlation
