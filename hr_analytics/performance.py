"""Performance rating distribution and top-performer ranking."""

import logging
from collections.abc import Sequence

from hr_analytics.categories import category_color, is_reported_category
from hr_analytics.models import EmployeeRecord, PerformanceDistributionEntry
from hr_analytics.transform import records_to_frame
from hr_analytics.utils.types import EmploymentStatus

logger = logging.getLogger(__name__)

DEFAULT_TOP_PERFORMERS = 10


def compute_performance_distribution(
    records: Sequence[EmployeeRecord],
) -> list[PerformanceDistributionEntry]:
    """Count records per rating label actually present in the data.

    Percentages are relative to the records that carry a label, not to the
    whole record set. Labels outside the known rating scale are still
    reported, with the neutral colour.
    """
    df = records_to_frame(records)
    labelled = df[df["performance_category"].map(is_reported_category).astype(bool)]
    total = len(labelled)
    if total == 0:
        return []

    counts = (
        labelled.groupby("performance_category", sort=False)
        .size()
        .sort_values(ascending=False, kind="stable")
    )
    distribution = [
        PerformanceDistributionEntry(
            category=category,
            count=int(count),
            percentage=float(count) / total * 100,
            color=category_color(category),
        )
        for category, count in counts.items()
    ]
    logger.info("Performance distribution over %d rated records: %d categories", total, len(distribution))
    return distribution


def get_top_performers(
    records: Sequence[EmployeeRecord],
    limit: int = DEFAULT_TOP_PERFORMERS,
) -> list[EmployeeRecord]:
    """Return active, rated employees ordered by rating, best first.

    Employees with the same rating keep their input order.
    """
    if limit <= 0:
        return []

    df = records_to_frame(records)
    eligible = df[(df["status"] == EmploymentStatus.ACTIVE) & df["performance_score"].notna()]
    ranked = eligible.sort_values("performance_score", ascending=False, kind="stable").head(limit)
    return [records[i] for i in ranked.index]
