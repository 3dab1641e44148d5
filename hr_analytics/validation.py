"""Data-quality checks over parsed records and derived views.

Nothing here is run by the parser. The checks report problems; they never
drop or repair records.
"""

import logging
from collections.abc import Sequence

from hr_analytics.models import (
    EmployeeRecord,
    department_stats_schema,
    distribution_schema,
    employee_frame_schema,
)
from hr_analytics.report import DashboardViews
from hr_analytics.transform import records_to_frame
from hr_analytics.utils.types import ValidationOutcome, classify_quality
from hr_analytics.utils.validators import completeness, validate_dataframe, validate_unique

logger = logging.getLogger(__name__)

type CheckName = str

QUALITY_COLUMNS = (
    "name",
    "department",
    "hire_date",
    "salary",
    "performance_score",
    "engagement",
    "satisfaction",
)


def validate_records(records: Sequence[EmployeeRecord]) -> dict[CheckName, ValidationOutcome]:
    """Run schema and key checks over the record frame.

    Duplicate identifiers are reported as a warning only; they are kept in
    every aggregate.
    """
    df = records_to_frame(records)
    results: dict[CheckName, ValidationOutcome] = {
        "employee_schema": validate_dataframe(df, employee_frame_schema),
    }

    unique = validate_unique(df, ["employee_id"])
    if not unique["valid"]:
        unique = {**unique, "valid": True, "status": "warning"}
    results["unique_employee_id"] = unique

    filled = completeness(df, QUALITY_COLUMNS)
    accuracy = 1.0 if results["employee_schema"]["valid"] else 0.0
    quality = classify_quality(filled, accuracy)
    results["data_quality"] = {
        "valid": True,
        "status": str(quality),
        "errors": [] if filled == 1.0 else [f"Completeness {filled:.1%} across {len(QUALITY_COLUMNS)} columns"],
    }

    logger.info("Validated %d records: quality %s", len(df), quality)
    return results


def validate_views(views: DashboardViews) -> dict[CheckName, ValidationOutcome]:
    frames = views.to_frames()
    results: dict[CheckName, ValidationOutcome] = {}

    match frames["department_stats"]:
        case df if df.empty:
            results["department_stats"] = {"valid": True, "status": "skipped", "errors": []}
        case df:
            results["department_stats"] = validate_dataframe(df, department_stats_schema)

    match frames["performance_distribution"]:
        case df if df.empty:
            results["performance_distribution"] = {"valid": True, "status": "skipped", "errors": []}
        case df:
            results["performance_distribution"] = validate_dataframe(df, distribution_schema)

    return results
