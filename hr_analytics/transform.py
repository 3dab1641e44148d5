"""Turn coerced CSV rows into typed employee records."""

import logging
from collections.abc import Sequence
from datetime import date, datetime

import pandas as pd

from hr_analytics.models import EmployeeRecord
from hr_analytics.schema import lookup
from hr_analytics.utils.types import DateLike, EmploymentStatus, RawRow

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365.25

FRAME_COLUMNS = [
    "employee_id",
    "name",
    "department",
    "position",
    "hire_date",
    "termination_date",
    "salary",
    "status",
    "performance_category",
    "performance_score",
    "engagement",
    "satisfaction",
    "tenure_years",
]


def parse_date(raw: DateLike) -> date | None:
    """Parse a date cell; anything pandas cannot read becomes None."""
    if raw is None:
        return None
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    ts = pd.to_datetime(raw, errors="coerce")
    if pd.isna(ts):
        return None
    return ts.date()


def compute_tenure_years(hire_date: date | None, as_of: datetime | None = None) -> float:
    """Years between hire and ``as_of``, never negative.

    A missing hire date yields 0.0 rather than None.
    """
    if hire_date is None:
        return 0.0
    now = pd.Timestamp(as_of) if as_of is not None else pd.Timestamp.now()
    elapsed = now - pd.Timestamp(hire_date)
    years = elapsed / pd.Timedelta(days=DAYS_PER_YEAR)
    return max(0.0, float(years))


def normalize_status(raw: str | float | None) -> EmploymentStatus:
    match raw:
        case "Active":
            return EmploymentStatus.ACTIVE
        case _:
            return EmploymentStatus.TERMINATED


def _as_text(value: str | float | None) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _as_number(value: str | float | None) -> float | None:
    return value if isinstance(value, float) else None


def build_employee_record(row: RawRow, as_of: datetime | None = None) -> EmployeeRecord:
    """Map one coerced row onto an ``EmployeeRecord`` via the column schema."""
    hire_date = parse_date(lookup(row, "hire_date"))
    return EmployeeRecord(
        employee_id=_as_text(lookup(row, "employee_id")) or "",
        name=_as_text(lookup(row, "name")),
        department=_as_text(lookup(row, "department")),
        position=_as_text(lookup(row, "position")),
        hire_date=hire_date,
        termination_date=parse_date(lookup(row, "termination_date")),
        salary=_as_number(lookup(row, "salary")),
        status=normalize_status(lookup(row, "status")),
        performance_category=_as_text(lookup(row, "performance_category")),
        engagement=_as_number(lookup(row, "engagement")),
        satisfaction=_as_number(lookup(row, "satisfaction")),
        tenure_years=compute_tenure_years(hire_date, as_of),
        attributes=dict(row),
    )


def records_to_frame(records: Sequence[EmployeeRecord]) -> pd.DataFrame:
    """Build a DataFrame with one row per record, in input order."""
    rows = [
        {
            "employee_id": r.employee_id,
            "name": r.name,
            "department": r.department,
            "position": r.position,
            "hire_date": r.hire_date,
            "termination_date": r.termination_date,
            "salary": r.salary,
            "status": str(r.status),
            "performance_category": r.performance_category,
            "performance_score": r.performance_score,
            "engagement": r.engagement,
            "satisfaction": r.satisfaction,
            "tenure_years": r.tenure_years,
        }
        for r in records
    ]
    df = pd.DataFrame(rows, columns=FRAME_COLUMNS)

    for col in ("hire_date", "termination_date"):
        df[col] = pd.to_datetime(df[col], errors="coerce")
    for col in ("salary", "performance_score", "engagement", "satisfaction", "tenure_years"):
        df[col] = pd.to_numeric(df[col], errors="coerce").astype(float)

    logger.debug("Built record frame with %d rows", len(df))
    return df
