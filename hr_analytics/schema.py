"""Column schema for employee exports.

Every column the parser knows about is described by a ``FieldSpec``: the
header name, the kind of value it holds, and the ``EmployeeRecord``
attribute it feeds (if any). Legacy exports used different header names
for the same data; those are listed as aliases and only consulted when the
canonical column is absent from a row.

Columns that are not in the table are kept as text.
"""

import math
from dataclasses import dataclass
from enum import StrEnum

from hr_analytics.utils.types import CellValue


class FieldKind(StrEnum):
    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    CATEGORY = "category"


@dataclass(frozen=True)
class FieldSpec:
    column: str
    kind: FieldKind
    attribute: str | None = None
    aliases: tuple[str, ...] = ()


EMPLOYEE_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("EmpID", FieldKind.TEXT, "employee_id", aliases=("EmployeeID",)),
    FieldSpec("Employee_Name", FieldKind.TEXT, "name", aliases=("FullName",)),
    FieldSpec("Department", FieldKind.TEXT, "department"),
    FieldSpec("Position", FieldKind.TEXT, "position", aliases=("Role",)),
    FieldSpec("DateofHire", FieldKind.DATE, "hire_date", aliases=("HireDate",)),
    FieldSpec("DateofTermination", FieldKind.DATE, "termination_date", aliases=("TerminationDate",)),
    FieldSpec("Salary", FieldKind.NUMBER, "salary", aliases=("CurrentSalary",)),
    FieldSpec("EmploymentStatus", FieldKind.CATEGORY, "status", aliases=("Status",)),
    FieldSpec("PerformanceScore", FieldKind.CATEGORY, "performance_category", aliases=("PerformanceCategory",)),
    FieldSpec("EngagementSurvey", FieldKind.NUMBER, "engagement", aliases=("OverallEngagement",)),
    FieldSpec("EmpSatisfaction", FieldKind.NUMBER, "satisfaction", aliases=("JobSatisfaction",)),
    # Numeric columns with no dedicated record attribute
    FieldSpec("Age", FieldKind.NUMBER),
    FieldSpec("GoalsAchieved", FieldKind.NUMBER),
    FieldSpec("GoalsSet", FieldKind.NUMBER),
    FieldSpec("AchievementRate", FieldKind.NUMBER),
    FieldSpec("TenureYears", FieldKind.NUMBER),
)

_SPECS_BY_COLUMN: dict[str, FieldSpec] = {}
for _spec in EMPLOYEE_FIELDS:
    _SPECS_BY_COLUMN[_spec.column] = _spec
    for _alias in _spec.aliases:
        _SPECS_BY_COLUMN[_alias] = _spec

NUMERIC_COLUMNS: frozenset[str] = frozenset(
    column
    for column, spec in _SPECS_BY_COLUMN.items()
    if spec.kind is FieldKind.NUMBER
)

RECORD_FIELDS: dict[str, FieldSpec] = {
    spec.attribute: spec for spec in EMPLOYEE_FIELDS if spec.attribute is not None
}


def spec_for(column: str) -> FieldSpec:
    """Return the spec for a header name; unknown headers are plain text."""
    return _SPECS_BY_COLUMN.get(column) or FieldSpec(column, FieldKind.TEXT)


def parse_number(raw: str) -> float | None:
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def coerce_value(column: str, raw: str | None) -> CellValue:
    """Coerce one raw cell according to its column's kind.

    Empty cells become ``None``. Numeric columns that do not parse become
    ``None`` as well, never ``0``. Dates stay as text here and are parsed
    when the record is built.
    """
    if raw is None:
        return None
    value = raw.strip()
    if value == "":
        return None

    match spec_for(column).kind:
        case FieldKind.NUMBER:
            return parse_number(value)
        case _:
            return value


def lookup(row: dict[str, CellValue], attribute: str) -> CellValue:
    """Read the value feeding ``attribute``, falling back to legacy aliases."""
    spec = RECORD_FIELDS[attribute]
    if spec.column in row:
        return row[spec.column]
    for alias in spec.aliases:
        if alias in row:
            return row[alias]
    return None
