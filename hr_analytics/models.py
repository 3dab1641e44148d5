"""Record and view types, plus pandera schemas for HR data validation."""

from dataclasses import dataclass, field
from datetime import date

import pandera as pa
from pandera import Column, Check

from hr_analytics.categories import performance_score
from hr_analytics.utils.types import CellValue, EmploymentStatus

type EmployeeID = str
type SalaryAmount = float


@dataclass(frozen=True)
class EmployeeRecord:
    employee_id: EmployeeID
    name: str | None
    department: str | None
    position: str | None
    hire_date: date | None
    termination_date: date | None
    salary: SalaryAmount | None
    status: EmploymentStatus
    performance_category: str | None
    engagement: float | None
    satisfaction: float | None
    tenure_years: float
    attributes: dict[str, CellValue] = field(default_factory=dict, compare=False, repr=False)

    @property
    def is_active(self) -> bool:
        return self.status is EmploymentStatus.ACTIVE

    @property
    def performance_score(self) -> int | None:
        return performance_score(self.performance_category)


@dataclass(frozen=True)
class DashboardMetrics:
    total_employees: int
    active_employees: int
    average_performance: float
    turnover_rate: float
    average_tenure: float
    average_engagement: float
    high_performers: int
    average_salary: float


@dataclass(frozen=True)
class DepartmentStats:
    department: str
    employee_count: int
    average_performance: float
    average_salary: float
    average_engagement: float
    turnover_rate: float


@dataclass(frozen=True)
class PerformanceDistributionEntry:
    category: str
    count: int
    percentage: float
    color: str


@dataclass(frozen=True)
class TenurePerformancePoint:
    name: str | None
    tenure: float
    performance: int
    salary: SalaryAmount | None
    department: str | None


@dataclass(frozen=True)
class EngagementPerformancePoint:
    name: str | None
    engagement: float
    performance: int
    tenure: float
    department: str | None


employee_frame_schema = pa.DataFrameSchema(
    {
        "employee_id": Column(str, Check.str_length(min_value=1)),
        "name": Column(str, nullable=True),
        "department": Column(str, nullable=True),
        "hire_date": Column(pa.DateTime, nullable=True),
        "termination_date": Column(pa.DateTime, nullable=True),
        "salary": Column(float, Check.greater_than_or_equal_to(0), nullable=True),
        "status": Column(str, Check.isin([s.value for s in EmploymentStatus])),
        "performance_score": Column(float, Check.isin([2.0, 3.0, 4.0, 5.0]), nullable=True),
        "engagement": Column(float, Check.in_range(0, 5), nullable=True),
        "satisfaction": Column(float, Check.in_range(0, 5), nullable=True),
        "tenure_years": Column(float, Check.greater_than_or_equal_to(0)),
    },
    strict=False,
    coerce=True,
)


department_stats_schema = pa.DataFrameSchema(
    {
        "department": Column(str, Check.str_length(min_value=1)),
        "employee_count": Column(int, Check.greater_than_or_equal_to(0)),
        "average_performance": Column(float, Check.in_range(0, 5)),
        "average_salary": Column(float, Check.greater_than_or_equal_to(0)),
        "average_engagement": Column(float, Check.in_range(0, 5)),
        "turnover_rate": Column(float, Check.in_range(0, 100)),
    },
    coerce=True,
)


distribution_schema = pa.DataFrameSchema(
    {
        "category": Column(str, Check.str_length(min_value=1)),
        "count": Column(int, Check.greater_than(0)),
        "percentage": Column(float, Check.in_range(0, 100)),
        "color": Column(str, Check.str_matches(r"^#[0-9A-Fa-f]{6}$")),
    },
    coerce=True,
)
