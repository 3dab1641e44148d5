"""HR / People Analytics.

Parses HRIS employee exports into typed records and derives the dashboard
views: headline KPIs, department breakdowns, the performance rating
distribution, top performers, and tenure/engagement against performance.
"""

from hr_analytics.correlations import (
    get_engagement_performance_correlation,
    get_performance_by_tenure,
    get_satisfaction_performance_correlation,
)
from hr_analytics.departments import compute_department_stats
from hr_analytics.ingest import parse_employee_csv, read_employee_csv
from hr_analytics.metrics import compute_dashboard_metrics
from hr_analytics.models import (
    DashboardMetrics,
    DepartmentStats,
    EmployeeRecord,
    EngagementPerformancePoint,
    PerformanceDistributionEntry,
    TenurePerformancePoint,
)
from hr_analytics.performance import compute_performance_distribution, get_top_performers
from hr_analytics.report import DashboardViews, build_dashboard
from hr_analytics.utils.types import EmploymentStatus

__all__ = [
    "DashboardMetrics",
    "DashboardViews",
    "DepartmentStats",
    "EmployeeRecord",
    "EmploymentStatus",
    "EngagementPerformancePoint",
    "PerformanceDistributionEntry",
    "TenurePerformancePoint",
    "build_dashboard",
    "compute_dashboard_metrics",
    "compute_department_stats",
    "compute_performance_distribution",
    "get_engagement_performance_correlation",
    "get_performance_by_tenure",
    "get_satisfaction_performance_correlation",
    "get_top_performers",
    "parse_employee_csv",
    "read_employee_csv",
]
