"""Tests for the paired-metric projections."""

from hr_analytics.correlations import (
    get_engagement_performance_correlation,
    get_performance_by_tenure,
    get_satisfaction_performance_correlation,
)
from hr_analytics.ingest import parse_employee_csv
from hr_analytics.models import EngagementPerformancePoint, TenurePerformancePoint
from hr_analytics.utils.types import EmploymentStatus


class TestPerformanceByTenure:
    def test_projects_rated_records(self, make_record):
        record = make_record(
            name="Smith, John",
            tenure_years=6.5,
            performance_category="Exceeds",
            salary=None,
            department="Sales",
        )
        assert get_performance_by_tenure([record]) == [
            TenurePerformancePoint(name="Smith, John", tenure=6.5, performance=5, salary=None, department="Sales")
        ]

    def test_skips_unrated_records(self, make_record):
        records = [
            make_record(performance_category=None),
            make_record(performance_category="Outstanding"),
            make_record(performance_category="PIP", status=EmploymentStatus.TERMINATED),
        ]
        points = get_performance_by_tenure(records)
        assert [p.performance for p in points] == [2]

    def test_one_point_per_record_in_order(self, make_record):
        records = [make_record(name=n) for n in ("a", "b", "a")]
        assert [p.name for p in get_performance_by_tenure(records)] == ["a", "b", "a"]

    def test_empty_record_set(self):
        assert get_performance_by_tenure([]) == []


class TestEngagementPerformanceCorrelation:
    def test_projects_engagement(self, make_record):
        record = make_record(name="Doe, Jane", engagement=3.2, performance_category="Fully Meets", tenure_years=2.0)
        (point,) = get_engagement_performance_correlation([record])
        assert point == EngagementPerformancePoint(
            name="Doe, Jane", engagement=3.2, performance=4, tenure=2.0, department="Production"
        )

    def test_zero_and_missing_engagement_are_skipped(self, make_record):
        records = [make_record(engagement=0.0), make_record(engagement=None)]
        assert get_engagement_performance_correlation(records) == []

    def test_zero_engagement_from_export_is_skipped(self):
        records = parse_employee_csv("EmpID,PerformanceScore,EngagementSurvey\n1,Exceeds,0\n2,PIP,3.5")
        points = get_engagement_performance_correlation(records)
        assert [(p.engagement, p.performance) for p in points] == [(3.5, 2)]

    def test_satisfaction_alias(self):
        assert get_satisfaction_performance_correlation is get_engagement_performance_correlation

    def test_empty_record_set(self):
        assert get_engagement_performance_correlation([]) == []
