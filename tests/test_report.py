"""Tests for the dashboard bundle, export frames, and display formatting."""

import json

import pytest
from rich.console import Console

from hr_analytics.ingest import parse_employee_csv
from hr_analytics.report import (
    build_dashboard,
    format_currency,
    format_number,
    format_percentage,
    render_dashboard,
)

VIEW_NAMES = {
    "dashboard_metrics",
    "department_stats",
    "performance_distribution",
    "top_performers",
    "performance_by_tenure",
    "engagement_vs_performance",
}


@pytest.fixture
def views(sample_csv, as_of):
    return build_dashboard(parse_employee_csv(sample_csv, as_of=as_of), top_limit=3)


class TestBuildDashboard:
    def test_all_views_present(self, views):
        assert views.metrics.total_employees == 5
        assert [(d.department, d.employee_count) for d in views.departments] == [
            ("Production", 2), ("Sales", 1), ("IT/IS", 0),
        ]
        assert [e.category for e in views.distribution] == [
            "Exceeds", "Fully Meets", "Needs Improvement", "PIP",
        ]
        assert [r.employee_id for r in views.top_performers] == ["10026", "10196", "10088"]
        assert len(views.tenure_performance) == 4
        assert len(views.engagement_performance) == 2

    def test_empty_record_set(self):
        views = build_dashboard([])
        assert views.metrics.total_employees == 0
        assert views.departments == []
        assert views.distribution == []
        assert views.top_performers == []
        assert views.tenure_performance == []
        assert views.engagement_performance == []

    def test_to_dict_is_json_serializable(self, views):
        payload = views.to_dict()
        assert set(payload) == VIEW_NAMES
        decoded = json.loads(json.dumps(payload))
        assert decoded["top_performers"][0]["hire_date"] == "2014-01-01"
        assert decoded["dashboard_metrics"]["active_employees"] == 4
        assert decoded["engagement_vs_performance"][0] == {
            "name": "Adinolfi, Wilson",
            "satisfaction": 4.6,
            "performance": 5,
            "tenure": pytest.approx(9.9986, abs=1e-3),
            "department": "Production",
        }

    def test_to_frames(self, views):
        frames = views.to_frames()
        assert set(frames) == VIEW_NAMES
        assert len(frames["dashboard_metrics"]) == 1
        assert list(frames["department_stats"]["department"]) == ["Production", "Sales", "IT/IS"]

    def test_empty_top_performer_frame_keeps_columns(self):
        frame = build_dashboard([]).to_frames()["top_performers"]
        assert frame.empty
        assert "employee_id" in frame.columns


class TestFormatting:
    @pytest.mark.parametrize(
        "value, decimals, expected",
        [(3.14159, 1, "3.1"), (2.0, 2, "2.00"), (0, 0, "0")],
    )
    def test_format_number(self, value, decimals, expected):
        assert format_number(value, decimals) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [(62506.4, "$62,506"), (1_234_567.8, "$1,234,568"), (0, "$0"), (-1500, "-$1,500"), (None, "n/a")],
    )
    def test_format_currency(self, value, expected):
        assert format_currency(value) == expected

    def test_format_percentage(self):
        assert format_percentage(33.333) == "33.3%"


class TestRenderDashboard:
    def test_renders_tables(self, views):
        console = Console(record=True, width=160)
        render_dashboard(views, console)
        text = console.export_text()
        assert "Workforce KPIs" in text
        assert "Production" in text
        assert "Adinolfi, Wilson" in text
