"""Exhaustive tests for the performance lookup tables."""

import pytest

from hr_analytics.categories import (
    DEFAULT_CATEGORY_COLOR,
    HIGH_PERFORMER_CATEGORIES,
    PERFORMANCE_COLORS,
    PERFORMANCE_SCORES,
    PerformanceCategory,
    category_color,
    is_high_performer,
    is_reported_category,
    performance_score,
)


class TestPerformanceScores:
    @pytest.mark.parametrize(
        "label, score",
        [("Exceeds", 5), ("Fully Meets", 4), ("Needs Improvement", 3), ("PIP", 2)],
    )
    def test_ordinal_mapping(self, label, score):
        assert performance_score(label) == score

    def test_table_covers_exactly_the_rating_scale(self):
        assert set(PERFORMANCE_SCORES) == {c.value for c in PerformanceCategory}

    @pytest.mark.parametrize("label", [None, "", "exceeds", "Outstanding", "5"])
    def test_unknown_labels_have_no_score(self, label):
        assert performance_score(label) is None

    def test_high_performers(self):
        assert HIGH_PERFORMER_CATEGORIES == {"Exceeds", "Fully Meets"}
        assert is_high_performer("Exceeds")
        assert not is_high_performer("PIP")
        assert not is_high_performer(None)


class TestCategoryColors:
    @pytest.mark.parametrize(
        "label, color",
        [
            ("Fully Meets", "#70ad47"),
            ("Exceeds", "#4CAF50"),
            ("Needs Improvement", "#ff9900"),
            ("PIP", "#c5504b"),
        ],
    )
    def test_known_colors(self, label, color):
        assert category_color(label) == color

    def test_every_rating_has_a_color(self):
        assert set(PERFORMANCE_COLORS) == set(PERFORMANCE_SCORES)

    def test_unknown_label_gets_neutral_color(self):
        assert category_color("Outstanding") == DEFAULT_CATEGORY_COLOR == "#6B7280"


class TestIsReportedCategory:
    @pytest.mark.parametrize("label", ["Exceeds", "Outstanding", "n/a"])
    def test_reported(self, label):
        assert is_reported_category(label)

    @pytest.mark.parametrize("label", [None, "", "   ", "null", "undefined"])
    def test_not_reported(self, label):
        assert not is_reported_category(label)
