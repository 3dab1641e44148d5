"""Performance category lookup tables shared by every aggregate."""

from enum import StrEnum


class PerformanceCategory(StrEnum):
    EXCEEDS = "Exceeds"
    FULLY_MEETS = "Fully Meets"
    NEEDS_IMPROVEMENT = "Needs Improvement"
    PIP = "PIP"


# Ordinal used for averaging and ranking
PERFORMANCE_SCORES: dict[str, int] = {
    PerformanceCategory.EXCEEDS: 5,
    PerformanceCategory.FULLY_MEETS: 4,
    PerformanceCategory.NEEDS_IMPROVEMENT: 3,
    PerformanceCategory.PIP: 2,
}

HIGH_PERFORMER_CATEGORIES: frozenset[str] = frozenset({
    PerformanceCategory.EXCEEDS,
    PerformanceCategory.FULLY_MEETS,
})

PERFORMANCE_COLORS: dict[str, str] = {
    PerformanceCategory.FULLY_MEETS: "#70ad47",
    PerformanceCategory.EXCEEDS: "#4CAF50",
    PerformanceCategory.NEEDS_IMPROVEMENT: "#ff9900",
    PerformanceCategory.PIP: "#c5504b",
}

DEFAULT_CATEGORY_COLOR = "#6B7280"

# Placeholder strings some exports write instead of leaving the cell empty
_PLACEHOLDER_LABELS = frozenset({"null", "undefined"})


def performance_score(label: str | None) -> int | None:
    """Return the ordinal for a category label, or None if it is not rated."""
    if label is None:
        return None
    return PERFORMANCE_SCORES.get(label)


def is_high_performer(label: str | None) -> bool:
    return label in HIGH_PERFORMER_CATEGORIES


def category_color(label: str) -> str:
    return PERFORMANCE_COLORS.get(label, DEFAULT_CATEGORY_COLOR)


def is_reported_category(label: str | None) -> bool:
    """True for labels that belong in the distribution view.

    Any non-blank label counts, recognized or not, except the literal
    placeholder strings.
    """
    if label is None:
        return False
    stripped = label.strip()
    return stripped != "" and stripped not in _PLACEHOLDER_LABELS
