"""Shared type definitions for the HR analytics package."""

from datetime import date, datetime
from enum import StrEnum


type CellValue = str | float | None
type RawRow = dict[str, CellValue]
type ValidationOutcome = dict[str, bool | str | list[str]]
type DateLike = date | datetime | str | None


class EmploymentStatus(StrEnum):
    ACTIVE = "Active"
    TERMINATED = "Terminated"


class DataQuality(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    UNKNOWN = "unknown"


def classify_quality(completeness: float, accuracy: float) -> DataQuality:
    match (completeness, accuracy):
        case (c, a) if c > 0.95 and a > 0.95:
            return DataQuality.HIGH
        case (c, a) if c > 0.80 and a > 0.80:
            return DataQuality.MEDIUM
        case (c, a) if c > 0.50 or a > 0.50:
            return DataQuality.LOW
        case _:
            return DataQuality.UNKNOWN
