"""Shared utilities for the HR analytics package."""

from hr_analytics.utils.io import read_text_file, write_output
from hr_analytics.utils.validators import validate_dataframe, validate_unique
from hr_analytics.utils.types import EmploymentStatus, ValidationOutcome
