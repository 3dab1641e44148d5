"""Data validation utilities using pandera."""

import logging
from collections.abc import Sequence

import pandera as pa
import pandas as pd
from pandera import DataFrameSchema

from hr_analytics.utils.types import ValidationOutcome

logger = logging.getLogger(__name__)


def validate_dataframe(df: pd.DataFrame, schema: DataFrameSchema) -> ValidationOutcome:
    """Validate a DataFrame against a pandera schema."""
    try:
        schema.validate(df, lazy=True)
        return {"valid": True, "status": "ok", "errors": []}
    except pa.errors.SchemaErrors as e:
        errors = []
        for _, row in e.failure_cases.iterrows():
            match row.to_dict():
                case {"column": col, "check": check, "failure_case": val}:
                    errors.append(f"Column '{col}' failed check '{check}': {val}")
                case failure:
                    errors.append(f"Validation failure: {failure}")
        logger.warning("Schema validation found %d failure(s)", len(errors))
        return {"valid": False, "status": "error", "errors": errors}


def validate_unique(df: pd.DataFrame, columns: list[str]) -> ValidationOutcome:
    """Check that specified columns form a unique key."""
    duplicates = df.duplicated(subset=columns, keep=False)
    dup_count = int(duplicates.sum())

    match dup_count:
        case 0:
            return {"valid": True, "status": "ok", "errors": []}
        case n:
            sample = df.loc[duplicates, columns[0]].drop_duplicates().head(5).tolist()
            return {
                "valid": False,
                "status": "error",
                "errors": [f"Found {n} duplicate rows on columns {columns}. Sample: {sample}"],
            }


def completeness(df: pd.DataFrame, columns: Sequence[str]) -> float:
    """Share of non-null cells across the given columns (1.0 for no rows)."""
    if df.empty or not columns:
        return 1.0
    return float(df[list(columns)].notna().to_numpy().mean())
