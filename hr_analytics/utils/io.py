"""File I/O utilities for reading exports and writing derived views."""

import logging
import tomllib
from pathlib import Path

import pandas as pd
from rich.console import Console

type FilePath = str | Path

logger = logging.getLogger(__name__)
console = Console()

EXPORT_ENCODINGS = ("utf-8-sig", "latin-1")


def read_text_file(path: FilePath) -> str:
    """Read a text export, handling encoding quirks."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Employee export not found: {path}")

    for encoding in EXPORT_ENCODINGS:
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            logger.debug("Could not decode %s as %s", path.name, encoding)
            continue
    raise ValueError(f"Could not decode {path}")


def write_output(df: pd.DataFrame, path: FilePath, fmt: str = "csv") -> Path:
    """Write a DataFrame to the specified format."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    match fmt:
        case "csv":
            df.to_csv(path, index=False)
        case "parquet":
            df.to_parquet(path, index=False)
        case "excel":
            df.to_excel(path, index=False)
        case "json":
            df.to_json(path, orient="records", indent=2, date_format="iso")
        case other:
            raise ValueError(f"Unsupported output format: {other}")

    console.print(f"  Wrote {len(df)} rows to {path}")
    return path


def output_suffix(fmt: str) -> str:
    match fmt:
        case "csv" | "json" | "parquet":
            return f".{fmt}"
        case "excel":
            return ".xlsx"
        case other:
            raise ValueError(f"Unsupported output format: {other}")


def load_toml_config(path: FilePath) -> dict:
    """Load a TOML configuration file."""
    with open(path, "rb") as f:
        return tomllib.load(f)
