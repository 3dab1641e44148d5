"""Parse HRIS employee exports (comma-separated text) into records.

Lines are split by hand rather than with ``pd.read_csv``: a quote only
toggles the in-quotes state and is dropped wherever it appears (``"a"b``
reads as ``ab``), and the header is split on every comma.
"""

import logging
from datetime import datetime
from pathlib import Path

from hr_analytics.models import EmployeeRecord
from hr_analytics.schema import coerce_value
from hr_analytics.transform import build_employee_record
from hr_analytics.utils.io import FilePath, read_text_file
from hr_analytics.utils.types import RawRow

logger = logging.getLogger(__name__)

BYTE_ORDER_MARK = "\ufeff"


def split_csv_line(line: str) -> list[str]:
    """Split one line on commas, honouring double-quoted sections.

    A quote character only toggles the in-quotes state and is not kept in
    the field value.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)

    fields.append("".join(current))
    return fields


def parse_header(line: str) -> list[str]:
    return [token.lstrip(BYTE_ORDER_MARK).strip() for token in line.split(",")]


def parse_row(headers: list[str], line: str) -> RawRow:
    values = split_csv_line(line)
    return {
        header: coerce_value(header, values[i] if i < len(values) else None)
        for i, header in enumerate(headers)
    }


def parse_employee_csv(text: str, as_of: datetime | None = None) -> list[EmployeeRecord]:
    """Parse CSV text into employee records.

    The first line is the header. Rows without an identifier are dropped;
    every other problem degrades to an empty value and the row is kept.
    ``as_of`` pins the instant tenure is measured against (defaults to now).
    """
    text = text.strip()
    if not text:
        return []

    lines = text.split("\n")
    headers = parse_header(lines[0])
    records: list[EmployeeRecord] = []
    dropped = 0

    for line in lines[1:]:
        record = build_employee_record(parse_row(headers, line), as_of)
        if record.employee_id.strip() == "":
            dropped += 1
            continue
        records.append(record)

    if dropped:
        logger.debug("Dropped %d rows without an employee identifier", dropped)
    logger.info("Parsed %d employee records from %d columns", len(records), len(headers))
    return records


def read_employee_csv(path: FilePath, as_of: datetime | None = None) -> list[EmployeeRecord]:
    """Read an export file from disk and parse it."""
    path = Path(path)
    logger.info("Reading employee export: %s", path.name)
    return parse_employee_csv(read_text_file(path), as_of=as_of)
