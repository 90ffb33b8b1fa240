"""
Shared utilities for data ingestion: numeric coercion, cell text, line
splitting.
"""

import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

# Leading decimal number, e.g. "12", "-3.5", ".5", "1e3", "12 pcs"
_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_count(val: Any) -> float:
    """Coerce a cell value to float, returning 0.0 for non-numeric values.

    Strings are read up to the first character that cannot continue a
    decimal number, so "120 pcs" reads as 120.0 while "pcs" and "" read
    as 0.0. Numeric cells (from a workbook) are cast directly.
    """
    if val is None or isinstance(val, bool):
        return 0.0
    if isinstance(val, (int, float)):
        # NaN never equals itself
        return float(val) if val == val else 0.0
    match = _LEADING_NUMBER.match(str(val).strip())
    if match is None:
        return 0.0
    try:
        return float(match.group(0))
    except (ValueError, OverflowError):
        return 0.0


def cell_text(val: Any) -> str:
    """Render a workbook cell as the text a CSV export would carry."""
    if val is None:
        return ""
    if isinstance(val, float) and val.is_integer():
        return str(int(val))
    if hasattr(val, "strftime"):
        return val.strftime("%Y-%m-%d")
    return str(val).strip()


def split_lines(text: str) -> list[str]:
    """Return the non-blank lines of a document.

    A leading byte-order mark is dropped and every carriage return is
    removed, so a stray CR inside a cell never splits a row.
    """
    normalised = text.removeprefix("\ufeff").replace("\r", "").strip()
    if not normalised:
        return []
    return [line for line in normalised.split("\n") if line.strip()]
