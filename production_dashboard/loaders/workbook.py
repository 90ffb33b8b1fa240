"""
Loader for locally saved copies of the production sheet.

Accepts either a CSV export or an .xlsx download ("File > Download >
Microsoft Excel"). Only the first worksheet of a workbook is read.
"""

import logging
from pathlib import Path

import openpyxl

from .production_csv import ProductionRecord, parse_production_csv, parse_rows
from .utils import cell_text

logger = logging.getLogger(__name__)


def load_production_workbook(path: str) -> list[ProductionRecord]:
    """Load production records from the first sheet of an .xlsx workbook.

    Assumptions
    -----------
    - Row 1 is the header (or the first data row when unlabelled).
    - Fully empty rows are ignored, as blank lines are in the CSV export.
    - Cached values are read (data_only=True), not formulas.
    """
    try:
        wb = openpyxl.load_workbook(path, data_only=True, read_only=True)
    except Exception:
        logger.exception("Failed to open production workbook: %s", path)
        raise

    try:
        ws = wb.worksheets[0]
        rows = []
        for values in ws.iter_rows(values_only=True):
            cells = [cell_text(v) for v in values]
            if not any(cells):
                continue
            rows.append(cells)
    finally:
        wb.close()

    records = parse_rows(rows)
    logger.info("Loaded %d production records from %s", len(records), path)
    return records


def load_production_file(path: str) -> list[ProductionRecord]:
    """Load production records from a local .csv or .xlsx file."""
    suffix = Path(path).suffix.lower()

    if suffix == ".csv":
        text = Path(path).read_text(encoding="utf-8-sig")
        return parse_production_csv(text)
    if suffix in (".xlsx", ".xlsm"):
        return load_production_workbook(path)

    raise ValueError(f"Unsupported production file type: {path}")
