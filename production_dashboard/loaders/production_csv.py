"""
Loader for the production sheet CSV export.

Expected layout (one row per product line per day):
    tanggal, barang, production, qc, defect, repair

Header names are matched loosely (see columns.resolve_columns); a sheet
without a header row is read positionally. Cells that are missing or
non-numeric never fail the load, they read as "" or 0.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from .columns import ColumnMapping, resolve_columns
from .csv_line import split_csv_line
from .utils import parse_count, split_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProductionRecord:
    """One data row of the production sheet."""

    date: str
    product_line: str
    produced: float = 0.0
    qc_pass: float = 0.0
    defect: float = 0.0
    repair: float = 0.0


def _cell(row: Sequence[str], idx: int | None) -> str:
    if idx is None or idx < 0 or idx >= len(row):
        return ""
    return row[idx]


def build_record(row: Sequence[str], mapping: ColumnMapping) -> ProductionRecord:
    """Build a ProductionRecord from one tokenised row."""
    return ProductionRecord(
        date=(_cell(row, mapping.date) or "").strip(),
        product_line=(_cell(row, mapping.product_line) or "").strip(),
        produced=parse_count(_cell(row, mapping.produced)),
        qc_pass=parse_count(_cell(row, mapping.qc_pass)),
        defect=parse_count(_cell(row, mapping.defect)),
        repair=parse_count(_cell(row, mapping.repair)),
    )


def parse_rows(rows: Iterable[Sequence[str]]) -> list[ProductionRecord]:
    """Turn tokenised rows (header first) into records.

    Used by both the CSV and the workbook loaders so the two sources
    resolve columns identically.
    """
    iterator = iter(rows)
    header = next(iterator, None)
    if header is None:
        return []

    mapping = resolve_columns(header)

    records = []
    skipped = 0
    for row in iterator:
        if len(row) == 0:
            skipped += 1
            continue
        records.append(build_record(row, mapping))

    if skipped:
        logger.warning("Skipped %d empty rows", skipped)
    return records


def parse_production_csv(text: str) -> list[ProductionRecord]:
    """Parse a production sheet CSV document into records.

    Parameters
    ----------
    text : Full CSV document, header row first.

    Returns
    -------
    Records in document order, header excluded. A blank document gives [].
    """
    lines = split_lines(text)
    if not lines:
        logger.warning("CSV document is empty")
        return []

    records = parse_rows(split_csv_line(line) for line in lines)
    logger.info("Parsed %d production records", len(records))
    return records
