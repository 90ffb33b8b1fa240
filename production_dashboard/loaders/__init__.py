"""Data ingestion loaders for the production sheet."""

from .columns import ColumnMapping, resolve_columns
from .csv_line import split_csv_line
from .google_sheet import (
    SheetConfigError,
    SheetFetchError,
    SheetSourceError,
    fetch_sheet_csv,
    to_csv_export_url,
    to_edit_url,
)
from .production_csv import ProductionRecord, parse_production_csv
from .workbook import load_production_file, load_production_workbook

__all__ = [
    "ColumnMapping",
    "resolve_columns",
    "split_csv_line",
    "SheetConfigError",
    "SheetFetchError",
    "SheetSourceError",
    "fetch_sheet_csv",
    "to_csv_export_url",
    "to_edit_url",
    "ProductionRecord",
    "parse_production_csv",
    "load_production_file",
    "load_production_workbook",
]
