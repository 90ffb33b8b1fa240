"""
Configuration: sheet source, targets, tracked product lines, column synonyms.

HEADER_SYNONYMS maps each logical record field to the header names (in
priority order) that a spreadsheet export may use for it. POSITIONAL_COLUMNS
is the layout assumed when the header carries no recognisable names.
"""

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Sheet source: paste the shared Google Sheet link here
# ---------------------------------------------------------------------------
SHEET_URL = (
    "https://docs.google.com/spreadsheets/d/"
    "1tBnWq8XH9ZIfJaGN8rnO8-6DPA7jhP9CoMj7I0VbANk/edit?usp=sharing"
)

# ---------------------------------------------------------------------------
# Targets
# ---------------------------------------------------------------------------
DAILY_TARGET = 200
WEEKLY_TARGET = 800

# ---------------------------------------------------------------------------
# Product lines shown individually on the dashboard
# ---------------------------------------------------------------------------
TRACKED_PRODUCT_LINES: tuple[str, ...] = ("Chasis", "Cushion", "Headrest")

# ---------------------------------------------------------------------------
# Column resolution
# ---------------------------------------------------------------------------
NUMERIC_FIELDS: tuple[str, ...] = ("produced", "qc_pass", "defect", "repair")

# field -> accepted header names, first match wins (compared case-insensitively)
HEADER_SYNONYMS: dict[str, tuple[str, ...]] = {
    "date": ("tanggal", "date", "tgl"),
    "product_line": ("barang", "item", "product", "produk", "nama"),
    "produced": ("production", "produksi", "prod", "jumlah"),
    "qc_pass": ("qc", "quality", "quality control"),
    "defect": ("defect", "defects", "kerusakan"),
    "repair": ("repair", "perbaikan"),
}

POSITIONAL_COLUMNS: dict[str, int] = {
    "date": 0,
    "product_line": 1,
    "produced": 2,
    "qc_pass": 3,
    "defect": 4,
    "repair": 5,
}

# ---------------------------------------------------------------------------
# Chart
# ---------------------------------------------------------------------------
CHART_LABELS: tuple[str, ...] = ("Production", "Defect", "Repair")
CHART_COLORS: tuple[str, ...] = ("#3B82F6", "#10B981", "#EF4444")

# ---------------------------------------------------------------------------
# Fetch
# ---------------------------------------------------------------------------
FETCH_TIMEOUT_S = 30
HTML_MARKERS: tuple[str, ...] = ("<!doctype html", "<html")


@dataclass(frozen=True)
class DashboardConfig:
    """The options a dashboard load is parameterised by."""

    sheet_url: str = SHEET_URL
    daily_target: float = DAILY_TARGET
    weekly_target: float = WEEKLY_TARGET
    tracked_product_lines: tuple[str, ...] = TRACKED_PRODUCT_LINES
