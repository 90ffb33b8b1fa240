"""
Dashboard-ready output functions.

These are the primary entry points for the Streamlit front end and the
CLI. Each function returns plain dicts suitable for rendering cards and
the production pie chart.
"""

import logging
from typing import Sequence

import requests

from .config import CHART_COLORS, CHART_LABELS, DashboardConfig
from .kpis import (
    chart_segments,
    filter_by_date,
    find_product_snapshot,
    latest_date,
    sum_totals,
    summarise_period,
)
from .loaders.google_sheet import SheetConfigError, SheetFetchError, fetch_sheet_csv
from .loaders.production_csv import ProductionRecord, parse_production_csv

logger = logging.getLogger(__name__)


def get_dashboard_view(
    records: Sequence[ProductionRecord],
    config: DashboardConfig | None = None,
) -> dict:
    """Map parsed records to everything the dashboard displays.

    Parameters
    ----------
    records : Output of parse_production_csv() (or a local file loader).
    config : Targets and tracked product lines. Defaults to DashboardConfig().

    Returns
    -------
    Dict with structure:
    {
        "has_data": True,
        "latest_date": "2024-01-02",
        "daily":  {"produced": ..., "qc_pass": ..., "defect": ..., "repair": ...,
                   "target": 200, "production_rate": ..., "defect_rate": ...,
                   "repair_rate": ...},
        "period": {... same keys, target 800 ...},
        "product_lines": {"Chasis": {"produced": ..., "qc_pass": ..., "defect": ...,
                                     "repair": ..., "matched": True}, ...},
        "chart": {"labels": [...], "values": [...], "colors": [...],
                  "segments": ChartSegments(...)},
    }
    With no records, has_data is False, latest_date is None and every
    number is zero.
    """
    config = config or DashboardConfig()

    latest = latest_date(records)
    if latest is None:
        logger.warning("No production records, returning empty dashboard view")
        today: list[ProductionRecord] = []
    else:
        today = filter_by_date(records, latest)

    segments = chart_segments(sum_totals(today))

    product_lines = {}
    for name in config.tracked_product_lines:
        snap = find_product_snapshot(today, name)
        product_lines[name] = {
            "produced": snap.produced,
            "qc_pass": snap.qc_pass,
            "defect": snap.defect,
            "repair": snap.repair,
            "matched": snap.matched,
        }

    return {
        "has_data": latest is not None,
        "latest_date": latest,
        "daily": summarise_period(today, config.daily_target),
        "period": summarise_period(records, config.weekly_target),
        "product_lines": product_lines,
        "chart": {
            "labels": list(CHART_LABELS),
            "values": [segments.pure_production, segments.defect, segments.repair],
            "colors": list(CHART_COLORS),
            "segments": segments,
        },
    }


def load_records(
    config: DashboardConfig | None = None,
    session: requests.Session | None = None,
) -> list[ProductionRecord]:
    """Fetch the configured sheet and parse it.

    Configuration and transport problems are logged and re-raised; they are
    the only failures a load can end in.
    """
    config = config or DashboardConfig()
    try:
        text = fetch_sheet_csv(config.sheet_url, session=session)
    except SheetConfigError as exc:
        logger.error("Sheet configuration problem: %s", exc)
        raise
    except SheetFetchError:
        logger.exception("Failed to fetch production sheet")
        raise
    return parse_production_csv(text)


def load_dashboard(
    config: DashboardConfig | None = None,
    session: requests.Session | None = None,
) -> dict:
    """Fetch, parse and aggregate in one step."""
    config = config or DashboardConfig()
    return get_dashboard_view(load_records(config, session=session), config)


def format_rate(value: float, decimals: int) -> str:
    """Format a percentage for display, e.g. format_rate(92.5, 1) -> '92.5%'."""
    return f"{value:.{decimals}f}%"


def format_count(value: float) -> str:
    """Format a count without a trailing '.0' for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return str(round(value, 2))
