"""
KPI computation functions. Pure functions with no side effects.

Provides latest-day selection, totals, rate calculation, per-line
snapshots and the pie-chart split.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from .config import NUMERIC_FIELDS
from .loaders.production_csv import ProductionRecord
from .transforms import build_fact_production

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PeriodTotals:
    produced: float = 0.0
    qc_pass: float = 0.0
    defect: float = 0.0
    repair: float = 0.0


@dataclass(frozen=True)
class ProductSnapshot:
    """Latest-day figures for one tracked product line.

    matched is False when no record matched and the counts are zero
    placeholders.
    """

    name: str
    produced: float = 0.0
    qc_pass: float = 0.0
    defect: float = 0.0
    repair: float = 0.0
    matched: bool = False


@dataclass(frozen=True)
class ChartSegments:
    pure_production: float
    defect: float
    repair: float


def latest_date(records: Sequence[ProductionRecord]) -> str | None:
    """Return the lexicographically greatest date, or None if there are no records.

    Dates are compared as strings, which orders ISO-style dates
    (YYYY-MM-DD) chronologically.
    """
    if not records:
        return None
    latest = records[0].date
    for r in records[1:]:
        if r.date > latest:
            latest = r.date
    return latest


def filter_by_date(records: Sequence[ProductionRecord], date: str) -> list[ProductionRecord]:
    """Records whose date equals `date`, order kept."""
    return [r for r in records if r.date == date]


def sum_totals(records: Sequence[ProductionRecord]) -> PeriodTotals:
    """Component-wise sum of the four counts."""
    fact = build_fact_production(records)
    if fact.empty:
        return PeriodTotals()
    sums = fact[list(NUMERIC_FIELDS)].sum()
    return PeriodTotals(**{name: float(sums[name]) for name in NUMERIC_FIELDS})


def calc_rate(numerator: float, denominator: float) -> float:
    """Return numerator / denominator * 100, or 0.0 if denominator == 0."""
    if denominator == 0:
        return 0.0
    return (numerator / denominator) * 100


def production_rate(totals: PeriodTotals, target: float) -> float:
    return calc_rate(totals.produced, target)


def defect_rate(totals: PeriodTotals) -> float:
    return calc_rate(totals.defect, totals.produced)


def repair_rate(totals: PeriodTotals) -> float:
    return calc_rate(totals.repair, totals.produced)


def summarise_period(records: Sequence[ProductionRecord], target: float) -> dict:
    """Totals plus rates for a set of records.

    Returns
    -------
    Dict with structure:
    {
        "produced": ..., "qc_pass": ..., "defect": ..., "repair": ...,
        "target": ...,
        "production_rate": ..., "defect_rate": ..., "repair_rate": ...,
    }
    """
    totals = sum_totals(records)
    return {
        "produced": totals.produced,
        "qc_pass": totals.qc_pass,
        "defect": totals.defect,
        "repair": totals.repair,
        "target": target,
        "production_rate": production_rate(totals, target),
        "defect_rate": defect_rate(totals),
        "repair_rate": repair_rate(totals),
    }


def find_product_snapshot(
    records: Sequence[ProductionRecord],
    name: str,
) -> ProductSnapshot:
    """Pick the record for a product line out of one day's records.

    Matching order (case-insensitive): exact name, then name contained in
    the record's product line. The first record in document order wins at
    each stage. No match gives a zero-valued snapshot.
    """
    wanted = name.lower()
    match = next(
        (r for r in records if r.product_line and r.product_line.lower() == wanted),
        None,
    )
    if match is None:
        match = next(
            (r for r in records if r.product_line and wanted in r.product_line.lower()),
            None,
        )
    if match is None:
        return ProductSnapshot(name=name)

    return ProductSnapshot(
        name=name,
        produced=match.produced,
        qc_pass=match.qc_pass,
        defect=match.defect,
        repair=match.repair,
        matched=True,
    )


def chart_segments(totals: PeriodTotals) -> ChartSegments:
    """Split totals into the three pie slices.

    Defects are shown as their own slice, so they are taken out of the
    production slice; the production slice never goes below zero.
    """
    return ChartSegments(
        pure_production=max(0.0, totals.produced - totals.defect),
        defect=totals.defect,
        repair=totals.repair,
    )
