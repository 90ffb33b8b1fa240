"""
Data transforms: turn parsed production records into a fact table and the
grouped summaries the dashboard charts are drawn from.
"""

import logging
from dataclasses import asdict
from typing import Iterable

import numpy as np
import pandas as pd

from .config import NUMERIC_FIELDS
from .loaders.production_csv import ProductionRecord

logger = logging.getLogger(__name__)

FACT_COLUMNS = ["date", "product_line", *NUMERIC_FIELDS]


def build_fact_production(records: Iterable[ProductionRecord]) -> pd.DataFrame:
    """Build the production fact table, one row per record, document order kept.

    Returns
    -------
    fact_production DataFrame with columns:
        date, product_line, produced, qc_pass, defect, repair
    """
    df = pd.DataFrame([asdict(r) for r in records], columns=FACT_COLUMNS)
    df = df.astype({col: "float64" for col in NUMERIC_FIELDS})

    logger.debug("Built fact_production with %d rows", len(df))
    return df


def _add_rates(df: pd.DataFrame) -> pd.DataFrame:
    produced = df["produced"].to_numpy(dtype="float64")
    # same zero guard as kpis.calc_rate
    has_output = produced != 0
    safe = np.where(has_output, produced, 1.0)
    df["defect_rate"] = np.where(has_output, df["defect"] / safe * 100, 0.0)
    df["repair_rate"] = np.where(has_output, df["repair"] / safe * 100, 0.0)
    return df


def summarise_by_date(fact: pd.DataFrame) -> pd.DataFrame:
    """Aggregate fact_production to daily grain.

    Rules
    -----
    - Counts: sum across product lines
    - Rates: recomputed from the daily sums (0 when nothing was produced)

    Returns
    -------
    DataFrame with columns:
        date, produced, qc_pass, defect, repair, defect_rate, repair_rate
    sorted by date string.
    """
    if fact.empty:
        logger.warning("Empty fact table, returning empty daily summary")
        return pd.DataFrame(columns=["date", *NUMERIC_FIELDS, "defect_rate", "repair_rate"])

    daily = (
        fact.groupby("date", sort=True)[list(NUMERIC_FIELDS)]
        .sum()
        .reset_index()
    )
    return _add_rates(daily)


def summarise_by_product(fact: pd.DataFrame) -> pd.DataFrame:
    """Aggregate fact_production per product line over the whole document.

    Returns
    -------
    DataFrame with columns:
        product_line, produced, qc_pass, defect, repair, defect_rate,
        repair_rate
    ordered by produced, largest first.
    """
    if fact.empty:
        return pd.DataFrame(
            columns=["product_line", *NUMERIC_FIELDS, "defect_rate", "repair_rate"]
        )

    by_line = (
        fact.groupby("product_line", sort=False)[list(NUMERIC_FIELDS)]
        .sum()
        .reset_index()
        .sort_values("produced", ascending=False, kind="stable")
        .reset_index(drop=True)
    )
    return _add_rates(by_line)
