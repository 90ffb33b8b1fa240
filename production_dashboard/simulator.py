"""
Simulated data generator for the production dashboard.

Generates a CSV document shaped like the production sheet export, for
offline demos and for exercising the pipeline without a shared sheet.
All values are synthetic.
"""

import numpy as np
import pandas as pd

from .config import DAILY_TARGET, TRACKED_PRODUCT_LINES

# ---------------------------------------------------------------------------
# Typical line parameters: share of the daily target, defect and repair
# probabilities per unit
# ---------------------------------------------------------------------------
_LINE_PARAMS = {
    "Chasis": {"share": 0.40, "defect_p": 0.04, "repair_p": 0.6},
    "Cushion": {"share": 0.35, "defect_p": 0.03, "repair_p": 0.5},
    "Headrest": {"share": 0.25, "defect_p": 0.05, "repair_p": 0.7},
}
_DEFAULT_PARAMS = {"share": 0.30, "defect_p": 0.04, "repair_p": 0.6}

SHEET_HEADER = ["tanggal", "barang", "production", "qc", "defect", "repair"]


def generate_production_frame(
    days: int = 7,
    start: str = "2026-02-02",
    product_lines: tuple[str, ...] = TRACKED_PRODUCT_LINES,
    daily_target: float = DAILY_TARGET,
    seed: int = 42,
) -> pd.DataFrame:
    """Generate simulated daily production per product line.

    Weekends run at reduced throughput. Defects are drawn per unit
    produced, repairs per defect, and QC pass is what remains.
    """
    rng = np.random.default_rng(seed)
    dates = pd.date_range(start, periods=days, freq="D")
    rows = []

    for date in dates:
        is_weekend = date.dayofweek >= 5
        for line in product_lines:
            params = _LINE_PARAMS.get(line, _DEFAULT_PARAMS)
            base = daily_target * params["share"] * (0.6 if is_weekend else 1.05)
            produced = max(int(round(base + rng.normal(0, base * 0.08))), 0)
            defect = int(rng.binomial(produced, params["defect_p"])) if produced else 0
            repair = int(rng.binomial(defect, params["repair_p"])) if defect else 0

            rows.append({
                "tanggal": date.strftime("%Y-%m-%d"),
                "barang": line,
                "production": produced,
                "qc": produced - defect,
                "defect": defect,
                "repair": repair,
            })

    return pd.DataFrame(rows, columns=SHEET_HEADER)


def generate_production_csv(
    days: int = 7,
    start: str = "2026-02-02",
    product_lines: tuple[str, ...] = TRACKED_PRODUCT_LINES,
    daily_target: float = DAILY_TARGET,
    seed: int = 42,
) -> str:
    """Same as generate_production_frame(), rendered as sheet CSV text."""
    df = generate_production_frame(days, start, product_lines, daily_target, seed)
    return df.to_csv(index=False, lineterminator="\n")
