"""
Production Line Dashboard: end-to-end pipeline.

Fetches the production sheet (or reads a local copy), parses it, and
prints the dashboard figures as a text report.

Usage:
    python main.py                       # configured Google Sheet
    python main.py --url <sheet link>
    python main.py --file export.csv     # local .csv or .xlsx
    python main.py --demo                # synthetic data, no network
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from production_dashboard.config import DashboardConfig
from production_dashboard.dashboard import (
    format_count,
    format_rate,
    get_dashboard_view,
    load_records,
)
from production_dashboard.loaders import (
    SheetConfigError,
    SheetFetchError,
    load_production_file,
    parse_production_csv,
)
from production_dashboard.simulator import generate_production_csv
from production_dashboard.transforms import build_fact_production, summarise_by_date

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


def _print_period(title: str, figures: dict) -> None:
    print(f"\n{title}")
    print(f"  Production : {format_count(figures['produced'])}/{format_count(figures['target'])}"
          f"  ({format_rate(figures['production_rate'], 0)})")
    print(f"  QC pass    : {format_count(figures['qc_pass'])}")
    print(f"  Defect     : {format_count(figures['defect'])}"
          f"  ({format_rate(figures['defect_rate'], 1)})")
    print(f"  Repair     : {format_count(figures['repair'])}"
          f"  ({format_rate(figures['repair_rate'], 1)})")


def print_report(view: dict) -> None:
    """Print a dashboard view the way the cards lay it out."""
    if not view["has_data"]:
        print("\nNo data: the sheet is empty or failed to load.")
        return

    print(f"\nLatest date: {view['latest_date'] or '—'}")
    _print_period("Today's report", view["daily"])
    _print_period("Weekly report", view["period"])

    print("\nProduct lines (latest day)")
    for name, figures in view["product_lines"].items():
        flag = "" if figures["matched"] else "  (no row)"
        print(f"  {name:10s} | prod {format_count(figures['produced']):>6} | "
              f"qc {format_count(figures['qc_pass']):>6} | "
              f"defect {format_count(figures['defect']):>5} | "
              f"repair {format_count(figures['repair']):>5}{flag}")

    print("\nChart segments")
    for label, value in zip(view["chart"]["labels"], view["chart"]["values"]):
        print(f"  {label:10s} {format_count(value)}")


def main(argv: list[str] | None = None) -> int:
    """Run the pipeline and print the report. Returns a process exit code."""
    parser = argparse.ArgumentParser(description="Production line dashboard report")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--url", help="Google Sheet link (defaults to config.SHEET_URL)")
    source.add_argument("--file", help="Local .csv or .xlsx copy of the sheet")
    source.add_argument("--demo", action="store_true", help="Use synthetic data")
    args = parser.parse_args(argv)

    config = DashboardConfig()
    if args.url:
        config = replace(config, sheet_url=args.url)

    print("=" * 70)
    print("  PRODUCTION LINE DASHBOARD")
    print("=" * 70)

    if args.demo:
        records = parse_production_csv(generate_production_csv())
    elif args.file:
        records = load_production_file(args.file)
    else:
        try:
            records = load_records(config)
        except SheetConfigError as e:
            print(f"\nConfiguration error: {e}")
            return 2
        except SheetFetchError:
            print("\nError: failed to load data. Check the log, the URL and the sheet's sharing settings.")
            return 1

    view = get_dashboard_view(records, config)
    print_report(view)

    daily = summarise_by_date(build_fact_production(records))
    if not daily.empty:
        print("\nDaily breakdown")
        print(daily.to_string(index=False, float_format=lambda x: f"{x:.1f}"))

    print("\n" + "=" * 70)
    return 0


if __name__ == "__main__":
    sys.exit(main())
