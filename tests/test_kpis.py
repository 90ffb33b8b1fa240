"""
Unit tests for the KPI functions.

All pure: records in, numbers out.
"""
import pytest

from production_dashboard.kpis import (
    ChartSegments,
    PeriodTotals,
    ProductSnapshot,
    calc_rate,
    chart_segments,
    defect_rate,
    filter_by_date,
    find_product_snapshot,
    latest_date,
    production_rate,
    repair_rate,
    sum_totals,
    summarise_period,
)
from production_dashboard.loaders.production_csv import ProductionRecord


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def records() -> list[ProductionRecord]:
    return [
        ProductionRecord("2024-01-01", "Chasis", 100, 95, 5, 2),
        ProductionRecord("2024-01-02", "Chasis", 90, 88, 2, 1),
        ProductionRecord("2024-01-02", "Cushion Grey", 50, 45, 5, 4),
        ProductionRecord("2024-01-01", "Headrest", 40, 40, 0, 0),
        ProductionRecord("2024-01-02", "Headrest", 60, 57, 3, 3),
    ]


# ---------------------------------------------------------------------------
# Latest day
# ---------------------------------------------------------------------------


class TestLatestDate:
    def test_lexicographic_max(self, records):
        assert latest_date(records) == "2024-01-02"

    def test_empty_is_no_data(self):
        assert latest_date([]) is None

    def test_blank_dates_still_a_date(self):
        assert latest_date([ProductionRecord("", "Chasis", 1)]) == ""

    def test_string_compare_not_calendar(self):
        rs = [ProductionRecord("9/1/2024", "A"), ProductionRecord("10/1/2024", "B")]
        assert latest_date(rs) == "9/1/2024"


class TestFilterByDate:
    def test_only_latest_rows(self, records):
        today = filter_by_date(records, latest_date(records))
        assert [r.product_line for r in today] == ["Chasis", "Cushion Grey", "Headrest"]
        assert all(r.date == "2024-01-02" for r in today)


# ---------------------------------------------------------------------------
# Totals & rates
# ---------------------------------------------------------------------------


class TestTotals:
    def test_sum_all(self, records):
        assert sum_totals(records) == PeriodTotals(produced=340, qc_pass=325, defect=15, repair=10)

    def test_sum_empty(self):
        assert sum_totals([]) == PeriodTotals()


class TestRates:
    def test_calc_rate(self):
        assert calc_rate(50, 200) == pytest.approx(25.0)

    def test_calc_rate_zero_denominator(self):
        assert calc_rate(5, 0) == 0.0

    def test_zero_totals_give_zero_rates(self):
        zero = PeriodTotals()
        assert production_rate(zero, 200) == 0.0
        assert defect_rate(zero) == 0.0
        assert repair_rate(zero) == 0.0

    def test_zero_target(self):
        assert production_rate(PeriodTotals(produced=10), 0) == 0.0

    def test_rates(self):
        totals = PeriodTotals(produced=200, qc_pass=190, defect=10, repair=4)
        assert production_rate(totals, 800) == pytest.approx(25.0)
        assert defect_rate(totals) == pytest.approx(5.0)
        assert repair_rate(totals) == pytest.approx(2.0)

    def test_summarise_period(self, records):
        summary = summarise_period(records, 800)
        assert summary["produced"] == 340
        assert summary["target"] == 800
        assert summary["production_rate"] == pytest.approx(42.5)
        assert summary["defect_rate"] == pytest.approx(15 / 340 * 100)
        assert summary["repair_rate"] == pytest.approx(10 / 340 * 100)


# ---------------------------------------------------------------------------
# Per-line snapshot
# ---------------------------------------------------------------------------


class TestFindProductSnapshot:
    def test_exact_match_case_insensitive(self, records):
        snap = find_product_snapshot(records[1:3], "CHASIS")
        assert snap == ProductSnapshot("CHASIS", 90, 88, 2, 1, matched=True)

    def test_substring_fallback(self):
        rs = [ProductionRecord("2024-01-02", "Headrest", 60, 57, 3, 3)]
        snap = find_product_snapshot(rs, "head")
        assert snap.matched is True
        assert snap.produced == 60

    def test_exact_preferred_over_earlier_substring(self):
        rs = [
            ProductionRecord("d", "Cushion Grey", 1),
            ProductionRecord("d", "cushion", 2),
        ]
        assert find_product_snapshot(rs, "Cushion").produced == 2

    def test_no_match_gives_zeros(self, records):
        snap = find_product_snapshot(records, "Armrest")
        assert snap == ProductSnapshot("Armrest")
        assert snap.matched is False

    def test_blank_product_lines_never_match(self):
        rs = [ProductionRecord("d", "", 5)]
        assert find_product_snapshot(rs, "Chasis").matched is False


# ---------------------------------------------------------------------------
# Chart split
# ---------------------------------------------------------------------------


class TestChartSegments:
    def test_defect_removed_from_production(self):
        seg = chart_segments(PeriodTotals(produced=100, defect=5, repair=2))
        assert seg == ChartSegments(pure_production=95, defect=5, repair=2)

    def test_clamped_when_defect_exceeds_produced(self):
        seg = chart_segments(PeriodTotals(produced=10, defect=15))
        assert seg.pure_production == 0
        assert seg.defect == 15
