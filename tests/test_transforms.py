"""Tests for fact-table building and grouped summaries."""
import pandas as pd
import pytest

from production_dashboard.kpis import calc_rate
from production_dashboard.loaders.production_csv import ProductionRecord
from production_dashboard.transforms import (
    FACT_COLUMNS,
    build_fact_production,
    summarise_by_date,
    summarise_by_product,
)


@pytest.fixture()
def fact() -> pd.DataFrame:
    return build_fact_production([
        ProductionRecord("2024-01-02", "Chasis", 90, 88, 2, 1),
        ProductionRecord("2024-01-01", "Chasis", 100, 95, 5, 2),
        ProductionRecord("2024-01-01", "Cushion", 0, 0, 0, 0),
        ProductionRecord("2024-01-02", "Cushion", 120, 110, 10, 6),
    ])


class TestBuildFactProduction:
    def test_schema_and_order(self, fact):
        assert list(fact.columns) == FACT_COLUMNS
        assert fact["date"].tolist() == ["2024-01-02", "2024-01-01", "2024-01-01", "2024-01-02"]
        assert fact["produced"].dtype == "float64"

    def test_empty_keeps_schema(self):
        df = build_fact_production([])
        assert df.empty
        assert list(df.columns) == FACT_COLUMNS


class TestSummariseByDate:
    def test_grouped_and_sorted(self, fact):
        daily = summarise_by_date(fact)
        assert daily["date"].tolist() == ["2024-01-01", "2024-01-02"]
        assert daily["produced"].tolist() == [100.0, 210.0]
        assert daily["defect_rate"].tolist() == pytest.approx([5.0, 12 / 210 * 100])

    def test_zero_production_day_has_zero_rates(self):
        daily = summarise_by_date(build_fact_production([ProductionRecord("d", "x", 0, 0, 3, 1)]))
        assert daily["defect_rate"].tolist() == [0.0]
        assert daily["repair_rate"].tolist() == [0.0]

    def test_rates_agree_with_calc_rate_on_negative_output(self):
        daily = summarise_by_date(build_fact_production([ProductionRecord("d", "x", -4, 0, 2, 1)]))
        assert daily["defect_rate"].iloc[0] == pytest.approx(calc_rate(2, -4))
        assert daily["repair_rate"].iloc[0] == pytest.approx(calc_rate(1, -4))

    def test_empty(self):
        daily = summarise_by_date(build_fact_production([]))
        assert daily.empty
        assert "defect_rate" in daily.columns


class TestSummariseByProduct:
    def test_largest_first(self, fact):
        by_line = summarise_by_product(fact)
        assert by_line["product_line"].tolist() == ["Chasis", "Cushion"]
        assert by_line["produced"].tolist() == [190.0, 120.0]
        assert by_line["repair_rate"].iloc[1] == pytest.approx(5.0)

    def test_empty(self):
        assert summarise_by_product(build_fact_production([])).empty
