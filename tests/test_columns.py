"""Tests for header-to-column resolution."""
import pytest

from production_dashboard.loaders.columns import ColumnMapping, find_index, resolve_columns

POSITIONAL = ColumnMapping(date=0, product_line=1, produced=2, qc_pass=3, defect=4, repair=5)


class TestFindIndex:
    def test_case_insensitive(self):
        assert find_index(["Tanggal", "BARANG"], ["barang"]) == 1

    def test_first_candidate_wins_over_earlier_column(self):
        # "date" is listed before "tgl", so it wins even though "tgl" is leftmost
        assert find_index(["tgl", "date"], ["tanggal", "date", "tgl"]) == 1

    def test_leftmost_duplicate_wins(self):
        assert find_index(["qc", "x", "qc"], ["qc"]) == 0

    def test_exact_match_only(self):
        assert find_index(["production qty"], ["production"]) is None

    def test_none_cells_ignored(self):
        assert find_index([None, "item"], ["item"]) == 1


class TestResolveColumns:
    def test_indonesian_header(self):
        header = ["tanggal", "barang", "produksi", "qc", "kerusakan", "perbaikan"]
        assert resolve_columns(header) == POSITIONAL

    def test_reordered_english_header(self):
        header = ["Item", "Date", "Repair", "Defects", "Quality Control", "Production"]
        assert resolve_columns(header) == ColumnMapping(
            date=1, product_line=0, produced=5, qc_pass=4, defect=3, repair=2
        )

    def test_unrecognised_header_is_fully_positional(self):
        assert resolve_columns(["col1", "col2", "col3", "col4", "col5", "col6"]) == POSITIONAL

    def test_unrecognised_header_ignores_recognised_tail(self):
        # qc/defect/repair names are not enough to trust the header
        header = ["a", "b", "c", "repair", "defect", "qc"]
        assert resolve_columns(header) == POSITIONAL

    def test_only_produced_resolved_forces_date_and_line(self):
        header = ["x", "y", "z", "jumlah"]
        mapping = resolve_columns(header)
        assert mapping.date == 0
        assert mapping.product_line == 1
        assert mapping.produced == 3

    def test_one_of_date_or_line_missing_stays_unresolved(self):
        mapping = resolve_columns(["nama", "jumlah"])
        assert mapping.date is None
        assert mapping.product_line == 0
        assert mapping.produced == 1

    def test_missing_produced_falls_back_to_position(self):
        mapping = resolve_columns(["date", "product"])
        assert mapping.produced == 2

    @pytest.mark.parametrize("field, position", [("qc_pass", 3), ("defect", 4), ("repair", 5)])
    def test_secondary_fields_fall_back_independently(self, field, position):
        mapping = resolve_columns(["date", "item", "production"])
        assert getattr(mapping, field) == position

    def test_secondary_field_resolved_when_named(self):
        mapping = resolve_columns(["date", "item", "production", "x", "x", "x", "defects"])
        assert mapping.defect == 6
        assert mapping.qc_pass == 3

    def test_empty_header(self):
        assert resolve_columns([]) == POSITIONAL

    def test_as_dict(self):
        assert POSITIONAL.as_dict() == {
            "date": 0, "product_line": 1, "produced": 2,
            "qc_pass": 3, "defect": 4, "repair": 5,
        }
