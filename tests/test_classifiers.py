"""Unit tests for row and cell classification helpers."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from conftest import LONG_TEXT, prose_row

from sheet_layout.classifiers import RowKind, classify_row, filled_cells, first_cell_text, is_numeric_like, is_prose_row

# ===========================================================================
# filled_cells / first_cell_text tests
# ===========================================================================


class TestCellHelpers:

    def test_filled_cells_trims(self):
        assert filled_cells(["a", "  ", "", "b"]) == ["a", "b"]

    def test_first_cell_text_trims(self):
        assert first_cell_text(["  Revenue  ", "1"]) == "Revenue"

    def test_first_cell_text_zero_width(self):
        assert first_cell_text([]) == ""


# ===========================================================================
# is_prose_row / classify_row tests
# ===========================================================================


class TestClassifyRow:

    def test_long_single_cell_is_prose(self):
        assert classify_row(prose_row()) is RowKind.PROSE

    def test_revenue_row_is_table(self):
        assert classify_row(["Revenue", "120,000", "4.2%"]) is RowKind.TABLE_ROW

    def test_short_single_cell_is_table(self):
        assert classify_row(["Quarter 3", "", ""]) is RowKind.TABLE_ROW

    def test_exactly_threshold_length_is_table(self):
        """Length must be strictly greater than the threshold."""
        assert classify_row(["x" * 25, ""]) is RowKind.TABLE_ROW
        assert classify_row(["x" * 26, ""]) is RowKind.PROSE

    def test_threshold_measured_on_trimmed_text(self):
        assert classify_row(["   " + "x" * 25 + "   ", ""]) is RowKind.TABLE_ROW

    def test_two_filled_cells_is_table(self):
        assert classify_row([LONG_TEXT, "note"]) is RowKind.TABLE_ROW

    def test_long_text_outside_first_cell_is_table(self):
        """The length test reads cell 0, so a lone long cell elsewhere stays in the table."""
        assert classify_row(["", LONG_TEXT, ""]) is RowKind.TABLE_ROW

    def test_whitespace_cells_are_not_filled(self):
        assert classify_row([LONG_TEXT, "   ", ""]) is RowKind.PROSE

    def test_whitespace_only_row_is_table(self):
        assert classify_row([" ", ""]) is RowKind.TABLE_ROW

    def test_custom_threshold(self):
        assert is_prose_row(["Short note", ""], prose_threshold=5) is True
        assert is_prose_row(prose_row(), prose_threshold=500) is False

    def test_deterministic(self):
        row = prose_row()
        assert {classify_row(row) for _ in range(5)} == {RowKind.PROSE}


# ===========================================================================
# is_numeric_like tests
# ===========================================================================


class TestIsNumericLike:

    def test_thousands(self):
        assert is_numeric_like("120,000") is True

    def test_percent(self):
        assert is_numeric_like("4.2%") is True

    def test_negative(self):
        assert is_numeric_like("-40") is True

    def test_scientific(self):
        assert is_numeric_like("1.5E-3") is True

    def test_surrounding_whitespace(self):
        assert is_numeric_like("  92 ") is True

    def test_lowercase_e_is_text(self):
        assert is_numeric_like("1.5e-3") is False

    def test_word(self):
        assert is_numeric_like("Revenue") is False

    def test_currency_symbol(self):
        assert is_numeric_like("$12") is False

    def test_empty(self):
        assert is_numeric_like("") is False

    def test_whitespace_only(self):
        assert is_numeric_like("   ") is False

    def test_punctuation_only_matches(self):
        """Character-class check only, so '-' and '%' alone qualify."""
        assert is_numeric_like("-") is True
        assert is_numeric_like("%") is True
