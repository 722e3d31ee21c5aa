"""Row and cell classification helpers for the layout builder.

Each function is a pure function of a normalized row (or one cell's text)
and the prose threshold.
"""

from enum import Enum

from sheet_layout.patterns import DEFAULT_PROSE_THRESHOLD, NUMERIC_LIKE_CHARS


class RowKind(Enum):
    """How a normalized row is laid out on the page."""

    PROSE = "prose"
    TABLE_ROW = "table_row"


def filled_cells(row: list[str]) -> list[str]:
    """Return the cells whose trimmed value is non-empty."""
    return [cell for cell in row if cell.strip()]


def first_cell_text(row: list[str]) -> str:
    """Return the trimmed text of cell 0 ('' for a zero-width row)."""
    return row[0].strip() if row else ""


def is_prose_row(row: list[str], prose_threshold: int = DEFAULT_PROSE_THRESHOLD) -> bool:
    """Return True if the row has exactly one filled cell and its first cell is long text."""
    return len(filled_cells(row)) == 1 and len(first_cell_text(row)) > prose_threshold


def classify_row(row: list[str], prose_threshold: int = DEFAULT_PROSE_THRESHOLD) -> RowKind:
    """Classify a row as PROSE or TABLE_ROW."""
    if is_prose_row(row, prose_threshold):
        return RowKind.PROSE
    return RowKind.TABLE_ROW


def is_numeric_like(text: str) -> bool:
    """Return True if the trimmed text is non-empty and uses only digits, '.', ',', '%', 'E', '-'."""
    stripped = text.strip()
    return bool(stripped) and all(char in NUMERIC_LIKE_CHARS for char in stripped)
