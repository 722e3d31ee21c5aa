"""Row normalization: drop blank rows and pad the rest to a rectangle.

Runs before the layout builder.  The grid comes from the spreadsheet parser as
display strings with ragged row lengths; absent cells may be ``None``.
"""

import logging
from collections.abc import Sequence

from sheet_layout.errors import EmptySheetError

logger = logging.getLogger(__name__)


def _is_blank_row(row: Sequence[str | None]) -> bool:
    """Return True if every cell is '' or None (an empty row is blank too)."""
    return all(cell is None or cell == "" for cell in row)


def normalize_rows(grid: Sequence[Sequence[str | None]]) -> list[list[str]]:
    """Return the non-blank rows of *grid*, each right-padded with '' to the widest row.

    Raises EmptySheetError when no row has any content.  Cells are copied
    unchanged (no trimming); rows are never truncated or reordered.
    """
    surviving = [row for row in grid if row is not None and not _is_blank_row(row)]
    dropped = len(grid) - len(surviving)
    if dropped:
        logger.debug("Dropped %d blank rows", dropped)

    if not surviving:
        raise EmptySheetError()

    max_cols = max(len(row) for row in surviving)
    normalized = [["" if cell is None else cell for cell in row] + [""] * (max_cols - len(row)) for row in surviving]

    logger.debug("Normalized %d rows to width %d", len(normalized), max_cols)
    return normalized
