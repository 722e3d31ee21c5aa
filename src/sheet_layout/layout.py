"""Pagination and block grouping.

Rows are sliced into positional pages first, then classified and grouped
within each page.  A table that straddles a page boundary is emitted as two
independent Table blocks, one per page; pagination never looks at content.
"""

import logging
from itertools import groupby

from sheet_layout.classifiers import RowKind, classify_row, first_cell_text, is_numeric_like
from sheet_layout.patterns import DEFAULT_PROSE_THRESHOLD
from sheet_layout.schema import Block, Cell, LayoutConfig, LayoutDocument, Page, ProseBlock, TableBlock

logger = logging.getLogger(__name__)


# ─── Pagination ──────────────────────────────────────────────────────────────


def paginate(rows: list[list[str]], page_size: int) -> list[list[list[str]]]:
    """Slice rows into consecutive chunks of *page_size* (the last may be shorter)."""
    return [rows[i : i + page_size] for i in range(0, len(rows), page_size)]


# ─── Grouping ────────────────────────────────────────────────────────────────


def _table_cells(row: list[str], is_header: bool) -> list[Cell]:
    """Annotate every cell of a table row with header and alignment hints."""
    return [Cell(text=text, is_header=is_header, is_numeric_like=is_numeric_like(text)) for text in row]


def _run_blocks(kind: RowKind, run: list[tuple[int, list[str]]]) -> list[Block]:
    """Turn one run of same-kind (global_index, row) pairs into blocks.

    A prose run yields one ProseBlock per row; a table run yields a single
    TableBlock.  Only the row at global index 0 can be a header.
    """
    if kind is RowKind.PROSE:
        return [ProseBlock(text=first_cell_text(row), row=list(row)) for _, row in run]
    rows = [_table_cells(row, index == 0) for index, row in run]
    return [TableBlock(rows=rows, is_header_block=run[0][0] == 0)]


def build_page(page_rows: list[list[str]], start_index: int, prose_threshold: int = DEFAULT_PROSE_THRESHOLD) -> Page:
    """Group one page's rows into Prose and Table blocks.

    *start_index* is the global index of the page's first row, used to decide
    which row (if any) is the document header.  Consecutive rows of the same
    kind form one run, so each row is visited once.
    """
    runs = groupby(enumerate(page_rows, start=start_index), key=lambda item: classify_row(item[1], prose_threshold))
    blocks = [block for kind, run in runs for block in _run_blocks(kind, list(run))]
    return Page(blocks=blocks)


# ─── Main Entry Point ────────────────────────────────────────────────────────


def build_document(
    rows: list[list[str]],
    page_size: int | None = None,
    prose_threshold: int | None = None,
    config: LayoutConfig | None = None,
) -> LayoutDocument:
    """Paginate normalized rows and group each page into typed blocks.

    Pass either *config* or the loose *page_size* / *prose_threshold*
    arguments, not both.  The configuration is validated before any row is
    processed; a non-positive page size raises pydantic's ValidationError.
    """
    if config is not None and (page_size is not None or prose_threshold is not None):
        raise ValueError("Pass either config or page_size/prose_threshold, not both")
    if config is None:
        overrides = {"page_size": page_size, "prose_threshold": prose_threshold}
        config = LayoutConfig(**{key: value for key, value in overrides.items() if value is not None})

    if rows and classify_row(rows[0], config.prose_threshold) is RowKind.PROSE:
        logger.warning("First row is prose; no header row will be marked")

    pages: list[Page] = []
    for page_no, page_rows in enumerate(paginate(rows, config.page_size)):
        page = build_page(page_rows, page_no * config.page_size, config.prose_threshold)
        logger.debug("Page %d: %d rows -> %d blocks", page_no + 1, len(page_rows), len(page.blocks))
        pages.append(page)

    logger.info("Built layout: %d rows across %d pages (page_size=%d)", len(rows), len(pages), config.page_size)
    return LayoutDocument(pages=pages)
