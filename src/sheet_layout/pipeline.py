"""Main layout pipeline step and command-line entry point.

Takes the raw grid produced by the spreadsheet parser (rows of display
strings), normalizes it, and builds the paginated LayoutDocument.  The CLI
reads that grid from a JSON file and writes the rendered document.

Usage:
    python -m sheet_layout.pipeline grid.json -o report.html
    python -m sheet_layout.pipeline grid.json --format markdown
"""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from sheet_layout.config import load_config
from sheet_layout.errors import EmptySheetError
from sheet_layout.layout import build_document
from sheet_layout.normalize import normalize_rows
from sheet_layout.rendering import render_html, render_markdown
from sheet_layout.schema import LayoutConfig, LayoutDocument

logger = logging.getLogger(__name__)

RENDERERS = {
    "html": render_html,
    "markdown": render_markdown,
    "json": lambda document: json.dumps(document.to_dict(), indent=2, ensure_ascii=False),
}


# ─── Main Pipeline Step ──────────────────────────────────────────────────────


def run(grid: Sequence[Sequence[str | None]], config: LayoutConfig | None = None) -> LayoutDocument:
    """Normalize a raw grid and lay it out into pages.

    Raises EmptySheetError when the grid has no non-blank rows.  *config*
    defaults to the environment-driven configuration.
    """
    cfg = config or load_config()
    rows = normalize_rows(grid)
    logger.info("Normalized grid: %d rows in, %d rows kept", len(grid), len(rows))
    return build_document(rows, config=cfg)


def load_grid(path: Path) -> list[list[str | None]]:
    """Read a grid JSON file (an array of arrays of strings)."""
    with open(path, "r", encoding="utf-8") as fopen:
        grid = json.load(fopen)
    if not isinstance(grid, list) or not all(isinstance(row, list) for row in grid):
        raise ValueError(f"{path} must contain a JSON array of arrays")
    # Cells must already be display strings; null marks an absent cell
    for row_no, row in enumerate(grid):
        for col_no, cell in enumerate(row):
            if cell is not None and not isinstance(cell, str):
                raise ValueError(f"{path}: row {row_no}, column {col_no} is {type(cell).__name__}, expected a string or null")
    return grid


def main(argv: Sequence[str] | None = None) -> int:
    """Render a grid JSON file as HTML, markdown, or layout JSON."""
    parser = argparse.ArgumentParser(description="Lay out a spreadsheet grid as a paginated document")
    parser.add_argument("grid", type=Path, help="JSON file holding the sheet as an array of row arrays")
    parser.add_argument("-o", "--output", type=Path, default=None, help="Output file (default: stdout)")
    parser.add_argument("--format", choices=list(RENDERERS.keys()), default="html", help="Output format (default: html)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    try:
        grid = load_grid(args.grid)
    except ValueError as exc:
        logger.error("Could not read grid: %s", exc)
        return 1

    try:
        document = run(grid)
    except EmptySheetError as exc:
        logger.error("%s: %s", args.grid, exc)
        return 1

    rendered = RENDERERS[args.format](document)
    if args.output is None:
        sys.stdout.write(rendered)
    else:
        args.output.write_text(rendered, encoding="utf-8")
        logger.info("Wrote %d pages to %s", len(document.pages), args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
