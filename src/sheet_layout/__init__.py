"""Spreadsheet layout and pagination engine.

Submodules:
  patterns     -- default tunables and the numeric-like character set
  errors       -- EmptySheetError
  schema       -- Cell / TableBlock / ProseBlock / Page / LayoutDocument Pydantic models
  classifiers  -- row and cell classification helpers
  normalize    -- blank-row filtering and rectangular padding
  layout       -- pagination and block grouping (build_document)
  config       -- environment-driven LayoutConfig loading
  rendering    -- HTML and markdown renderers over a LayoutDocument
  pipeline     -- main run() entry point and CLI
"""

from sheet_layout.errors import EmptySheetError
from sheet_layout.layout import build_document
from sheet_layout.normalize import normalize_rows
from sheet_layout.schema import Cell, LayoutConfig, LayoutDocument, Page, ProseBlock, TableBlock

__all__ = [
    "Cell",
    "EmptySheetError",
    "LayoutConfig",
    "LayoutDocument",
    "Page",
    "ProseBlock",
    "TableBlock",
    "build_document",
    "normalize_rows",
]
