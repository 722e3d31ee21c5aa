"""Pydantic models for the paginated layout document.

A LayoutDocument is built once from a normalized row sequence and handed to a
renderer.  All models are frozen; renderers read them and never mutate.
``LayoutDocument.to_dict()`` produces the renderer-facing structure with
camelCase keys (``isHeader``, ``isNumericLike``, ``isHeaderBlock``).
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from sheet_layout.patterns import DEFAULT_PAGE_SIZE, DEFAULT_PROSE_THRESHOLD

NormalizedRow = list[str]


class LayoutConfig(BaseModel):
    """Tunables for the layout builder.

    Validated on construction so a bad page size fails before any row is
    processed.
    """

    model_config = ConfigDict(frozen=True)

    page_size: int = DEFAULT_PAGE_SIZE
    prose_threshold: int = DEFAULT_PROSE_THRESHOLD

    @model_validator(mode="after")
    def validate_bounds(self) -> "LayoutConfig":
        """Ensure page_size is positive and prose_threshold is non-negative."""
        if self.page_size <= 0:
            raise ValueError(f"page_size must be a positive integer, got {self.page_size}")
        if self.prose_threshold < 0:
            raise ValueError(f"prose_threshold must be non-negative, got {self.prose_threshold}")
        return self


class Cell(BaseModel):
    """One table cell plus the presentation hints a renderer needs."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    text: str
    is_header: bool = Field(default=False, alias="isHeader")
    is_numeric_like: bool = Field(default=False, alias="isNumericLike")


class TableBlock(BaseModel):
    """A run of consecutive table rows on one page."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: Literal["table"] = "table"
    rows: list[list[Cell]]
    is_header_block: bool = Field(default=False, alias="isHeaderBlock")

    @model_validator(mode="after")
    def validate_row_widths(self) -> "TableBlock":
        """Ensure every row has the same number of cells as the first."""
        if not self.rows:
            raise ValueError("A table block needs at least one row")
        n_cols = len(self.rows[0])
        for i, row in enumerate(self.rows):
            if len(row) != n_cols:
                raise ValueError(f"Row {i} has {len(row)} cells, expected {n_cols}")
        return self

    def source_rows(self) -> list[NormalizedRow]:
        """Return the cell texts of every row, in order."""
        return [[cell.text for cell in row] for row in self.rows]


class ProseBlock(BaseModel):
    """A single long-text row rendered as a paragraph."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["prose"] = "prose"
    text: str
    # Source row; kept for row conservation but not part of the renderer payload
    row: NormalizedRow = Field(exclude=True)

    def source_rows(self) -> list[NormalizedRow]:
        """Return the one row this paragraph came from."""
        return [list(self.row)]


Block = Annotated[TableBlock | ProseBlock, Field(discriminator="kind")]


class Page(BaseModel):
    """An ordered list of blocks built from one positional chunk of rows."""

    model_config = ConfigDict(frozen=True)

    blocks: list[Block]

    def source_rows(self) -> list[NormalizedRow]:
        """Return the rows of every block on this page, in order."""
        return [row for block in self.blocks for row in block.source_rows()]


class LayoutDocument(BaseModel):
    """The paginated output of the layout builder."""

    model_config = ConfigDict(frozen=True)

    pages: list[Page]

    def source_rows(self) -> list[NormalizedRow]:
        """Concatenate every block's rows across all pages (equals the builder input)."""
        return [row for page in self.pages for row in page.source_rows()]

    def to_dict(self) -> dict:
        """Return the renderer-agnostic plain structure."""
        return self.model_dump(by_alias=True)
