"""HTML and markdown rendering of a LayoutDocument.

The HTML output is print-ready (A4 landscape) and is what the PDF printer
consumes; the markdown output is for previews and logs.  Renderers only read
the model.
"""

import html

from sheet_layout.schema import Cell, LayoutDocument, Page, ProseBlock, TableBlock

# ─── HTML ────────────────────────────────────────────────────────────────────

_STYLESHEET = """\
@page { size: A4 landscape; margin: 10mm; }
body {
  font-family: 'Calibri', 'Arial', sans-serif;
  -webkit-print-color-adjust: exact;
  font-size: 11px;
  color: #000;
}
.page-break { page-break-after: always; height: 0; display: block; clear: both; }
.custom-table {
  width: 100%;
  border-collapse: collapse;
  margin-bottom: 15px;
  table-layout: auto;
  border: 1px solid #000;
}
.custom-table td {
  border: 1px solid #bfbfbf;
  padding: 4px 6px;
  overflow: hidden;
  white-space: nowrap;
}
.header-cell {
  font-weight: bold;
  background-color: #f0f0f0;
  text-align: center !important;
  border-bottom: 2px solid #000;
}
.text-right { text-align: right; }
.text-left { text-align: left; }
.interpretation-text {
  font-size: 12px;
  line-height: 1.4;
  padding: 10px 0;
  margin: 10px 0;
  text-align: justify;
  white-space: pre-wrap;
  font-style: italic;
}
"""


def _html_cell(cell: Cell) -> str:
    """Render one <td> with its alignment and header classes."""
    classes = ["text-right" if cell.is_numeric_like else "text-left"]
    if cell.is_header:
        classes.append("header-cell")
    return f'<td class="{" ".join(classes)}">{html.escape(cell.text)}</td>'


def _html_block(block: TableBlock | ProseBlock) -> str:
    if isinstance(block, ProseBlock):
        return f'<div class="interpretation-text">{html.escape(block.text)}</div>'
    rows = "".join("<tr>" + "".join(_html_cell(cell) for cell in row) + "</tr>" for row in block.rows)
    return f'<table class="custom-table"><tbody>{rows}</tbody></table>'


def _html_page(page: Page) -> str:
    return '<div class="page">' + "".join(_html_block(block) for block in page.blocks) + "</div>"


def render_html(document: LayoutDocument) -> str:
    """Render the document as a standalone HTML page with one page-break between pages."""
    body = '<div class="page-break"></div>'.join(_html_page(page) for page in document.pages)
    return (
        "<!DOCTYPE html>\n"
        '<html>\n<head>\n<meta charset="utf-8">\n'
        f"<style>\n{_STYLESHEET}</style>\n"
        "</head>\n"
        f"<body>\n{body}\n</body>\n"
        "</html>\n"
    )


# ─── Markdown ────────────────────────────────────────────────────────────────


def _md_row(texts: list[str]) -> str:
    """Render one pipe-table row, escaping literal pipes."""
    return "| " + " | ".join(text.replace("|", "\\|") for text in texts) + " |"


def _md_table(block: TableBlock) -> str:
    """Convert a TableBlock into a markdown table string.

    Markdown tables need a header line; non-header blocks get an empty one.
    """
    texts = block.source_rows()
    n_cols = len(texts[0])
    if block.is_header_block:
        header, body = texts[0], texts[1:]
    else:
        header, body = [""] * n_cols, texts

    lines = [_md_row(header), "| " + " | ".join(["---"] * n_cols) + " |"]
    lines.extend(_md_row(row) for row in body)
    return "\n".join(lines)


def render_markdown(document: LayoutDocument) -> str:
    """Render the document as markdown, separating pages with a horizontal rule."""
    pages: list[str] = []
    for page in document.pages:
        parts = [block.text if isinstance(block, ProseBlock) else _md_table(block) for block in page.blocks]
        pages.append("\n\n".join(parts))
    return "\n\n---\n\n".join(pages) + "\n"
