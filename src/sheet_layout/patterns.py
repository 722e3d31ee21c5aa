"""Constants shared by the classifiers, layout builder, and config loader."""

# ─── Layout Defaults ──────────────────────────────────────────────────────────

# Rows per page (positional chunk size)
DEFAULT_PAGE_SIZE = 20

# A single-cell row must be strictly longer than this to render as prose
DEFAULT_PROSE_THRESHOLD = 25


# ─── Cell Patterns ───────────────────────────────────────────────────────────

# Characters allowed in a numeric-like cell, e.g. "120,000", "4.2%", "1E-5".
# Only uppercase E; "1e-5" is treated as text.
NUMERIC_LIKE_CHARS = frozenset("0123456789.,%E-")
