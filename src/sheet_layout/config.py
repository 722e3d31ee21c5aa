"""Environment-driven configuration for the layout engine."""

import os
from pathlib import Path

from dotenv import load_dotenv

from sheet_layout.patterns import DEFAULT_PAGE_SIZE, DEFAULT_PROSE_THRESHOLD
from sheet_layout.schema import LayoutConfig

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

PAGE_SIZE_VAR = "SHEET_LAYOUT_PAGE_SIZE"
PROSE_THRESHOLD_VAR = "SHEET_LAYOUT_PROSE_THRESHOLD"


def _int_from_env(name: str, default: int) -> int:
    """Read an integer environment variable, falling back to *default* when unset or blank."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def load_config() -> LayoutConfig:
    """Build a validated LayoutConfig from the environment (and .env at the project root)."""
    return LayoutConfig(
        page_size=_int_from_env(PAGE_SIZE_VAR, DEFAULT_PAGE_SIZE),
        prose_threshold=_int_from_env(PROSE_THRESHOLD_VAR, DEFAULT_PROSE_THRESHOLD),
    )
