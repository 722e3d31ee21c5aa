"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")

LONG_TEXT = "This is a long explanatory paragraph describing trends over the quarter."


def prose_row(text: str = LONG_TEXT, width: int = 3) -> list[str]:
    """Build a single-cell prose row padded to *width*."""
    return [text] + [""] * (width - 1)


@pytest.fixture
def report_grid() -> list[list[str]]:
    """A small ragged sheet: header, data rows, a blank row, and an interpretation line."""
    return [
        ["Name", "Score", "Change"],
        ["Alice", "92", "4.2%"],
        ["", "", ""],
        ["Bob", "87"],
        [LONG_TEXT],
        ["Total", "179", "-1,5"],
    ]
