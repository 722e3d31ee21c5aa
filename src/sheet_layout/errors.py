"""Errors surfaced to callers of the layout engine."""


class EmptySheetError(ValueError):
    """Raised when a grid has no rows left after blank rows are removed."""

    def __init__(self, message: str = "Sheet is empty"):
        super().__init__(message)
