"""Positional cell extraction from parsed rows."""

from collections.abc import Sequence

from bookshelf.config import ColumnMapping
from bookshelf.models.book import BookRecord


def get_cell_value(row: Sequence[object] | None, index: int | None) -> str:
    """Return the trimmed text of a cell.

    Missing rows, missing or negative indices and out-of-range positions all
    give an empty string. Non-text cells are coerced with ``str()``.

    Args:
        row: A parsed row.
        index: Zero-based column position.

    Returns:
        The trimmed cell text.
    """
    if not row or index is None or index < 0 or index >= len(row):
        return ""
    value = row[index]
    if value is None:
        return ""
    return str(value).strip()


def extract_record(row: Sequence[object], columns: ColumnMapping) -> BookRecord:
    """Build a BookRecord from a row using the configured column positions."""
    return BookRecord(
        **{
            field: get_cell_value(row, index)
            for field, index in columns.model_dump().items()
        }
    )
