"""Sheet loading pipeline."""

from bookshelf.pipeline.errors import (
    EmptySheetError,
    LoadError,
    SheetFetchError,
    SheetStatusError,
)
from bookshelf.pipeline.loader import ShelfLoader, decode_sheet

__all__ = [
    "EmptySheetError",
    "LoadError",
    "SheetFetchError",
    "SheetStatusError",
    "ShelfLoader",
    "decode_sheet",
]
