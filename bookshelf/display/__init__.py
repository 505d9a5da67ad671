"""Page document and its display surfaces."""

from bookshelf.display.page_shell import PAGE_SHELL
from bookshelf.display.surfaces import BucketSurface, ShelfPage, StatusLine

__all__ = ["PAGE_SHELL", "BucketSurface", "ShelfPage", "StatusLine"]
