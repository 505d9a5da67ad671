"""Data models for the Bookshelf reading tracker."""

from bookshelf.models.book import BookRecord, Bucket
from bookshelf.models.load_result import LoadResult, LoadState

__all__ = [
    "BookRecord",
    "Bucket",
    "LoadResult",
    "LoadState",
]
