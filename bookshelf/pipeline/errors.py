"""Errors raised while loading the reading sheet."""


class LoadError(Exception):
    """Base class for failures of a load cycle."""


class SheetFetchError(LoadError):
    """The sheet could not be downloaded (network failure)."""


class SheetStatusError(LoadError):
    """The sheet endpoint answered with a non-success HTTP status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Sheet request failed with HTTP status {status_code}")
        self.status_code = status_code


class EmptySheetError(LoadError):
    """The downloaded sheet holds no non-blank rows."""
