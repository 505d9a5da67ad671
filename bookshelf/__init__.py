"""Bookshelf: a reading tracker rendered from a published spreadsheet."""
