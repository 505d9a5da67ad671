"""Book card rendering."""

from bookshelf.rendering.cards import CardRenderer, parse_rating, sanitize_external_link

__all__ = ["CardRenderer", "parse_rating", "sanitize_external_link"]
