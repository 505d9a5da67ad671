"""Book record data model."""

from enum import Enum

from pydantic import BaseModel


class Bucket(str, Enum):
    """Reading-status list a book is shown in."""

    READING = "reading"
    NEXT = "next"
    FINISHED = "finished"


class BookRecord(BaseModel):
    """One book, extracted from a single spreadsheet row.

    Every field is trimmed text and defaults to an empty string. ``rating``
    keeps the raw cell text; the card renderer decides whether it is a usable
    number. The link fields are validated at render time as well.
    """

    title: str = ""
    author: str = ""
    genre: str = ""
    status: str = ""  # raw status cell, e.g. "Czytam teraz"
    rating: str = ""
    cover_url: str = ""
    polish_link: str = ""
    english_link: str = ""
