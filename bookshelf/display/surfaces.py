"""Display surface handles bound to the page document.

The loader writes into these handles and nothing else does. Each handle
wraps a node of a parsed page shell: a bucket's ``<ul>`` list with its
"empty" placeholder, and the status line.
"""

import logging
from collections.abc import Iterable

from bs4 import BeautifulSoup, Tag

from bookshelf.display.page_shell import PAGE_SHELL
from bookshelf.models.book import Bucket

logger = logging.getLogger(__name__)

LIST_IDS: dict[Bucket, str] = {
    Bucket.READING: "reading-list",
    Bucket.NEXT: "next-list",
    Bucket.FINISHED: "finished-list",
}


def _set_hidden(tag: Tag, hidden: bool) -> None:
    if hidden:
        tag["hidden"] = ""
    elif tag.has_attr("hidden"):
        del tag["hidden"]


class BucketSurface:
    """One bucket's card list plus its empty-state placeholder."""

    def __init__(self, list_tag: Tag, empty_tag: Tag | None = None) -> None:
        self.list_tag = list_tag
        self.empty_tag = empty_tag

    @property
    def cards(self) -> list[Tag]:
        return self.list_tag.find_all("li", recursive=False)

    @property
    def card_count(self) -> int:
        return len(self.cards)

    @property
    def empty_visible(self) -> bool:
        return self.empty_tag is not None and not self.empty_tag.has_attr("hidden")

    def replace(self, cards: Iterable[Tag]) -> None:
        """Swap the whole list content for the given cards."""
        self.list_tag.clear()
        for card in cards:
            self.list_tag.append(card)
        self.toggle_empty()

    def clear(self) -> None:
        self.replace([])

    def toggle_empty(self) -> None:
        """Show the placeholder exactly when the list holds no cards."""
        if self.empty_tag is None:
            return
        _set_hidden(self.empty_tag, self.card_count > 0)


class StatusLine:
    """Progress, success and error messages shown above the lists."""

    def __init__(self, tag: Tag | None) -> None:
        self.tag = tag

    @property
    def text(self) -> str:
        return self.tag.get_text() if self.tag is not None else ""

    @property
    def visible(self) -> bool:
        return self.tag is not None and not self.tag.has_attr("hidden")

    @property
    def is_error(self) -> bool:
        return self.tag is not None and "is-error" in self.tag.get("class", [])

    def show(self, text: str, kind: str = "info") -> None:
        """Display a message; empty text hides the line.

        Args:
            text: Message to show.
            kind: "info" or "error"; errors get the ``is-error`` class.
        """
        if self.tag is None:
            return
        if not text:
            _set_hidden(self.tag, True)
            return
        _set_hidden(self.tag, False)
        self.tag.string = text

        classes = [c for c in self.tag.get("class", []) if c != "is-error"]
        if kind == "error":
            classes.append("is-error")
        self.tag["class"] = classes


class ShelfPage:
    """A page document exposing the three bucket surfaces and the status line."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self.soup = soup
        self.lists: dict[Bucket, BucketSurface] = {}
        for bucket, list_id in LIST_IDS.items():
            list_tag = soup.find(id=list_id)
            if list_tag is None:
                raise ValueError(f"Page shell has no list container '#{list_id}'")
            empty_tag = soup.find(attrs={"data-for": list_id})
            if empty_tag is None:
                logger.warning("No empty-state placeholder for '#%s'", list_id)
            self.lists[bucket] = BucketSurface(list_tag, empty_tag)
        self.status = StatusLine(soup.find(id="status-message"))

    @classmethod
    def from_shell(cls, html: str = PAGE_SHELL, title: str | None = None) -> "ShelfPage":
        """Parse a page shell and bind its surfaces.

        Args:
            html: Page markup containing the list containers.
            title: Optional page heading and document title.

        Returns:
            A ShelfPage with every placeholder in its initial state.
        """
        soup = BeautifulSoup(html, "lxml")
        if title:
            for tag in (soup.title, soup.find("h1")):
                if tag is not None:
                    tag.string = title
        return cls(soup)

    def render(self) -> str:
        """Return the full page HTML."""
        return str(self.soup)

    def render_body(self) -> str:
        """Return only the ``<main>`` markup, with the page stylesheet prepended."""
        parts = (self.soup.find("style"), self.soup.find("main"))
        return "".join(str(part) for part in parts if part is not None)
