"""Book card renderer producing detached HTML subtrees."""

import logging
import math
import re
from urllib.parse import urlsplit, urlunsplit

from bs4 import BeautifulSoup, Tag

from bookshelf.config import RendererConfig
from bookshelf.models.book import BookRecord, Bucket

logger = logging.getLogger(__name__)

MAX_RATING = 5
FILLED_STAR = "★"
EMPTY_STAR = "☆"
ALLOWED_LINK_SCHEMES = ("http", "https")

# Leading float literal, the same prefix a lenient float parser accepts
FLOAT_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_rating(value: object) -> int | None:
    """Turn a rating cell into a star count.

    The leading numeric part of the text is parsed as a float ("4.6/5"
    reads as 4.6), rounded half up and clamped to 0..5.

    Args:
        value: Raw rating cell.

    Returns:
        Number of filled stars (1-5), or None when the cell is not a finite
        number or rounds to zero.
    """
    if value is None:
        return None
    match = FLOAT_PREFIX.match(str(value))
    if not match:
        return None
    number = float(match.group())
    if not math.isfinite(number):
        return None
    stars = max(0, min(MAX_RATING, math.floor(number + 0.5)))
    return stars or None


def sanitize_external_link(value: object) -> str | None:
    """Validate an absolute http(s) URL.

    Args:
        value: Raw link cell.

    Returns:
        The normalized URL, or None for blank input, relative paths and any
        scheme other than http/https.
    """
    if not value:
        return None
    text = str(value).strip()
    if not text:
        return None
    try:
        parts = urlsplit(text)
        hostname = parts.hostname
    except ValueError:
        return None
    scheme = parts.scheme.lower()
    if scheme not in ALLOWED_LINK_SCHEMES or not hostname:
        return None
    return urlunsplit((scheme, parts.netloc, parts.path or "/", parts.query, parts.fragment))


class CardRenderer:
    """Builds ``<li class="book-card">`` nodes from book records.

    Cards are created on an internal scratch document and returned detached,
    ready to be inserted into any page.

    Args:
        config: RendererConfig with the card labels.
    """

    def __init__(self, config: RendererConfig | None = None) -> None:
        self._config = config or RendererConfig()
        self._soup = BeautifulSoup("", "lxml")

    def render(self, record: BookRecord, variant: Bucket | str | None = None) -> Tag:
        """Render one card.

        Args:
            record: The book to render.
            variant: Bucket the card belongs to; adds a ``book-card--<variant>``
                class so each list can be styled on its own.

        Returns:
            A detached ``li`` tag.
        """
        item = self._element("li", "book-card")
        variant_name = variant.value if isinstance(variant, Bucket) else variant
        if isinstance(variant_name, str) and variant_name.strip():
            item["class"].append(f"book-card--{variant_name.strip()}")

        body = self._element("div", "book-card-body")

        if record.cover_url:
            body.append(self._cover(record))

        content = self._element("div", "book-card-content")
        title = self._element("h3", "book-title")
        title.string = record.title or self._config.untitled
        content.append(title)

        meta = self._meta(record)
        if meta.contents:
            content.append(meta)

        rating = self._rating(record.rating)
        if rating is not None:
            content.append(rating)

        body.append(content)
        item.append(body)
        return item

    def _element(self, name: str, *classes: str, **attrs: str) -> Tag:
        tag = self._soup.new_tag(name, attrs=attrs)
        if classes:
            tag["class"] = list(classes)
        return tag

    def _cover(self, record: BookRecord) -> Tag:
        wrapper = self._element("div", "book-cover")
        if record.title:
            alt = f"{self._config.cover_alt_prefix}{record.title}"
        else:
            alt = self._config.cover_alt_fallback
        image = self._soup.new_tag(
            "img", attrs={"src": record.cover_url, "alt": alt, "loading": "lazy"}
        )
        wrapper.append(image)
        return wrapper

    def _meta(self, record: BookRecord) -> Tag:
        meta = self._element("p", "book-meta")

        if record.author:
            author = self._element("span", "book-meta-author")
            author.string = record.author
            meta.append(author)

        links = self._links(record)
        if links is not None:
            meta.append(links)

        if record.genre:
            genre = self._element("span", "book-meta-genre")
            genre.string = record.genre
            meta.append(genre)

        return meta

    def _links(self, record: BookRecord) -> Tag | None:
        config = self._config
        links = [
            self._link(record.polish_link, config.polish_link_label, config.polish_link_flag),
            self._link(record.english_link, config.english_link_label, config.english_link_flag),
        ]
        links = [link for link in links if link is not None]
        if not links:
            return None

        container = self._element("span", "book-meta-links")
        for link in links:
            container.append(link)
        return container

    def _link(self, url: str, label: str, flag: str) -> Tag | None:
        href = sanitize_external_link(url)
        if href is None:
            if url:
                logger.debug("Dropping unsafe or malformed link: %r", url)
            return None

        title = f"{label}{self._config.new_tab_suffix}"
        link = self._element(
            "a",
            "book-meta-link",
            href=href,
            target="_blank",
            rel="noopener noreferrer",
            title=title,
        )
        link["aria-label"] = title

        if flag:
            flag_span = self._element("span", "book-meta-link-flag")
            flag_span["aria-hidden"] = "true"
            flag_span.string = flag
            link.append(flag_span)

        label_span = self._element("span", "book-meta-link-label")
        label_span.string = label
        link.append(label_span)
        return link

    def _rating(self, value: str) -> Tag | None:
        stars = parse_rating(value)
        if stars is None:
            return None

        rating = self._element("div", "book-rating", role="img")
        rating["aria-label"] = self._config.rating_label.format(rating=stars)
        for position in range(1, MAX_RATING + 1):
            filled = position <= stars
            star = self._element("span", "rating-star")
            star["aria-hidden"] = "true"
            star.string = FILLED_STAR if filled else EMPTY_STAR
            if filled:
                star["class"].append("is-filled")
            rating.append(star)
        return rating
