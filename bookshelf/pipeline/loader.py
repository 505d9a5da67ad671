"""Sheet loader: fetch, parse, classify and render into the page surfaces."""

import logging
from collections.abc import Callable
from datetime import datetime

import chardet
import httpx
from bs4 import Tag

from bookshelf.config import AppConfig
from bookshelf.display.surfaces import ShelfPage
from bookshelf.ingestion.classifier import StatusClassifier
from bookshelf.ingestion.csv_parser import is_blank_row, parse_csv
from bookshelf.ingestion.extractor import extract_record
from bookshelf.models.book import Bucket
from bookshelf.models.load_result import LoadResult, LoadState
from bookshelf.pipeline.errors import (
    EmptySheetError,
    SheetFetchError,
    SheetStatusError,
)
from bookshelf.rendering.cards import CardRenderer

logger = logging.getLogger(__name__)

# Ask every cache on the way for a fresh copy of the sheet
NO_CACHE_HEADERS = {"Cache-Control": "no-cache", "Pragma": "no-cache"}


def decode_sheet(raw_bytes: bytes) -> str:
    """Decode a downloaded sheet, falling back to encoding detection.

    Args:
        raw_bytes: Response body.

    Returns:
        The decoded text.
    """
    try:
        return raw_bytes.decode("utf-8-sig")
    except UnicodeDecodeError:
        pass

    detected = chardet.detect(raw_bytes)
    encoding = detected.get("encoding") or "utf-8"
    confidence = detected.get("confidence") or 0

    if confidence < 0.7:
        logger.warning(
            "Low confidence encoding detection for sheet: %s (%.0f%%)",
            encoding,
            confidence * 100,
        )

    try:
        return raw_bytes.decode(encoding)
    except (UnicodeDecodeError, LookupError):
        logger.error("Failed to decode sheet as %s, replacing bad bytes", encoding)
        return raw_bytes.decode("utf-8", errors="replace")


class ShelfLoader:
    """Runs the fetch → parse → classify → render cycle.

    Each ``load()`` call is a full cycle that replaces every bucket list
    wholesale. Calls are not deduplicated: overlapping loads all run, and
    the one that finishes last determines what the page shows.

    Failures never raise. They are logged, and the status line shows one
    fixed error message. Lists are cleared only when the failure happens
    after the sheet was downloaded. A network or HTTP failure keeps the
    previously rendered cards.

    Args:
        config: Application configuration.
        page: Display surfaces to write into.
        transport: Optional httpx transport (used to fake the network).
        clock: Returns the time shown in the success message.
    """

    def __init__(
        self,
        config: AppConfig,
        page: ShelfPage,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._config = config
        self._page = page
        self._transport = transport
        self._clock = clock
        self._classifier = StatusClassifier(config.classifier)
        self._renderer = CardRenderer(config.renderer)
        self.state = LoadState.IDLE

    async def load(self) -> LoadResult:
        """Fetch the sheet and refresh every list.

        Returns:
            LoadResult describing the finished cycle.
        """
        messages = self._config.messages
        self.state = LoadState.LOADING
        self._page.status.show(messages.loading)

        downloaded = False
        try:
            text = await self._fetch()
            downloaded = True
            records_shown = self._render(text)
        except Exception:
            logger.exception(
                "Failed to load reading sheet from %s", self._config.source.csv_url
            )
            return self._fail(clear=downloaded)

        if records_shown:
            timestamp = self._clock().strftime(messages.timestamp_format)
            message = messages.updated.format(timestamp=timestamp)
        else:
            message = messages.empty

        self.state = LoadState.SUCCESS
        self._page.status.show(message)
        logger.info("Sheet loaded: %d books shown", records_shown)
        return self._result(LoadState.SUCCESS, message, records_shown)

    async def _fetch(self) -> str:
        """Download the sheet text, bypassing caches.

        Raises:
            SheetFetchError: On any transport-level failure.
            SheetStatusError: On a non-2xx response.
        """
        source = self._config.source
        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=httpx.Timeout(source.timeout),
                follow_redirects=True,
            ) as client:
                response = await client.get(source.csv_url, headers=NO_CACHE_HEADERS)
        except httpx.HTTPError as exc:
            raise SheetFetchError(f"Could not download sheet: {exc}") from exc

        if not response.is_success:
            raise SheetStatusError(response.status_code)

        return decode_sheet(response.content)

    def _render(self, text: str) -> int:
        """Parse sheet text and replace the bucket lists.

        Returns:
            Number of records placed in a bucket.

        Raises:
            EmptySheetError: If the sheet has no non-blank rows.
        """
        rows = [row for row in parse_csv(text) if not is_blank_row(row)]
        if not rows:
            raise EmptySheetError("Sheet contains no data")

        # First row holds the column headers
        grouped: dict[Bucket, list[Tag]] = {bucket: [] for bucket in Bucket}
        for row in rows[1:]:
            record = extract_record(row, self._config.source.columns)
            bucket = self._classifier.classify(record.status)
            if bucket is None:
                continue
            grouped[bucket].append(self._renderer.render(record, bucket))

        for bucket, surface in self._page.lists.items():
            surface.replace(grouped[bucket])

        return sum(len(cards) for cards in grouped.values())

    def _fail(self, clear: bool) -> LoadResult:
        message = self._config.messages.error
        for surface in self._page.lists.values():
            if clear:
                surface.clear()
            else:
                surface.toggle_empty()
        self.state = LoadState.FAILURE
        self._page.status.show(message, kind="error")
        return self._result(LoadState.FAILURE, message, 0)

    def _result(self, state: LoadState, message: str, records_shown: int) -> LoadResult:
        return LoadResult(
            state=state,
            message=message,
            card_counts={
                bucket: surface.card_count for bucket, surface in self._page.lists.items()
            },
            records_shown=records_shown,
            finished_at=self._clock(),
        )
