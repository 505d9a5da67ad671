"""Tests for the sheet loader pipeline."""

import asyncio
from datetime import datetime

import httpx
import pytest

from bookshelf.config import AppConfig
from bookshelf.display.surfaces import ShelfPage
from bookshelf.models.book import Bucket
from bookshelf.models.load_result import LoadState
from bookshelf.pipeline.loader import ShelfLoader, decode_sheet

SHEET_URL = "https://sheets.example.com/pub?output=csv"
FIXED_NOW = datetime(2026, 10, 18, 14, 5, 3)

HEADER = "Sygnatura czasowa,Nr,Tytuł,Autor,Gatunek,Status,Format,Język,Ocena,Okładka,PL,EN"
SAMPLE_SHEET = "\r\n".join(
    [
        HEADER,
        "2024-01-01,1,Lalka,Bolesław Prus,Powieść,Czytam,papier,pl,,,,",
        '2024-01-02,2,"Solaris, wydanie II",Stanisław Lem,Sci-fi,Przeczytane,e-book,pl,4.6,'
        "https://example.com/solaris.jpg,https://example.com/pl,javascript:alert(1)",
    ]
)


@pytest.fixture
def config() -> AppConfig:
    config = AppConfig()
    config.source.csv_url = SHEET_URL
    return config


@pytest.fixture
def page() -> ShelfPage:
    return ShelfPage.from_shell()


def _transport(body: str | bytes = SAMPLE_SHEET, status: int = 200) -> httpx.MockTransport:
    content = body.encode("utf-8") if isinstance(body, str) else body

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, content=content)

    return httpx.MockTransport(handler)


def _loader(config: AppConfig, page: ShelfPage, transport: httpx.AsyncBaseTransport) -> ShelfLoader:
    return ShelfLoader(config, page, transport=transport, clock=lambda: FIXED_NOW)


def _run(loader: ShelfLoader):
    return asyncio.run(loader.load())


class TestDecodeSheet:
    def test_utf8(self) -> None:
        assert decode_sheet("Przeczytane".encode("utf-8")) == "Przeczytane"

    def test_utf8_bom_is_stripped(self) -> None:
        assert decode_sheet("\ufeffa,b".encode("utf-8")) == "a,b"

    def test_legacy_encoding_falls_back(self) -> None:
        text = "Planuję przeczytać, żółć, gęślą jaźń, zażółć gęślą jaźń " * 5
        assert "przeczyta" in decode_sheet(text.encode("windows-1250"))


class TestLoadSuccess:
    def test_end_to_end_buckets(self, config: AppConfig, page: ShelfPage) -> None:
        result = _run(_loader(config, page, _transport()))

        assert result.state is LoadState.SUCCESS
        assert result.records_shown == 2
        assert result.card_counts == {Bucket.READING: 1, Bucket.NEXT: 0, Bucket.FINISHED: 1}
        assert page.lists[Bucket.READING].card_count == 1
        assert page.lists[Bucket.FINISHED].card_count == 1
        assert not page.lists[Bucket.READING].empty_visible
        assert not page.lists[Bucket.FINISHED].empty_visible
        assert page.lists[Bucket.NEXT].empty_visible

    def test_success_status_message(self, config: AppConfig, page: ShelfPage) -> None:
        loader = _loader(config, page, _transport())
        _run(loader)

        assert loader.state is LoadState.SUCCESS
        assert page.status.text == "Zaktualizowano: 18.10.2026, 14:05:03."
        assert not page.status.is_error

    def test_cards_carry_record_fields(self, config: AppConfig, page: ShelfPage) -> None:
        _run(_loader(config, page, _transport()))

        card = page.lists[Bucket.FINISHED].cards[0]
        assert "book-card--finished" in card["class"]
        assert card.select_one("h3.book-title").get_text() == "Solaris, wydanie II"
        assert card.select_one("img")["src"] == "https://example.com/solaris.jpg"
        assert len(card.select("span.rating-star.is-filled")) == 5
        hrefs = [a["href"] for a in card.select("a.book-meta-link")]
        assert hrefs == ["https://example.com/pl"]

    def test_request_bypasses_cache(self, config: AppConfig, page: ShelfPage) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text=SAMPLE_SHEET)

        _run(_loader(config, page, httpx.MockTransport(handler)))

        assert len(seen) == 1
        assert str(seen[0].url) == SHEET_URL
        assert seen[0].headers["Cache-Control"] == "no-cache"
        assert seen[0].headers["Pragma"] == "no-cache"

    def test_unmatched_statuses_are_dropped(self, config: AppConfig, page: ShelfPage) -> None:
        sheet = "\n".join([HEADER, "x,1,Dune,Herbert,Sci-fi,W kolejce", "x,2,Emma,Austen,,Planuję"])
        result = _run(_loader(config, page, _transport(sheet)))

        assert result.records_shown == 1
        assert page.lists[Bucket.NEXT].card_count == 1
        assert page.lists[Bucket.READING].card_count == 0

    def test_header_only_reports_no_data(self, config: AppConfig, page: ShelfPage) -> None:
        result = _run(_loader(config, page, _transport(HEADER + "\n")))

        assert result.state is LoadState.SUCCESS
        assert page.status.text == "Brak danych do wyświetlenia."
        assert all(surface.empty_visible for surface in page.lists.values())

    def test_blank_rows_are_skipped(self, config: AppConfig, page: ShelfPage) -> None:
        sheet = f"\n , ,\n{HEADER}\n\nx,1,Lalka,Prus,,Czytam\n"
        result = _run(_loader(config, page, _transport(sheet)))

        assert result.records_shown == 1
        assert page.lists[Bucket.READING].card_count == 1

    def test_refresh_replaces_lists(self, config: AppConfig, page: ShelfPage) -> None:
        _run(_loader(config, page, _transport()))
        sheet = "\n".join([HEADER, "x,1,Emma,Austen,,Planuję"])
        _run(_loader(config, page, _transport(sheet)))

        assert page.lists[Bucket.READING].card_count == 0
        assert page.lists[Bucket.FINISHED].card_count == 0
        assert page.lists[Bucket.NEXT].card_count == 1
        assert page.lists[Bucket.READING].empty_visible


class TestLoadFailure:
    ERROR_TEXT = "Nie udało się pobrać danych z arkusza. Spróbuj odświeżyć stronę później."

    def _prime(self, config: AppConfig, page: ShelfPage) -> None:
        _run(_loader(config, page, _transport()))
        assert page.lists[Bucket.READING].card_count == 1

    def test_http_error_status(
        self, config: AppConfig, page: ShelfPage, caplog: pytest.LogCaptureFixture
    ) -> None:
        loader = _loader(config, page, _transport("nope", status=404))
        result = _run(loader)

        assert result.state is LoadState.FAILURE
        assert loader.state is LoadState.FAILURE
        assert page.status.text == self.ERROR_TEXT
        assert page.status.is_error
        assert "Failed to load reading sheet" in caplog.text
        assert "404" in caplog.text

    def test_network_error(self, config: AppConfig, page: ShelfPage) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        result = _run(_loader(config, page, httpx.MockTransport(handler)))

        assert result.state is LoadState.FAILURE
        assert page.status.text == self.ERROR_TEXT
        assert all(surface.empty_visible for surface in page.lists.values())

    def test_network_error_keeps_previous_cards(self, config: AppConfig, page: ShelfPage) -> None:
        self._prime(config, page)

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("offline", request=request)

        _run(_loader(config, page, httpx.MockTransport(handler)))

        assert page.lists[Bucket.READING].card_count == 1
        assert page.lists[Bucket.FINISHED].card_count == 1
        assert page.lists[Bucket.NEXT].empty_visible
        assert page.status.is_error

    def test_http_error_keeps_previous_cards(self, config: AppConfig, page: ShelfPage) -> None:
        self._prime(config, page)
        _run(_loader(config, page, _transport("", status=500)))

        assert page.lists[Bucket.READING].card_count == 1

    def test_empty_sheet_clears_lists(self, config: AppConfig, page: ShelfPage) -> None:
        self._prime(config, page)
        result = _run(_loader(config, page, _transport("\r\n \r\n")))

        assert result.state is LoadState.FAILURE
        assert result.card_counts == {Bucket.READING: 0, Bucket.NEXT: 0, Bucket.FINISHED: 0}
        assert all(surface.empty_visible for surface in page.lists.values())
        assert page.status.text == self.ERROR_TEXT

    def test_failure_does_not_raise(self, config: AppConfig, page: ShelfPage) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        result = _run(_loader(config, page, httpx.MockTransport(handler)))
        assert not result.ok


class TestOverlappingLoads:
    def test_last_to_finish_wins(self, config: AppConfig, page: ShelfPage) -> None:
        slow_sheet = "\n".join([HEADER, "x,1,Wolna,A,,Czytam"])
        fast_sheet = "\n".join([HEADER, "x,1,Szybka,B,,Przeczytane"])

        async def scenario() -> None:
            release = asyncio.Event()

            async def slow(request: httpx.Request) -> httpx.Response:
                await release.wait()
                return httpx.Response(200, text=slow_sheet)

            def fast(request: httpx.Request) -> httpx.Response:
                return httpx.Response(200, text=fast_sheet)

            slow_task = asyncio.create_task(
                _loader(config, page, httpx.MockTransport(slow)).load()
            )
            await asyncio.sleep(0)
            await _loader(config, page, httpx.MockTransport(fast)).load()
            assert page.lists[Bucket.FINISHED].card_count == 1

            release.set()
            await slow_task

        asyncio.run(scenario())

        assert page.lists[Bucket.READING].card_count == 1
        assert page.lists[Bucket.FINISHED].card_count == 0
        title = page.lists[Bucket.READING].cards[0].select_one("h3").get_text()
        assert title == "Wolna"


def test_loader_starts_idle(config: AppConfig, page: ShelfPage) -> None:
    loader: ShelfLoader = _loader(config, page, _transport())
    assert loader.state is LoadState.IDLE


def test_loading_message_shown_while_fetching(config: AppConfig, page: ShelfPage) -> None:
    observed: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        observed.append(page.status.text)
        return httpx.Response(200, text=SAMPLE_SHEET)

    _run(_loader(config, page, httpx.MockTransport(handler)))
    assert observed == ["Ładuję dane z arkusza..."]


