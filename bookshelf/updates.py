"""Update channel and the manual "refresh now" action."""

import logging
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import Protocol

from bookshelf.pipeline.loader import ShelfLoader

logger = logging.getLogger(__name__)


class UpdateChannel(Protocol):
    """Reports whether a newer version of the app is waiting to be activated."""

    def has_pending_update(self) -> bool: ...

    async def activate(self) -> None: ...


class NullUpdateChannel:
    """Channel that never has an update."""

    def has_pending_update(self) -> bool:
        return False

    async def activate(self) -> None:
        return None


class FileVersionUpdateChannel:
    """Treats a change of a watched file as a pending update.

    The file's modification time at construction is the active version.
    Once the file changes, an update is pending until ``activate()`` adopts
    the new version.

    Args:
        path: File to watch, usually the configuration file.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._active_version = self._current_version()

    def _current_version(self) -> float | None:
        try:
            return self._path.stat().st_mtime
        except FileNotFoundError:
            return None

    def has_pending_update(self) -> bool:
        return self._current_version() != self._active_version

    async def activate(self) -> None:
        self._active_version = self._current_version()
        logger.info("Activated new version of %s", self._path)


class RefreshOutcome(str, Enum):
    """What a manual refresh did."""

    RELOADED = "reloaded"
    REFETCHED = "refetched"


async def refresh_now(
    loader: ShelfLoader,
    channel: UpdateChannel | None = None,
    reload: Callable[[], None] | None = None,
) -> RefreshOutcome:
    """Handle the "refresh now" button.

    With a pending update, the channel is activated first and the page is
    reloaded once activation completes. Otherwise the sheet is fetched again.

    Args:
        loader: Loader to re-run when there is no update.
        channel: Update channel; None means no update checking.
        reload: Called after activation to reload the page.

    Returns:
        The action that was taken.
    """
    if channel is not None and channel.has_pending_update():
        await channel.activate()
        if reload is not None:
            reload()
        return RefreshOutcome.RELOADED

    await loader.load()
    return RefreshOutcome.REFETCHED
