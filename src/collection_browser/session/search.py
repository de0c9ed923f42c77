"""Paginated search session state."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Callable

from collection_browser.models import Artwork
from collection_browser.sources.base import CollectionSource
from collection_browser.sources.exceptions import CollectionError, NoDataError

if TYPE_CHECKING:
    from collection_browser.config import AppConfig

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again."

ChangeListener = Callable[["SearchSession"], None]


class SessionPhase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


class SearchSession:
    """Accumulated search results plus the pagination cursor behind them.

    Only one fetch may be outstanding at a time: while ``is_loading`` is
    true, ``search`` and ``load_more`` return immediately without touching
    state. All mutation is expected to happen on a single event loop.

    ``page`` is the last page fetched. ``items`` and ``page`` are only ever
    reset together, by ``reset_pagination`` or a successful ``search``.
    """

    def __init__(
        self,
        source: CollectionSource,
        auto_select_first: bool = False,
    ) -> None:
        self._source = source
        self._auto_select_first = auto_select_first
        self._listeners: list[ChangeListener] = []

        self.items: list[Artwork] = []
        self.page = 1
        self.query: str | None = None
        self.has_more = True
        self.is_loading = False
        self.error_message: str | None = None
        self.selected_artwork: Artwork | None = None

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        source: CollectionSource | None = None,
    ) -> SearchSession:
        """Build a session whose source and selection policy come from ``config``."""
        from collection_browser.sources.factory import create_source

        return cls(
            source=source or create_source(config.source),
            auto_select_first=config.auto_select_first,
        )

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Call ``listener(session)`` after every state change.

        Returns a function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("Session listener failed")

    @property
    def phase(self) -> SessionPhase:
        if self.is_loading:
            return SessionPhase.LOADING
        if self.error_message is not None:
            return SessionPhase.ERROR
        if self.items:
            return SessionPhase.LOADED
        return SessionPhase.IDLE

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def search(self, query: str | None = None) -> None:
        """Replace ``items`` with page 1 of results for ``query``.

        Skipped while loading, and when ``query`` equals the last executed
        query and results are already present.
        """
        if self.is_loading:
            return
        if query == self.query and self.items:
            logger.debug("Skipping duplicate search for %r", query)
            return

        previous_query = self.query
        self.is_loading = True
        self.error_message = None
        self.query = query
        self._notify()

        try:
            result = await self._source.fetch(page=1, query=query)
        except Exception as exc:
            # items still belong to the previous query
            self.query = previous_query
            self._set_error(exc)
        else:
            self.page = 1
            self.items = list(result.items)
            self.has_more = bool(result.items)
            if self._auto_select_first and self.selected_artwork is None:
                self.selected_artwork = self.items[0] if self.items else None
        finally:
            self.is_loading = False

        self._notify()

    async def load_more(self, query: str | None = None) -> None:
        """Fetch the next page and append it to ``items``.

        On failure the page counter is restored, so retrying re-fetches the
        same page.
        """
        if self.is_loading or not self.has_more:
            return

        self.is_loading = True
        self.page += 1
        self._notify()

        try:
            result = await self._source.fetch(page=self.page, query=query)
        except Exception as exc:
            self.page -= 1
            if isinstance(exc, NoDataError):
                self.has_more = False
            self._set_error(exc)
        else:
            self.items.extend(result.items)
            self.has_more = bool(result.items)
        finally:
            self.is_loading = False

        self._notify()

    async def load_more_if_needed(
        self, artwork: Artwork, query: str | None = None
    ) -> None:
        """Load the next page when ``artwork`` is the last item shown."""
        if not self.items or artwork != self.items[-1]:
            return
        await self.load_more(query)

    async def refresh(self, query: str | None = None) -> None:
        """Pull-to-refresh: start over from page 1."""
        if self.is_loading:
            return
        self.reset_pagination()
        await self.search(query)

    def reset_pagination(self) -> None:
        self.page = 1
        self.items = []
        self.has_more = True
        self._notify()

    def dismiss_error(self) -> None:
        """Clear the displayed error without retrying."""
        if self.error_message is None:
            return
        self.error_message = None
        self._notify()

    def select(self, artwork: Artwork | None) -> None:
        self.selected_artwork = artwork
        self._notify()

    def _set_error(self, exc: Exception) -> None:
        if isinstance(exc, CollectionError):
            self.error_message = exc.message
        else:
            logger.exception("Unexpected error while fetching artworks")
            self.error_message = UNEXPECTED_ERROR_MESSAGE
