"""Debounced search scheduling for live text input."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from collection_browser.session.search import SearchSession

if TYPE_CHECKING:
    from collection_browser.config import AppConfig

logger = logging.getLogger(__name__)


class SearchDebouncer:
    """Coalesce bursts of text changes into a single search.

    Every change resets pagination straight away and (re)starts a quiet
    period of ``delay_s`` seconds; only the change that survives the quiet
    period runs a search. A search that has already started is never
    cancelled by later changes.
    """

    def __init__(self, session: SearchSession, delay_s: float = 0.5) -> None:
        self._session = session
        self._delay_s = delay_s
        self._pending: asyncio.Task[None] | None = None
        self._running: asyncio.Task[None] | None = None

    @classmethod
    def from_config(cls, session: SearchSession, config: AppConfig) -> SearchDebouncer:
        return cls(session, delay_s=config.debounce_s)

    @property
    def has_pending(self) -> bool:
        return self._pending is not None and not self._pending.done()

    def on_text_change(self, text: str) -> None:
        """Schedule a search for ``text``, superseding any pending one.

        Must be called from a running event loop.
        """
        self.cancel()
        self._session.reset_pagination()
        self._pending = asyncio.create_task(self._run(text))

    def cancel(self) -> None:
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None

    async def flush(self) -> None:
        """Wait for the pending (or already running) search to finish."""
        task = self._pending or self._running
        if task is None:
            return
        await asyncio.wait({task})
        if not task.cancelled() and task.exception() is not None:
            raise task.exception()

    async def _run(self, text: str) -> None:
        await asyncio.sleep(self._delay_s)
        # Past the quiet period: detach so later edits cannot cancel the
        # fetch below.
        current = asyncio.current_task()
        if self._pending is current:
            self._pending = None
            self._running = current
        logger.debug("Debounced search for %r", text)
        try:
            await self._session.search(text)
        finally:
            if self._running is current:
                self._running = None
