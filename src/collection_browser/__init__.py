"""collection-browser: search, paginate and favorite museum collection items."""

from __future__ import annotations

from typing import TYPE_CHECKING

from collection_browser.export import export_json, export_markdown
from collection_browser.favorites import FavoriteStore, JsonFileStore, MemoryStore
from collection_browser.models import Artwork, ImageRef, SearchPage
from collection_browser.session import SearchDebouncer, SearchSession, SessionPhase
from collection_browser.sources import CollectionError, RijksmuseumSource

if TYPE_CHECKING:
    from collection_browser.config import AppConfig


async def search(
    query: str | None = None,
    config: AppConfig | None = None,
    page: int = 1,
) -> SearchPage:
    """One-shot convenience: fetch a single page of results.

    Args:
        query: Optional search term; empty or None lists the whole collection.
        config: Optional AppConfig. If None, loads from environment.
        page: Page number, starting at 1.
    """
    from collection_browser.config import load_config
    from collection_browser.sources import create_source

    cfg = config or load_config()
    source = create_source(cfg.source)
    try:
        return await source.fetch(page=page, query=query)
    finally:
        await source.aclose()


__all__ = [
    "Artwork",
    "CollectionError",
    "FavoriteStore",
    "ImageRef",
    "JsonFileStore",
    "MemoryStore",
    "RijksmuseumSource",
    "SearchDebouncer",
    "SearchPage",
    "SearchSession",
    "SessionPhase",
    "search",
    "export_json",
    "export_markdown",
]
