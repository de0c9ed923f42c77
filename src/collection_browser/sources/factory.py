"""Collection source factory."""

from __future__ import annotations

import httpx

from collection_browser.config import SourceConfig
from collection_browser.sources.base import CollectionSource


def create_source(
    config: SourceConfig,
    client: httpx.AsyncClient | None = None,
) -> CollectionSource:
    """Create a collection source adapter from configuration."""
    from collection_browser.sources.rijksmuseum import RijksmuseumSource

    return RijksmuseumSource(
        api_key=config.api_key,
        base_url=config.base_url,
        page_size=config.page_size,
        timeout_s=config.timeout_s,
        client=client,
    )
