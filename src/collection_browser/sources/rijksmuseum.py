"""Rijksmuseum collection API source adapter."""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx
from pydantic import ValidationError

from collection_browser.config import DEFAULT_BASE_URL
from collection_browser.models import CollectionResponse, SearchPage
from collection_browser.sources.base import CollectionSource
from collection_browser.sources.exceptions import (
    CollectionError,
    InvalidURLError,
    NetworkError,
    NoDataError,
    NoInternetConnectionError,
    ServerError,
    TooManyRequestsError,
)

logger = logging.getLogger(__name__)


class RijksmuseumSource(CollectionSource):
    """Paginated search against the Rijksmuseum ``/collection`` endpoint.

    Holds no mutable state between calls, so ``fetch`` may be awaited
    concurrently. Ordering of results across calls is the caller's concern.
    No retries are attempted here.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        page_size: int = 10,
        timeout_s: float = 20.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.page_size = page_size
        self.timeout_s = timeout_s
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(follow_redirects=True)

    @property
    def source_name(self) -> str:
        return "rijksmuseum"

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # ------------------------------------------------------------------
    # Request construction
    # ------------------------------------------------------------------

    def build_url(self) -> httpx.URL:
        """Return the endpoint URL, or raise InvalidURLError."""
        try:
            url = httpx.URL(f"{self.base_url.rstrip('/')}/collection")
        except (httpx.InvalidURL, TypeError) as exc:
            raise InvalidURLError() from exc
        if url.scheme not in {"http", "https"} or not url.host:
            raise InvalidURLError()
        return url

    def build_params(self, page: int, query: str | None) -> dict[str, Any]:
        params: dict[str, Any] = {
            "key": self.api_key,
            "ps": self.page_size,
            "p": page,
        }
        if query:
            params["q"] = query
        return params

    # ------------------------------------------------------------------
    # Response handling
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_page(response: httpx.Response) -> SearchPage:
        try:
            body = CollectionResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            # json.JSONDecodeError is a ValueError
            raise NetworkError() from exc
        if not body.art_objects:
            raise NoDataError()
        return SearchPage(items=body.art_objects, total_count=body.count)

    @classmethod
    def _handle_response(cls, response: httpx.Response) -> SearchPage:
        status_code = response.status_code

        if status_code == 200:
            return cls._parse_page(response)
        if status_code == 429:
            raise TooManyRequestsError()
        if 500 <= status_code <= 599:
            raise ServerError()
        raise NetworkError()

    async def fetch(self, page: int = 1, query: str | None = None) -> SearchPage:
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")

        url = self.build_url()
        params = self.build_params(page, query)

        t0 = time.perf_counter()
        try:
            response = await self._client.get(
                url, params=params, timeout=self.timeout_s
            )
        except httpx.ConnectError as exc:
            logger.warning("Collection request could not connect: %s", exc)
            raise NoInternetConnectionError() from exc
        except httpx.HTTPError as exc:
            logger.warning("Collection request failed: %s", exc)
            raise NetworkError() from exc

        try:
            result = self._handle_response(response)
        except CollectionError as exc:
            logger.warning(
                "Collection page %d (query=%r) failed with HTTP %d: %s",
                page, query, response.status_code, type(exc).__name__,
            )
            raise

        logger.info(
            "Fetched collection page %d (query=%r) in %.2fs (%d items of %d)",
            page, query, time.perf_counter() - t0,
            len(result.items), result.total_count,
        )
        return result
