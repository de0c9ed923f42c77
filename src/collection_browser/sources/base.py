"""Collection source abstraction."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from collection_browser.models import SearchPage


class CollectionSource(ABC):
    """Abstract base class for remote collection sources.

    A source translates a page number and optional search term into the
    remote API's request format and normalizes the response into a
    SearchPage. Failures are raised as CollectionError subclasses.
    """

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Unique identifier for this source (e.g. 'rijksmuseum')."""
        ...

    @abstractmethod
    async def fetch(self, page: int = 1, query: str | None = None) -> SearchPage:
        """Fetch one page of results, optionally filtered by ``query``."""
        ...

    async def aclose(self) -> None:
        """Release transport resources. Sources without any need not override."""

    async def __aenter__(self) -> CollectionSource:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
