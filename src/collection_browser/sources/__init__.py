"""Remote collection sources."""

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
from collection_browser.sources.factory import create_source
from collection_browser.sources.rijksmuseum import RijksmuseumSource

__all__ = [
    "CollectionError",
    "CollectionSource",
    "InvalidURLError",
    "NetworkError",
    "NoDataError",
    "NoInternetConnectionError",
    "RijksmuseumSource",
    "ServerError",
    "TooManyRequestsError",
    "create_source",
]
