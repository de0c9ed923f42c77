"""Locally persisted favorites."""

from collection_browser.favorites.storage import (
    JsonFileStore,
    KeyValueStore,
    MemoryStore,
)
from collection_browser.favorites.store import FAVORITES_KEY, FavoriteStore

__all__ = [
    "FAVORITES_KEY",
    "FavoriteStore",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
]
