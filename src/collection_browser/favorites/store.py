"""Persisted set of favorite artwork ids."""

from __future__ import annotations

import logging

from collection_browser.favorites.storage import KeyValueStore

logger = logging.getLogger(__name__)

FAVORITES_KEY = "FavoriteArtworks"


class FavoriteStore:
    """Set of favorited artwork ids, flushed to storage on every change.

    Any string is accepted as an id, including ids the client has never
    fetched.
    """

    def __init__(self, storage: KeyValueStore, key: str = FAVORITES_KEY) -> None:
        self._storage = storage
        self._key = key
        self._favorites: set[str] = self._load()

    def _load(self) -> set[str]:
        saved = self._storage.get(self._key)
        if not isinstance(saved, list):
            if saved is not None:
                logger.warning("Ignoring non-list favorites under %r", self._key)
            return set()
        return {item for item in saved if isinstance(item, str)}

    def _save(self) -> None:
        self._storage.set(self._key, sorted(self._favorites))

    @property
    def favorite_ids(self) -> frozenset[str]:
        return frozenset(self._favorites)

    def is_favorite(self, artwork_id: str) -> bool:
        return artwork_id in self._favorites

    def toggle_favorite(self, artwork_id: str) -> bool:
        """Flip membership of ``artwork_id`` and return the new state."""
        was_favorite = artwork_id in self._favorites
        if was_favorite:
            self._favorites.remove(artwork_id)
        else:
            self._favorites.add(artwork_id)
        try:
            self._save()
        except Exception:
            # keep memory in step with what is persisted
            if was_favorite:
                self._favorites.add(artwork_id)
            else:
                self._favorites.discard(artwork_id)
            raise
        return artwork_id in self._favorites

    def __len__(self) -> int:
        return len(self._favorites)

    def __contains__(self, artwork_id: object) -> bool:
        return artwork_id in self._favorites
