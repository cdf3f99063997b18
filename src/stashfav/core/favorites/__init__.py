"""Persisted favorite flags for stash identifiers."""

from stashfav.core.favorites.fake import FakeFavoritesStorage
from stashfav.core.favorites.storage import FavoritesStorage, FileFavoritesStorage
from stashfav.core.favorites.store import FavoriteStore
from stashfav.core.favorites.types import NotFavorite, PersistFailed

__all__ = [
    "FakeFavoritesStorage",
    "FavoriteStore",
    "FavoritesStorage",
    "FileFavoritesStorage",
    "NotFavorite",
    "PersistFailed",
]
