"""Favorite store: the persisted set of favorite stash identifiers.

The document on disk has one shape:

    {"stashes": {"stash@{0}": true, "stash@{3}": true}}

Presence of a key means favorite; the store never writes `false`. Every
mutation rewrites the whole document through the injected FavoritesStorage.
A failed write is reported back as PersistFailed while the in-memory set stays
authoritative for the rest of the session.
"""

import json
import logging

from stashfav.core.favorites.storage import FavoritesStorage
from stashfav.core.favorites.types import NotFavorite, PersistFailed

logger = logging.getLogger(__name__)

STASHES_KEY = "stashes"


class FavoriteStore:
    """Owns the favorite set for one session.

    Call load() once after construction (or use FavoriteStore.open()); until then
    the set is empty.
    """

    def __init__(self, storage: FavoritesStorage) -> None:
        self._storage = storage
        self._stashes: dict[str, bool] = {}

    @classmethod
    def open(cls, storage: FavoritesStorage) -> "FavoriteStore":
        """Create a store and load the persisted favorites into it."""
        store = cls(storage)
        store.load()
        return store

    @property
    def location(self) -> str:
        return self._storage.location

    def load(self) -> dict[str, bool]:
        """Replace the in-memory set with the persisted one and return a copy.

        An absent document yields an empty set. A document that cannot be read
        or parsed is logged as a warning and also yields an empty set; nothing
        is raised.
        """
        try:
            raw = self._storage.read()
        except OSError as e:
            logger.warning("Could not read favorites from %s: %s", self.location, e)
            raw = None

        self._stashes = _parse_document(raw, self.location) if raw is not None else {}
        logger.debug("Loaded %d favorite(s) from %s", len(self._stashes), self.location)
        return dict(self._stashes)

    def is_favorite(self, stash_id: str) -> bool:
        return self._stashes.get(stash_id, False)

    def favorite_ids(self) -> list[str]:
        """Marked ids in the order they were first marked."""
        return list(self._stashes)

    def mark(self, stash_id: str) -> PersistFailed | None:
        """Mark `stash_id` as favorite and persist, even if it already was one."""
        self._stashes[stash_id] = True
        return self._save()

    def unmark(self, stash_id: str) -> NotFavorite | PersistFailed | None:
        """Remove `stash_id` from the favorites and persist.

        Returns NotFavorite without writing when the id was not marked.
        """
        if stash_id not in self._stashes:
            return NotFavorite(stash_id=stash_id)
        del self._stashes[stash_id]
        return self._save()

    def evict(self, stash_id: str) -> PersistFailed | None:
        """Drop `stash_id` after its stash disappeared; persist only if it was marked."""
        if self._stashes.pop(stash_id, None) is None:
            return None
        logger.debug("Evicted %s from favorites", stash_id)
        return self._save()

    def _save(self) -> PersistFailed | None:
        payload = json.dumps({STASHES_KEY: self._stashes}, indent=2) + "\n"
        try:
            self._storage.write(payload.encode("utf-8"))
        except OSError as e:
            logger.warning("Could not save favorites to %s: %s", self.location, e)
            return PersistFailed(location=self.location, reason=str(e))
        logger.debug("Saved %d favorite(s) to %s", len(self._stashes), self.location)
        return None


def _parse_document(raw: bytes, location: str) -> dict[str, bool]:
    """Extract the favorite set from a stored document.

    Unknown top-level fields are ignored. Entries whose value is not `true`
    are not favorites and are dropped.
    """
    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("Ignoring unreadable favorites file %s: %s", location, e)
        return {}

    if not isinstance(data, dict):
        logger.warning("Ignoring favorites file %s: expected a JSON object", location)
        return {}

    stashes = data.get(STASHES_KEY, {})
    if not isinstance(stashes, dict):
        logger.warning("Ignoring favorites file %s: '%s' is not an object", location, STASHES_KEY)
        return {}

    return {str(key): True for key, value in stashes.items() if value is True}
