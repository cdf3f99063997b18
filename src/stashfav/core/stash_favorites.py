"""Reconcile the live git stash list with the persisted favorite set.

Git identifies stashes by position (`stash@{N}`, 0 = newest), so an identifier
only means something relative to the current stash list. Every query rebuilds
the read model from `git stash list` and annotates each entry with the flag
stored for its identifier. The live list decides which stashes exist; the
favorite store only decides which of them are starred.

Popping or dropping a stash removes it from the list, so its flag is evicted.
Entries above it shift down by one; their flags are left in place.
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Literal

from stashfav.core.favorites.store import FavoriteStore
from stashfav.core.favorites.types import NotFavorite, PersistFailed
from stashfav.core.stash.abc import StashBackend, StashBackendError

logger = logging.getLogger(__name__)

STASH_LINE_PATTERN = re.compile(r"^stash@\{(\d+)\}: (.*)")

StashAction = Literal["apply", "pop", "drop"]

_PAST_TENSE: dict[StashAction, str] = {
    "apply": "Applied",
    "pop": "Popped",
    "drop": "Dropped",
}


def stash_id_for(ordinal: int) -> str:
    """Build the git identifier for the stash at `ordinal`."""
    return f"stash@{{{ordinal}}}"


@dataclass(frozen=True)
class StashEntry:
    """One live stash annotated with its favorite flag."""

    stash_id: str
    ordinal: int
    description: str
    is_favorite: bool


@dataclass(frozen=True)
class StashListing:
    """Result of a stash query.

    `error` is set when the backend could not list stashes; `entries` is then
    empty. An empty listing with no error means there really is nothing to show.
    """

    entries: tuple[StashEntry, ...]
    error: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.entries


@dataclass(frozen=True)
class GroupedListing:
    """Favorites first, then everything else; backend order within each group."""

    favorites: tuple[StashEntry, ...]
    others: tuple[StashEntry, ...]
    error: str | None = None


@dataclass(frozen=True)
class StashOpResult:
    """Outcome of apply/pop/drop.

    `persist_error` is set when the stash operation succeeded but evicting the
    favorite flag could not be saved.
    """

    stash_id: str
    action: StashAction
    success: bool
    message: str
    persist_error: PersistFailed | None = None


def parse_stash_line(line: str) -> tuple[int, str] | None:
    """Split a `git stash list` line into (ordinal, description).

    Returns None for lines that do not start with `stash@{N}: `.
    """
    match = STASH_LINE_PATTERN.match(line)
    if match is None:
        return None
    return int(match.group(1)), match.group(2)


class StashFavorites:
    """Read model and commands for favorite stashes.

    This is the whole surface a presentation layer needs: list queries return
    frozen dataclasses, commands return result values, and nothing here raises
    for backend or persistence failures.
    """

    def __init__(self, backend: StashBackend, store: FavoriteStore) -> None:
        self._backend = backend
        self._store = store

    @property
    def store(self) -> FavoriteStore:
        return self._store

    def list_all(self) -> StashListing:
        try:
            lines = self._backend.list_stashes()
        except StashBackendError as e:
            logger.debug("Listing stashes failed: %s", e)
            return StashListing(entries=(), error=str(e))

        entries: list[StashEntry] = []
        for line in lines:
            parsed = parse_stash_line(line)
            if parsed is None:
                logger.debug("Skipping unparseable stash line: %r", line)
                continue
            ordinal, description = parsed
            stash_id = stash_id_for(ordinal)
            entries.append(
                StashEntry(
                    stash_id=stash_id,
                    ordinal=ordinal,
                    description=description,
                    is_favorite=self._store.is_favorite(stash_id),
                )
            )
        return StashListing(entries=tuple(entries))

    def list_favorites(self) -> StashListing:
        listing = self.list_all()
        return StashListing(
            entries=tuple(entry for entry in listing.entries if entry.is_favorite),
            error=listing.error,
        )

    def list_grouped(self) -> GroupedListing:
        listing = self.list_all()
        return GroupedListing(
            favorites=tuple(entry for entry in listing.entries if entry.is_favorite),
            others=tuple(entry for entry in listing.entries if not entry.is_favorite),
            error=listing.error,
        )

    def mark(self, stash_id: str) -> PersistFailed | None:
        return self._store.mark(stash_id)

    def unmark(self, stash_id: str) -> NotFavorite | PersistFailed | None:
        return self._store.unmark(stash_id)

    def apply(self, stash_id: str) -> StashOpResult:
        """Apply a stash; its favorite flag is never touched."""
        return self._run("apply", stash_id, self._backend.apply)

    def pop(self, stash_id: str) -> StashOpResult:
        """Pop a stash and, on success, evict its favorite flag."""
        result = self._run("pop", stash_id, self._backend.pop)
        return self._evict_on_success(result)

    def drop(self, stash_id: str) -> StashOpResult:
        """Drop a stash and, on success, evict its favorite flag."""
        result = self._run("drop", stash_id, self._backend.drop)
        return self._evict_on_success(result)

    def _run(
        self, action: StashAction, stash_id: str, operation: Callable[[str], None]
    ) -> StashOpResult:
        try:
            operation(stash_id)
        except StashBackendError as e:
            return StashOpResult(
                stash_id=stash_id,
                action=action,
                success=False,
                message=f"Failed to {action} {stash_id}: {e}",
            )
        return StashOpResult(
            stash_id=stash_id,
            action=action,
            success=True,
            message=f"{_PAST_TENSE[action]} {stash_id}",
        )

    def _evict_on_success(self, result: StashOpResult) -> StashOpResult:
        if not result.success:
            return result
        persist_error = self._store.evict(result.stash_id)
        if persist_error is None:
            return result
        return replace(result, persist_error=persist_error)
