"""Result types returned by favorite store mutations.

Expected negative outcomes are values, not exceptions. Callers check them with
isinstance(), the same way they check other sentinels in this codebase.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class NotFavorite:
    """unmark() was asked to remove an id that is not a favorite."""

    stash_id: str

    @property
    def message(self) -> str:
        return f"{self.stash_id} is not marked as favorite"


@dataclass(frozen=True)
class PersistFailed:
    """The favorites file could not be written.

    The in-memory favorite set is still updated; only durability failed.
    """

    location: str
    reason: str

    @property
    def message(self) -> str:
        return f"could not save favorites to {self.location}: {self.reason}"
