"""Fake StashBackend implementation for testing.

FakeStashBackend keeps an in-memory stash list that shifts on pop/drop the
same way git's does, so identity-shift scenarios can be exercised without a
repository.
"""

from stashfav.core.stash.abc import StashBackend, StashBackendError


class FakeStashBackend(StashBackend):
    """In-memory fake implementation of git stash operations.

    Constructor Injection:
    - descriptions: stash descriptions, newest first (index 0 = stash@{0})
    - raw_lines: exact lines to return from list_stashes(), bypassing
      descriptions (for malformed-output tests)
    - list_error / apply_error / pop_error / drop_error: when set, the
      matching operation raises StashBackendError with that message

    Mutation Tracking:
    - applied / popped / dropped: ids passed to each operation, in call order

    Examples:
        >>> backend = FakeStashBackend(descriptions=["WIP on main: one", "WIP on main: two"])
        >>> backend.list_stashes()
        ['stash@{0}: WIP on main: one', 'stash@{1}: WIP on main: two']
        >>> backend.drop("stash@{0}")
        >>> backend.list_stashes()
        ['stash@{0}: WIP on main: two']
    """

    def __init__(
        self,
        *,
        descriptions: list[str] | None = None,
        raw_lines: list[str] | None = None,
        list_error: str | None = None,
        apply_error: str | None = None,
        pop_error: str | None = None,
        drop_error: str | None = None,
    ) -> None:
        self._descriptions = list(descriptions or [])
        self._raw_lines = raw_lines
        self._list_error = list_error
        self._apply_error = apply_error
        self._pop_error = pop_error
        self._drop_error = drop_error
        self._applied: list[str] = []
        self._popped: list[str] = []
        self._dropped: list[str] = []

    def list_stashes(self) -> list[str]:
        if self._list_error is not None:
            raise StashBackendError(self._list_error)
        if self._raw_lines is not None:
            return list(self._raw_lines)
        return [
            f"stash@{{{index}}}: {description}"
            for index, description in enumerate(self._descriptions)
        ]

    def apply(self, stash_id: str) -> None:
        if self._apply_error is not None:
            raise StashBackendError(self._apply_error)
        self._position(stash_id)
        self._applied.append(stash_id)

    def pop(self, stash_id: str) -> None:
        if self._pop_error is not None:
            raise StashBackendError(self._pop_error)
        del self._descriptions[self._position(stash_id)]
        self._popped.append(stash_id)

    def drop(self, stash_id: str) -> None:
        if self._drop_error is not None:
            raise StashBackendError(self._drop_error)
        del self._descriptions[self._position(stash_id)]
        self._dropped.append(stash_id)

    def _position(self, stash_id: str) -> int:
        for index in range(len(self._descriptions)):
            if stash_id == f"stash@{{{index}}}":
                return index
        raise StashBackendError(f"error: {stash_id} is not a valid reference")

    @property
    def descriptions(self) -> list[str]:
        """Current stash descriptions, newest first (for test assertions)."""
        return self._descriptions.copy()

    @property
    def applied(self) -> list[str]:
        """Ids passed to apply(), for test assertions."""
        return self._applied.copy()

    @property
    def popped(self) -> list[str]:
        """Ids passed to pop(), for test assertions."""
        return self._popped.copy()

    @property
    def dropped(self) -> list[str]:
        """Ids passed to drop(), for test assertions."""
        return self._dropped.copy()
