"""High-level git stash operations interface.

Architecture:
- StashBackend: Abstract base class defining the interface
- RealStashBackend: Production implementation using the git CLI
- FakeStashBackend: In-memory implementation for tests
"""

from abc import ABC, abstractmethod


class StashBackendError(Exception):
    """A git stash command failed.

    The message is the backend's own human-readable cause (e.g. git's stderr),
    suitable for showing to the user verbatim.
    """


class StashBackend(ABC):
    """Abstract interface for git stash operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def list_stashes(self) -> list[str]:
        """List raw stash lines, newest first.

        Each line has the shape `stash@{N}: <description>`, exactly as printed
        by `git stash list`.

        Raises:
            StashBackendError: If the stash list cannot be read
        """
        ...

    @abstractmethod
    def apply(self, stash_id: str) -> None:
        """Apply a stash without removing it from the stash list.

        Raises:
            StashBackendError: If git refuses (unknown id, conflicts, ...)
        """
        ...

    @abstractmethod
    def pop(self, stash_id: str) -> None:
        """Apply a stash and remove it from the stash list.

        Raises:
            StashBackendError: If git refuses (unknown id, conflicts, ...)
        """
        ...

    @abstractmethod
    def drop(self, stash_id: str) -> None:
        """Remove a stash from the stash list without applying it.

        Raises:
            StashBackendError: If git refuses (unknown id, ...)
        """
        ...
