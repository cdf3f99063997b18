"""Byte-level persistence for the favorites document.

Architecture:
- FavoritesStorage: Abstract base class (read/write whole document)
- FileFavoritesStorage: Production implementation backed by one JSON file
- FakeFavoritesStorage: In-memory implementation for tests (see fake.py)
"""

from abc import ABC, abstractmethod
from pathlib import Path


class FavoritesStorage(ABC):
    """Abstract interface for storing the serialized favorites document."""

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable location of the document (for messages)."""
        ...

    @abstractmethod
    def read(self) -> bytes | None:
        """Return the stored document, or None if nothing was ever written.

        Raises:
            OSError: If the document exists but cannot be read
        """
        ...

    @abstractmethod
    def write(self, data: bytes) -> None:
        """Replace the stored document with `data`.

        Raises:
            OSError: If the document cannot be written
        """
        ...


class FileFavoritesStorage(FavoritesStorage):
    """Stores the favorites document in a single file, overwritten on every write."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    @property
    def location(self) -> str:
        return str(self._path)

    def read(self) -> bytes | None:
        if not self._path.exists():
            return None
        return self._path.read_bytes()

    def write(self, data: bytes) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_bytes(data)
