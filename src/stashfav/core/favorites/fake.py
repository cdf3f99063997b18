"""Fake FavoritesStorage implementation for testing."""

from stashfav.core.favorites.storage import FavoritesStorage


class FakeFavoritesStorage(FavoritesStorage):
    """In-memory fake of the favorites file.

    Constructor Injection:
    - data: initial stored bytes (None = file absent)
    - read_error / write_error: when set, read()/write() raise OSError with
      that message

    Mutation Tracking:
    - writes: every successfully stored payload, in call order
    - write_attempts: number of write() calls, including failed ones
    """

    def __init__(
        self,
        *,
        data: bytes | None = None,
        read_error: str | None = None,
        write_error: str | None = None,
    ) -> None:
        self._data = data
        self._read_error = read_error
        self._write_error = write_error
        self._writes: list[bytes] = []
        self._write_attempts = 0

    @property
    def location(self) -> str:
        return "<memory>"

    def read(self) -> bytes | None:
        if self._read_error is not None:
            raise OSError(self._read_error)
        return self._data

    def write(self, data: bytes) -> None:
        self._write_attempts += 1
        if self._write_error is not None:
            raise OSError(self._write_error)
        self._writes.append(data)
        self._data = data

    @property
    def data(self) -> bytes | None:
        """Currently stored bytes (for test assertions)."""
        return self._data

    @property
    def writes(self) -> list[bytes]:
        """All successful write() payloads (for test assertions)."""
        return self._writes.copy()

    @property
    def write_attempts(self) -> int:
        """Number of write() calls, successful or not (for test assertions)."""
        return self._write_attempts
