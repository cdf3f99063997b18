"""Git stash gateway: abstract interface plus real and fake implementations."""

from stashfav.core.stash.abc import StashBackend, StashBackendError
from stashfav.core.stash.fake import FakeStashBackend
from stashfav.core.stash.real import RealStashBackend

__all__ = [
    "FakeStashBackend",
    "RealStashBackend",
    "StashBackend",
    "StashBackendError",
]
