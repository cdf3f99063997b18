"""Application context with dependency injection."""

from dataclasses import dataclass, replace
from pathlib import Path

from stashfav.core.favorites.storage import FileFavoritesStorage
from stashfav.core.favorites.store import FavoriteStore
from stashfav.core.global_config import GlobalConfig, load_global_config
from stashfav.core.stash.abc import StashBackend
from stashfav.core.stash.real import RealStashBackend
from stashfav.core.stash_favorites import StashFavorites
from stashfav.core.user_feedback import InteractiveFeedback, QuietFeedback, UserFeedback


@dataclass(frozen=True)
class StashfavContext:
    """Immutable context holding all dependencies for stashfav operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime. The favorite store
    inside is the one mutable piece; it belongs to this session alone.
    """

    stash_backend: StashBackend
    favorites: FavoriteStore
    stashes: StashFavorites
    feedback: UserFeedback
    cwd: Path  # Current working directory at CLI invocation
    global_config: GlobalConfig

    def with_feedback(self, feedback: UserFeedback) -> "StashfavContext":
        """Return a copy of this context using different feedback output."""
        return replace(self, feedback=feedback)

    @staticmethod
    def for_test(
        stash_backend: StashBackend | None = None,
        favorites: FavoriteStore | None = None,
        feedback: UserFeedback | None = None,
        cwd: Path | None = None,
        global_config: GlobalConfig | None = None,
    ) -> "StashfavContext":
        """Create test context with optional pre-configured collaborators.

        Args:
            stash_backend: Optional StashBackend. If None, creates empty FakeStashBackend.
            favorites: Optional FavoriteStore. If None, opens a store over an empty
                FakeFavoritesStorage.
            feedback: Optional UserFeedback. If None, uses uncolored InteractiveFeedback
                so CliRunner output is plain text.
            cwd: Optional current working directory. If None, uses Path("/test/default/cwd").
            global_config: Optional GlobalConfig. If None, uses a config pointing at
                Path("/test/default/favorites.json") with color disabled.

        Returns:
            StashfavContext configured with provided values and test defaults

        Example:
            >>> backend = FakeStashBackend(descriptions=["WIP on main: one"])
            >>> store = FavoriteStore.open(FakeFavoritesStorage())
            >>> ctx = StashfavContext.for_test(stash_backend=backend, favorites=store)
        """
        from stashfav.core.favorites.fake import FakeFavoritesStorage
        from stashfav.core.stash.fake import FakeStashBackend

        if stash_backend is None:
            stash_backend = FakeStashBackend()

        if favorites is None:
            favorites = FavoriteStore.open(FakeFavoritesStorage())

        if feedback is None:
            feedback = InteractiveFeedback(use_color=False)

        if cwd is None:
            cwd = Path("/test/default/cwd")

        if global_config is None:
            global_config = GlobalConfig(
                favorites_path=Path("/test/default/favorites.json"),
                use_color=False,
            )

        return StashfavContext(
            stash_backend=stash_backend,
            favorites=favorites,
            stashes=StashFavorites(stash_backend, favorites),
            feedback=feedback,
            cwd=cwd,
            global_config=global_config,
        )


def create_context(*, quiet: bool = False, cwd: Path | None = None) -> StashfavContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        quiet: If True, suppress informational output
        cwd: Directory git runs in (defaults to Path.cwd())

    Returns:
        StashfavContext with real implementations

    Raises:
        ValueError: If the global config file is malformed
    """
    # 1. Capture cwd (no deps)
    if cwd is None:
        cwd = Path.cwd()

    # 2. Load global config (no deps) - defaults when no file exists
    global_config = load_global_config()

    # 3. Load favorites once for the session
    favorites = FavoriteStore.open(FileFavoritesStorage(global_config.favorites_path))

    # 4. Create the git gateway and the reconciliation service over both
    stash_backend: StashBackend = RealStashBackend(cwd)
    stashes = StashFavorites(stash_backend, favorites)

    feedback: UserFeedback
    if quiet:
        feedback = QuietFeedback(use_color=global_config.use_color)
    else:
        feedback = InteractiveFeedback(use_color=global_config.use_color)

    return StashfavContext(
        stash_backend=stash_backend,
        favorites=favorites,
        stashes=stashes,
        feedback=feedback,
        cwd=cwd,
        global_config=global_config,
    )
