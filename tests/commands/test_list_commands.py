"""Tests for `stashfav list` and `stashfav favorites`."""

import json

from click.testing import CliRunner

from stashfav.cli.cli import cli
from stashfav.core.context import StashfavContext
from stashfav.core.favorites import FakeFavoritesStorage, FavoriteStore
from stashfav.core.stash import FakeStashBackend


def _context(
    backend: FakeStashBackend, stored: bytes | None = None
) -> StashfavContext:
    store = FavoriteStore.open(FakeFavoritesStorage(data=stored))
    return StashfavContext.for_test(stash_backend=backend, favorites=store)


def test_list_marks_favorites_with_star() -> None:
    backend = FakeStashBackend(
        descriptions=["WIP on feature-branch: Add new feature", "WIP on bugfix: Fix critical bug"]
    )
    ctx = _context(backend, stored=b'{"stashes": {"stash@{1}": true}}')

    result = CliRunner().invoke(cli, ["list"], obj=ctx)

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "All stashes (★ = favorite):",
        "  stash@{0}: WIP on feature-branch: Add new feature",
        "★ stash@{1}: WIP on bugfix: Fix critical bug",
    ]


def test_list_reports_backend_error_and_exits_zero() -> None:
    ctx = _context(FakeStashBackend(list_error="fatal: not a git repository"))

    result = CliRunner().invoke(cli, ["list"], obj=ctx)

    assert result.exit_code == 0
    assert "Error getting stashes: fatal: not a git repository" in result.output


def test_list_grouped_sections() -> None:
    backend = FakeStashBackend(descriptions=["A", "B", "C"])
    ctx = _context(backend, stored=b'{"stashes": {"stash@{2}": true}}')

    result = CliRunner().invoke(cli, ["list", "--grouped"], obj=ctx)

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "★ Favorites:",
        "★ stash@{2}: C",
        "Other stashes:",
        "  stash@{0}: A",
        "  stash@{1}: B",
    ]


def test_list_grouped_with_no_favorites() -> None:
    ctx = _context(FakeStashBackend(descriptions=["A"]))

    result = CliRunner().invoke(cli, ["list", "--grouped"], obj=ctx)

    assert result.exit_code == 0
    assert result.output.splitlines()[:2] == ["★ Favorites:", "  (none)"]


def test_list_json_read_model() -> None:
    backend = FakeStashBackend(raw_lines=["stash@{0}: A", "stash@{1}: B"])
    ctx = _context(backend, stored=b'{"stashes": {"stash@{1}": true}}')

    result = CliRunner().invoke(cli, ["list", "--json"], obj=ctx)

    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "type": "stash-list",
        "stashes": [
            {"id": "stash@{0}", "index": 0, "description": "A", "isFavorite": False},
            {"id": "stash@{1}", "index": 1, "description": "B", "isFavorite": True},
        ],
        "error": None,
    }


def test_favorites_lists_only_favorites() -> None:
    backend = FakeStashBackend(descriptions=["A", "B"])
    ctx = _context(backend, stored=b'{"stashes": {"stash@{1}": true}}')

    result = CliRunner().invoke(cli, ["favorites"], obj=ctx)

    assert result.exit_code == 0
    assert result.output.splitlines() == ["Favorite stashes:", "★ stash@{1}: B"]


def test_favorites_empty_message() -> None:
    ctx = _context(FakeStashBackend(descriptions=["A"]))

    result = CliRunner().invoke(cli, ["favorites"], obj=ctx)

    assert result.exit_code == 0
    assert result.output.strip() == "No favorite stashes found."


def test_favorites_backend_error_is_not_reported_as_empty() -> None:
    """A broken backend must not look like 'no favorites'."""
    ctx = _context(FakeStashBackend(list_error="fatal: bad"), stored=b'{"stashes": {"stash@{0}": true}}')

    result = CliRunner().invoke(cli, ["favorites"], obj=ctx)

    assert result.exit_code == 0
    assert "No favorite stashes found." not in result.output
    assert "Error getting stashes: fatal: bad" in result.output


def test_favorites_json_includes_error() -> None:
    ctx = _context(FakeStashBackend(list_error="fatal: bad"))

    result = CliRunner().invoke(cli, ["favorites", "--json"], obj=ctx)

    assert result.exit_code == 0
    assert json.loads(result.output) == {"type": "stash-list", "stashes": [], "error": "fatal: bad"}
