"""Tests for loading and saving ~/.stashfav/config.toml."""

from pathlib import Path

import pytest

from stashfav.core.global_config import (
    CONFIG_ENV_VAR,
    FAVORITES_PATH_ENV_VAR,
    GlobalConfig,
    default_favorites_path,
    global_config_exists,
    global_config_path,
    load_global_config,
    save_global_config,
)


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.delenv(FAVORITES_PATH_ENV_VAR, raising=False)


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    """No config file is not an error; defaults apply."""
    config = load_global_config(tmp_path / "missing.toml")

    assert config == GlobalConfig.defaults()
    assert config.favorites_path == default_favorites_path()
    assert config.use_color is True


def test_default_favorites_path_is_in_home() -> None:
    assert default_favorites_path() == Path.home() / ".stashfav-favorite-stashes.json"


def test_loads_values_from_file(tmp_path: Path) -> None:
    config_file = tmp_path / "config.toml"
    config_file.write_text(
        'favorites_path = "/data/favs.json"\nuse_color = false\n', encoding="utf-8"
    )

    config = load_global_config(config_file)

    assert config.favorites_path == Path("/data/favs.json")
    assert config.use_color is False


def test_invalid_toml_raises_value_error(tmp_path: Path) -> None:
    config_file = tmp_path / "config.toml"
    config_file.write_text("favorites_path = [unclosed", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid config file"):
        load_global_config(config_file)


def test_wrong_types_raise_value_error(tmp_path: Path) -> None:
    config_file = tmp_path / "config.toml"
    config_file.write_text('use_color = "yes"\n', encoding="utf-8")

    with pytest.raises(ValueError, match="use_color"):
        load_global_config(config_file)

    config_file.write_text("favorites_path = 3\n", encoding="utf-8")

    with pytest.raises(ValueError, match="favorites_path"):
        load_global_config(config_file)


def test_environment_overrides_favorites_path(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """STASHFAV_FAVORITES_PATH wins over the file unless apply_env=False."""
    config_file = tmp_path / "config.toml"
    config_file.write_text('favorites_path = "/from/file.json"\n', encoding="utf-8")
    monkeypatch.setenv(FAVORITES_PATH_ENV_VAR, "/from/env.json")

    assert load_global_config(config_file).favorites_path == Path("/from/env.json")
    assert load_global_config(config_file, apply_env=False).favorites_path == Path(
        "/from/file.json"
    )


def test_config_path_honors_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert global_config_path() == Path.home() / ".stashfav" / "config.toml"

    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "custom.toml"))

    assert global_config_path() == tmp_path / "custom.toml"
    assert not global_config_exists()


def test_save_then_load(tmp_path: Path) -> None:
    config_file = tmp_path / "nested" / "config.toml"
    config = GlobalConfig(favorites_path=tmp_path / "favs.json", use_color=False)

    save_global_config(config, config_file)

    assert global_config_exists(config_file)
    assert load_global_config(config_file) == config


def test_save_preserves_comments(tmp_path: Path) -> None:
    """Existing comments survive a rewrite."""
    config_file = tmp_path / "config.toml"
    config_file.write_text("# keep me\nuse_color = true\n", encoding="utf-8")

    save_global_config(
        GlobalConfig(favorites_path=tmp_path / "favs.json", use_color=False), config_file
    )

    content = config_file.read_text(encoding="utf-8")
    assert "# keep me" in content
    assert "use_color = false" in content


def test_save_replaces_unparseable_file(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text("use_color = maybe\n", encoding="utf-8")

    save_global_config(
        GlobalConfig(favorites_path=tmp_path / "favs.json", use_color=False), config_path
    )

    loaded = load_global_config(config_path, apply_env=False)
    assert loaded.use_color is False
    assert loaded.favorites_path == tmp_path / "favs.json"
