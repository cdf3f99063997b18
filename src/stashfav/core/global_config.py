"""Global configuration data structures and loading.

Provides immutable global config data loaded from ~/.stashfav/config.toml.
The file is optional: every key has a default, so a missing file simply means
"use the defaults". Environment variables override the file:

- STASHFAV_CONFIG: path of the config file itself
- STASHFAV_FAVORITES_PATH: path of the favorites document
"""

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

import tomlkit
from tomlkit.exceptions import TOMLKitError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "STASHFAV_CONFIG"
FAVORITES_PATH_ENV_VAR = "STASHFAV_FAVORITES_PATH"

GLOBAL_CONFIG_KEYS = ("favorites_path", "use_color")


def default_favorites_path() -> Path:
    return Path.home() / ".stashfav-favorite-stashes.json"


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    Loaded once at CLI entry point and stored in StashfavContext.
    """

    favorites_path: Path
    use_color: bool

    @classmethod
    def defaults(cls) -> "GlobalConfig":
        return cls(favorites_path=default_favorites_path(), use_color=True)


def global_config_path() -> Path:
    """Get the path to the global config file.

    Honors STASHFAV_CONFIG; otherwise ~/.stashfav/config.toml.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".stashfav" / "config.toml"


def global_config_exists(path: Path | None = None) -> bool:
    config_path = path if path is not None else global_config_path()
    return config_path.exists()


def load_global_config(path: Path | None = None, *, apply_env: bool = True) -> GlobalConfig:
    """Load global config, falling back to defaults for anything not set.

    Args:
        path: Config file path (defaults to global_config_path())
        apply_env: Whether STASHFAV_FAVORITES_PATH may override the file. Pass False
            when the result is going to be written back.

    Returns:
        GlobalConfig instance with loaded values

    Raises:
        ValueError: If the config file is not valid TOML or a value has the wrong type
    """
    config_path = path if path is not None else global_config_path()
    defaults = GlobalConfig.defaults()

    data: dict = {}
    if config_path.exists():
        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid config file {config_path}: {e}") from e

    favorites_path = defaults.favorites_path
    raw_path = data.get("favorites_path")
    if raw_path is not None:
        if not isinstance(raw_path, str) or not raw_path:
            raise ValueError(f"'favorites_path' in {config_path} must be a non-empty string")
        favorites_path = Path(raw_path).expanduser()

    env_path = os.environ.get(FAVORITES_PATH_ENV_VAR)
    if apply_env and env_path:
        favorites_path = Path(env_path).expanduser()

    use_color = data.get("use_color", defaults.use_color)
    if not isinstance(use_color, bool):
        raise ValueError(f"'use_color' in {config_path} must be true or false")

    return GlobalConfig(favorites_path=favorites_path, use_color=use_color)


def save_global_config(config: GlobalConfig, path: Path | None = None) -> None:
    """Save global config, preserving formatting and comments of an existing file.

    A file that is not valid TOML is replaced.

    Args:
        config: GlobalConfig instance to save
        path: Config file path (defaults to global_config_path())
    """
    config_path = path if path is not None else global_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    doc = _new_document()
    if config_path.exists():
        try:
            doc = tomlkit.parse(config_path.read_text(encoding="utf-8"))
        except TOMLKitError as e:
            logger.warning("Replacing unparseable config file %s: %s", config_path, e)

    doc["favorites_path"] = str(config.favorites_path)
    doc["use_color"] = config.use_color

    config_path.write_text(tomlkit.dumps(doc), encoding="utf-8")


def _new_document() -> tomlkit.TOMLDocument:
    doc = tomlkit.document()
    doc.add(tomlkit.comment("Global stashfav configuration"))
    return doc
