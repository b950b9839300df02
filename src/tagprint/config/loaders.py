# topmark:header:start
#
#   project      : TagPrint
#   file         : loaders.py
#   file_relpath : src/tagprint/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TagPrint configuration from TOML files.

Two sources are recognized:

- ``tagprint.toml``: the settings live in the top-level table;
- ``pyproject.toml``: the settings live in ``[tool.tagprint]``.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from tagprint.config.logging import get_logger
from tagprint.config.model import Config, ConfigError

if TYPE_CHECKING:
    from tagprint.config.logging import TagprintLogger

logger: TagprintLogger = get_logger(__name__)

CONFIG_FILE_NAME: Final[str] = "tagprint.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_SECTION: Final[tuple[str, str]] = ("tool", "tagprint")


def load_toml_dict(path: Path) -> dict[str, Any]:
    """Read and parse a TOML file into a plain dict.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        return tomlkit.parse(text).unwrap()
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc


def extract_settings(data: dict[str, Any], path: Path) -> dict[str, Any] | None:
    """Return the TagPrint table of a parsed file, or None if it has none."""
    if path.name != PYPROJECT_FILE_NAME:
        return data
    section: Any = data
    for key in PYPROJECT_SECTION:
        if not isinstance(section, dict) or key not in section:
            return None
        section = section[key]
    if not isinstance(section, dict):
        raise ConfigError(f"[{'.'.join(PYPROJECT_SECTION)}] in {path} must be a table")
    return section


def find_config_file(directory: Path) -> Path | None:
    """Return the config file to use in ``directory``, if any.

    ``tagprint.toml`` takes precedence over ``pyproject.toml``; a
    ``pyproject.toml`` without a ``[tool.tagprint]`` table is skipped.
    """
    candidate = directory / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate
    candidate = directory / PYPROJECT_FILE_NAME
    if candidate.is_file() and extract_settings(load_toml_dict(candidate), candidate) is not None:
        return candidate
    return None


def load_config(path: Path | None = None, *, directory: Path | None = None) -> Config:
    """Load the effective configuration.

    Args:
        path (Path | None): Explicit config file; must exist.
        directory (Path | None): Where to look for a config file when ``path``
            is None. Defaults to the current working directory.

    Returns:
        Config: The loaded configuration, or defaults when no file applies.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    if path is None:
        path = find_config_file(directory or Path.cwd())
        if path is None:
            logger.debug("no config file found, using defaults")
            return Config.from_defaults()
    elif not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    settings = extract_settings(load_toml_dict(path), path)
    if settings is None:
        logger.warning("%s has no [%s] table, using defaults", path, ".".join(PYPROJECT_SECTION))
        return Config.from_defaults()
    config = Config.from_toml_dict(settings, source=str(path))
    logger.debug("loaded config from %s: mode=%s", path, config.mode.value)
    return config
