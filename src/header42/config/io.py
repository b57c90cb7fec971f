# topmark:header:start
#
#   project      : header42
#   file         : io.py
#   file_relpath : src/header42/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render header42 TOML configuration.

Sources:
- ``header42.toml``: settings are top-level keys.
- ``pyproject.toml``: settings live in the ``[tool.header42]`` table.

Parsing is done with `tomlkit` and returned as plain `dict` structures. The
typed getters below coerce values and log a warning for values of the wrong
shape, returning the supplied default instead.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeAlias, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from header42.config.logging import get_logger
from header42.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_SECTION

if TYPE_CHECKING:
    from header42.config.logging import Header42Logger

logger: Header42Logger = get_logger(__name__)

TomlTable: TypeAlias = dict[str, Any]


class ConfigFileError(Exception):
    """Raised when a configuration file cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot load configuration from {path}: {reason}")
        self.path = path
        self.reason = reason


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigFileError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigFileError(path, str(e)) from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigFileError(path, str(e)) from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_settings_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the header42 settings table of a parsed config file.

    For ``pyproject.toml`` this is ``[tool.header42]`` (``None`` when absent);
    for any other file name the whole document.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    table: Any = data
    for part in PYPROJECT_SECTION.split("."):
        if not isinstance(table, dict):
            return None
        table = cast("TomlTable", table).get(part)
    return cast("TomlTable", table) if isinstance(table, dict) else None


def find_config_file(start: Path) -> Path | None:
    """Find the closest configuration file, walking up from ``start``.

    In each directory ``header42.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it has a ``[tool.header42]`` table.

    Args:
        start (Path): Directory where the search begins.

    Returns:
        Path | None: The configuration file, or ``None`` if there is none.
    """
    current: Path = start.resolve()
    for directory in (current, *current.parents):
        candidate: Path = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            logger.debug("Found config file %s", candidate)
            return candidate
        pyproject: Path = directory / PYPROJECT_FILE_NAME
        if pyproject.is_file():
            try:
                data: TomlTable = load_toml_dict(pyproject)
            except ConfigFileError:
                continue
            if extract_settings_table(pyproject, data) is not None:
                logger.debug("Found [%s] in %s", PYPROJECT_SECTION, pyproject)
                return pyproject
    logger.debug("No configuration file found from %s upward", current)
    return None


def get_string_value(table: TomlTable, key: str, default: str = "") -> str:
    """Extract a string value from a TOML table.

    Numbers and booleans are coerced with ``str(...)``. Missing keys return
    ``default``; other types log a warning and return ``default``.
    """
    value: Any | None = table.get(key)
    if value is None:
        return default
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, bool)):
        return str(value)
    logger.warning("Config key '%s' must be a string, got %r; using %r", key, value, default)
    return default


def get_int_value(table: TomlTable, key: str, default: int, *, minimum: int = 1) -> int:
    """Extract an integer value of at least ``minimum`` from a TOML table."""
    value: Any | None = table.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        logger.warning(
            "Config key '%s' must be an integer >= %d, got %r; using %d",
            key,
            minimum,
            value,
            default,
        )
        return default
    return value


def get_list_value(table: TomlTable, key: str) -> list[str]:
    """Extract a list of strings from a TOML table.

    A single string is accepted as a one-element list. Non-string items are
    dropped with a warning.
    """
    value: Any | None = table.get(key)
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        logger.warning("Config key '%s' must be a list of strings, got %r", key, value)
        return []
    out: list[str] = []
    for item in cast("list[Any]", value):
        if isinstance(item, str):
            out.append(item)
        else:
            logger.warning("Ignoring non-string item %r in config key '%s'", item, key)
    return out


def to_toml(data: TomlTable) -> str:
    """Serialize a dict to TOML text."""
    doc: tomlkit.TOMLDocument = tomlkit.document()
    for key, value in data.items():
        doc.add(key, value)
    return tomlkit.dumps(doc)
