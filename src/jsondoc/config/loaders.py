# topmark:header:start
#
#   project      : JsonDoc
#   file         : loaders.py
#   file_relpath : src/jsondoc/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML loading and discovery for JsonDoc configuration.

Configuration lives either in a dedicated ``jsondoc.toml`` or in the
``[tool.jsondoc]`` table of a ``pyproject.toml``. Discovery walks up from a
starting directory and stops at the first directory holding either file;
``jsondoc.toml`` wins when both are present in the same directory.

Parsing uses `tomlkit` and unwraps the document into plain Python
containers before validation in [`jsondoc.config.model`][].
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from jsondoc.config.keys import Toml
from jsondoc.config.logging import get_logger
from jsondoc.config.model import Config
from jsondoc.constants import JSONDOC_TOML_NAME, PYPROJECT_TOML_NAME, PYPROJECT_TOOL_TABLE
from jsondoc.core.errors import ConfigError

if TYPE_CHECKING:
    from jsondoc.config.logging import JsonDocLogger

logger: JsonDocLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file into a plain dictionary.

    Args:
        path: Path to the TOML file.

    Returns:
        TomlTable: The parsed document as plain Python containers.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        data: TomlTable = tomlkit.parse(text).unwrap()
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    logger.trace("Parsed %s: %r", path, data)
    return data


def extract_jsondoc_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the JsonDoc table of a parsed config file.

    A ``pyproject.toml`` contributes its ``[tool.jsondoc]`` table (``None``
    when absent); any other file is a JsonDoc file as a whole.

    Raises:
        ConfigError: If ``[tool.jsondoc]`` is present but not a table.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL, {})
    table: Any = tool.get(PYPROJECT_TOOL_TABLE) if isinstance(tool, dict) else None
    if table is None:
        return None
    if not isinstance(table, dict):
        raise ConfigError(f"{path}: [tool.{PYPROJECT_TOOL_TABLE}] must be a table")
    return table


def discover_config_file(start: Path | None = None) -> Path | None:
    """Find the nearest config file, walking up from ``start``.

    Args:
        start: Directory to start from; the working directory when omitted.

    Returns:
        Path | None: ``jsondoc.toml``, or a ``pyproject.toml`` holding a
        ``[tool.jsondoc]`` table, or ``None`` when nothing was found.
    """
    current: Path = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate: Path = directory / JSONDOC_TOML_NAME
        if candidate.is_file():
            logger.debug("Discovered config file %s", candidate)
            return candidate
        pyproject: Path = directory / PYPROJECT_TOML_NAME
        if pyproject.is_file():
            try:
                table = extract_jsondoc_table(pyproject, load_toml_dict(pyproject))
            except ConfigError as exc:
                logger.warning("Skipping %s: %s", pyproject, exc)
                continue
            if table is not None:
                logger.debug("Discovered config table in %s", pyproject)
                return pyproject
    logger.debug("No config file found above %s", current)
    return None


def load_config(path: Path) -> Config:
    """Load and validate the configuration stored in ``path``.

    Args:
        path: A ``jsondoc.toml`` or a ``pyproject.toml`` file.

    Returns:
        Config: The validated configuration.

    Raises:
        ConfigError: If the file is unreadable, not TOML, or has an invalid shape.
    """
    table = extract_jsondoc_table(path, load_toml_dict(path))
    if table is None:
        logger.warning("%s has no [tool.%s] table", path, PYPROJECT_TOOL_TABLE)
        return Config(source=path)
    return Config.from_toml_dict(table, source=path)


def discover_config(start: Path | None = None) -> Config:
    """Return the nearest configuration, or an empty one when none exists."""
    path = discover_config_file(start)
    if path is None:
        return Config()
    return load_config(path)
