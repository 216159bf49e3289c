# topmark:header:start
#
#   project      : JsonDoc
#   file         : config_resolver.py
#   file_relpath : src/jsondoc/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the effective configuration and registry for a CLI command.

Precedence, lowest to highest:

1. the default registry;
2. the configuration file (``--config PATH``, else discovered from the
   working directory unless ``--no-config`` is given);
3. ``--name TARGET=NAME`` options on the command line.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from jsondoc.cli.errors import JsonDocUsageError
from jsondoc.config.loaders import discover_config, load_config
from jsondoc.config.logging import get_logger
from jsondoc.config.model import Config
from jsondoc.utils.introspection import import_target

if TYPE_CHECKING:
    from collections.abc import Iterable

    from jsondoc.config.logging import JsonDocLogger
    from jsondoc.registry import Registry

logger: JsonDocLogger = get_logger(__name__)


def resolve_config(*, config_path: str | None, no_config: bool) -> Config:
    """Return the configuration selected by ``--config`` / ``--no-config``.

    Raises:
        JsonDocUsageError: If both options are given.
        ConfigError: If the selected file is invalid.
    """
    if config_path and no_config:
        raise JsonDocUsageError("The '--config' and '--no-config' options are mutually exclusive.")
    if config_path:
        return load_config(Path(config_path))
    if no_config:
        logger.debug("Configuration discovery disabled")
        return Config()
    return discover_config()


def resolve_registry(config: Config, names: Iterable[tuple[str, str]]) -> Registry:
    """Build the registry from ``config`` plus command-line name overrides.

    Raises:
        ConfigError: If a configured target cannot be imported.
        TargetImportError: If a command-line target cannot be imported.
    """
    registry = config.build_registry()
    for target, name in names:
        registry.register_name(import_target(target), name)
    return registry
