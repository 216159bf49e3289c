# topmark:header:start
#
#   project      : JsonDoc
#   file         : __init__.py
#   file_relpath : src/jsondoc/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonDoc CLI package.

This package groups all Click command definitions and supporting utilities
for the JsonDoc command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        jsondoc = "jsondoc.cli.main:cli"

All subcommands live in [`jsondoc.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
