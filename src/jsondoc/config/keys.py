# topmark:header:start
#
#   project      : JsonDoc
#   file         : keys.py
#   file_relpath : src/jsondoc/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for JsonDoc configuration.

Keys defined here are the external configuration API of ``jsondoc.toml`` and
of ``[tool.jsondoc]`` in ``pyproject.toml``. Renaming or removing one is a
breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by JsonDoc configuration."""

    # [tool] (pyproject.toml only)
    SECTION_TOOL: Final[str] = "tool"

    # [names]: "module:Qualname" = "placeholder-name"
    SECTION_NAMES: Final[str] = "names"

    # [schemas]: "module:Qualname" = <literal description tree>
    SECTION_SCHEMAS: Final[str] = "schemas"

    # [output]
    SECTION_OUTPUT: Final[str] = "output"

    KEY_FORMAT: Final[str] = "format"
    KEY_INDENT: Final[str] = "indent"

    KNOWN_SECTIONS: Final[frozenset[str]] = frozenset(
        {SECTION_NAMES, SECTION_SCHEMAS, SECTION_OUTPUT}
    )
