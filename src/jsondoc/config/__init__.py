# topmark:header:start
#
#   project      : JsonDoc
#   file         : __init__.py
#   file_relpath : src/jsondoc/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for JsonDoc.

Modules:
    - ``logging``: TRACE-aware logger class and colored log formatting.
    - ``model``: the immutable `Config` and its registry builder.
    - ``loaders``: TOML discovery and parsing (``jsondoc.toml`` /
      ``[tool.jsondoc]`` in ``pyproject.toml``).

Import from the submodules directly; this package does not re-export them so
that the core can depend on ``jsondoc.config.logging`` without pulling in the
registry.
"""

from __future__ import annotations
