# topmark:header:start
#
#   project      : JsonDoc
#   file         : __init__.py
#   file_relpath : src/jsondoc/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core building blocks shared by the registry, the engine and the frontends.

Modules:
    - ``nodes``: the description tree (`Atom`, `ObjectNode`, `ArrayNode`,
      `MapNode`, `RecursionMarker`, `Verbatim`).
    - ``types``: canonical type identity, shape classification and member
      enumeration.
    - ``capabilities``: custom-serialization capability queries.
    - ``errors``: exception hierarchy.
    - ``machine``: JSON / NDJSON / Markdown rendering of description trees.

This package is Click-free and console-free.
"""

from __future__ import annotations
