# topmark:header:start
#
#   project      : JsonDoc
#   file         : __init__.py
#   file_relpath : src/jsondoc/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonDoc package.

JsonDoc inspects Python types at runtime and documents the shape they take
when serialized to JSON: scalars become placeholders such as ``"<int>"``,
aggregates become nested placeholder trees, and self-referential types are
truncated with a ``"..."`` marker at their point of re-entry.

Typical usage:
    ```python
    from jsondoc import Registry, describe_as_text

    registry = Registry().register_name(Address, "street-address")
    print(describe_as_text(Person, registry))
    ```
"""

from __future__ import annotations

from jsondoc.core.errors import (
    ConfigError,
    DescriptionEncodeError,
    JsonDocError,
    MemoInvariantError,
    TargetImportError,
)
from jsondoc.core.nodes import (
    RECURSION,
    ArrayNode,
    Atom,
    DescriptionNode,
    MapNode,
    ObjectNode,
    RecursionMarker,
    Verbatim,
)
from jsondoc.core.types import MemberTag
from jsondoc.engine import Engine, describe, describe_as_text
from jsondoc.registry import NameOverride, Registry, SchemaOverride

__all__ = [
    "RECURSION",
    "ArrayNode",
    "Atom",
    "ConfigError",
    "DescriptionEncodeError",
    "DescriptionNode",
    "Engine",
    "JsonDocError",
    "MapNode",
    "MemberTag",
    "MemoInvariantError",
    "NameOverride",
    "ObjectNode",
    "RecursionMarker",
    "Registry",
    "SchemaOverride",
    "TargetImportError",
    "Verbatim",
    "describe",
    "describe_as_text",
]
