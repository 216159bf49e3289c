# topmark:header:start
#
#   project      : JsonDoc
#   file         : __init__.py
#   file_relpath : src/jsondoc/registry/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public registry of type description overrides.

Exposes [`Registry`][jsondoc.registry.registry.Registry] and its entry types.
"""

from __future__ import annotations

from jsondoc.registry.registry import (
    EntryView,
    NameOverride,
    Registry,
    RegistryEntry,
    SchemaOverride,
)

__all__ = [
    "EntryView",
    "NameOverride",
    "Registry",
    "RegistryEntry",
    "SchemaOverride",
]
