# topmark:header:start
#
#   project      : JsonDoc
#   file         : errors.py
#   file_relpath : src/jsondoc/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core exception types raised by the engine, the renderers and the config layer.

Provides typed exceptions for core-domain failures:
- `MemoInvariantError` when the traversal memo reaches an impossible state.
- `DescriptionEncodeError` when a description tree cannot be rendered as JSON.
- `TargetImportError` when a ``module:Qualname`` target cannot be imported.
- `ConfigError` for malformed configuration files.

Notes:
    - Describing a finite type never fails. `MemoInvariantError` signals a bug
      in the memo state machine, not a malformed input, which is why it is an
      `AssertionError`.
    - This module has no side effects.
"""

from __future__ import annotations

__all__ = [
    "ConfigError",
    "DescriptionEncodeError",
    "JsonDocError",
    "MemoInvariantError",
    "TargetImportError",
]


class JsonDocError(Exception):
    """Base class for all JsonDoc errors."""


class MemoInvariantError(JsonDocError, AssertionError):
    """The per-traversal memo was re-entered in a terminal state."""


class DescriptionEncodeError(JsonDocError, ValueError):
    """A description tree (typically a schema override payload) is not JSON-encodable."""


class TargetImportError(JsonDocError, ImportError):
    """A ``module:Qualname`` target could not be imported or resolved."""


class ConfigError(JsonDocError, ValueError):
    """Configuration is missing, malformed, or references unknown targets."""
