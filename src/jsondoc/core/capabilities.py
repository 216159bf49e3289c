# topmark:header:start
#
#   project      : JsonDoc
#   file         : capabilities.py
#   file_relpath : src/jsondoc/core/capabilities.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom-serialization capability queries.

A type whose serialization is produced by its own logic cannot be described
by looking at its fields. Three capabilities are recognized:

- *structured*: the type renders itself as a JSON value (`JsonMarshaler`
  ``__json__()`` or `DictMarshaler` ``to_dict()``). Described as ``"<object>"``.
- *text*: the type renders itself as one string (`TextMarshaler`
  ``to_text()`` or ``os.PathLike``). Described as ``"<string>"``.
- *printer*: the type defines its own ``__str__``. Only used to collapse an
  aggregate without visible members to ``"<string>"``.

All queries take a *type*, never an instance, and answer False for type
expressions that are not classes (``list[int]``, ``Any``, ...).
"""

from __future__ import annotations

import os
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class JsonMarshaler(Protocol):
    """A type that produces its own JSON value."""

    def __json__(self) -> object:
        """Return a JSON-serializable value for this object."""
        ...


@runtime_checkable
class DictMarshaler(Protocol):
    """A type that produces its own mapping (the ``to_dict()`` convention)."""

    def to_dict(self) -> object:
        """Return a JSON-serializable mapping for this object."""
        ...


@runtime_checkable
class TextMarshaler(Protocol):
    """A type that renders itself as a single text value."""

    def to_text(self) -> str:
        """Return the text form of this object."""
        ...


def marshals_json(tp: Any) -> bool:
    """Return True if instances of ``tp`` serialize through custom structured logic."""
    if not isinstance(tp, type):
        return False
    return issubclass(tp, (JsonMarshaler, DictMarshaler))


def marshals_text(tp: Any) -> bool:
    """Return True if instances of ``tp`` render themselves as a single string."""
    if not isinstance(tp, type):
        return False
    return issubclass(tp, (TextMarshaler, os.PathLike))


def has_printer(tp: Any) -> bool:
    """Return True if ``tp`` defines its own text rendering (``__str__`` or ``to_text``)."""
    if not isinstance(tp, type):
        return False
    return tp.__str__ is not object.__str__ or marshals_text(tp)
