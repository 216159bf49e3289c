# topmark:header:start
#
#   project      : JsonDoc
#   file         : nodes.py
#   file_relpath : src/jsondoc/core/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Description tree produced by the engine.

A description tree documents the JSON shape of a type:

- `Atom`: an opaque placeholder such as ``"<int>"`` or ``"<my-name>"``.
- `ObjectNode`: named members, each described by a node.
- `ArrayNode`: one exemplar element standing in for every element.
- `MapNode`: one key/value exemplar pair; the key is always an `Atom`.
- `RecursionMarker`: the ``"..."`` token placed where a cycle is re-entered.
- `Verbatim`: a caller-supplied schema payload stored as-is.

Nodes are immutable values. `to_value()` converts a tree into plain JSON-like
Python data (``dict``/``list``/``str``) ready for any JSON encoder; key
ordering is left to the encoder.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Final, cast

from jsondoc.core.errors import DescriptionEncodeError

OBJECT_ATOM: Final[str] = "<object>"
STRING_ATOM: Final[str] = "<string>"
RECURSION_TEXT: Final[str] = "..."


class DescriptionNode:
    """Base class of every description tree node."""

    __slots__ = ()

    def to_value(self) -> object:
        """Return the node as plain JSON-like Python data."""
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Atom(DescriptionNode):
    """Opaque placeholder, rendered as a JSON string.

    Attributes:
        text: The literal placeholder, e.g. ``"<string>"``.
    """

    text: str

    @classmethod
    def named(cls, name: str) -> Atom:
        """Return the placeholder atom for ``name`` (``"<name>"``)."""
        return cls(f"<{name}>")

    def to_value(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class ObjectNode(DescriptionNode):
    """Aggregate with named members.

    Member order carries no meaning; renderers sort keys.

    Attributes:
        members: Member name -> member description.
    """

    members: Mapping[str, DescriptionNode] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Detach from the caller's mapping.
        object.__setattr__(self, "members", dict(self.members))

    def __len__(self) -> int:
        return len(self.members)

    def to_value(self) -> dict[str, object]:
        return {name: node.to_value() for name, node in self.members.items()}


@dataclass(frozen=True, slots=True)
class ArrayNode(DescriptionNode):
    """Homogeneous sequence, described by a single exemplar element."""

    element: DescriptionNode

    def to_value(self) -> list[object]:
        return [self.element.to_value()]


@dataclass(frozen=True, slots=True)
class MapNode(DescriptionNode):
    """Associative mapping, described by a single key/value exemplar pair.

    JSON object keys are strings, so the key is always an `Atom`.
    """

    key: Atom
    value: DescriptionNode

    def to_value(self) -> dict[str, object]:
        return {self.key.text: self.value.to_value()}


class RecursionMarker(DescriptionNode):
    """The ``"..."`` token marking the re-entry point of a cycle.

    Use the `RECURSION` singleton.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return "RECURSION"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, RecursionMarker)

    def __hash__(self) -> int:
        return hash(RECURSION_TEXT)

    def to_value(self) -> str:
        return RECURSION_TEXT


RECURSION: Final[RecursionMarker] = RecursionMarker()


@dataclass(frozen=True, slots=True)
class Verbatim(DescriptionNode):
    """Caller-supplied schema payload, stored and rendered as-is.

    The payload is never validated. Nested description nodes inside lists and
    dicts are converted by `to_value()`; anything else is handed to the JSON
    encoder unchanged, which may reject it at render time.
    """

    payload: object

    def to_value(self) -> object:
        return to_json_value(self.payload)


def to_json_value(
    obj: object,
    *,
    adapt: Callable[[object], object] | None = None,
) -> object:
    """Convert ``obj`` to plain data, expanding any description nodes it contains.

    Args:
        obj: A description node, or JSON-like data possibly containing nodes.
        adapt: Optional hook applied to every value that is not a description
            node before it is inspected; its result is converted in turn.

    Returns:
        The same data with every `DescriptionNode` replaced by its `to_value()`.

    Raises:
        DescriptionEncodeError: If a container holds itself, directly or not.
    """
    return _convert(obj, adapt, set())


def _convert(obj: object, adapt: Callable[[object], object] | None, active: set[int]) -> object:
    if isinstance(obj, Verbatim):
        return _convert(obj.payload, adapt, active)
    if isinstance(obj, DescriptionNode):
        return obj.to_value()
    marker = id(obj)
    if adapt is not None:
        obj = adapt(obj)
    if not isinstance(obj, (Mapping, list, tuple)):
        return obj
    if marker in active:
        raise DescriptionEncodeError("circular reference in schema payload")
    active.add(marker)
    try:
        if isinstance(obj, Mapping):
            mapping = cast("Mapping[object, object]", obj)
            return {key: _convert(value, adapt, active) for key, value in mapping.items()}
        return [_convert(item, adapt, active) for item in obj]
    finally:
        active.discard(marker)


OBJECT: Final[Atom] = Atom(OBJECT_ATOM)
STRING: Final[Atom] = Atom(STRING_ATOM)
