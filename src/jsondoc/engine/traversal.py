# topmark:header:start
#
#   project      : JsonDoc
#   file         : traversal.py
#   file_relpath : src/jsondoc/engine/traversal.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recursive traversal that turns a type into a description tree.

Per canonical type, resolution proceeds in a fixed order:

1. registry override (returned as-is, the type is never inspected);
2. structured-serialization capability -> ``"<object>"``;
3. text-serialization capability -> ``"<string>"``;
4. structural recursion by [`TypeShape`][jsondoc.core.types.TypeShape].

Step 4 runs under the memo state machine of
[`jsondoc.engine.memo`][jsondoc.engine.memo], which truncates cycles with a
single ``"..."`` marker at the point of re-entry while every non-cyclic
occurrence of a type still receives its complete description.
"""

from __future__ import annotations

import typing
from typing import TYPE_CHECKING, Any, cast, get_origin

from jsondoc.config.logging import get_logger
from jsondoc.core.capabilities import has_printer, marshals_json, marshals_text
from jsondoc.core.nodes import (
    OBJECT,
    RECURSION,
    STRING,
    ArrayNode,
    Atom,
    MapNode,
    ObjectNode,
)
from jsondoc.core.types import (
    TypeShape,
    Unresolved,
    canonical_type,
    classify,
    iter_members,
    mapping_items,
    newtype_supertype,
    qualified_name,
    scalar_kind,
    sequence_element,
    type_key,
)
from jsondoc.engine.memo import MemoState, MemoTable

if TYPE_CHECKING:
    from jsondoc.config.logging import JsonDocLogger
    from jsondoc.core.nodes import DescriptionNode
    from jsondoc.registry import Registry

logger: JsonDocLogger = get_logger(__name__)


class Traversal:
    """State of a single top-level ``describe`` call.

    Args:
        registry: Overrides consulted before any introspection. It is only read.

    Attributes:
        registry: The registry in use.
        memo: Memo cells created during this traversal.
    """

    __slots__ = ("memo", "registry")

    def __init__(self, registry: Registry) -> None:
        self.registry: Registry = registry
        self.memo: MemoTable = MemoTable()

    def describe(self, tp: Any) -> DescriptionNode:
        """Describe ``tp``, recursing into its structure as needed.

        Args:
            tp: Any type expression.

        Returns:
            DescriptionNode: The description of ``tp`` in the context of this traversal.
        """
        canonical = canonical_type(tp)

        entry = self.registry.lookup(canonical)
        if entry is not None:
            return entry.node

        key = type_key(canonical)
        cell = self.memo.get(key)
        if cell is not None:
            if cell.state is MemoState.BUILDING_FULL:
                # Cycle: describe again with further re-entries truncated.
                logger.trace("memo %s: cycle detected, building shallow description", cell.label)
                cell.state = MemoState.BUILDING_SHALLOW
            elif cell.state is MemoState.BUILDING_SHALLOW:
                return RECURSION
            elif cell.state is MemoState.SHALLOW_DONE:
                return cast("DescriptionNode", cell.shallow)
            else:
                return cast("DescriptionNode", cell.full)
        elif marshals_json(canonical):
            return OBJECT
        elif marshals_text(canonical):
            return STRING
        else:
            cell = self.memo.open(key, qualified_name(canonical))

        return cell.settle(self._resolve(canonical))

    def _resolve(self, tp: Any) -> DescriptionNode:
        shape: TypeShape = classify(tp)
        if shape is TypeShape.AGGREGATE:
            return self._describe_aggregate(tp)
        if shape is TypeShape.SEQUENCE:
            return ArrayNode(self.describe(sequence_element(tp)))
        if shape is TypeShape.MAPPING:
            key_type, value_type = mapping_items(tp)
            key_node = self.describe(key_type)
            if not isinstance(key_node, Atom):
                # JSON object keys are strings.
                key_node = STRING
            return MapNode(key_node, self.describe(value_type))
        if shape is TypeShape.NAMED:
            return self.describe(newtype_supertype(tp))
        if shape is TypeShape.SCALAR:
            return Atom.named(scalar_kind(tp))
        if isinstance(tp, (Unresolved, str, typing.ForwardRef)):
            logger.warning("Unresolved type %r described as %s", tp, OBJECT.text)
        return OBJECT

    def _describe_aggregate(self, tp: Any) -> DescriptionNode:
        members: dict[str, DescriptionNode] = {}
        for member in iter_members(tp):
            if member.private or member.excluded:
                continue
            if member.name in members:
                logger.debug("%s: member name %r declared twice", qualified_name(tp), member.name)
            if member.tag.as_string:
                target = canonical_type(member.annotation)
                while classify(target) is TypeShape.NAMED:
                    target = canonical_type(newtype_supertype(target))
                if classify(target) is TypeShape.SCALAR:
                    members[member.name] = Atom.named(f"string-{scalar_kind(target)}")
                    continue
                logger.debug(
                    "%s.%s: 'string' option ignored on non-scalar member",
                    qualified_name(tp),
                    member.attr,
                )
            members[member.name] = self.describe(member.annotation)

        if not members and has_printer(get_origin(tp) or tp):
            return STRING
        return ObjectNode(members)
