# topmark:header:start
#
#   project      : JsonDoc
#   file         : test_nodes.py
#   file_relpath : tests/core/test_nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for description tree nodes."""

from __future__ import annotations

import pytest

from jsondoc.core.errors import DescriptionEncodeError
from jsondoc.core.nodes import (
    OBJECT,
    RECURSION,
    STRING,
    ArrayNode,
    Atom,
    MapNode,
    ObjectNode,
    RecursionMarker,
    Verbatim,
    to_json_value,
)


def test_atom_named_wraps_name_in_angle_brackets() -> None:
    """`Atom.named` renders a placeholder name as ``<name>``."""
    assert Atom.named("int") == Atom("<int>")
    assert Atom.named("my-struct").to_value() == "<my-struct>"


def test_generic_atoms() -> None:
    """The generic object and string atoms have fixed texts."""
    assert OBJECT.to_value() == "<object>"
    assert STRING.to_value() == "<string>"


def test_object_node_detaches_from_caller_mapping() -> None:
    """Mutating the mapping passed in does not change the node."""
    members = {"a": Atom("<int>")}
    node = ObjectNode(members)
    members["b"] = Atom("<string>")

    assert len(node) == 1
    assert node.to_value() == {"a": "<int>"}


def test_nested_tree_to_value() -> None:
    """Arrays render as one-element lists and maps as one-entry dicts."""
    tree = ObjectNode(
        {
            "items": ArrayNode(Atom("<int>")),
            "index": MapNode(STRING, ObjectNode({"next": RECURSION})),
        }
    )
    assert tree.to_value() == {
        "items": ["<int>"],
        "index": {"<string>": {"next": "..."}},
    }


def test_recursion_marker_compares_by_type() -> None:
    """Any recursion marker equals the singleton."""
    assert RecursionMarker() == RECURSION
    assert hash(RecursionMarker()) == hash(RECURSION)
    assert RECURSION != Atom("...")
    assert repr(RECURSION) == "RECURSION"


def test_nodes_are_value_objects() -> None:
    """Structurally equal trees compare equal."""
    assert ObjectNode({"a": ArrayNode(Atom("<int>"))}) == ObjectNode({"a": ArrayNode(Atom("<int>"))})
    assert MapNode(STRING, OBJECT) != MapNode(STRING, STRING)


def test_verbatim_expands_nested_nodes() -> None:
    """Nodes nested inside a schema payload are converted; other data is kept."""
    node = Verbatim({"PhantomField": Atom("<my-type>"), "list": (1, Atom("<int>")), "n": None})
    assert node.to_value() == {"PhantomField": "<my-type>", "list": [1, "<int>"], "n": None}


def test_to_json_value_passes_plain_data_through() -> None:
    """Plain JSON-like data is returned unchanged."""
    data = {"a": [1, 2.5, "x", True, None]}
    assert to_json_value(data) == data


def test_to_json_value_rejects_self_containing_data() -> None:
    """A mapping that contains itself cannot be converted."""
    data: dict[str, object] = {"a": 1}
    data["loop"] = [data]
    with pytest.raises(DescriptionEncodeError, match="circular reference"):
        to_json_value(data)
