# topmark:header:start
#
#   project      : JsonDoc
#   file         : test_registry.py
#   file_relpath : tests/registry/test_registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the registry of description overrides."""

from __future__ import annotations

import datetime
import decimal
import uuid
from typing import Annotated, NewType, Optional

from jsondoc.core.nodes import Atom, ObjectNode, Verbatim
from jsondoc.registry import NameOverride, Registry, SchemaOverride
from jsondoc.registry.defaults import DEFAULT_NAMES
from tests.sample_types import M1, M2

UserId = NewType("UserId", int)


def test_fresh_registry_holds_defaults(registry: Registry) -> None:
    """Common non-introspectable types are pre-registered."""
    assert registry.lookup(Exception) == NameOverride("error")
    assert registry.lookup(datetime.datetime) == NameOverride("timestamp")
    assert registry.lookup(bytes) == NameOverride("base64-string")
    assert registry.lookup(decimal.Decimal) == NameOverride("decimal-string")
    assert registry.lookup(uuid.UUID) == NameOverride("uuid")
    assert len(registry) == len({tp for tp, _ in DEFAULT_NAMES})


def test_empty_registry_has_no_entries() -> None:
    """`Registry.empty` skips the defaults."""
    registry = Registry.empty()
    assert len(registry) == 0
    assert registry.lookup(datetime.datetime) is None


def test_registration_is_chainable(registry: Registry) -> None:
    """Mutators return the registry itself."""
    result = registry.register_name(M1, "my-struct").register_schema(
        M2, {"PhantomField": "<my-type>"}
    )
    assert result is registry
    assert registry.lookup(M1) == NameOverride("my-struct")
    assert registry.lookup(M2) == SchemaOverride({"PhantomField": "<my-type>"})


def test_last_registration_wins(registry: Registry) -> None:
    """Registering a type twice replaces the earlier entry."""
    registry.register_name(M1, "first").register_schema(M1, {"x": "<int>"})
    registry.register_name(M1, "second")
    assert registry.lookup(M1) == NameOverride("second")


def test_lookup_canonicalizes(registry: Registry) -> None:
    """Indirection layers are stripped on both registration and lookup."""
    registry.register_name(Optional[M1], "m1")
    assert registry.lookup(M1) == NameOverride("m1")
    assert registry.lookup(Annotated[M1 | None, "doc"]) == NameOverride("m1")
    assert M1 in registry


def test_lookup_is_exact() -> None:
    """No supertype matching, and NewTypes keep their own identity."""

    class MyError(ValueError):
        pass

    registry = Registry()
    assert registry.lookup(MyError) is None
    registry.register_name(int, "number")
    assert registry.lookup(UserId) is None


def test_clone_is_independent(registry: Registry) -> None:
    """Mutating a clone never affects its source, and vice versa."""
    clone = registry.clone().register_name(M1, "clone-only")
    registry.register_name(M2, "source-only")

    assert registry.lookup(M1) is None
    assert clone.lookup(M2) is None
    assert clone.lookup(datetime.datetime) == NameOverride("timestamp")
    assert len(clone) == len(registry)


def test_entry_nodes() -> None:
    """Name overrides render as atoms; schema trees are stored verbatim."""
    tree = ObjectNode({"a": Atom("<int>")})
    assert NameOverride("x").node == Atom("<x>")
    assert SchemaOverride(tree).node is tree
    assert SchemaOverride({"a": 1}).node == Verbatim({"a": 1})


def test_iter_entries_sorted_by_type_name() -> None:
    """Entries are listed by qualified type name."""
    registry = Registry.empty().register_name(M2, "b").register_name(M1, "a")
    views = list(registry.iter_entries())
    assert [v.type_name for v in views] == ["tests.sample_types:M1", "tests.sample_types:M2"]
    assert views[0].to_dict() == {"type": "tests.sample_types:M1", "description": "<a>"}


def test_repr() -> None:
    """The repr reports the entry count."""
    assert repr(Registry.empty().register_name(M1, "x")) == "Registry(entries=1)"
