# topmark:header:start
#
#   project      : JsonDoc
#   file         : registry.py
#   file_relpath : src/jsondoc/registry/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry of caller-declared description overrides.

A [`Registry`][jsondoc.registry.registry.Registry] maps a *canonical type
identity* to a pre-declared description that the engine returns without
looking at the type's structure:

- [`NameOverride`][jsondoc.registry.registry.NameOverride]: a placeholder
  name, rendered as ``"<name>"``.
- [`SchemaOverride`][jsondoc.registry.registry.SchemaOverride]: a literal
  description tree, stored verbatim.

Typical usage:
    ```python
    from jsondoc.registry import Registry

    registry = (
        Registry()
        .register_name(MyStruct1, "my-struct")
        .register_schema(MyStruct2, {"PhantomField": "<my-type>"})
    )
    derived = registry.clone().register_name(Other, "other")  # registry is untouched
    ```

Notes:
    - Registration is a configuration-time operation. A registry may be read
      by several concurrent ``describe`` calls as long as nobody mutates it
      while they run.
    - Registering a type twice replaces the earlier entry (last write wins).
    - Lookups canonicalize the type first and then match exactly: there is no
      subclass or prefix matching.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from jsondoc.config.logging import get_logger
from jsondoc.core.nodes import Atom, DescriptionNode, Verbatim
from jsondoc.core.types import canonical_type, qualified_name, type_key
from jsondoc.registry.defaults import DEFAULT_NAMES

if TYPE_CHECKING:
    from collections.abc import Iterator

    from jsondoc.config.logging import JsonDocLogger

logger: JsonDocLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class NameOverride:
    """Describe a type with a placeholder name.

    Attributes:
        name: The bare name; the description is ``"<name>"``.
    """

    name: str

    @property
    def node(self) -> DescriptionNode:
        """The description served for the registered type."""
        return Atom.named(self.name)


@dataclass(frozen=True, slots=True)
class SchemaOverride:
    """Describe a type with a literal, caller-supplied description tree.

    Attributes:
        tree: A `DescriptionNode`, or JSON-like data (possibly containing
            nodes) that is rendered as-is.
    """

    tree: object

    @property
    def node(self) -> DescriptionNode:
        """The description served for the registered type."""
        if isinstance(self.tree, DescriptionNode):
            return self.tree
        return Verbatim(self.tree)


RegistryEntry = NameOverride | SchemaOverride


@dataclass(frozen=True, slots=True)
class EntryView:
    """Serializable view of one registry entry.

    Attributes:
        type_name: Qualified name of the registered type.
        entry: The registered override.
    """

    type_name: str
    entry: RegistryEntry

    def to_dict(self) -> dict[str, object]:
        """Return the view as a JSON-friendly mapping."""
        return {"type": self.type_name, "description": self.entry.node.to_value()}


class Registry:
    """Mapping from canonical type identity to a description override.

    A fresh registry is pre-loaded with the entries of
    [`DEFAULT_NAMES`][jsondoc.registry.defaults.DEFAULT_NAMES]; use
    [`Registry.empty`][jsondoc.registry.registry.Registry.empty] for one
    without defaults. All mutators return the registry itself so that
    registrations can be chained.
    """

    __slots__ = ("_entries", "_types")

    def __init__(self, *, defaults: bool = True) -> None:
        self._entries: dict[Any, RegistryEntry] = {}
        self._types: dict[Any, Any] = {}
        if defaults:
            for tp, name in DEFAULT_NAMES:
                self.register_name(tp, name)

    @classmethod
    def empty(cls) -> Registry:
        """Return a registry without any default entry."""
        return cls(defaults=False)

    def _store(self, tp: Any, entry: RegistryEntry) -> Registry:
        canonical = canonical_type(tp)
        key = type_key(canonical)
        if key in self._entries:
            logger.debug("Replacing registry entry for %s", qualified_name(canonical))
        self._entries[key] = entry
        self._types[key] = canonical
        return self

    def register_name(self, tp: Any, name: str) -> Registry:
        """Describe ``tp`` as the placeholder ``"<name>"``.

        Args:
            tp: The type to name; indirection layers are stripped.
            name: The bare placeholder name, e.g. ``"my-struct"``.

        Returns:
            Registry: This registry, for chaining.
        """
        return self._store(tp, NameOverride(name))

    def register_schema(self, tp: Any, tree: object) -> Registry:
        """Describe ``tp`` with a literal description tree.

        The tree is stored verbatim and never traversed. It must be
        representable as JSON for rendering to succeed.

        Args:
            tp: The type to document; indirection layers are stripped.
            tree: A `DescriptionNode` or JSON-like data.

        Returns:
            Registry: This registry, for chaining.
        """
        return self._store(tp, SchemaOverride(tree))

    def lookup(self, tp: Any) -> RegistryEntry | None:
        """Return the entry registered for ``tp``, if any.

        Args:
            tp: Any type expression; it is canonicalized before lookup.

        Returns:
            RegistryEntry | None: The exact-match entry, or ``None``.
        """
        return self._entries.get(type_key(canonical_type(tp)))

    def clone(self) -> Registry:
        """Return an independent copy of this registry.

        Entries are immutable, so the copy shares them; the mappings holding
        them are not shared.
        """
        clone = Registry.empty()
        clone._entries = dict(self._entries)
        clone._types = dict(self._types)
        return clone

    def __contains__(self, tp: object) -> bool:
        return self.lookup(tp) is not None

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Registry(entries={len(self._entries)})"

    def iter_entries(self) -> Iterator[EntryView]:
        """Iterate over all entries, sorted by qualified type name.

        Yields:
            EntryView: One view per registered type.
        """
        views = [
            EntryView(type_name=qualified_name(self._types[key]), entry=entry)
            for key, entry in self._entries.items()
        ]
        yield from sorted(views, key=lambda view: view.type_name)
