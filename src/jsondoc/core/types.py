# topmark:header:start
#
#   project      : JsonDoc
#   file         : types.py
#   file_relpath : src/jsondoc/core/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime type introspection for the description engine.

This module answers three questions about a Python type expression:

- *Which identity does it have?* [`canonical_type`][jsondoc.core.types.canonical_type]
  strips indirection layers (``Annotated``, ``Optional``, ``Final``, TypedDict
  qualifiers, PEP 695 aliases) so that ``Node`` and ``Node | None`` are looked
  up and memoized under the same key.
- *Which shape does it have?* [`classify`][jsondoc.core.types.classify] maps it
  onto the closed [`TypeShape`][jsondoc.core.types.TypeShape] enumeration.
- *What does it contain?* `iter_members`, `sequence_element` and
  `mapping_items` expose member, element, key and value types.

The module is pure: it never describes anything itself and never touches the
registry.
"""

from __future__ import annotations

import collections
import collections.abc as cabc
import dataclasses
import inspect
import sys
import types
import typing
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Annotated, Any, Final, Literal, Union, get_args, get_origin

from jsondoc.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Mapping

    from jsondoc.config.logging import JsonDocLogger

logger: JsonDocLogger = get_logger(__name__)

NoneType: Final[type] = type(None)

#: Field metadata key holding a member tag on dataclass fields.
TAG_KEY: Final[str] = "jsondoc"

#: Name in a member tag that excludes the member.
EXCLUDE_NAME: Final[str] = "-"

# Qualifier forms that wrap a type without changing its JSON shape.
_QUALIFIERS: Final[tuple[object, ...]] = tuple(
    form
    for form in (
        typing.Final,
        getattr(typing, "Required", None),
        getattr(typing, "NotRequired", None),
        getattr(typing, "ReadOnly", None),
    )
    if form is not None
)

if sys.version_info >= (3, 12):
    from typing import TypeAliasType as _TypeAliasType
else:  # pragma: no cover - depends on interpreter version
    _TypeAliasType = None

_UNION_ORIGINS: Final[tuple[object, ...]] = (Union, types.UnionType)

# Scalar kinds, checked in MRO-safe order (bool before int).
_SCALAR_KINDS: Final[tuple[tuple[type, str], ...]] = (
    (bool, "bool"),
    (int, "int"),
    (float, "float64"),
    (str, "string"),
    (NoneType, "null"),
)

# Bare classes whose elements are bytes.
_BYTE_SEQUENCES: Final[tuple[type, ...]] = (bytes, bytearray, memoryview)

# Iteration ABCs that are not Sequence/Set subclasses but still serialize as arrays.
_ITERABLE_ORIGINS: Final[tuple[type, ...]] = (
    cabc.Iterable,
    cabc.Iterator,
    cabc.Collection,
    cabc.Reversible,
    cabc.Generator,
)


class TypeShape(Enum):
    """Closed set of structural shapes a canonical type can take."""

    SCALAR = "scalar"
    AGGREGATE = "aggregate"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    DYNAMIC = "dynamic"
    NAMED = "named"


@dataclass(frozen=True, slots=True)
class MemberTag:
    """Per-member serialization tag.

    A tag can be attached to a dataclass field through its metadata
    (``field(metadata={"jsondoc": "delta,string"})``) or to any annotation
    through ``Annotated[int, MemberTag(name="delta")]``.

    Attributes:
        name: Externally visible name; ``None`` keeps the attribute name.
        exclude: If True the member contributes nothing to the description.
        as_string: Render a scalar member as a JSON string.
        omit_empty: Parsed for completeness; does not change the shape.
    """

    name: str | None = None
    exclude: bool = False
    as_string: bool = False
    omit_empty: bool = False

    @classmethod
    def parse(cls, text: str) -> MemberTag:
        """Parse the compact ``"name,opt,opt"`` form.

        ``"-"`` alone excludes the member, while ``"-,"`` names it ``"-"``.
        Unknown options are ignored.

        Args:
            text: The tag text.

        Returns:
            The parsed tag.
        """
        name, sep, rest = text.partition(",")
        if name == EXCLUDE_NAME and not sep:
            return cls(exclude=True)
        options: set[str] = {opt.strip() for opt in rest.split(",") if opt.strip()}
        return cls(
            name=name.strip() or None,
            as_string="string" in options,
            omit_empty="omitempty" in options,
        )

    @classmethod
    def coerce(cls, value: object) -> MemberTag | None:
        """Return ``value`` as a tag, parsing strings; ``None`` for anything else."""
        if isinstance(value, MemberTag):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        return None


@dataclass(frozen=True, slots=True)
class Member:
    """One member of an aggregate, in declaration order.

    Attributes:
        attr: Attribute (or key) name as declared.
        annotation: Resolved annotation, possibly still wrapped in indirection layers.
        tag: Effective member tag.
    """

    attr: str
    annotation: Any
    tag: MemberTag = MemberTag()

    @property
    def name(self) -> str:
        """Externally visible name."""
        return self.tag.name or self.attr

    @property
    def private(self) -> bool:
        """True if the member is not part of the public structural contract."""
        return self.attr.startswith("_")

    @property
    def excluded(self) -> bool:
        """True if a tag explicitly excludes the member."""
        return self.tag.exclude


class Unresolved:
    """Placeholder for an annotation that could not be evaluated."""

    __slots__ = ("text",)

    def __init__(self, text: str) -> None:
        self.text = text

    def __repr__(self) -> str:
        return f"Unresolved({self.text!r})"


# --- Identity ---


def _is_union(origin: object) -> bool:
    return origin in _UNION_ORIGINS


def canonical_type(tp: Any) -> Any:
    """Strip indirection layers from ``tp``.

    Removes, repeatedly: ``Annotated`` metadata, a single ``None`` arm of a union
    (``Optional``), ``Final``/``Required``/``NotRequired``/``ReadOnly`` qualifiers
    and PEP 695 type aliases. ``NewType`` is kept: it is a distinct identity.

    Args:
        tp: Any type expression. ``None`` stands for ``NoneType``.

    Returns:
        The canonical type expression.
    """
    while True:
        if tp is None:
            return NoneType
        origin = get_origin(tp)
        if origin is Annotated or origin in _QUALIFIERS:
            tp = get_args(tp)[0]
        elif _is_union(origin):
            args = get_args(tp)
            arms = [arg for arg in args if arg is not NoneType and arg is not None]
            if len(arms) != 1 or len(args) == 1:
                return tp
            tp = arms[0]
        elif _TypeAliasType is not None and isinstance(tp, _TypeAliasType):
            tp = tp.__value__
        else:
            return tp


def type_key(tp: Any) -> Any:
    """Return a hashable lookup key for a canonical type."""
    try:
        hash(tp)
    except TypeError:
        return ("unhashable", id(tp))
    return tp


def qualified_name(tp: Any) -> str:
    """Return ``module:Qualname`` for classes, ``repr`` for other type expressions."""
    if isinstance(tp, type) or isinstance(tp, typing.NewType):
        module: str | None = getattr(tp, "__module__", None)
        qualname: str = getattr(tp, "__qualname__", None) or getattr(tp, "__name__", repr(tp))
        return f"{module}:{qualname}" if module else qualname
    return repr(tp)


# --- Shape classification ---


def _value_kind(value: object) -> str | None:
    if isinstance(value, Enum):
        value = value.value
    for base, kind in _SCALAR_KINDS:
        if isinstance(value, base):
            return kind
    return None


def _single_kind(values: Iterator[object]) -> str | None:
    kinds: set[str | None] = {_value_kind(value) for value in values}
    if len(kinds) == 1:
        return kinds.pop()
    return None


def _is_namedtuple(tp: type) -> bool:
    return issubclass(tp, tuple) and hasattr(tp, "_fields")


def _is_protocol(tp: type) -> bool:
    return bool(getattr(tp, "_is_protocol", False))


def _is_mapping_class(tp: object) -> bool:
    return isinstance(tp, type) and issubclass(tp, cabc.Mapping)


def _is_sequence_class(tp: object) -> bool:
    if not isinstance(tp, type):
        return False
    if issubclass(tp, (str,)):
        return False
    return issubclass(tp, (cabc.Sequence, cabc.Set)) or tp in _ITERABLE_ORIGINS


def is_aggregate_class(tp: object) -> bool:
    """Return True for dataclasses, NamedTuple and TypedDict classes."""
    if not isinstance(tp, type):
        return False
    return dataclasses.is_dataclass(tp) or typing.is_typeddict(tp) or _is_namedtuple(tp)


def classify(tp: Any) -> TypeShape:
    """Classify a canonical type into a [`TypeShape`][jsondoc.core.types.TypeShape].

    Args:
        tp: A canonical type (see `canonical_type`).

    Returns:
        The structural shape of ``tp``.
    """
    if tp is Any or tp is object or isinstance(tp, (typing.TypeVar, Unresolved, str)):
        return TypeShape.DYNAMIC
    if isinstance(tp, typing.ForwardRef):
        return TypeShape.DYNAMIC
    if isinstance(tp, typing.NewType):
        return TypeShape.NAMED

    origin = get_origin(tp)
    if origin is Literal:
        return TypeShape.SCALAR if _single_kind(iter(get_args(tp))) else TypeShape.DYNAMIC
    if _is_union(origin):
        return TypeShape.DYNAMIC
    if origin is not None:
        if is_aggregate_class(origin):
            return TypeShape.AGGREGATE
        if origin is tuple or _is_sequence_class(origin):
            return TypeShape.SEQUENCE
        if _is_mapping_class(origin):
            return TypeShape.MAPPING
        if isinstance(origin, type) and classify(origin) is TypeShape.AGGREGATE:
            # User-defined generic class, e.g. ``Box[int]``.
            return TypeShape.AGGREGATE
        return TypeShape.SCALAR

    if not isinstance(tp, type):
        return TypeShape.DYNAMIC
    if issubclass(tp, Enum):
        return TypeShape.SCALAR if _single_kind(iter(tp)) else TypeShape.DYNAMIC
    if any(issubclass(tp, base) for base, _ in _SCALAR_KINDS):
        return TypeShape.SCALAR
    if is_aggregate_class(tp):
        return TypeShape.AGGREGATE
    if _is_mapping_class(tp):
        return TypeShape.MAPPING
    if _is_sequence_class(tp):
        return TypeShape.SEQUENCE
    if _is_protocol(tp) or inspect.isabstract(tp):
        return TypeShape.DYNAMIC
    if tp.__module__ == "builtins":
        return TypeShape.SCALAR
    return TypeShape.AGGREGATE


def scalar_kind(tp: Any) -> str:
    """Return the kind name of a scalar type (``"int"``, ``"float64"``, ...).

    Non-JSON scalars are named after their lower-cased class or origin name.
    """
    origin = get_origin(tp)
    if origin is Literal:
        return _single_kind(iter(get_args(tp))) or "object"
    if origin is not None:
        tp = origin
    if isinstance(tp, type):
        if issubclass(tp, Enum):
            return _single_kind(iter(tp)) or "object"
        for base, kind in _SCALAR_KINDS:
            if issubclass(tp, base):
                return kind
    name: str = getattr(tp, "__name__", None) or getattr(tp, "_name", None) or repr(tp)
    return name.lower()


# --- Contents ---


def _generic_base_args(tp: type, predicate: Callable[[object], bool]) -> tuple[Any, ...]:
    """Return the type arguments of the first parameterized container base of ``tp``."""
    for klass in tp.__mro__:
        for base in getattr(klass, "__orig_bases__", ()):
            base_origin = get_origin(base)
            if base_origin is not None and predicate(base_origin):
                return get_args(base)
    return ()


def sequence_element(tp: Any) -> Any:
    """Return the element type of a sequence type.

    Fixed-size tuples with a single distinct element type are homogeneous;
    heterogeneous tuples and unparameterized containers yield ``Any``.
    """
    origin = get_origin(tp)
    args = get_args(tp)
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return args[0]
        distinct: list[Any] = []
        for arg in args:
            if arg not in distinct:
                distinct.append(arg)
        return distinct[0] if len(distinct) == 1 else Any
    if origin is not None:
        return args[0] if args else Any
    if isinstance(tp, type):
        if issubclass(tp, _BYTE_SEQUENCES):
            return int
        base_args = _generic_base_args(tp, _is_sequence_class)
        if base_args:
            return base_args[0]
    return Any


def mapping_items(tp: Any) -> tuple[Any, Any]:
    """Return the ``(key, value)`` types of a mapping type."""
    origin = get_origin(tp)
    args = get_args(tp)
    target = origin if origin is not None else tp
    if isinstance(target, type) and issubclass(target, collections.Counter):
        return (args[0] if args else Any), int
    if len(args) == 2:
        return args[0], args[1]
    if origin is None and isinstance(tp, type):
        base_args = _generic_base_args(tp, _is_mapping_class)
        if len(base_args) == 2:
            return base_args[0], base_args[1]
    return Any, Any


def newtype_supertype(tp: Any) -> Any:
    """Return the supertype a ``NewType`` wraps."""
    return tp.__supertype__


# --- Members ---


def _annotation_tag(annotation: Any) -> MemberTag | None:
    """Find a `MemberTag` in ``Annotated`` metadata, looking through indirection layers."""
    while True:
        origin = get_origin(annotation)
        if origin is Annotated:
            for meta in annotation.__metadata__:
                if isinstance(meta, MemberTag):
                    return meta
            annotation = get_args(annotation)[0]
        elif origin in _QUALIFIERS:
            annotation = get_args(annotation)[0]
        elif _is_union(origin):
            arms = [arg for arg in get_args(annotation) if arg is not NoneType]
            if len(arms) != 1:
                return None
            annotation = arms[0]
        else:
            return None


def _is_classvar(annotation: Any) -> bool:
    while get_origin(annotation) is Annotated:
        annotation = get_args(annotation)[0]
    return annotation is typing.ClassVar or get_origin(annotation) is typing.ClassVar


def _raw_annotations(tp: type) -> dict[str, Any]:
    raw: dict[str, Any] = {}
    for klass in reversed(tp.__mro__):
        raw.update(getattr(klass, "__annotations__", {}) or {})
    return raw


def _resolve_one(
    name: str, annotation: Any, globalns: dict[str, Any], localns: dict[str, Any]
) -> Any:
    if isinstance(annotation, typing.ForwardRef):
        annotation = annotation.__forward_arg__
    if not isinstance(annotation, str):
        return annotation
    # A one-member class keeps ClassVar/Final legal, as in a real class body.
    holder = type(f"_{name}_hint", (), {"__annotations__": {name: annotation}})
    try:
        return typing.get_type_hints(holder, globalns, localns, include_extras=True)[name]
    except (NameError, AttributeError, SyntaxError, TypeError) as exc:
        logger.warning("Cannot resolve annotation %r: %s", annotation, exc)
        return Unresolved(annotation)


def resolve_hints(tp: type) -> dict[str, Any]:
    """Resolve the annotations of ``tp``, forward references included.

    The class is always resolvable under its own name, so self-referential
    classes defined inside functions work. When a reference cannot be resolved
    the remaining annotations are resolved one by one and the failing ones are
    replaced with `Unresolved`.

    Args:
        tp: The class to inspect.

    Returns:
        Attribute name -> resolved annotation (``Annotated`` metadata kept).
    """
    localns: dict[str, Any] = {tp.__name__: tp}
    try:
        return typing.get_type_hints(tp, localns=localns, include_extras=True)
    except (NameError, AttributeError, SyntaxError, TypeError) as exc:
        logger.debug("Falling back to per-member resolution for %s: %s", qualified_name(tp), exc)
    module = sys.modules.get(tp.__module__)
    globalns: dict[str, Any] = dict(vars(module)) if module is not None else {}
    return {
        name: _resolve_one(name, annotation, globalns, localns)
        for name, annotation in _raw_annotations(tp).items()
    }


def _typevar_bindings(cls: type, args: tuple[Any, ...]) -> dict[Any, Any]:
    params: tuple[Any, ...] = getattr(cls, "__parameters__", ())
    return dict(zip(params, args))


def _substitute(annotation: Any, bindings: Mapping[Any, Any]) -> Any:
    """Replace bound TypeVars inside ``annotation`` (``list[T]`` -> ``list[int]``)."""
    if not bindings:
        return annotation
    if isinstance(annotation, typing.TypeVar):
        return bindings.get(annotation, annotation)
    params: tuple[Any, ...] = getattr(annotation, "__parameters__", ())
    if not params:
        return annotation
    try:
        return annotation[tuple(bindings.get(param, param) for param in params)]
    except TypeError:
        return annotation


def _bind_self(annotation: Any, owner: Any) -> Any:
    """Replace ``typing.Self`` inside ``annotation`` with ``owner``."""
    if annotation is typing.Self:
        return owner
    args = get_args(annotation)
    if not args:
        return annotation
    bound = tuple(_bind_self(arg, owner) for arg in args)
    if all(new is old for new, old in zip(bound, args)):
        return annotation
    origin = get_origin(annotation)
    if origin is Annotated:
        return Annotated[(bound[0], *annotation.__metadata__)]
    if _is_union(origin):
        return Union[bound]
    copy_with: Callable[[tuple[Any, ...]], Any] | None = getattr(annotation, "copy_with", None)
    try:
        return copy_with(bound) if copy_with is not None else origin[bound]
    except TypeError:
        return annotation


def _member(attr: str, annotation: Any, field_tag: object = None) -> Member:
    tag: MemberTag | None = MemberTag.coerce(field_tag) or _annotation_tag(annotation)
    return Member(attr=attr, annotation=annotation, tag=tag or MemberTag())


def iter_members(tp: Any) -> Iterator[Member]:
    """Yield the members of an aggregate type in declaration order.

    Private and excluded members are yielded too; filtering is the caller's
    decision. ``ClassVar`` annotations are not members. For a parameterized
    generic (``Box[int]``) the type arguments are substituted into the member
    annotations. ``typing.Self`` is bound to ``tp``.

    Args:
        tp: A dataclass, NamedTuple, TypedDict or annotated class, possibly
            parameterized.

    Yields:
        Member: One entry per declared member.
    """
    origin = get_origin(tp)
    cls: type = origin if origin is not None else tp
    bindings: dict[Any, Any] = _typevar_bindings(cls, get_args(tp)) if origin is not None else {}
    hints: dict[str, Any] = {
        name: _bind_self(_substitute(annotation, bindings), tp)
        for name, annotation in resolve_hints(cls).items()
    }
    if dataclasses.is_dataclass(cls):
        for f in dataclasses.fields(cls):
            yield _member(f.name, hints.get(f.name, f.type), f.metadata.get(TAG_KEY))
        return
    if _is_namedtuple(cls):
        for name in cls._fields:  # type: ignore[attr-defined]
            yield _member(name, hints.get(name, Any))
        return
    for name, annotation in hints.items():
        if _is_classvar(annotation):
            continue
        yield _member(name, annotation)
