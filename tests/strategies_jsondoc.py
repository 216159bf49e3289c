# topmark:header:start
#
#   project      : JsonDoc
#   file         : strategies_jsondoc.py
#   file_relpath : tests/strategies_jsondoc.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating finite, possibly cyclic, class graphs.

A generated graph is a list of annotated classes ``C0 .. Cn``. Every member
refers either to a scalar or to another class of the same graph, possibly
through ``list``, ``dict``, ``Optional`` or ``Annotated`` wrappers. Member
annotations are real objects, not strings, so resolution never depends on
module globals.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Annotated, Any, Optional

from hypothesis import strategies as st

Draw = Callable[[st.SearchStrategy[Any]], Any]

SCALARS: tuple[type, ...] = (int, float, str, bool)

WRAPPERS: tuple[str, ...] = ("plain", "list", "dict", "optional", "annotated")


@dataclass(frozen=True)
class MemberSpec:
    """One generated member: a scalar or a reference to another class, wrapped."""

    name: str
    target: int | type
    wrapper: str


@dataclass(frozen=True)
class GraphSpec:
    """Member specs of every class in a generated graph."""

    classes: tuple[tuple[MemberSpec, ...], ...]

    @property
    def edges(self) -> dict[int, set[int]]:
        """Class index -> indices of the classes it references."""
        return {
            index: {m.target for m in members if isinstance(m.target, int)}
            for index, members in enumerate(self.classes)
        }

    def has_cycle_from(self, start: int) -> bool:
        """Return True if a cycle is reachable from class ``start``."""
        edges = self.edges
        state: dict[int, int] = {}  # 1 = on stack, 2 = done

        def visit(index: int) -> bool:
            state[index] = 1
            for nxt in edges[index]:
                if state.get(nxt) == 1:
                    return True
                if nxt not in state and visit(nxt):
                    return True
            state[index] = 2
            return False

        return visit(start)


def _wrap(tp: Any, wrapper: str) -> Any:
    if wrapper == "list":
        return list[tp]
    if wrapper == "dict":
        return dict[str, tp]
    if wrapper == "optional":
        return Optional[tp]
    if wrapper == "annotated":
        return Annotated[tp, "generated"]
    return tp


@st.composite
def graph_specs(draw: Draw, *, max_classes: int = 5, acyclic: bool = False) -> GraphSpec:
    """Draw a graph of up to ``max_classes`` classes.

    Args:
        draw: Hypothesis draw function.
        max_classes: Upper bound on the number of classes.
        acyclic: Only allow references to classes with a higher index.

    Returns:
        GraphSpec: The generated graph description.
    """
    count: int = draw(st.integers(min_value=1, max_value=max_classes))
    classes: list[tuple[MemberSpec, ...]] = []
    for index in range(count):
        if acyclic:
            candidates = list(range(index + 1, count))
        else:
            candidates = list(range(count))
        targets: st.SearchStrategy[int | type] = st.sampled_from(SCALARS)
        if candidates:
            targets = st.one_of(st.sampled_from(SCALARS), st.sampled_from(candidates))
        member_count: int = draw(st.integers(min_value=0, max_value=4))
        members = tuple(
            MemberSpec(
                name=f"m{position}",
                target=draw(targets),
                wrapper=draw(st.sampled_from(WRAPPERS)),
            )
            for position in range(member_count)
        )
        classes.append(members)
    return GraphSpec(classes=tuple(classes))


def build_classes(spec: GraphSpec) -> list[type]:
    """Create the classes of ``spec`` and wire their annotations.

    Classes are created first with empty annotation dicts, which are filled
    once every class exists so that members may refer to any class.
    """
    annotations: list[dict[str, Any]] = [{} for _ in spec.classes]
    classes: list[type] = [
        type(f"C{index}", (), {"__annotations__": annotations[index], "__module__": __name__})
        for index in range(len(spec.classes))
    ]
    for index, members in enumerate(spec.classes):
        for member in members:
            target = classes[member.target] if isinstance(member.target, int) else member.target
            annotations[index][member.name] = _wrap(target, member.wrapper)
    return classes
