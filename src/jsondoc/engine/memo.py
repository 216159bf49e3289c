# topmark:header:start
#
#   project      : JsonDoc
#   file         : memo.py
#   file_relpath : src/jsondoc/engine/memo.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-traversal memo table with cycle detection.

Each canonical type visited during one ``describe`` call owns a
[`MemoCell`][jsondoc.engine.memo.MemoCell] that moves through:

```text
BUILDING_FULL --(re-entered)--> BUILDING_SHALLOW --(done)--> SHALLOW_DONE
      |                                                           |
      +-----------------------(done)-------> FULL_DONE <--(done)--+
```

- Re-entry in ``BUILDING_FULL`` proves a cycle: the cell switches to
  ``BUILDING_SHALLOW`` and the type is resolved again from scratch.
- Re-entry in ``BUILDING_SHALLOW`` yields the recursion marker.
- Re-entry in ``SHALLOW_DONE`` yields the cached shallow result.
- Re-entry in ``FULL_DONE`` yields the cached full result.

The table belongs to one traversal and must never be shared across calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from jsondoc.config.logging import get_logger
from jsondoc.core.errors import MemoInvariantError

if TYPE_CHECKING:
    from jsondoc.config.logging import JsonDocLogger
    from jsondoc.core.nodes import DescriptionNode

logger: JsonDocLogger = get_logger(__name__)


class MemoState(Enum):
    """Progress of one type's description within a traversal."""

    BUILDING_FULL = "building-full"
    BUILDING_SHALLOW = "building-shallow"
    SHALLOW_DONE = "shallow-done"
    FULL_DONE = "full-done"


@dataclass(slots=True)
class MemoCell:
    """Memo entry for one canonical type.

    Attributes:
        label: Human-readable type name, for logging.
        state: Current state.
        shallow: Description with the cycle truncated, once known.
        full: Complete description, once known.
    """

    label: str
    state: MemoState = MemoState.BUILDING_FULL
    shallow: DescriptionNode | None = None
    full: DescriptionNode | None = None

    def settle(self, node: DescriptionNode) -> DescriptionNode:
        """Record a finished resolution pass and advance the state.

        Args:
            node: The description produced by the pass that just finished.

        Returns:
            DescriptionNode: ``node``, unchanged.

        Raises:
            MemoInvariantError: If the cell was already ``FULL_DONE``.
        """
        if self.state is MemoState.BUILDING_SHALLOW:
            self.shallow = node
            self.state = MemoState.SHALLOW_DONE
            logger.trace("memo %s: shallow description done", self.label)
        elif self.state in (MemoState.BUILDING_FULL, MemoState.SHALLOW_DONE):
            self.full = node
            self.state = MemoState.FULL_DONE
            logger.trace("memo %s: full description done", self.label)
        else:
            raise MemoInvariantError(
                f"impossible memo state: {self.label} settled twice ({self.state.value})"
            )
        return node


class MemoTable:
    """Memo cells of a single traversal, keyed by canonical type identity."""

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: dict[Any, MemoCell] = {}

    def get(self, key: Any) -> MemoCell | None:
        """Return the cell for ``key``, if the type was visited."""
        return self._cells.get(key)

    def open(self, key: Any, label: str) -> MemoCell:
        """Create the cell for a first visit, in ``BUILDING_FULL``.

        Raises:
            MemoInvariantError: If a cell already exists for ``key``.
        """
        if key in self._cells:
            raise MemoInvariantError(f"memo cell for {label} opened twice")
        cell = MemoCell(label=label)
        self._cells[key] = cell
        return cell

    def __len__(self) -> int:
        return len(self._cells)
