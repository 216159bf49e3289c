# topmark:header:start
#
#   project      : JsonDoc
#   file         : __init__.py
#   file_relpath : src/jsondoc/engine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Description engine: public entry points.

[`Engine`][jsondoc.engine.Engine] binds a registry; every call to
[`Engine.describe`][jsondoc.engine.Engine.describe] runs a fresh
[`Traversal`][jsondoc.engine.traversal.Traversal] with its own memo table, so
an engine (and its registry) can serve independent, concurrent calls.

Typical usage:
    ```python
    from jsondoc.engine import Engine

    engine = Engine()
    tree = engine.describe(Person)        # DescriptionNode
    text = engine.describe_as_text(Person)  # JSON text, sorted keys
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from jsondoc.config.logging import get_logger
from jsondoc.constants import DEFAULT_INDENT
from jsondoc.core.machine.serializers import serialize_description
from jsondoc.core.types import qualified_name
from jsondoc.engine.traversal import Traversal
from jsondoc.registry import Registry

if TYPE_CHECKING:
    from jsondoc.config.logging import JsonDocLogger
    from jsondoc.core.nodes import DescriptionNode

logger: JsonDocLogger = get_logger(__name__)

__all__ = [
    "Engine",
    "Traversal",
    "describe",
    "describe_as_text",
]


class Engine:
    """Describe types against a fixed registry.

    Args:
        registry: Overrides to consult; a default registry when omitted.

    Attributes:
        registry: The registry in use. Do not mutate it while a call runs.
    """

    __slots__ = ("registry",)

    def __init__(self, registry: Registry | None = None) -> None:
        self.registry: Registry = registry if registry is not None else Registry()

    def describe(self, tp: Any) -> DescriptionNode:
        """Return the description tree of ``tp``.

        Never fails for a finite type graph; self-referential types are
        truncated with ``"..."`` at the point where the cycle is re-entered.

        Args:
            tp: Any type expression (class, generic alias, ``Optional``, ...).

        Returns:
            DescriptionNode: The description tree.
        """
        logger.debug("Describing %s", qualified_name(tp))
        traversal = Traversal(self.registry)
        node = traversal.describe(tp)
        logger.trace("Described %s using %d memo cell(s)", qualified_name(tp), len(traversal.memo))
        return node

    def describe_as_text(self, tp: Any, *, indent: int | None = DEFAULT_INDENT) -> str:
        """Return the description of ``tp`` rendered as JSON text.

        Args:
            tp: Any type expression.
            indent: Indentation width; ``None`` renders on a single line.

        Returns:
            str: JSON text with sorted keys and a trailing newline.

        Raises:
            DescriptionEncodeError: If a schema override is not JSON-encodable.
        """
        return serialize_description(self.describe(tp), indent=indent)


def describe(tp: Any, registry: Registry | None = None) -> DescriptionNode:
    """Describe ``tp`` with ``registry`` (a default registry when omitted)."""
    return Engine(registry).describe(tp)


def describe_as_text(
    tp: Any,
    registry: Registry | None = None,
    *,
    indent: int | None = DEFAULT_INDENT,
) -> str:
    """Describe ``tp`` and render the result as JSON text."""
    return Engine(registry).describe_as_text(tp, indent=indent)
