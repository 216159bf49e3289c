# topmark:header:start
#
#   project      : JsonDoc
#   file         : payloads.py
#   file_relpath : src/jsondoc/core/machine/payloads.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Payload builders for machine-readable output.

“Payload” here means: the *domain object* that will be inserted into a JSON
envelope (top-level JSON output) or into an NDJSON record (streaming output).

This module is intentionally:
- Click-free
- Console-free
- serialization-free (no `json.dumps`)
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from jsondoc.constants import JSONDOC, JSONDOC_VERSION
from jsondoc.core.machine.schemas import MachineKey, MetaPayload

if TYPE_CHECKING:
    from collections.abc import Iterable

    from jsondoc.core.nodes import DescriptionNode


@lru_cache(maxsize=1)
def build_meta_payload() -> MetaPayload:
    """Build a small metadata payload with tool name and version.

    This payload is stable for the lifetime of the running process, so it is
    cached to avoid recreating identical dict objects across serializers.

    Returns:
        Mapping with keys `"tool"`, `"version"`, and `"platform"`.
    """
    import sys

    return MetaPayload(
        tool=JSONDOC,
        version=JSONDOC_VERSION,
        platform=sys.platform,
    )


def build_description_payload(type_name: str, node: DescriptionNode) -> dict[str, object]:
    """Build the payload of one described type.

    Args:
        type_name: Qualified name of the described type.
        node: Its description tree.

    Returns:
        `{"type": ..., "description": ...}` with the tree converted to plain data.
    """
    return {MachineKey.TYPE: type_name, MachineKey.DESCRIPTION: node.to_value()}


def build_descriptions_payload(
    items: Iterable[tuple[str, DescriptionNode]],
) -> dict[str, object]:
    """Build a `type name -> description` mapping for a JSON envelope."""
    return {type_name: node.to_value() for type_name, node in items}
