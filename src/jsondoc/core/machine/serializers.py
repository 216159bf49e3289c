# topmark:header:start
#
#   project      : JsonDoc
#   file         : serializers.py
#   file_relpath : src/jsondoc/core/machine/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Pure JSON/NDJSON/Markdown serialization of description trees.

This module converts description trees and *already-shaped* machine output
objects (envelopes or NDJSON record mappings) into strings.

It is intentionally:
- Console-free (no `ConsoleLike`, no printing)
- Click-free
- side-effect-free (serialization only)

Conventions:
- Object keys are always sorted, so the same tree always renders identically.
- Non-ASCII text is written as-is (no ``\\uXXXX`` escaping).
- `serialize_description()` ends with a trailing newline, like a stream encoder.
- `serialize_json_object()` does not append a trailing newline.
- `serialize_ndjson()` returns a string that *does* end with a final `\\n`.
- Any encoder failure is raised as `DescriptionEncodeError`.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from jsondoc.constants import DEFAULT_INDENT
from jsondoc.core.errors import DescriptionEncodeError
from jsondoc.core.machine.payloads import (
    build_description_payload,
    build_descriptions_payload,
)
from jsondoc.core.machine.schemas import MachineKey, MachineKind, MetaPayload
from jsondoc.core.machine.shapes import build_json_envelope, build_ndjson_record
from jsondoc.core.nodes import to_json_value

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from jsondoc.core.nodes import DescriptionNode


def _dumps(obj: object, *, indent: int | None) -> str:
    try:
        return json.dumps(
            obj,
            indent=indent,
            sort_keys=True,
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as exc:
        raise DescriptionEncodeError(f"description is not JSON-encodable: {exc}") from exc


def serialize_json_object(obj: object, *, indent: int | None = DEFAULT_INDENT) -> str:
    """Serialize plain data (or a tree) to pretty-printed JSON (no trailing newline).

    Args:
        obj: The object to serialize; description nodes are expanded.
        indent: Indentation width; ``None`` renders on a single line.

    Returns:
        A JSON string with sorted keys (no trailing newline).

    Raises:
        DescriptionEncodeError: If ``obj`` contains values JSON cannot represent.
    """
    return _dumps(to_json_value(obj), indent=indent)


def serialize_description(node: DescriptionNode, *, indent: int | None = DEFAULT_INDENT) -> str:
    """Render a description tree as JSON text.

    Args:
        node: The description tree.
        indent: Indentation width; ``None`` renders on a single line.

    Returns:
        The JSON text, ending with a newline.

    Raises:
        DescriptionEncodeError: If a schema override payload is not JSON-encodable.
    """
    return serialize_json_object(node, indent=indent) + "\n"


def serialize_json_envelope(
    meta: MetaPayload,
    items: Iterable[tuple[str, DescriptionNode]],
    *,
    indent: int | None = DEFAULT_INDENT,
) -> str:
    """Serialize several descriptions as one JSON envelope.

    Shape: `{"meta": {...}, "descriptions": {<type name>: <tree>, ...}}`

    Args:
        meta: Metadata payload (tool/version).
        items: `(type name, description)` pairs.
        indent: Indentation width.

    Returns:
        Pretty-printed JSON string (no trailing newline).
    """
    envelope: dict[str, object] = build_json_envelope(
        meta=meta,
        **{MachineKey.DESCRIPTIONS: build_descriptions_payload(items)},
    )
    return serialize_json_object(envelope, indent=indent)


def iter_ndjson_strings(records: Iterable[Mapping[str, object]]) -> Iterator[str]:
    r"""Serialize shaped NDJSON records into per-line JSON strings.

    Args:
        records: Shaped NDJSON record mappings.

    Yields:
        One JSON string per record (no trailing newline).
    """
    for record in records:
        yield _dumps(record, indent=None)


def serialize_ndjson(
    meta: MetaPayload,
    items: Iterable[tuple[str, DescriptionNode]],
) -> str:
    """Serialize descriptions as NDJSON, one `description` record per type.

    Args:
        meta: Metadata payload (tool/version).
        items: `(type name, description)` pairs.

    Returns:
        A string containing one JSON object per line, ending with a trailing newline.
    """
    records = (
        build_ndjson_record(
            kind=MachineKind.DESCRIPTION,
            meta=meta,
            payload=build_description_payload(type_name, node),
        )
        for type_name, node in items
    )
    return "\n".join(iter_ndjson_strings(records)) + "\n"


def serialize_markdown(
    items: Iterable[tuple[str, DescriptionNode]],
    *,
    title: str | None = None,
    indent: int | None = DEFAULT_INDENT,
) -> str:
    """Render descriptions as a Markdown document.

    Each type gets a second-level heading followed by a fenced ``json`` block.

    Args:
        items: `(type name, description)` pairs.
        title: Optional first-level heading.
        indent: Indentation width of the JSON blocks.

    Returns:
        The Markdown text, ending with a newline.
    """
    parts: list[str] = []
    if title:
        parts.append(f"# {title}\n")
    for type_name, node in items:
        parts.append(f"## `{type_name}`\n")
        parts.append(f"```json\n{serialize_description(node, indent=indent)}```\n")
    return "\n".join(parts)
