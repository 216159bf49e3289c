# topmark:header:start
#
#   project      : JsonDoc
#   file         : __init__.py
#   file_relpath : src/jsondoc/core/machine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Rendering of description trees to text.

Separation of concerns (naming + placement):

1) Schema primitives (keys/kinds + meta payload type)
   - [`jsondoc.core.machine.schemas`][jsondoc.core.machine.schemas]

2) Payload builders (domain data only; no envelope/kind/meta)
   - [`jsondoc.core.machine.payloads`][jsondoc.core.machine.payloads]
   - Naming: `build_*_payload(...)`

3) Shape builders (envelopes and NDJSON records; still not serialized)
   - [`jsondoc.core.machine.shapes`][jsondoc.core.machine.shapes]

4) Serialization (turn shapes into strings; no printing)
   - [`jsondoc.core.machine.serializers`][jsondoc.core.machine.serializers]
   - Every JSON document is written with sorted keys, so renderings are
     deterministic.
   - Encoder failures surface as
     [`DescriptionEncodeError`][jsondoc.core.errors.DescriptionEncodeError].

Rule of thumb:
- If it imports `ConsoleLike` or `click`, it does not live in `core.machine`.
"""

from __future__ import annotations

from jsondoc.core.machine.schemas import MachineKey, MachineKind, MetaPayload
from jsondoc.core.machine.serializers import (
    iter_ndjson_strings,
    serialize_description,
    serialize_json_envelope,
    serialize_json_object,
    serialize_markdown,
    serialize_ndjson,
)
from jsondoc.core.machine.shapes import build_json_envelope, build_ndjson_record

__all__ = [
    "MachineKey",
    "MachineKind",
    "MetaPayload",
    "build_json_envelope",
    "build_ndjson_record",
    "iter_ndjson_strings",
    "serialize_description",
    "serialize_json_envelope",
    "serialize_json_object",
    "serialize_markdown",
    "serialize_ndjson",
]
