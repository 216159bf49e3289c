# topmark:header:start
#
#   project      : JsonDoc
#   file         : shapes.py
#   file_relpath : src/jsondoc/core/machine/shapes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Envelope and record shapes for machine output.

Two shapes exist:

- a JSON envelope, ``{"meta": {...}, <name>: <payload>, ...}``, printed as a
  single document (several descriptions, the registry listing, the version);
- an NDJSON record, ``{"kind": <kind>, "meta": {...}, <payload keys>...}``,
  printed one per line.

Builders here only arrange plain data; `serializers` turns it into text.
"""

from __future__ import annotations

from collections.abc import Mapping

from jsondoc.core.machine.schemas import MachineKey, MetaPayload, normalize_payload


def build_json_envelope(*, meta: MetaPayload, **payloads: object) -> dict[str, object]:
    """Wrap named payloads in an envelope headed by ``meta``.

    Args:
        meta: Tool metadata.
        **payloads: Payloads keyed by their envelope name (``descriptions``, ``entries``...).

    Returns:
        The envelope, with every payload normalized to plain data.
    """
    envelope: dict[str, object] = {MachineKey.META: dict(meta)}
    envelope.update({name: normalize_payload(value) for name, value in payloads.items()})
    return envelope


def build_ndjson_record(
    *,
    kind: str,
    meta: MetaPayload,
    payload: Mapping[str, object],
) -> dict[str, object]:
    """Build one NDJSON record.

    The payload keys sit next to ``kind`` and ``meta`` rather than under a
    container key, so a description record reads
    ``{"kind": "description", "meta": ..., "type": ..., "description": ...}``.

    Args:
        kind: Record kind, one of `MachineKind`.
        meta: Tool metadata.
        payload: Keys merged into the record.

    Returns:
        The record as plain data.
    """
    record: dict[str, object] = {MachineKey.KIND: kind, MachineKey.META: dict(meta)}
    record.update({key: normalize_payload(value) for key, value in payload.items()})
    return record
