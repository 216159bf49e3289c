# topmark:header:start
#
#   project      : JsonDoc
#   file         : schemas.py
#   file_relpath : src/jsondoc/core/machine/schemas.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical schema primitives for JsonDoc machine output.

This module centralizes:
- canonical *keys* used in JSON envelopes and NDJSON records (`MachineKey`)
- canonical NDJSON *kinds* (`MachineKind`)
- the metadata payload type (`MetaPayload`)
- payload normalization (`normalize_payload`)
"""

from __future__ import annotations

from enum import Enum
from pathlib import PurePath
from typing import Any, Final, TypedDict

from jsondoc.core.nodes import to_json_value


class MachineKey:
    """Canonical keys used in machine-readable JSON/NDJSON envelopes."""

    KIND: Final[str] = "kind"
    META: Final[str] = "meta"

    TYPE: Final[str] = "type"
    DESCRIPTION: Final[str] = "description"
    DESCRIPTIONS: Final[str] = "descriptions"
    ENTRIES: Final[str] = "entries"
    VERSION: Final[str] = "version"


class MachineKind:
    """Canonical `kind` values for NDJSON records."""

    DESCRIPTION: Final[str] = "description"
    ENTRY: Final[str] = "entry"
    VERSION: Final[str] = "version"


class MetaPayload(TypedDict):
    """Metadata describing the JsonDoc runtime environment for machine output."""

    tool: str
    version: str
    platform: str


def _adapt_payload_value(obj: object) -> object:
    if isinstance(obj, PurePath):
        return str(obj)
    if isinstance(obj, Enum):
        return obj.value
    to_dict: Any | None = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return obj


def normalize_payload(obj: object) -> object:
    """Normalize a payload into JSON-serializable structures.

    Conversions, applied at every depth:
      - `DescriptionNode` -> its `to_value()`
      - `PurePath` -> `str`
      - `Enum` -> `Enum.value`
      - object with callable `.to_dict()` -> normalized `.to_dict()`
      - `Mapping` -> `dict`, `list`/`tuple` -> `list`

    Mapping keys are left untouched; a non-string key in a schema override
    fails at encoding time.

    Args:
        obj: The payload object to normalize.

    Returns:
        A JSON-serializable representation of `obj` (anything unknown is
        passed through for the encoder to accept or reject).

    Raises:
        DescriptionEncodeError: If the payload contains a circular reference.
    """
    return to_json_value(obj, adapt=_adapt_payload_value)
