# topmark:header:start
#
#   project      : JsonDoc
#   file         : defaults.py
#   file_relpath : src/jsondoc/registry/defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Default name overrides loaded into every new [`Registry`][jsondoc.registry.Registry].

These types either cannot be introspected structurally or are conventionally
encoded as strings before transport (raw bytes as base64, timestamps as
ISO 8601, arbitrary-precision numbers as decimal strings). The list is data:
changing it never affects the engine.
"""

from __future__ import annotations

import datetime
import decimal
import fractions
import ipaddress
import pathlib
import uuid
from typing import Final

DEFAULT_NAMES: Final[tuple[tuple[type, str], ...]] = (
    # raw bytes are base64-encoded before transport
    (bytes, "base64-string"),
    (bytearray, "base64-string"),
    (memoryview, "base64-string"),
    # errors
    (BaseException, "error"),
    (Exception, "error"),
    # time
    (datetime.datetime, "timestamp"),
    (datetime.date, "date"),
    (datetime.time, "time-of-day"),
    (datetime.timedelta, "duration"),
    # network
    (ipaddress.IPv4Address, "ip-address"),
    (ipaddress.IPv6Address, "ip-address"),
    (ipaddress.IPv4Network, "ip-network"),
    (ipaddress.IPv6Network, "ip-network"),
    (ipaddress.IPv4Interface, "ip-interface"),
    (ipaddress.IPv6Interface, "ip-interface"),
    # arbitrary precision numbers
    (decimal.Decimal, "decimal-string"),
    (fractions.Fraction, "fraction-string"),
    # identifiers and paths
    (uuid.UUID, "uuid"),
    (pathlib.PurePath, "path"),
    (pathlib.Path, "path"),
    (pathlib.PurePosixPath, "path"),
    (pathlib.PureWindowsPath, "path"),
    (pathlib.PosixPath, "path"),
    (pathlib.WindowsPath, "path"),
)
