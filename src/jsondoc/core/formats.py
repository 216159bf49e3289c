# topmark:header:start
#
#   project      : JsonDoc
#   file         : formats.py
#   file_relpath : src/jsondoc/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared output format definitions used across JsonDoc frontends.

This module centralizes the `OutputFormat` enum so the CLI, the config layer
and the renderers agree on the same format vocabulary without introducing
`Click` or console dependencies.
"""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for rendered descriptions.

    Attributes:
        JSON: A single JSON document. One target renders as its bare
            description tree; several targets render as an envelope.
        NDJSON: One JSON record per described type.
        MARKDOWN: A Markdown document with one fenced JSON block per type.

    Notes:
        - Machine formats (``JSON`` and ``NDJSON``) never include ANSI color.
        - Use with [`jsondoc.cli.cli_types.EnumChoiceParam`][] to parse
          ``--format`` from Click.
    """

    # Machine formats:
    JSON = "json"
    NDJSON = "ndjson"

    # Human formats:
    MARKDOWN = "markdown"


def is_machine_format(fmt: OutputFormat | None) -> bool:
    """Return True for formats intended for machine consumption.

    Args:
        fmt: the output format to be checked.

    Returns:
        `True` if the format provided is a machine format, else `False`.
    """
    return fmt in {OutputFormat.JSON, OutputFormat.NDJSON}
