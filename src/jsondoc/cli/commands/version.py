# topmark:header:start
#
#   project      : JsonDoc
#   file         : version.py
#   file_relpath : src/jsondoc/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonDoc `version` command.

Prints the current JsonDoc version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jsondoc.cli.options import output_format_option
from jsondoc.constants import JSONDOC_VERSION
from jsondoc.core.formats import OutputFormat
from jsondoc.core.machine.payloads import build_meta_payload
from jsondoc.core.machine.schemas import MachineKey, MachineKind
from jsondoc.core.machine.serializers import iter_ndjson_strings, serialize_json_object
from jsondoc.core.machine.shapes import build_json_envelope, build_ndjson_record

if TYPE_CHECKING:
    from jsondoc.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of JsonDoc.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of JsonDoc.

    Args:
        output_format (OutputFormat | None): Optional output format; plain text when omitted.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if output_format is OutputFormat.JSON:
        envelope = build_json_envelope(
            meta=build_meta_payload(), **{MachineKey.VERSION: JSONDOC_VERSION}
        )
        console.print(serialize_json_object(envelope))
    elif output_format is OutputFormat.NDJSON:
        record = build_ndjson_record(
            kind=MachineKind.VERSION,
            meta=build_meta_payload(),
            payload={MachineKey.VERSION: JSONDOC_VERSION},
        )
        console.print(next(iter_ndjson_strings([record])))
    elif output_format is OutputFormat.MARKDOWN:
        console.print("# JsonDoc Version\n")
        console.print(f"**JsonDoc version: {JSONDOC_VERSION}**")
    else:
        console.print(console.styled(JSONDOC_VERSION, bold=True))
