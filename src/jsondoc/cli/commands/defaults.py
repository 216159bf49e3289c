# topmark:header:start
#
#   project      : JsonDoc
#   file         : defaults.py
#   file_relpath : src/jsondoc/cli/commands/defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonDoc `defaults` command.

Lists the registry entries every description starts from: the built-in
defaults plus, unless ``--no-config`` is given, the configured overrides.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jsondoc.cli.config_resolver import resolve_config, resolve_registry
from jsondoc.cli.errors import from_core_error
from jsondoc.cli.options import config_options, output_format_option
from jsondoc.core.errors import JsonDocError
from jsondoc.core.formats import OutputFormat
from jsondoc.core.machine.payloads import build_meta_payload
from jsondoc.core.machine.schemas import MachineKey, MachineKind
from jsondoc.core.machine.serializers import iter_ndjson_strings, serialize_json_object
from jsondoc.core.machine.shapes import build_json_envelope, build_ndjson_record

if TYPE_CHECKING:
    from jsondoc.cli.console_api import ConsoleLike
    from jsondoc.registry import EntryView


def _render_markdown(views: list[EntryView]) -> str:
    lines = ["# JsonDoc registry", "", "| Type | Description |", "|------|-------------|"]
    for view in views:
        described = serialize_json_object(view.entry.node, indent=None)
        lines.append(f"| `{view.type_name}` | `{described}` |")
    return "\n".join(lines) + "\n"


def _render_text(views: list[EntryView], console: ConsoleLike) -> str:
    width = max((len(view.type_name) for view in views), default=0)
    lines: list[str] = []
    for view in views:
        described = serialize_json_object(view.entry.node, indent=None)
        lines.append(f"{console.styled(view.type_name.ljust(width), bold=True)}  {described}")
    return "\n".join(lines) + "\n"


@click.command(
    name="defaults",
    help="List the registry entries applied before any type is inspected.",
)
@config_options
@output_format_option
def defaults_command(
    *,
    config_path: str | None,
    no_config: bool,
    output_format: OutputFormat | None,
) -> None:
    """List the registry entries in effect.

    Without ``--format``, entries are printed as an aligned plain-text listing.

    Args:
        config_path (str | None): Explicit configuration file.
        no_config (bool): Skip configuration discovery.
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    try:
        config = resolve_config(config_path=config_path, no_config=no_config)
        views = list(resolve_registry(config, ()).iter_entries())

        if output_format is OutputFormat.JSON:
            envelope = build_json_envelope(meta=build_meta_payload(), **{MachineKey.ENTRIES: views})
            text = serialize_json_object(envelope) + "\n"
        elif output_format is OutputFormat.NDJSON:
            meta = build_meta_payload()
            records = (
                build_ndjson_record(kind=MachineKind.ENTRY, meta=meta, payload=view.to_dict())
                for view in views
            )
            text = "".join(f"{line}\n" for line in iter_ndjson_strings(records))
        elif output_format is OutputFormat.MARKDOWN:
            text = _render_markdown(views)
        else:
            text = _render_text(views, console)
    except JsonDocError as exc:
        raise from_core_error(exc) from exc

    console.print(text, nl=False)
