# topmark:header:start
#
#   project      : JsonDoc
#   file         : describe.py
#   file_relpath : src/jsondoc/cli/commands/describe.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonDoc `describe` command.

Describes one or more ``module:Qualname`` targets.

Input modes supported:
  * a single target in JSON format prints the bare description tree;
  * several targets in JSON format print one envelope
    ``{"meta": ..., "descriptions": {<type>: <tree>, ...}}``;
  * NDJSON prints one ``description`` record per target;
  * Markdown prints one fenced JSON block per target.

Examples:
  Describe a dataclass:

    $ jsondoc describe myapp.models:Person

  Describe two types, naming one of their dependencies:

    $ jsondoc describe myapp.models:Person myapp.models:Team \\
        --name myapp.models:Address=street-address
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jsondoc.cli.cli_types import NameAssignmentParam
from jsondoc.cli.config_resolver import resolve_config, resolve_registry
from jsondoc.cli.errors import from_core_error
from jsondoc.cli.options import config_options, indent_option, output_format_option
from jsondoc.config.logging import get_logger
from jsondoc.core.errors import JsonDocError
from jsondoc.core.formats import OutputFormat
from jsondoc.core.machine.payloads import build_meta_payload
from jsondoc.core.machine.serializers import (
    serialize_description,
    serialize_json_envelope,
    serialize_markdown,
    serialize_ndjson,
)
from jsondoc.core.types import qualified_name
from jsondoc.engine import Engine
from jsondoc.utils.introspection import import_target

if TYPE_CHECKING:
    from jsondoc.cli.console_api import ConsoleLike
    from jsondoc.config.logging import JsonDocLogger
    from jsondoc.core.nodes import DescriptionNode

logger: JsonDocLogger = get_logger(__name__)


def render_descriptions(
    items: list[tuple[str, DescriptionNode]],
    *,
    fmt: OutputFormat,
    indent: int,
    title: str | None = None,
) -> str:
    """Render described types in the requested format.

    Args:
        items: `(type name, description)` pairs, in command-line order.
        fmt: Output format.
        indent: JSON indentation width.
        title: Markdown document title.

    Returns:
        str: The rendered text, ending with a newline.

    Raises:
        DescriptionEncodeError: If a description is not JSON-encodable.
    """
    if fmt is OutputFormat.NDJSON:
        return serialize_ndjson(build_meta_payload(), items)
    if fmt is OutputFormat.MARKDOWN:
        return serialize_markdown(items, title=title, indent=indent)
    if len(items) == 1:
        return serialize_description(items[0][1], indent=indent)
    return serialize_json_envelope(build_meta_payload(), items, indent=indent) + "\n"


@click.command(
    name="describe",
    help="Describe the JSON shape of one or more types given as module:Qualname.",
)
@click.argument("targets", nargs=-1, required=True, metavar="TARGET...")
@click.option(
    "--name",
    "names",
    type=NameAssignmentParam(),
    multiple=True,
    help="Describe TARGET as the placeholder '<NAME>' (repeatable).",
)
@click.option(
    "--title",
    default=None,
    help="Document title (markdown format only).",
)
@config_options
@output_format_option
@indent_option
def describe_command(
    *,
    targets: tuple[str, ...],
    names: tuple[tuple[str, str], ...],
    title: str | None,
    config_path: str | None,
    no_config: bool,
    output_format: OutputFormat | None,
    indent: int | None,
) -> None:
    """Describe the JSON shape of one or more types.

    Args:
        targets (tuple[str, ...]): ``module:Qualname`` targets to describe.
        names (tuple[tuple[str, str], ...]): ``(target, name)`` overrides.
        title (str | None): Markdown document title.
        config_path (str | None): Explicit configuration file.
        no_config (bool): Skip configuration discovery.
        output_format (OutputFormat | None): Output format; configured or JSON when omitted.
        indent (int | None): JSON indentation; configured or 2 when omitted.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    try:
        config = resolve_config(config_path=config_path, no_config=no_config)
        engine = Engine(resolve_registry(config, names))
        items: list[tuple[str, DescriptionNode]] = []
        for target in targets:
            tp = import_target(target)
            items.append((qualified_name(tp), engine.describe(tp)))

        fmt: OutputFormat = output_format or config.output_format or OutputFormat.JSON
        width: int = indent if indent is not None else config.effective_indent
        logger.info("Rendering %d description(s) as %s", len(items), fmt.value)
        text = render_descriptions(items, fmt=fmt, indent=width, title=title)
    except JsonDocError as exc:
        raise from_core_error(exc) from exc

    console.print(text, nl=False)
