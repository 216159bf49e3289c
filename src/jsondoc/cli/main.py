# topmark:header:start
#
#   project      : JsonDoc
#   file         : main.py
#   file_relpath : src/jsondoc/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonDoc command-line interface.

Key ideas:
- Group-level options are initialized once, placed into ``ctx.obj``.
- Program output goes through a console stored in ``ctx.obj["console"]``;
  diagnostics go through `logging` on stderr.
- ``JSONDOC_LOG_LEVEL`` takes precedence over ``-v``/``-q`` for the log level.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jsondoc.cli.commands.defaults import defaults_command
from jsondoc.cli.commands.describe import describe_command
from jsondoc.cli.commands.version import version_command
from jsondoc.cli.console import ClickConsole
from jsondoc.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from jsondoc.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from jsondoc.cli.console_api import ConsoleLike
    from jsondoc.config.logging import JsonDocLogger

logger: JsonDocLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    level_cli = resolve_verbosity(verbose, quiet)
    level_env = resolve_env_log_level()
    log_level = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    # A console injected by the caller (tests) is kept.
    ctx.obj.setdefault("console", ClickConsole(enable_color=enable_color))


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Describe the JSON shape of Python types.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the JsonDoc CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'jsondoc describe module:Qualname' to describe a type.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(describe_command)

cli.add_command(defaults_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
