# topmark:header:start
#
#   project      : JsonDoc
#   file         : errors.py
#   file_relpath : src/jsondoc/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the JsonDoc CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. [`from_core_error`][jsondoc.cli.errors.from_core_error]
    maps core exceptions to their CLI counterpart.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from jsondoc.cli.exit_codes import ExitCode
from jsondoc.core.errors import (
    ConfigError,
    DescriptionEncodeError,
    JsonDocError,
    MemoInvariantError,
    TargetImportError,
)


class JsonDocCliError(click.ClickException):
    """Base class for all JsonDoc CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            - Unlike Click's default, this method does not add color.
            - Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class JsonDocUsageError(JsonDocCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class JsonDocDataError(JsonDocCliError):
    """Error for descriptions that cannot be rendered."""

    exit_code = ExitCode.DATA_ERROR


class JsonDocTargetError(JsonDocCliError):
    """Error when a ``module:Qualname`` target cannot be imported."""

    exit_code = ExitCode.TARGET_NOT_FOUND


class JsonDocSoftwareError(JsonDocCliError):
    """Error for internal failures (broken invariants)."""

    exit_code = ExitCode.SOFTWARE_ERROR


class JsonDocConfigError(JsonDocCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


def from_core_error(exc: JsonDocError) -> JsonDocCliError:
    """Return the CLI error matching a core exception.

    Args:
        exc: The exception raised by the engine, the renderers or the config layer.

    Returns:
        JsonDocCliError: An exception carrying the matching exit code.
    """
    if isinstance(exc, ConfigError):
        return JsonDocConfigError(str(exc))
    if isinstance(exc, TargetImportError):
        return JsonDocTargetError(str(exc))
    if isinstance(exc, DescriptionEncodeError):
        return JsonDocDataError(str(exc))
    if isinstance(exc, MemoInvariantError):
        return JsonDocSoftwareError(str(exc))
    return JsonDocCliError(str(exc))
