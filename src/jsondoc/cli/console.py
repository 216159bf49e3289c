# topmark:header:start
#
#   project      : JsonDoc
#   file         : console.py
#   file_relpath : src/jsondoc/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-backed console for descriptions, listings and CLI errors.

Program output (stdout) and error messages (stderr) are written here;
diagnostics go through `logging` and never mix with descriptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import click

if TYPE_CHECKING:
    from typing import TextIO


@dataclass(slots=True)
class ClickConsole:
    """`ConsoleLike` implementation on top of `click.echo`.

    Streams left as ``None`` are looked up through `click.get_text_stream`
    on every write, so a console created early still follows stream
    redirection (``CliRunner`` included).

    Attributes:
        enable_color: Emit ANSI styles; when False `styled` returns text unchanged.
        out: Stream for descriptions and listings.
        err: Stream for error messages.
    """

    enable_color: bool = True
    out: TextIO | None = None
    err: TextIO | None = None

    def _write(self, text: str, *, nl: bool, to_err: bool) -> None:
        stream = self.err if to_err else self.out
        if stream is None:
            stream = click.get_text_stream("stderr" if to_err else "stdout")
        click.echo(text, file=stream, nl=nl, color=self.enable_color)

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to standard output."""
        self._write(text, nl=nl, to_err=False)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write ``text`` to standard error."""
        self._write(text, nl=nl, to_err=True)

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Apply `click.style` keyword arguments when color is enabled."""
        return click.style(text, **style_kwargs) if self.enable_color else text
