# topmark:header:start
#
#   project      : JsonDoc
#   file         : test_console.py
#   file_relpath : tests/cli/test_console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the Click-backed console."""

from __future__ import annotations

import io

from jsondoc.cli.console import ClickConsole


def test_print_and_error_use_separate_streams() -> None:
    """Program output and errors never share a stream."""
    out, err = io.StringIO(), io.StringIO()
    console = ClickConsole(enable_color=False, out=out, err=err)
    console.print("tree", nl=False)
    console.error("Error: boom")
    assert out.getvalue() == "tree"
    assert err.getvalue() == "Error: boom\n"


def test_styled_is_plain_without_color() -> None:
    """Styling is a no-op when color is disabled."""
    assert ClickConsole(enable_color=False).styled("x", bold=True) == "x"


def test_styled_adds_ansi_codes_with_color() -> None:
    """Enabled color wraps the text in ANSI sequences."""
    assert ClickConsole(enable_color=True).styled("x", bold=True) == "\x1b[1mx\x1b[0m"


def test_colored_output_is_stripped_for_plain_streams() -> None:
    """Disabled color removes styles that were applied earlier."""
    out = io.StringIO()
    ClickConsole(enable_color=False, out=out).print("\x1b[1mx\x1b[0m")
    assert out.getvalue() == "x\n"
