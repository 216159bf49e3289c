# topmark:header:start
#
#   project      : JsonDoc
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

import json

from jsondoc.constants import JSONDOC_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_version_outputs_version() -> None:
    """It should output the installed version string (exact match)."""
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.output.strip() == JSONDOC_VERSION


@mark_cli
def test_version_json_format() -> None:
    """`version --format json` returns an envelope with the version."""
    result = run_cli(["version", "--format", "json"])
    assert_SUCCESS(result)
    data = json.loads(result.output)
    assert data["version"] == JSONDOC_VERSION
    assert data["meta"]["tool"] == "jsondoc"


@mark_cli
def test_version_ndjson_format() -> None:
    """`version --format ndjson` prints a single ``version`` record."""
    result = run_cli(["version", "--format", "NDJSON"])
    assert_SUCCESS(result)
    lines = result.output.splitlines()
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["kind"] == "version"
    assert record["version"] == JSONDOC_VERSION


@mark_cli
def test_version_markdown_format() -> None:
    """`version --format markdown` prints a heading."""
    result = run_cli(["version", "--format", "markdown"])
    assert_SUCCESS(result)
    assert result.output.startswith("# JsonDoc Version")


@mark_cli
def test_invalid_format_is_rejected() -> None:
    """Unknown formats are rejected by the parameter type."""
    result = run_cli(["version", "--format", "yaml"])
    assert result.exit_code != 0
    assert "Must be one of: json, ndjson, markdown" in result.output


@mark_cli
def test_group_without_subcommand_prints_help() -> None:
    """Running the bare group prints a hint and the help text."""
    result = run_cli([])
    assert_SUCCESS(result)
    assert "jsondoc describe" in result.output
    assert "Usage:" in result.output
