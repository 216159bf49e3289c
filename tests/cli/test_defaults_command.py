# topmark:header:start
#
#   project      : JsonDoc
#   file         : test_defaults_command.py
#   file_relpath : tests/cli/test_defaults_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `defaults` command output."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from jsondoc.registry.defaults import DEFAULT_NAMES
from tests.cli.conftest import assert_SUCCESS, run_cli_in
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_defaults_plain_listing(tmp_path: Path) -> None:
    """The plain listing shows one line per default entry."""
    result = run_cli_in(tmp_path, ["--no-color", "defaults", "--no-config"])
    assert_SUCCESS(result)
    lines = result.stdout.splitlines()
    assert len(lines) == len(DEFAULT_NAMES)
    assert any(line.startswith("datetime:datetime") and '"<timestamp>"' in line for line in lines)


@mark_cli
def test_defaults_json_is_sorted(tmp_path: Path) -> None:
    """JSON output lists entries sorted by type name."""
    result = run_cli_in(tmp_path, ["defaults", "--no-config", "--format", "json"])
    assert_SUCCESS(result)
    entries = json.loads(result.stdout)["entries"]
    names = [entry["type"] for entry in entries]
    assert names == sorted(names)
    assert {"type": "uuid:UUID", "description": "<uuid>"} in entries


@mark_cli
def test_defaults_include_configured_entries(tmp_path: Path) -> None:
    """Configured overrides are listed with the defaults."""
    (tmp_path / "jsondoc.toml").write_text(
        '[names]\n"tests.sample_types:Leaf" = "leaf"\n', encoding="utf-8"
    )
    result = run_cli_in(tmp_path, ["defaults", "--format", "ndjson"])
    assert_SUCCESS(result)
    records = [json.loads(line) for line in result.stdout.splitlines()]
    assert len(records) == len(DEFAULT_NAMES) + 1
    assert all(record["kind"] == "entry" for record in records)
    assert {"type": "tests.sample_types:Leaf", "description": "<leaf>"} in [
        {"type": r["type"], "description": r["description"]} for r in records
    ]


@mark_cli
def test_defaults_markdown_table(tmp_path: Path) -> None:
    """Markdown output is a table with one row per entry."""
    result = run_cli_in(tmp_path, ["defaults", "--no-config", "--format", "markdown"])
    assert_SUCCESS(result)
    rows = [line for line in result.stdout.splitlines() if line.startswith("| `")]
    assert len(rows) == len(DEFAULT_NAMES)
