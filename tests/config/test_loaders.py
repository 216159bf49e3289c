# topmark:header:start
#
#   project      : JsonDoc
#   file         : test_loaders.py
#   file_relpath : tests/config/test_loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML loading and configuration discovery."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from jsondoc.config.loaders import (
    discover_config,
    discover_config_file,
    load_config,
    load_toml_dict,
)
from jsondoc.core.errors import ConfigError
from jsondoc.core.formats import OutputFormat

if TYPE_CHECKING:
    from pathlib import Path

JSONDOC_TOML = """
[names]
"tests.sample_types:M1" = "my-struct"

[schemas]
"tests.sample_types:M2" = { PhantomField = "<my-type>" }

[output]
format = "ndjson"
indent = 4
"""

PYPROJECT_TOML = """
[project]
name = "demo"

[tool.jsondoc.names]
"tests.sample_types:Leaf" = "leaf"
"""


def test_load_toml_dict_returns_plain_containers(tmp_path: Path) -> None:
    """Parsed documents are unwrapped into builtin types."""
    path = tmp_path / "jsondoc.toml"
    path.write_text(JSONDOC_TOML, encoding="utf-8")
    data = load_toml_dict(path)
    assert type(data) is dict
    assert type(data["schemas"]["tests.sample_types:M2"]) is dict
    assert data["output"]["indent"] == 4


def test_invalid_toml_raises_config_error(tmp_path: Path) -> None:
    """Syntax errors are reported as configuration errors."""
    path = tmp_path / "jsondoc.toml"
    path.write_text("[names\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_toml_dict(path)


def test_missing_file_raises_config_error(tmp_path: Path) -> None:
    """Unreadable files are reported as configuration errors."""
    with pytest.raises(ConfigError, match="Cannot read"):
        load_toml_dict(tmp_path / "nope.toml")


def test_load_jsondoc_toml(tmp_path: Path) -> None:
    """A dedicated file is a JsonDoc table as a whole."""
    path = tmp_path / "jsondoc.toml"
    path.write_text(JSONDOC_TOML, encoding="utf-8")
    config = load_config(path)
    assert config.names == {"tests.sample_types:M1": "my-struct"}
    assert config.schemas == {"tests.sample_types:M2": {"PhantomField": "<my-type>"}}
    assert config.output_format is OutputFormat.NDJSON
    assert config.indent == 4
    assert config.source == path


def test_load_pyproject_tool_table(tmp_path: Path) -> None:
    """``pyproject.toml`` contributes its ``[tool.jsondoc]`` table."""
    path = tmp_path / "pyproject.toml"
    path.write_text(PYPROJECT_TOML, encoding="utf-8")
    config = load_config(path)
    assert config.names == {"tests.sample_types:Leaf": "leaf"}
    assert config.output_format is None


def test_discovery_walks_up(tmp_path: Path) -> None:
    """The nearest config file above the start directory is used."""
    (tmp_path / "jsondoc.toml").write_text(JSONDOC_TOML, encoding="utf-8")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert discover_config_file(nested) == (tmp_path / "jsondoc.toml").resolve()
    assert discover_config(nested).indent == 4


def test_discovery_prefers_jsondoc_toml(tmp_path: Path) -> None:
    """``jsondoc.toml`` wins over ``pyproject.toml`` in the same directory."""
    (tmp_path / "pyproject.toml").write_text(PYPROJECT_TOML, encoding="utf-8")
    (tmp_path / "jsondoc.toml").write_text(JSONDOC_TOML, encoding="utf-8")
    found = discover_config_file(tmp_path)
    assert found is not None
    assert found.name == "jsondoc.toml"


def test_discovery_skips_pyproject_without_table(tmp_path: Path) -> None:
    """A ``pyproject.toml`` without ``[tool.jsondoc]`` does not stop the walk."""
    (tmp_path / "jsondoc.toml").write_text(JSONDOC_TOML, encoding="utf-8")
    inner = tmp_path / "pkg"
    inner.mkdir()
    (inner / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
    found = discover_config_file(inner)
    assert found is not None
    assert found.parent == tmp_path.resolve()
