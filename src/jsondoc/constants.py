# topmark:header:start
#
#   project      : JsonDoc
#   file         : constants.py
#   file_relpath : src/jsondoc/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonDoc Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

JSONDOC: str = "jsondoc"

JSONDOC_VERSION: str = get_version("jsondoc")

# Configuration discovery
JSONDOC_TOML_NAME: str = "jsondoc.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_TABLE: str = "jsondoc"

# Environment variable consulted for the internal log level
LOG_LEVEL_ENV_VAR: str = "JSONDOC_LOG_LEVEL"

DEFAULT_INDENT: int = 2
