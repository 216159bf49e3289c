# topmark:header:start
#
#   project      : JsonDoc
#   file         : model.py
#   file_relpath : src/jsondoc/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Validated, immutable JsonDoc configuration.

[`Config`][jsondoc.config.model.Config] is built from the JsonDoc table of a
TOML file (see [`jsondoc.config.loaders`][]) and turned into a
[`Registry`][jsondoc.registry.Registry] with
[`Config.build_registry`][jsondoc.config.model.Config.build_registry].

Targets stay as ``module:Qualname`` strings until the registry is built, so
loading a config file never imports user code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from jsondoc.config.keys import Toml
from jsondoc.config.logging import get_logger
from jsondoc.constants import DEFAULT_INDENT
from jsondoc.core.errors import ConfigError, TargetImportError
from jsondoc.core.formats import OutputFormat
from jsondoc.registry import Registry
from jsondoc.utils.introspection import import_target

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from jsondoc.config.logging import JsonDocLogger

logger: JsonDocLogger = get_logger(__name__)


def _section(table: Mapping[str, Any], name: str, *, where: str) -> dict[str, Any]:
    value: Any = table.get(name, {})
    if not isinstance(value, dict):
        raise ConfigError(f"{where}: [{name}] must be a table, got {type(value).__name__}")
    return value


def _parse_names(table: Mapping[str, Any], *, where: str) -> dict[str, str]:
    names: dict[str, str] = {}
    for target, name in _section(table, Toml.SECTION_NAMES, where=where).items():
        if not isinstance(name, str) or not name:
            raise ConfigError(
                f"{where}: [{Toml.SECTION_NAMES}] {target!r} must map to a non-empty string"
            )
        names[target] = name
    return names


def _parse_output(
    table: Mapping[str, Any], *, where: str
) -> tuple[OutputFormat | None, int | None]:
    output = _section(table, Toml.SECTION_OUTPUT, where=where)
    fmt: OutputFormat | None = None
    raw_format: Any = output.get(Toml.KEY_FORMAT)
    if raw_format is not None:
        try:
            fmt = OutputFormat(raw_format)
        except ValueError as exc:
            choices = ", ".join(f.value for f in OutputFormat)
            raise ConfigError(
                f"{where}: [{Toml.SECTION_OUTPUT}] {Toml.KEY_FORMAT} must be one of "
                f"{choices}, got {raw_format!r}"
            ) from exc

    indent: Any = output.get(Toml.KEY_INDENT)
    # bool is a subclass of int; exclude it.
    if indent is not None and (isinstance(indent, bool) or not isinstance(indent, int)):
        raise ConfigError(
            f"{where}: [{Toml.SECTION_OUTPUT}] {Toml.KEY_INDENT} must be an integer"
        )
    if indent is not None and indent < 0:
        raise ConfigError(f"{where}: [{Toml.SECTION_OUTPUT}] {Toml.KEY_INDENT} must be >= 0")

    for key in output:
        if key not in (Toml.KEY_FORMAT, Toml.KEY_INDENT):
            logger.warning("%s: unknown key [%s] %s ignored", where, Toml.SECTION_OUTPUT, key)
    return fmt, indent


@dataclass(frozen=True)
class Config:
    """Immutable JsonDoc configuration.

    Attributes:
        names: ``module:Qualname`` target -> placeholder name.
        schemas: ``module:Qualname`` target -> literal description tree.
        output_format: Preferred output format, if configured.
        indent: Preferred JSON indentation, if configured.
        source: File the configuration was read from, if any.
    """

    names: Mapping[str, str] = field(default_factory=dict)
    schemas: Mapping[str, object] = field(default_factory=dict)
    output_format: OutputFormat | None = None
    indent: int | None = None
    source: Path | None = None

    @classmethod
    def from_toml_dict(cls, table: Mapping[str, Any], *, source: Path | None = None) -> Config:
        """Validate a JsonDoc TOML table.

        Args:
            table: The unwrapped JsonDoc table (top level of ``jsondoc.toml``
                or ``[tool.jsondoc]``).
            source: File the table was read from, for messages.

        Returns:
            Config: The validated configuration.

        Raises:
            ConfigError: If a section or value has the wrong shape.
        """
        where: str = str(source) if source is not None else "<config>"
        for key in table:
            if key not in Toml.KNOWN_SECTIONS:
                logger.warning("%s: unknown section [%s] ignored", where, key)
        fmt, indent = _parse_output(table, where=where)
        return cls(
            names=_parse_names(table, where=where),
            schemas=dict(_section(table, Toml.SECTION_SCHEMAS, where=where)),
            output_format=fmt,
            indent=indent,
            source=source,
        )

    @property
    def effective_indent(self) -> int:
        """Configured indentation, or the default."""
        return DEFAULT_INDENT if self.indent is None else self.indent

    def build_registry(self, base: Registry | None = None) -> Registry:
        """Return a registry holding ``base``'s entries plus this configuration's.

        ``base`` itself is never modified. Schema entries are applied after
        name entries, so a target listed in both sections gets its schema.

        Args:
            base: Registry to start from; the default registry when omitted.

        Returns:
            Registry: A new registry.

        Raises:
            ConfigError: If a target cannot be imported.
        """
        registry: Registry = base.clone() if base is not None else Registry()
        try:
            for target, name in self.names.items():
                registry.register_name(import_target(target), name)
            for target, tree in self.schemas.items():
                registry.register_schema(import_target(target), tree)
        except TargetImportError as exc:
            where = str(self.source) if self.source is not None else "<config>"
            raise ConfigError(f"{where}: {exc}") from exc
        logger.debug(
            "Applied %d name and %d schema override(s) from %s",
            len(self.names),
            len(self.schemas),
            self.source or "<config>",
        )
        return registry
