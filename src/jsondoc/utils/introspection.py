# topmark:header:start
#
#   project      : JsonDoc
#   file         : introspection.py
#   file_relpath : src/jsondoc/utils/introspection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve ``module:Qualname`` targets named on the command line or in config files."""

from __future__ import annotations

import importlib
from typing import Any

from jsondoc.config.logging import JsonDocLogger, get_logger
from jsondoc.core.errors import TargetImportError

logger: JsonDocLogger = get_logger(__name__)


def split_target(target: str) -> tuple[str, str]:
    """Split ``"pkg.mod:Outer.Inner"`` into ``("pkg.mod", "Outer.Inner")``.

    The dotted form ``"pkg.mod.Outer"`` is accepted too; the last component
    is then taken as the qualified name.

    Raises:
        TargetImportError: If ``target`` has no module part or no name part.
    """
    module_name, sep, qualname = target.strip().partition(":")
    if not sep:
        module_name, _, qualname = module_name.rpartition(".")
    if not module_name or not qualname:
        raise TargetImportError(f"Invalid target {target!r}: expected 'module:Qualname'")
    return module_name, qualname


def import_target(target: str) -> Any:
    """Import the object named by ``target``.

    Args:
        target: ``"module:Qualname"`` (or ``"module.Qualname"``).

    Returns:
        The resolved object, usually a class.

    Raises:
        TargetImportError: If the module cannot be imported or the name is missing.
    """
    module_name, qualname = split_target(target)
    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise TargetImportError(f"Cannot import module {module_name!r}: {exc}") from exc
    for part in qualname.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise TargetImportError(
                f"Module {module_name!r} has no attribute {qualname!r}"
            ) from exc
    logger.debug("Resolved target %s -> %r", target, obj)
    return obj
