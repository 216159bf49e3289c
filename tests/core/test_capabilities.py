# topmark:header:start
#
#   project      : JsonDoc
#   file         : test_capabilities.py
#   file_relpath : tests/core/test_capabilities.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for custom-serialization capability queries."""

from __future__ import annotations

import pathlib

from jsondoc.core.capabilities import has_printer, marshals_json, marshals_text
from tests.sample_types import Empty, SelfJson, SelfText, Token


class HasToDict:
    def to_dict(self) -> dict[str, int]:
        return {}


def test_structured_capability() -> None:
    """``__json__`` and ``to_dict`` both mark a type as self-serializing."""
    assert marshals_json(SelfJson)
    assert marshals_json(HasToDict)
    assert not marshals_json(SelfText)
    assert not marshals_json(Empty)


def test_text_capability() -> None:
    """``to_text`` and ``os.PathLike`` mark a type as rendering to one string."""
    assert marshals_text(SelfText)
    assert marshals_text(pathlib.PurePosixPath)
    assert not marshals_text(SelfJson)


def test_printer_capability() -> None:
    """A custom ``__str__`` or a text capability counts as a printer."""
    assert has_printer(Token)
    assert has_printer(SelfText)
    assert not has_printer(Empty)


def test_non_class_expressions_have_no_capability() -> None:
    """Generic aliases and other non-class expressions never match."""
    for tp in (list[int], dict[str, SelfJson], None):
        assert not marshals_json(tp)
        assert not marshals_text(tp)
        assert not has_printer(tp)
