# topmark:header:start
#
#   project      : JsonDoc
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the JsonDoc test suite.

Sets up global fixtures and the logging configuration for test runs.
"""

from __future__ import annotations

import logging as std_logging
from collections.abc import Callable, Iterator
from typing import Any, TypeVar, cast

import pytest
from hypothesis import settings

from jsondoc.config import logging
from jsondoc.constants import LOG_LEVEL_ENV_VAR
from jsondoc.registry import Registry

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_property: DecoratorType[Any] = as_typed_mark(pytest.mark.property)

# `nox -s property_test` selects "thorough" via --hypothesis-profile.
settings.register_profile("jsondoc", max_examples=60)
settings.register_profile("thorough", max_examples=500)
settings.load_profile("jsondoc")


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_jsondoc_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure JsonDoc's runtime log level is not forced via env during tests.

    This avoids accidental TRACE noise when the developer has exported
    JSONDOC_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Restore the root logger after each test.

    CLI invocations reconfigure logging for the given verbosity and attach a
    handler bound to the runner's captured stderr.
    """
    root = std_logging.getLogger()
    level = root.level
    ours = [h for h in root.handlers if isinstance(h.formatter, logging.ChalkFormatter)]
    yield
    root.setLevel(level)
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, logging.ChalkFormatter) and handler not in ours:
            root.removeHandler(handler)
    for handler in ours:
        if handler not in root.handlers:
            root.addHandler(handler)


@pytest.fixture
def registry() -> Registry:
    """A fresh registry with the default entries."""
    return Registry()


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure JsonDoc logging at DEBUG for the test session."""
    logging.setup_logging(level=std_logging.DEBUG)
