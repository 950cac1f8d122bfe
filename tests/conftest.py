# topmark:header:start
#
#   project      : Worrywart
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Worrywart test suite.

Sets up TRACE logging for the whole run, isolates tests from the developer's
``WORRYWART_*`` environment, and provides small fixtures for building sources,
anchors and sessions.

Notes:
    Each test builds its own `ReportingSession`; sessions are single-use and
    must never be shared between tests.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from worrywart.config import logging
from worrywart.diagnostic.anchor import SourceAnchor
from worrywart.session import ReportingSession

F = TypeVar("F", bound=Callable[..., object])

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


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def isolate_worrywart_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the developer's shell cannot change log level or limit during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
    """
    monkeypatch.delenv("WORRYWART_LOG_LEVEL", raising=False)
    monkeypatch.delenv("WORRYWART_LIMIT", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE for the whole run so every recorded diagnostic is exercised.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def session() -> ReportingSession:
    """Return a fresh session with the default limit."""
    return ReportingSession(filename="sample.txt")


SAMPLE_SOURCE = "first line\nsecond (line\nthird) line)\n"


@pytest.fixture
def source() -> str:
    """Return a small three-line source text."""
    return SAMPLE_SOURCE


@pytest.fixture
def anchor_at(source: str) -> Callable[[int], SourceAnchor]:
    """Return a factory building point anchors into `source`."""

    def _make(offset: int) -> SourceAnchor:
        return SourceAnchor.at(source, offset)

    return _make
