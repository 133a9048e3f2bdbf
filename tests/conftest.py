# topmark:header:start
#
#   project      : CSSPlus
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the CSSPlus test suite.

This file sets up global fixtures and typed wrappers around pytest decorators,
and customizes the logging configuration for test runs.

Notes:
    Pipeline tests drive the async processor with `asyncio.run`; fakes are
    injected through `Processor` constructor arguments rather than patched in.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from cssplus.config import logging

if TYPE_CHECKING:
    from pathlib import Path

T = TypeVar("T")
F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_cssplus_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure CSSPlus's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("CSSPLUS_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so failing tests show the full step trail.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def run(coro: Coroutine[Any, Any, T]) -> T:
    """Run a coroutine to completion (shorthand for `asyncio.run`)."""
    return asyncio.run(coro)


UTIL_CSS: str = ".u-img {\n  border-radius: 50%;\n}"

COMPONENT_CSS: str = (
    '@import "./util.css";\n'
    "\n"
    "/** @define Foo */\n"
    "\n"
    ":root {\n"
    "  --foo-color: red;\n"
    "}\n"
    "\n"
    ".Foo {\n"
    "  color: var(--foo-color);\n"
    "}\n"
)

# Four-space indentation: fails the default two-space rule
STYLELINT_CSS: str = ".Foo {\n    color: red;\n}\n"


@pytest.fixture
def fixtures_dir(tmp_path: Path) -> Path:
    """Write the stylesheet fixtures used across pipeline tests.

    Args:
        tmp_path (Path): The pytest-provided temporary directory.

    Returns:
        Path: Directory holding ``util.css``, ``component.css`` and ``stylelint.css``.
    """
    root: Path = tmp_path / "fixtures"
    root.mkdir()
    (root / "util.css").write_text(UTIL_CSS, encoding="utf-8")
    (root / "component.css").write_text(COMPONENT_CSS, encoding="utf-8")
    (root / "stylelint.css").write_text(STYLELINT_CSS, encoding="utf-8")
    return root


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test in an isolated working directory (no stray config discovery).

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    # An empty cssplus.toml stops upward discovery at the project directory
    (cwd / "cssplus.toml").write_text("", encoding="utf-8")
    monkeypatch.chdir(cwd)
    return cwd
