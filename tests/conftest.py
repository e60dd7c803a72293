# topmark:header:start
#
#   project      : TermConf
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the TermConf test suite.

Sets up global fixtures and the logging configuration for test runs, and offers
small builders for documents used across the suite.

Notes:
    Tests should respect the immutable/mutable split of the document model:

    - Build documents from TOML text with `load_document_text`, or start from
      `Document.thaw()` and `freeze()` the edited `MutableDocument`.
    - Do **not** mutate a frozen `Document`; every value it holds is immutable.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from termconf.config import logging
from termconf.config.reader import load_document_text

if TYPE_CHECKING:
    from pathlib import Path

    from termconf.config.model import Document

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


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


@pytest.fixture(autouse=True)
def silence_termconf_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure TermConf's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@pytest.fixture(autouse=True)
def restore_test_logging() -> Any:
    """Reinstall the test logging setup after each test.

    CLI invocations reconfigure the root logger against Click's captured
    streams; this puts the suite-wide handler back once the test is done.
    """
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_document(text: str) -> Document:
    """Load a document from TOML text (dedented by the caller).

    Args:
        text (str): TOML document text.

    Returns:
        Document: The loaded document.
    """
    return load_document_text(text, source="<test>")


def warnings_of(document: Document) -> list[str]:
    """Return the messages of the document's warning diagnostics."""
    return [d.message for d in document.diagnostics if d.level.value == "warning"]


def write_config(directory: Path, text: str, name: str = "termconf.toml") -> Path:
    """Write a configuration file and return its path."""
    path: Path = directory / name
    path.write_text(text, encoding="utf-8")
    return path
