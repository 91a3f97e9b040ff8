"""Shared pytest fixtures for termprompt tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from contextlib import contextmanager
from io import StringIO

import pytest

from termprompt.tui.component import Choice, Widget
from termprompt.tui.keys import BufferByteSource, Event


@pytest.fixture
def letter_choices() -> list[Choice[str]]:
    """Four choices A-D carrying data "1"-"4"."""
    return [
        Choice("A", "1"),
        Choice("B", "2"),
        Choice("C", "3"),
        Choice("D", "4"),
    ]


@pytest.fixture
def feed() -> Callable[[Widget, Iterable[Event]], None]:
    """Apply a sequence of events to a widget."""

    def _feed(widget: Widget, events: Iterable[Event]) -> None:
        for event in events:
            widget.consume(event)

    return _feed


@pytest.fixture
def output() -> StringIO:
    """In-memory terminal output."""
    return StringIO()


@pytest.fixture
def scripted_terminal(monkeypatch: pytest.MonkeyPatch) -> Callable[[bytes], None]:
    """Replace the real terminal with a scripted byte sequence."""

    def _install(data: bytes) -> None:
        @contextmanager
        def fake_raw_terminal():
            yield BufferByteSource(data)

        monkeypatch.setattr("termprompt.driver.raw_terminal", fake_raw_terminal)

    return _install


@pytest.fixture
def package_logger():
    """Yield the package root logger and restore its state afterwards."""
    logger = logging.getLogger("termprompt")
    handlers = list(logger.handlers)
    level = logger.level
    disabled = logger.disabled
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.disabled = disabled
