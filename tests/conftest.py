"""Shared pytest fixtures for driving interactive flows."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from io import StringIO

import pytest
from rich.console import Console

from mathmenu.platform.logging import setup_logger
from mathmenu.ui.cli.prompter import ConsoleIO


class ScriptedInput:
    """Line reader that replays a fixed script, then signals end of input."""

    def __init__(self, lines: Sequence[str]) -> None:
        self._lines: Iterator[str] = iter(lines)
        self.consumed = 0

    def __call__(self) -> str:
        try:
            line = next(self._lines)
        except StopIteration:
            raise EOFError("input script exhausted") from None
        self.consumed += 1
        return line


@dataclass
class ScriptedSession:
    """Console IO wired to a script plus access to everything printed."""

    io: ConsoleIO
    reader: ScriptedInput
    buffer: StringIO

    @property
    def output(self) -> str:
        return self.buffer.getvalue()


@pytest.fixture
def scripted_session() -> Callable[..., ScriptedSession]:
    """Build a ``ScriptedSession`` for the given input lines."""

    def _make(lines: Sequence[str], indent: int = 0) -> ScriptedSession:
        buffer = StringIO()
        console = Console(file=buffer, width=400, color_system=None, soft_wrap=True)
        reader = ScriptedInput(lines)
        return ScriptedSession(
            io=ConsoleIO(console=console, reader=reader, indent=indent),
            reader=reader,
            buffer=buffer,
        )

    return _make


@pytest.fixture(autouse=True)
def _reset_logger() -> Iterator[None]:
    """Restore the console-only logger after each test."""

    yield
    _ = setup_logger()
