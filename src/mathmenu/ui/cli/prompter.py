"""src/mathmenu/ui/cli/prompter.py
What: Console printing/reading primitives and the read-until-valid loop.
Why: Every command shares one prompt, validate, re-prompt cycle.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import final

from rich.console import Console

from mathmenu.config.settings import DEFAULT_INDENT
from mathmenu.features.validation import is_exit_command

NEW_LINE = "\n"


class CommandCancelledError(Exception):
    """Raised when the user types an exit keyword at a prompt."""

    def __init__(self, keyword: str) -> None:
        super().__init__(f"Cancelled by '{keyword.strip()}'")
        self.keyword = keyword


@final
class ConsoleIO:
    """Thin wrapper pairing a rich console with a line reader."""

    console: Console
    indent: int

    def __init__(
        self,
        console: Console | None = None,
        reader: Callable[[], str] | None = None,
        indent: int = DEFAULT_INDENT,
    ) -> None:
        """Initialize console IO.

        Args:
            console: Output console. Defaults to stdout.
            reader: Callable returning one line of input without the newline.
                Defaults to the builtin ``input``.
            indent: Tab depth applied by callers that do not pass their own.
        """
        self.console = console or Console(soft_wrap=True)
        self._reader = reader or input
        self.indent = indent

    def print_message(self, message: str, tabs: int | None = None, end: str = " ") -> None:
        """Print ``message`` indented by ``tabs`` tab characters."""

        depth = self.indent if tabs is None else tabs
        self.console.print(
            "\t" * depth + message,
            end=end,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

    def prompt(self, message: str, tabs: int | None = None, end: str = " ") -> str:
        """Print ``message`` and return the next input line verbatim."""

        self.print_message(message, tabs, end)
        return self._reader()

    def blank_line(self) -> None:
        self.console.print()


def read_until_valid(
    io: ConsoleIO,
    message: str,
    is_valid: Callable[[str], bool],
    on_invalid: Callable[[str], str],
    *,
    tabs: int | None = None,
) -> str:
    """Prompt until ``is_valid`` accepts the input and return it.

    Args:
        io: Console used for prompting.
        message: Prompt shown before every read.
        is_valid: Predicate over the raw line.
        on_invalid: Builds the notice printed after a rejected line.
        tabs: Indentation depth; defaults to ``io.indent``.

    Returns:
        str: The first accepted raw line.

    Raises:
        CommandCancelledError: If an exit keyword is typed.
    """
    while True:
        raw = io.prompt(message, tabs)
        if is_exit_command(raw):
            raise CommandCancelledError(raw)
        if is_valid(raw):
            return raw
        io.print_message(on_invalid(raw), tabs, NEW_LINE)


__all__ = ["CommandCancelledError", "ConsoleIO", "NEW_LINE", "read_until_valid"]
