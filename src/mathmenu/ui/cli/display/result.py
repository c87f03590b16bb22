"""src/mathmenu/ui/cli/display/result.py
What: Render command results and menu text.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from mathmenu.ui.cli.models import CommandResult
from mathmenu.ui.cli.prompter import NEW_LINE, ConsoleIO


@final
class ResultDisplay:
    """Handles menu and result display in the CLI."""

    io: ConsoleIO

    def __init__(self, io: ConsoleIO) -> None:
        """Initialize result display.

        Args:
            io: Console to print through.
        """
        self.io = io

    def show_main_menu(self, descriptions: Sequence[str]) -> None:
        """Print the numbered list of available commands."""

        self.io.blank_line()
        self.io.print_message("Main Menu", end=NEW_LINE)
        self.io.blank_line()
        self.io.print_message(
            f"You are able to choose one of {len(descriptions)} commands:", end=NEW_LINE
        )
        for index, description in enumerate(descriptions, start=1):
            self.io.print_message(f"{index}. {description}", end=NEW_LINE)

    def show_result(self, result: CommandResult) -> None:
        """Print a command's message followed by an empty line."""

        self.io.print_message(result.message, end=NEW_LINE)
        self.io.blank_line()

    def show_continue_options(self) -> None:
        self.io.print_message("Please choose from the following options:", end=NEW_LINE)
        self.io.print_message("1. Main menu", end=NEW_LINE)
        self.io.print_message("2. End program", end=NEW_LINE)


__all__ = ["ResultDisplay"]
