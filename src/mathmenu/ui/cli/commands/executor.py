"""src/mathmenu/ui/cli/commands/executor.py
What: Provide shared wiring for interactive menu commands.
Why: Reuse cancellation handling and lifecycle logging across commands.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import ClassVar

from mathmenu.platform.logging import logger
from mathmenu.ui.cli.models import CommandResult
from mathmenu.ui.cli.prompter import CommandCancelledError, ConsoleIO


class Command(ABC):
    """Base class for a menu command with a single ``run`` entry point."""

    name: ClassVar[str]
    description: ClassVar[str]
    cancel_message: ClassVar[str]

    io: ConsoleIO

    def __init__(self, io: ConsoleIO) -> None:
        """Initialize command.

        Args:
            io: Console used for prompts and notices.
        """
        self.io = io

    def run(self) -> CommandResult:
        """Run the command's prompt, validate, compute cycle.

        Returns:
            CommandResult: The result message, or the cancellation message when
            the user typed an exit keyword.
        """
        logger.info(
            "Running %s",
            self.name,
            extra={"command_event": "command.start", "command": self.name},
        )
        started = time.perf_counter()
        try:
            message = self.execute()
        except CommandCancelledError as exc:
            logger.info(
                "%s cancelled (%s)",
                self.name,
                exc.keyword.strip(),
                extra={"command_event": "command.cancelled", "command": self.name},
            )
            return CommandResult(message=self.cancel_message, cancelled=True)

        duration_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s completed",
            self.name,
            extra={
                "command_event": "command.complete",
                "command": self.name,
                "duration_ms": duration_ms,
            },
        )
        return CommandResult(message=message)

    @abstractmethod
    def execute(self) -> str:
        """Collect validated input and return the formatted result.

        Raises:
            CommandCancelledError: If the user cancels at any prompt.
        """
        pass


__all__ = ["Command"]
