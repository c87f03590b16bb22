"""Factorial-sum command."""

from __future__ import annotations

from typing import final, override

from mathmenu.config.settings import (
    FACTORIAL_DISPLAY_DIGITS,
    FACTORIAL_MAX,
    FACTORIAL_MIN,
    FACTORIAL_TERM_COUNT,
    FACTORIAL_WARNING_THRESHOLD,
)
from mathmenu.features.factorials import factorial_sum, format_factorial_sum
from mathmenu.features.validation import validate_natural_in_range
from mathmenu.platform.logging import logger
from mathmenu.ui.cli.commands.executor import Command
from mathmenu.ui.cli.prompter import NEW_LINE, ConsoleIO, read_until_valid

_RANGE_LABEL = f"[{FACTORIAL_MIN},{FACTORIAL_MAX}]"


@final
class FactorialSumCommand(Command):
    """Prompt for three integers and report the sum of their factorials."""

    name = "factorial sum"
    description = "Computing the sum of the factorials of three given positive integers."
    cancel_message = "Exiting the factorial calculation process."

    display_digits: int
    warning_threshold: int

    def __init__(
        self,
        io: ConsoleIO,
        display_digits: int = FACTORIAL_DISPLAY_DIGITS,
        warning_threshold: int = FACTORIAL_WARNING_THRESHOLD,
    ) -> None:
        """Initialize command.

        Args:
            io: Console used for prompts and notices.
            display_digits: Digits shown before the result is truncated.
            warning_threshold: Terms above this value log a slowness warning.
        """
        super().__init__(io)
        self.display_digits = display_digits
        self.warning_threshold = warning_threshold

    @override
    def execute(self) -> str:
        self.io.print_message(
            "Please enter three non-negative integers to calculate the sum of their "
            f"factorials. A valid range is {_RANGE_LABEL}",
            end=NEW_LINE,
        )
        self.io.print_message(
            "Large numbers may take a significant amount of time depending on your machine.",
            end=NEW_LINE,
        )

        terms: list[int] = []
        for index in range(1, FACTORIAL_TERM_COUNT + 1):
            raw = read_until_valid(
                self.io,
                f"Integer #{index}:",
                lambda text: validate_natural_in_range(text, FACTORIAL_MIN, FACTORIAL_MAX),
                lambda text: f"{text} is not a valid natural number in the range {_RANGE_LABEL}.",
            )
            terms.append(int(raw))

        for term in terms:
            if term > self.warning_threshold:
                logger.warning("Computing %d! may take a long time", term)

        total = factorial_sum(terms)
        logger.debug("Factorial sum for %s computed", terms)
        return format_factorial_sum(terms, total, self.display_digits)


__all__ = ["FactorialSumCommand"]
