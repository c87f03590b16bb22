"""Sum-of-cubes command."""

from __future__ import annotations

from typing import final, override

from mathmenu.config.settings import CUBE_SUM_MAX, CUBE_SUM_MIN
from mathmenu.features.cubes import format_sum_of_cubes, sum_of_cubes
from mathmenu.features.validation import parse_natural, validate_natural_in_range
from mathmenu.platform.logging import logger
from mathmenu.ui.cli.commands.executor import Command
from mathmenu.ui.cli.prompter import read_until_valid


@final
class SumOfCubesCommand(Command):
    """Prompt for n and report ``1**3 + ... + n**3``."""

    name = "sum of cubes"
    description = (
        "Computing the sum of cubes of consecutive positive integers up to a provided value."
    )
    cancel_message = "Exiting the sum of cubes calculation process."

    @staticmethod
    def _rejection(raw: str) -> str:
        if parse_natural(raw) is None:
            return f"{raw} is not a valid natural number."
        return f"{raw} is not a valid natural number in the range [{CUBE_SUM_MIN},{CUBE_SUM_MAX}]."

    @override
    def execute(self) -> str:
        raw = read_until_valid(
            self.io,
            f"Please enter a positive natural number between [{CUBE_SUM_MIN},{CUBE_SUM_MAX}]:",
            lambda text: validate_natural_in_range(text, CUBE_SUM_MIN, CUBE_SUM_MAX),
            self._rejection,
        )
        n = int(raw)
        total = sum_of_cubes(n)
        logger.debug("Sum of cubes for n=%d is %d", n, total)
        return format_sum_of_cubes(n, total)


__all__ = ["SumOfCubesCommand"]
