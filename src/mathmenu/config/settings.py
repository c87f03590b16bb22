"""Where: src/mathmenu/config/settings.py
What: Fixed numeric bounds, exit keywords and display defaults.
Why: Keep validation limits in one place for features and the CLI.
"""

from __future__ import annotations

import logging
from typing import Final

# Cube sums ------------------------------------------------------------------

CUBE_SUM_MIN: Final[int] = 1
# Keeps the result within ~128 bits for display purposes.
CUBE_SUM_MAX: Final[int] = 92681

# Factorial sums --------------------------------------------------------------

FACTORIAL_MIN: Final[int] = 0
FACTORIAL_MAX: Final[int] = 2**31 - 1
FACTORIAL_TERM_COUNT: Final[int] = 3
FACTORIAL_DISPLAY_DIGITS: Final[int] = 1024
FACTORIAL_WARNING_THRESHOLD: Final[int] = 100_000

# Console ------------------------------------------------------------------------

EXIT_KEYWORDS: Final[tuple[str, ...]] = ("exit", "end", "cancel", "stop", "quit")
DEFAULT_INDENT: Final[int] = 4
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"


def resolve_log_level(name: str | None) -> int:
    """Translate a level name from config into a ``logging`` level.

    Unknown or empty names fall back to ``WARNING``.
    """

    if not name:
        return logging.WARNING
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


__all__ = [
    "CUBE_SUM_MIN",
    "CUBE_SUM_MAX",
    "FACTORIAL_MIN",
    "FACTORIAL_MAX",
    "FACTORIAL_TERM_COUNT",
    "FACTORIAL_DISPLAY_DIGITS",
    "FACTORIAL_WARNING_THRESHOLD",
    "EXIT_KEYWORDS",
    "DEFAULT_INDENT",
    "DEFAULT_CONSOLE_LOG_LEVEL",
    "resolve_log_level",
]
