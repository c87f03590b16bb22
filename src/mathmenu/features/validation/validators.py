"""
Summary: Pure parse-or-reject predicates over raw console input.
Why: Share one definition of "valid" between every command and the menu loop.
"""

from __future__ import annotations

import math
import re
from collections.abc import Sequence
from typing import Final

from mathmenu.config.settings import EXIT_KEYWORDS

# Optional sign followed by digits; no whitespace or underscores.
_NATURAL_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?\d+", re.ASCII)

# Optional sign, digits with optional fraction (or a bare fraction), optional exponent.
_DECIMAL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?",
    re.ASCII,
)


def parse_natural(raw: str) -> int | None:
    """Parse ``raw`` as an integer, returning ``None`` when it is not one."""

    if _NATURAL_PATTERN.fullmatch(raw) is None:
        return None
    return int(raw)


def parse_decimal(raw: str) -> float | None:
    """Parse ``raw`` as a finite real number, returning ``None`` otherwise."""

    if _DECIMAL_PATTERN.fullmatch(raw) is None:
        return None
    value = float(raw)
    if not math.isfinite(value):
        return None
    return value


def validate_natural_in_range(raw: str, minimum: int, maximum: int) -> bool:
    """Return whether ``raw`` is an integer within ``[minimum, maximum]``.

    Examples:
        >>> validate_natural_in_range("3", 1, 92681)
        True
        >>> validate_natural_in_range("banana", 1, 92681)
        False
        >>> validate_natural_in_range("0", 1, 92681)
        False
    """

    value = parse_natural(raw)
    return value is not None and minimum <= value <= maximum


def validate_decimal_at_least(raw: str, floor: float) -> bool:
    """Return whether ``raw`` is a real number no lower than ``floor``.

    Used to reject temperatures below absolute zero in the source unit.
    """

    value = parse_decimal(raw)
    return value is not None and value >= floor


def validate_enum_choice(raw: str, options: Sequence[object]) -> bool:
    """Return whether ``raw`` is a 1-based index into ``options``."""

    return validate_natural_in_range(raw, 1, len(options))


def is_exit_command(raw: str) -> bool:
    """Return whether ``raw`` is one of the recognised exit keywords.

    Surrounding whitespace and letter case are ignored.
    """

    return raw.strip().lower() in EXIT_KEYWORDS


__all__ = [
    "is_exit_command",
    "parse_decimal",
    "parse_natural",
    "validate_decimal_at_least",
    "validate_enum_choice",
    "validate_natural_in_range",
]
