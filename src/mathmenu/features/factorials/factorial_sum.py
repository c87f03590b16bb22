"""
Summary: Arbitrary-precision factorials, their sums and display formatting.
Why: Terms up to 2**31 - 1 produce results far beyond fixed-width integers.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from contextlib import contextmanager

from mathmenu.config.settings import FACTORIAL_DISPLAY_DIGITS


def factorial(n: int) -> int:
    """Return ``n!`` by iterative multiplication.

    Running time grows without bound for very large ``n``; there is no cap
    and no timeout.

    Raises:
        ValueError: If ``n`` is negative.
    """
    if n < 0:
        raise ValueError(f"factorial is undefined for negative numbers, got {n}")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def factorial_sum(terms: Iterable[int]) -> int:
    """Return the sum of the factorials of ``terms``."""

    return sum((factorial(term) for term in terms), 0)


@contextmanager
def _unbounded_int_digits() -> Iterator[None]:
    """Temporarily lift CPython's int-to-str digit limit."""

    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(0)
    try:
        yield
    finally:
        sys.set_int_max_str_digits(previous)


def format_factorial_sum(
    terms: Sequence[int],
    total: int,
    display_digits: int = FACTORIAL_DISPLAY_DIGITS,
) -> str:
    """Render the user-facing sentence for a factorial sum.

    Results longer than ``display_digits`` show the digit count and only the
    leading digits followed by ``...``.
    """
    with _unbounded_int_digits():
        digits = str(total)

    label = ", ".join(f"{term}!" for term in terms)
    prefix = f"The sum of the factorials {label} is a number with {len(digits)} digits"
    if len(digits) > display_digits:
        return (
            f"{prefix} and these are the first {display_digits} digits: "
            f"{digits[:display_digits]}..."
        )
    return f"{prefix} and is {digits}"


__all__ = ["factorial", "factorial_sum", "format_factorial_sum"]
