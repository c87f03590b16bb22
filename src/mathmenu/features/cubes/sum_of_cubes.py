"""
Summary: Closed-form sum of the first n cubes.
Why: Nicomachus' identity avoids iterating up to n.
"""

from __future__ import annotations


def sum_of_cubes(n: int) -> int:
    """Return ``1**3 + 2**3 + ... + n**3``.

    Uses ``(n * (n + 1) / 2) ** 2``; the triangular number is always an
    integer so floor division is exact.

    Args:
        n: Number of leading natural numbers to include.

    Returns:
        int: The sum of cubes.

    Raises:
        ValueError: If ``n`` is negative.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    triangular = n * (n + 1) // 2
    return triangular * triangular


def format_sum_of_cubes(n: int, total: int) -> str:
    """Render the user-facing sentence for a computed sum."""

    return f"The sum of the cubes of natural numbers up to {n} cubed is {total}"


__all__ = ["format_sum_of_cubes", "sum_of_cubes"]
