"""Factorial-sum feature."""

from mathmenu.features.factorials.factorial_sum import (
    factorial,
    factorial_sum,
    format_factorial_sum,
)

__all__ = ["factorial", "factorial_sum", "format_factorial_sum"]
