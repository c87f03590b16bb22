"""Tests for the closed-form sum of cubes."""

import pytest

from mathmenu.config.settings import CUBE_SUM_MAX
from mathmenu.features.cubes import format_sum_of_cubes, sum_of_cubes


def test_smallest_valid_sum() -> None:
    assert sum_of_cubes(1) == 1


def test_small_sum() -> None:
    assert sum_of_cubes(3) == 36


def test_large_reference_sum() -> None:
    assert sum_of_cubes(92161) == 18035913638884423681


@pytest.mark.parametrize("n", [1, 2, 10, 57, 500])
def test_matches_explicit_summation(n: int) -> None:
    assert sum_of_cubes(n) == sum(i**3 for i in range(1, n + 1))


def test_upper_bound_exceeds_signed_64_bits() -> None:
    triangular = CUBE_SUM_MAX * (CUBE_SUM_MAX + 1) // 2
    assert sum_of_cubes(CUBE_SUM_MAX) == triangular**2
    assert sum_of_cubes(CUBE_SUM_MAX) == 18446425603259108841
    assert 2**63 < sum_of_cubes(CUBE_SUM_MAX) < 2**64


def test_negative_input_is_rejected() -> None:
    with pytest.raises(ValueError):
        _ = sum_of_cubes(-1)


def test_format_sum_of_cubes() -> None:
    assert (
        format_sum_of_cubes(3, 36)
        == "The sum of the cubes of natural numbers up to 3 cubed is 36"
    )
