"""Sum-of-cubes feature."""

from mathmenu.features.cubes.sum_of_cubes import format_sum_of_cubes, sum_of_cubes

__all__ = ["format_sum_of_cubes", "sum_of_cubes"]
