"""
Summary: Linear conversions between Celsius, Fahrenheit and Kelvin.
Why: Keep the formulas pure so the interactive command only handles input.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Final

from mathmenu.features.temperature.units import ConversionPair, TemperatureUnit

_FORMULAS: Final[dict[ConversionPair, Callable[[float], float]]] = {
    ConversionPair.CELSIUS_TO_FAHRENHEIT: lambda v: v * 9 / 5 + 32,
    ConversionPair.CELSIUS_TO_KELVIN: lambda v: v + 273.15,
    ConversionPair.FAHRENHEIT_TO_CELSIUS: lambda v: (v - 32) * 5 / 9,
    ConversionPair.FAHRENHEIT_TO_KELVIN: lambda v: (v - 32) * 5 / 9 + 273.15,
    ConversionPair.KELVIN_TO_CELSIUS: lambda v: v - 273.15,
    ConversionPair.KELVIN_TO_FAHRENHEIT: lambda v: (v - 273.15) * 9 / 5 + 32,
}


def round_to_hundredths(value: float) -> float:
    """Round to two decimal places (half-to-even on the scaled value).

    Values too large to scale by 100 are already whole numbers and come back
    unchanged.
    """

    scaled = value * 100.0
    if not math.isfinite(scaled):
        return value
    return round(scaled) / 100.0


def convert(from_unit: TemperatureUnit, to_unit: TemperatureUnit, value: float) -> float:
    """Convert ``value`` from ``from_unit`` to ``to_unit``.

    Callers are expected to have checked ``value`` against the source unit's
    absolute zero.

    Examples:
        >>> convert(TemperatureUnit.CELSIUS, TemperatureUnit.FAHRENHEIT, 145.0)
        293.0
        >>> convert(TemperatureUnit.KELVIN, TemperatureUnit.CELSIUS, 145.0)
        -128.15

    Raises:
        ValueError: If both units are the same.
    """
    pair = ConversionPair.of(from_unit, to_unit)
    return round_to_hundredths(_FORMULAS[pair](value))


def format_conversion(
    value: float,
    from_unit: TemperatureUnit,
    to_unit: TemperatureUnit,
    result: float,
) -> str:
    """Render the user-facing sentence for a conversion."""

    return f"{float(value)} degrees {from_unit.value} is {float(result)} degrees {to_unit.value}"


__all__ = ["convert", "format_conversion", "round_to_hundredths"]
