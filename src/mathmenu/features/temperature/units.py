"""Temperature units and the ordered pairs that can be converted between."""

from __future__ import annotations

from enum import Enum
from typing import Final


class TemperatureUnit(str, Enum):
    """Supported temperature scales, in menu order."""

    CELSIUS = "Celsius"
    FAHRENHEIT = "Fahrenheit"
    KELVIN = "Kelvin"

    @property
    def absolute_zero(self) -> float:
        """Lowest physically valid temperature expressed in this unit."""

        return _ABSOLUTE_ZERO[self]

    @staticmethod
    def from_menu_index(index: int) -> "TemperatureUnit":
        """Translate a 1-based menu selection into the matching unit."""

        units = list(TemperatureUnit)
        if not 1 <= index <= len(units):
            msg = f"Unit selection must be between 1 and {len(units)}, got {index}"
            raise ValueError(msg)
        return units[index - 1]


_ABSOLUTE_ZERO: Final[dict[TemperatureUnit, float]] = {
    TemperatureUnit.CELSIUS: -273.15,
    TemperatureUnit.FAHRENHEIT: -459.67,
    TemperatureUnit.KELVIN: 0.0,
}


class ConversionPair(Enum):
    """The six ordered (source, destination) pairs of distinct units."""

    CELSIUS_TO_FAHRENHEIT = (TemperatureUnit.CELSIUS, TemperatureUnit.FAHRENHEIT)
    CELSIUS_TO_KELVIN = (TemperatureUnit.CELSIUS, TemperatureUnit.KELVIN)
    FAHRENHEIT_TO_CELSIUS = (TemperatureUnit.FAHRENHEIT, TemperatureUnit.CELSIUS)
    FAHRENHEIT_TO_KELVIN = (TemperatureUnit.FAHRENHEIT, TemperatureUnit.KELVIN)
    KELVIN_TO_CELSIUS = (TemperatureUnit.KELVIN, TemperatureUnit.CELSIUS)
    KELVIN_TO_FAHRENHEIT = (TemperatureUnit.KELVIN, TemperatureUnit.FAHRENHEIT)

    @property
    def source(self) -> TemperatureUnit:
        return self.value[0]

    @property
    def target(self) -> TemperatureUnit:
        return self.value[1]

    @classmethod
    def of(cls, source: TemperatureUnit, target: TemperatureUnit) -> "ConversionPair":
        """Look up the pair for ``source`` to ``target``.

        Raises:
            ValueError: If both units are the same.
        """
        try:
            return cls((source, target))
        except ValueError:
            msg = f"Cannot convert {source.value} to itself"
            raise ValueError(msg) from None


__all__ = ["ConversionPair", "TemperatureUnit"]
