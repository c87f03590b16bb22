"""Temperature conversion feature."""

from mathmenu.features.temperature.converter import convert, format_conversion, round_to_hundredths
from mathmenu.features.temperature.units import ConversionPair, TemperatureUnit

__all__ = [
    "ConversionPair",
    "TemperatureUnit",
    "convert",
    "format_conversion",
    "round_to_hundredths",
]
