"""Temperature conversion command.

Unit selection is a two-stage menu (source, then destination) followed by a
Y/N confirmation; answering N starts the selection again. Exit keywords are
accepted at every prompt.
"""

from __future__ import annotations

from typing import Final, final, override

from mathmenu.features.temperature import TemperatureUnit, convert, format_conversion
from mathmenu.features.validation import (
    parse_decimal,
    parse_natural,
    validate_decimal_at_least,
    validate_enum_choice,
)
from mathmenu.platform.logging import logger
from mathmenu.ui.cli.commands.executor import Command
from mathmenu.ui.cli.prompter import NEW_LINE, read_until_valid

_UNITS: Final[tuple[TemperatureUnit, ...]] = tuple(TemperatureUnit)
_CHOICES_LABEL: Final[str] = ", ".join(str(i) for i in range(1, len(_UNITS))) + f" or {len(_UNITS)}"
_YES: Final[str] = "Y"
_NO: Final[str] = "N"


@final
class TemperatureConversionCommand(Command):
    """Convert a temperature between two distinct units."""

    name = "temperature conversion"
    description = (
        "Converting a temperature from one unit to another: Celsius, Fahrenheit or Kelvin."
    )
    cancel_message = "Exiting the temperature conversion process."

    @override
    def execute(self) -> str:
        self.io.print_message("You are able to convert between the following units:", end=NEW_LINE)
        for index, unit in enumerate(_UNITS, start=1):
            self.io.print_message(f"{index}. {unit.value}", end=NEW_LINE)

        while True:
            source = self._choose_source()
            target = self._choose_target(source)
            self.io.print_message(
                f"You have selected to convert {source.value} to {target.value}.",
                end=NEW_LINE,
            )
            if self._confirm():
                break

        value = self._read_temperature(source)
        result = convert(source, target, value)
        logger.debug("Converted %s %s to %s %s", value, source.value, result, target.value)
        return format_conversion(value, source, target, result)

    def _choose_source(self) -> TemperatureUnit:
        raw = read_until_valid(
            self.io,
            "Please enter the number of the unit you wish to convert from "
            "(type exit to go back to the main menu):",
            lambda text: validate_enum_choice(text, _UNITS),
            lambda _text: f"That is not one of the choices, please type {_CHOICES_LABEL}.",
        )
        return TemperatureUnit.from_menu_index(int(raw))

    def _choose_target(self, source: TemperatureUnit) -> TemperatureUnit:
        source_index = _UNITS.index(source) + 1

        def is_valid(text: str) -> bool:
            return validate_enum_choice(text, _UNITS) and parse_natural(text) != source_index

        def rejection(text: str) -> str:
            if parse_natural(text) == source_index:
                return "You already picked this unit to convert from. Pick another option."
            return f"That is not one of the choices, please type {_CHOICES_LABEL}."

        raw = read_until_valid(
            self.io,
            "Please enter the number of the unit you wish to convert to "
            "(type exit to go back to the main menu):",
            is_valid,
            rejection,
        )
        return TemperatureUnit.from_menu_index(int(raw))

    def _confirm(self) -> bool:
        answer = read_until_valid(
            self.io,
            f"Please confirm if this is correct ({_YES}/{_NO}):",
            lambda text: text.strip().upper() in {_YES, _NO},
            lambda _text: f"Please enter {_YES} for yes or {_NO} for no.",
        )
        return answer.strip().upper() == _YES

    def _read_temperature(self, source: TemperatureUnit) -> float:
        floor = source.absolute_zero

        def rejection(text: str) -> str:
            if parse_decimal(text) is None:
                return f"{text} is not a valid number."
            return f"Please enter a number no lower than {floor} degrees {source.value}."

        raw = read_until_valid(
            self.io,
            "Please enter the temperature to convert:",
            lambda text: validate_decimal_at_least(text, floor),
            rejection,
        )
        value = parse_decimal(raw)
        assert value is not None
        return value


__all__ = ["TemperatureConversionCommand"]
