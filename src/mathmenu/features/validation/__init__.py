"""Input validation package."""

from mathmenu.features.validation.validators import (
    is_exit_command,
    parse_decimal,
    parse_natural,
    validate_decimal_at_least,
    validate_enum_choice,
    validate_natural_in_range,
)

__all__ = [
    "is_exit_command",
    "parse_decimal",
    "parse_natural",
    "validate_decimal_at_least",
    "validate_enum_choice",
    "validate_natural_in_range",
]
