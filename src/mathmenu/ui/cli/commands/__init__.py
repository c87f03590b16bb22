"""Command execution package for CLI."""

from mathmenu.ui.cli.commands.executor import Command
from mathmenu.ui.cli.commands.cube_sum import SumOfCubesCommand
from mathmenu.ui.cli.commands.factorial_sum import FactorialSumCommand
from mathmenu.ui.cli.commands.conversion import TemperatureConversionCommand

__all__ = [
    "Command",
    "SumOfCubesCommand",
    "FactorialSumCommand",
    "TemperatureConversionCommand",
]
