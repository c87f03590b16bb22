"""Interactive menu loop and entry point for mathmenu."""

import sys
from collections.abc import Sequence
from typing import final

from mathmenu.config.config import Config
from mathmenu.config.paths import default_log_file
from mathmenu.config.settings import resolve_log_level
from mathmenu.features.validation import validate_enum_choice
from mathmenu.platform.logging import logger, setup_logger
from mathmenu.ui.cli.commands import (
    Command,
    FactorialSumCommand,
    SumOfCubesCommand,
    TemperatureConversionCommand,
)
from mathmenu.ui.cli.display import ResultDisplay
from mathmenu.ui.cli.models import MenuState
from mathmenu.ui.cli.prompter import NEW_LINE, CommandCancelledError, ConsoleIO, read_until_valid

_CONTINUE_OPTIONS: tuple[MenuState, MenuState] = (MenuState.MAIN_MENU, MenuState.TERMINATED)


@final
class MenuLoop:
    """Drive the main menu, command execution and continue/exit prompt."""

    io: ConsoleIO
    commands: tuple[Command, ...]
    display: ResultDisplay

    def __init__(self, io: ConsoleIO, commands: Sequence[Command]) -> None:
        """Initialize the menu loop.

        Args:
            io: Console used for every prompt.
            commands: Commands in menu order; option ``k`` runs ``commands[k - 1]``.
        """
        if not commands:
            raise ValueError("At least one command is required")
        self.io = io
        self.commands = tuple(commands)
        self.display = ResultDisplay(io)

    def run(self) -> None:
        """Run until the user chooses to end the program."""

        self.io.print_message("Welcome!", end=NEW_LINE)
        state = MenuState.MAIN_MENU
        selected: Command | None = None

        while state is not MenuState.TERMINATED:
            if state is MenuState.MAIN_MENU:
                selected = self._select_command()
                state = MenuState.TERMINATED if selected is None else MenuState.RUNNING_COMMAND
            elif state is MenuState.RUNNING_COMMAND:
                assert selected is not None
                result = selected.run()
                if result.cancelled:
                    logger.debug("Back from cancelled %s", selected.name)
                self.display.show_result(result)
                state = MenuState.CONFIRM_EXIT
            else:
                state = self._confirm_exit()

        self.io.print_message("Thank you. Goodbye!", end=NEW_LINE)

    def _choices_label(self) -> str:
        numbers = [str(i) for i in range(1, len(self.commands) + 1)]
        if len(numbers) == 1:
            return numbers[0]
        return ", ".join(numbers[:-1]) + f" or {numbers[-1]}"

    def _select_command(self) -> Command | None:
        """Show the menu and return the chosen command, or ``None`` on exit."""

        self.display.show_main_menu([command.description for command in self.commands])
        try:
            raw = read_until_valid(
                self.io,
                "Please select the command you want to run by typing the number:",
                lambda text: validate_enum_choice(text, self.commands),
                lambda _text: (
                    "Oh, it doesn't look like that was correct. "
                    f"Please type either {self._choices_label()}:"
                ),
            )
        except CommandCancelledError:
            logger.debug("Exit keyword typed at the main menu")
            return None
        return self.commands[int(raw) - 1]

    def _confirm_exit(self) -> MenuState:
        """Ask whether to return to the main menu or end the program."""

        self.display.show_continue_options()
        try:
            raw = read_until_valid(
                self.io,
                ">",
                lambda text: validate_enum_choice(text, _CONTINUE_OPTIONS),
                lambda _text: "Please type 1 or 2:",
            )
        except CommandCancelledError:
            return MenuState.TERMINATED
        return _CONTINUE_OPTIONS[int(raw) - 1]


def build_commands(io: ConsoleIO, configuration: Config) -> list[Command]:
    """Create the menu commands in display order."""

    return [
        SumOfCubesCommand(io),
        FactorialSumCommand(
            io,
            display_digits=configuration.factorial_display_digits,
            warning_threshold=configuration.factorial_warning_threshold,
        ),
        TemperatureConversionCommand(io),
    ]


@final
class CommandProcessor:
    """Interactive session processor."""

    @staticmethod
    def process_command(io: ConsoleIO | None = None) -> None:
        """Load configuration, configure logging and run the menu loop.

        Args:
            io: Console to use (for testing). Defaults to stdin/stdout.
        """
        try:
            configuration = Config.load()
            _ = setup_logger(
                log_file=configuration.log_file or default_log_file(),
                console_level=resolve_log_level(configuration.console_log_level),
            )
            session_io = io or ConsoleIO(indent=configuration.indent)
            MenuLoop(session_io, build_commands(session_io, configuration)).run()

        except (KeyboardInterrupt, EOFError):
            logger.warning("Operation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Interrupted or failed sessions
        exit through ``sys.exit`` instead.
    """
    CommandProcessor.process_command()
    return 0
