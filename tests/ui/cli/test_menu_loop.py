"""Tests for the interactive menu state machine."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import pytest
from pytest_mock import MockerFixture

from mathmenu.config.config import Config
from mathmenu.ui.cli import MenuLoop, build_commands
from mathmenu.ui.cli.commands import (
    FactorialSumCommand,
    SumOfCubesCommand,
    TemperatureConversionCommand,
)


def _menu(session: Any) -> MenuLoop:
    return MenuLoop(session.io, build_commands(session.io, Config()))


def test_build_commands_uses_menu_order(scripted_session: Callable[..., Any]) -> None:
    session = scripted_session([])
    configuration = Config(factorial_display_digits=10, factorial_warning_threshold=5)

    commands = build_commands(session.io, configuration)

    assert [type(c) for c in commands] == [
        SumOfCubesCommand,
        FactorialSumCommand,
        TemperatureConversionCommand,
    ]
    factorial_command = commands[1]
    assert isinstance(factorial_command, FactorialSumCommand)
    assert factorial_command.display_digits == 10
    assert factorial_command.warning_threshold == 5


def test_single_command_session(scripted_session: Callable[..., Any]) -> None:
    session = scripted_session(["1", "3", "2"])

    _menu(session).run()

    output = session.output
    assert output.startswith("Welcome!")
    assert "Main Menu" in output
    assert "1. Computing the sum of cubes" in output
    assert "2. Computing the sum of the factorials" in output
    assert "3. Converting a temperature" in output
    assert "The sum of the cubes of natural numbers up to 3 cubed is 36" in output
    assert "1. Main menu" in output
    assert "2. End program" in output
    assert output.rstrip().endswith("Thank you. Goodbye!")


def test_invalid_menu_choice_is_reprompted(scripted_session: Callable[..., Any]) -> None:
    session = scripted_session(["4", "sum", "1", "1", "2"])

    _menu(session).run()

    assert (
        session.output.count(
            "Oh, it doesn't look like that was correct. Please type either 1, 2 or 3:"
        )
        == 2
    )
    assert "up to 1 cubed is 1" in session.output


def test_returning_to_main_menu_runs_another_command(
    scripted_session: Callable[..., Any],
) -> None:
    session = scripted_session(["1", "2", "1", "2", "exit", "2"])

    _menu(session).run()

    output = session.output
    assert output.count("Main Menu") == 2
    assert "up to 2 cubed is 9" in output
    assert "Exiting the factorial calculation process." in output
    assert session.reader.consumed == 6


def test_invalid_continue_choice_is_reprompted(scripted_session: Callable[..., Any]) -> None:
    session = scripted_session(["1", "1", "3", "yes", "2"])

    _menu(session).run()

    assert session.output.count("Please type 1 or 2:") == 2
    assert session.output.rstrip().endswith("Thank you. Goodbye!")


@pytest.mark.parametrize("keyword", ["exit", "Quit", " end "])
def test_exit_keyword_at_main_menu_terminates(
    scripted_session: Callable[..., Any], keyword: str
) -> None:
    session = scripted_session([keyword])

    _menu(session).run()

    assert "Thank you. Goodbye!" in session.output
    assert "Please choose from the following options:" not in session.output


def test_exit_keyword_at_continue_prompt_terminates(
    scripted_session: Callable[..., Any],
) -> None:
    session = scripted_session(["1", "1", "stop"])

    _menu(session).run()

    assert session.output.count("Main Menu") == 1
    assert session.output.rstrip().endswith("Thank you. Goodbye!")


def test_selected_command_is_run_once(
    scripted_session: Callable[..., Any], mocker: MockerFixture
) -> None:
    session = scripted_session(["3", "2"])
    commands = build_commands(session.io, Config())
    run = mocker.patch.object(commands[2], "run", autospec=True)
    run.return_value.message = "converted"

    MenuLoop(session.io, commands).run()

    run.assert_called_once_with()
    assert "converted" in session.output


def test_menu_requires_commands(scripted_session: Callable[..., Any]) -> None:
    session = scripted_session([])

    with pytest.raises(ValueError):
        _ = MenuLoop(session.io, [])


def test_cancelled_command_returns_to_continue_prompt(
    scripted_session: Callable[..., Any], caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.DEBUG, logger="mathmenu")
    session = scripted_session(["1", "cancel", "2"])

    _menu(session).run()

    assert "Exiting the sum of cubes calculation process." in session.output
    assert "Please choose from the following options:" in session.output
    assert "Back from cancelled sum of cubes" in caplog.messages
