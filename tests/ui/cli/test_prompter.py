"""Tests for console IO primitives and the read-until-valid loop."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from mathmenu.ui.cli.prompter import NEW_LINE, CommandCancelledError, read_until_valid


def test_prompt_returns_line_verbatim(scripted_session: Callable[..., Any]) -> None:
    session = scripted_session(["  Mixed Case  "])

    assert session.io.prompt("Name:") == "  Mixed Case  "
    assert session.output == "Name: "


def test_print_message_applies_indentation(scripted_session: Callable[..., Any]) -> None:
    session = scripted_session([], indent=2)

    session.io.print_message("Hello", end=NEW_LINE)

    assert session.output.endswith("Hello\n")
    assert session.output[0] in " \t"


def test_print_message_does_not_interpret_markup(scripted_session: Callable[..., Any]) -> None:
    session = scripted_session([])

    session.io.print_message("[bold]x[/bold] in [1,92681] :smile:", end=NEW_LINE)

    assert session.output == "[bold]x[/bold] in [1,92681] :smile:\n"


def test_read_until_valid_reprompts_until_accepted(scripted_session: Callable[..., Any]) -> None:
    session = scripted_session(["a", "b", "ok"])

    result = read_until_valid(
        session.io,
        "Value:",
        lambda text: text == "ok",
        lambda text: f"{text} rejected",
    )

    assert result == "ok"
    assert session.reader.consumed == 3
    assert session.output.count("Value:") == 3
    assert "a rejected" in session.output
    assert "b rejected" in session.output


def test_read_until_valid_raises_on_exit_keyword(scripted_session: Callable[..., Any]) -> None:
    session = scripted_session(["bad", " QUIT "])

    with pytest.raises(CommandCancelledError) as excinfo:
        _ = read_until_valid(session.io, "Value:", lambda _t: False, lambda _t: "no")

    assert excinfo.value.keyword == " QUIT "


def test_exit_keyword_checked_before_validation(scripted_session: Callable[..., Any]) -> None:
    session = scripted_session(["exit"])

    with pytest.raises(CommandCancelledError):
        _ = read_until_valid(session.io, "Value:", lambda _t: True, lambda _t: "no")
