"""Value objects shared by CLI commands and the menu loop."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import final


@final
@dataclass(slots=True, frozen=True)
class CommandResult:
    """Message produced by a command for display."""

    message: str
    cancelled: bool = False


class MenuState(Enum):
    """States of the interactive menu loop."""

    MAIN_MENU = auto()
    RUNNING_COMMAND = auto()
    CONFIRM_EXIT = auto()
    TERMINATED = auto()


__all__ = ["CommandResult", "MenuState"]
