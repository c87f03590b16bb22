"""Interactive command line interface."""

from mathmenu.ui.cli.cli import CommandProcessor, MenuLoop, build_commands, main

__all__ = ["CommandProcessor", "MenuLoop", "build_commands", "main"]
