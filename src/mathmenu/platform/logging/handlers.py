"""Rich console handler with styling for command lifecycle events.

Where: platform/logging/handlers.py
What: Render ``command_event`` log records with an icon and colour.
Why: Keep structured command logging readable next to interactive prompts.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class MenuRichHandler(RichHandler):
    """Rich handler that renders command lifecycle events compactly."""

    _COMMAND_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "command.start": ("▶", "cyan"),
        "command.complete": ("✔", "green"),
        "command.cancelled": ("↩", "yellow"),
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with compact defaults.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _render_command_message(self, record: logging.LogRecord) -> Text | None:
        """Render a structured command event, or ``None`` for plain records."""

        event = getattr(record, "command_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._COMMAND_STYLES.get(event, ("ℹ", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        command = getattr(record, "command", None)
        label = {
            "command.start": "Started",
            "command.complete": "Completed",
            "command.cancelled": "Cancelled",
        }.get(event, "Event")
        _ = body.append(label)
        if command:
            _ = body.append(f" {command}")

        duration = getattr(record, "duration_ms", None)
        if isinstance(duration, (int, float)):
            _ = body.append(f" ({duration:.2f} ms)")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for command events."""

        command_text = self._render_command_message(record)
        if command_text is not None:
            return command_text
        return super().render_message(record, message)


__all__ = ["MenuRichHandler"]
