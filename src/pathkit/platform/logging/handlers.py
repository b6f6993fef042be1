"""Rich console handler rendering filesystem events.

Where: platform/logging/handlers.py
What: Style records tagged with a ``path_event`` extra and their paths.
Why: Keep presentation details out of the providers that emit the events.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class PathRichHandler(RichHandler):
    """Rich handler that highlights path separators in filesystem events."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        "fs.chdir.enter": ("📂", "cyan", "Entering "),
        "fs.chdir.restore": ("↩️", "cyan", "Restored "),
        "fs.remove.failed": ("🗑️", "red", "Could not remove "),
        "fs.move.failed": ("📦", "red", "Could not move "),
        "fs.read.failed": ("📄", "yellow", "Could not read "),
        "fs.write.failed": ("✏️", "red", "Could not write "),
        "fs.list.failed": ("📁", "yellow", "Could not list "),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4
    _SEPARATOR: ClassVar[str] = "/"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Render ``path`` keeping only its last few segments.

        Args:
            path: Path text as handed to the provider.

        Returns:
            Text: Styled path with magenta separators and an ellipsis when truncated.
        """
        separator = self._SEPARATOR
        absolute = path.startswith(separator)
        parts = [part for part in path.split(separator) if part]

        truncated = len(parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            parts = parts[-self._PATH_SEGMENT_LIMIT:]

        display = ""
        if truncated:
            display = "…" + separator
        elif absolute:
            display = separator
        display += separator.join(parts)
        if not display:
            display = path or "."

        text = Text()
        for char in display:
            if char == separator or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_path_event(self, record: logging.LogRecord) -> Text | None:
        event = getattr(record, "path_event", None)
        if not isinstance(event, str):
            return None

        icon, color, prefix = self._EVENT_STYLES.get(event, ("ℹ️", "blue", ""))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(prefix)

        path = getattr(record, "path", None)
        if path is not None:
            _ = body.append_text(self._format_path(str(path)))

        destination = getattr(record, "destination", None)
        if destination is not None:
            _ = body.append(" → ")
            _ = body.append_text(self._format_path(str(destination)))

        error_message = getattr(record, "error_message", None)
        if error_message:
            _ = body.append(f" ({error_message})")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render filesystem events with dedicated styling."""

        event_text = self._render_path_event(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["PathRichHandler"]
