"""Rich console handler for tagprobe log records.

Where: platform/logging/handlers.py
What: Render structured probe events with icons and compact file paths.
Why: Keep console output readable when inspecting many files at once.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class ProbeEventRichHandler(RichHandler):
    """Rich handler that gives probe events dedicated styling."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "probe.fast.accepted": ("⚡", "green"),
        "probe.fast.insufficient": ("↪️", "yellow"),
        "probe.fallback.success": ("🛟", "cyan"),
        "probe.fallback.failed": ("⛔", "red"),
    }
    _EVENT_LABELS: ClassVar[dict[str, str]] = {
        "probe.fast.accepted": "Fast pass accepted ",
        "probe.fast.insufficient": "Fast pass insufficient ",
        "probe.fallback.success": "Relaxed pass decoded ",
        "probe.fallback.failed": "Relaxed pass failed ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 3

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _format_path(self, raw_path: str) -> Text:
        """Format a path keeping only its last few segments."""

        path = self._to_pure_path(raw_path)
        separator = "\\" if isinstance(path, PureWindowsPath) else "/"
        parts = [part for part in path.parts if part and part != path.anchor]

        display = separator.join(parts) if parts else raw_path
        if len(parts) > self._PATH_SEGMENT_LIMIT:
            display = "…" + separator + separator.join(parts[-self._PATH_SEGMENT_LIMIT :])
        elif path.anchor:
            display = path.anchor + display

        text = Text()
        for char in display:
            color = "magenta" if char in {separator, "…"} else "white"
            _ = text.append(char, style=Style(color=color))
        return text

    def _render_probe_message(self, record: logging.LogRecord) -> Text | None:
        event = getattr(record, "probe_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(self._EVENT_LABELS.get(event, f"{event} "))

        source_path = getattr(record, "source_path", None)
        if source_path:
            _ = body.append_text(self._format_path(str(source_path)))

        reason = getattr(record, "reason", None)
        if reason:
            _ = body.append(f" ({reason})")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        probe_text = self._render_probe_message(record)
        if probe_text is not None:
            return probe_text
        return super().render_message(record, message)


__all__ = ["ProbeEventRichHandler"]
