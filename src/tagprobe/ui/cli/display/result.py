"""src/tagprobe/ui/cli/display/result.py
What: Render extracted AudioInfo records as Rich tables or JSON.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

import base64
from dataclasses import asdict
from pathlib import Path
from typing import Any, final

from rich.console import Console
from rich.table import Table

from tagprobe.shared import AudioInfo
from tagprobe.shared.images import sniff_image_mime


def audio_info_to_dict(info: AudioInfo) -> dict[str, Any]:
    """Convert ``info`` into JSON-serializable values."""

    payload = asdict(info)
    if info.cover is not None:
        payload["cover"] = base64.b64encode(info.cover).decode("ascii")
    return payload


def describe_cover(cover: bytes) -> str:
    mime = sniff_image_mime(cover) or "unknown type"
    return f"{len(cover):,} bytes ({mime})"


@final
class InfoDisplay:
    """Handles AudioInfo display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_info(self, path: Path, info: AudioInfo, *, as_json: bool = False) -> None:
        """Display one extraction result."""

        if as_json:
            payload = {"path": str(path), **audio_info_to_dict(info)}
            self.console.print_json(data=payload)
            return

        table = Table(title=str(path), show_header=False, title_justify="left")
        table.add_column("Field", style="cyan", no_wrap=True)
        table.add_column("Value")
        for name, value in asdict(info).items():
            if value is None:
                continue
            if name == "cover":
                rendered = describe_cover(value)
            elif name == "lyrics":
                first_line, _, rest = str(value).partition("\n")
                rendered = first_line + (" …" if rest else "")
            elif name == "bitrate":
                rendered = f"{value} kbps"
            elif name == "sample_rate":
                rendered = f"{value} Hz"
            elif name == "duration_ms":
                minutes, millis = divmod(int(value), 60_000)
                rendered = f"{minutes}:{millis / 1000:06.3f}"
            else:
                rendered = str(value)
            table.add_row(name, rendered)
        self.console.print(table)

    def show_summary(self, succeeded: int, failed: int) -> None:
        """Display totals for multi-file runs."""

        style = "red" if failed else "green"
        self.console.print(f"[{style}]Inspected {succeeded + failed} file(s): {succeeded} ok, {failed} failed[/{style}]")
