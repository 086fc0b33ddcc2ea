"""src/tagprobe/ui/cli/commands/inspect.py
What: Execute metadata inspection for the paths given on the command line.
Why: Keep per-file error handling and cover export out of the entry point.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import final

from tagprobe.application.services import read_audio_info
from tagprobe.platform.logging import logger
from tagprobe.shared import AudioInfo, DecodeError
from tagprobe.shared.images import sniff_image_mime
from tagprobe.ui.cli.args.options import InspectArgs
from tagprobe.ui.cli.display import InfoDisplay

_COVER_EXTENSIONS: dict[str, str] = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/bmp": ".bmp",
    "image/webp": ".webp",
}


def _available_path(target: Path) -> Path:
    """Find an available file path by appending a number if needed."""

    if not target.exists():
        return target

    counter = 1
    while True:
        candidate = target.parent / f"{target.stem} ({counter}){target.suffix}"
        if not candidate.exists():
            return candidate
        counter += 1


@dataclass(slots=True)
class InspectResult:
    """Outcome of inspecting one path."""

    path: Path
    info: AudioInfo | None = None
    error: str | None = None
    cover_path: Path | None = None

    @property
    def success(self) -> bool:
        return self.info is not None


@final
class InspectCommand:
    """Command for inspecting audio files."""

    def __init__(self, args: InspectArgs, display: InfoDisplay | None = None) -> None:
        self.args: InspectArgs = args
        self.display: InfoDisplay = display or InfoDisplay()

    def execute(self) -> list[InspectResult]:
        """Inspect every path, continuing past files that fail to decode."""

        results: list[InspectResult] = []
        for path in self.args.paths:
            result = InspectResult(path=path)
            try:
                result.info = read_audio_info(path, self.args.request)
            except DecodeError as exc:
                result.error = exc.message
                logger.error("Failed to read %s: %s", path, exc.message)
                results.append(result)
                continue

            if self.args.save_cover is not None and result.info.cover:
                result.cover_path = self.save_cover(path, result.info.cover, self.args.save_cover)

            if not self.args.quiet:
                self.display.show_info(path, result.info, as_json=self.args.as_json)
            results.append(result)

        if len(results) > 1 and not self.args.quiet and not self.args.as_json:
            succeeded = sum(1 for r in results if r.success)
            self.display.show_summary(succeeded, len(results) - succeeded)
        return results

    @staticmethod
    def save_cover(audio_path: Path, cover: bytes, directory: Path) -> Path:
        """Write ``cover`` into ``directory`` named after ``audio_path``."""

        extension = _COVER_EXTENSIONS.get(sniff_image_mime(cover) or "", ".bin")
        directory.mkdir(parents=True, exist_ok=True)
        target = _available_path(directory / f"{audio_path.stem}{extension}")
        _ = target.write_bytes(cover)
        logger.info("Saved cover of %s to %s", audio_path.name, target)
        return target
