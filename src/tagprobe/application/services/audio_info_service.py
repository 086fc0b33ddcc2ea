"""Where: src/tagprobe/application/services/audio_info_service.py
What: Compose the mutagen decoder with the extraction use cases.
Why: Give hosts one call that needs no wiring of their own.
"""

from __future__ import annotations

from functools import cache
from os import PathLike

from tagprobe.features.extraction.adapters import MutagenDecoder
from tagprobe.features.extraction.usecases.audio_info_reader import AudioInfoReader
from tagprobe.shared import AudioInfo, ExtractionRequest


@cache
def default_reader() -> AudioInfoReader:
    """Return the shared mutagen-backed reader."""

    return AudioInfoReader(MutagenDecoder())


def read_audio_info(
    path: str | PathLike[str],
    request: ExtractionRequest | None = None,
) -> AudioInfo:
    """Read metadata from ``path``.

    Args:
        path: Audio file to read.
        request: Flags selecting optional fields; tags only when omitted.

    Returns:
        AudioInfo: Requested fields found in the file.

    Raises:
        DecodeError: If the file cannot be decoded.
    """
    return default_reader().read(path, request)


__all__ = ["default_reader", "read_audio_info"]
