"""Audio file metadata reading facade.

Where: src/tagprobe/features/extraction/usecases/audio_info_reader.py
What: Wire the probe strategy and field extractor into one read operation.
Why: Offer hosts a single synchronous call that decodes and extracts.
"""

from __future__ import annotations

from os import PathLike
from typing import final

from tagprobe.platform.logging import logger
from tagprobe.shared import AudioInfo, ExtractionRequest

from .field_extractor import FieldExtractor
from .ports import TagDecoderPort
from .probe_strategy import ProbeStrategy

__all__ = ["AudioInfoReader"]


@final
class AudioInfoReader:
    """Read ``AudioInfo`` records from audio files.

    Holds no per-call state, so one instance can serve concurrent callers.
    """

    def __init__(self, decoder: TagDecoderPort) -> None:
        self._probe: ProbeStrategy = ProbeStrategy(decoder)
        self._extractor: FieldExtractor = FieldExtractor()

    def read(
        self,
        path: str | PathLike[str],
        request: ExtractionRequest | None = None,
    ) -> AudioInfo:
        """Decode ``path`` and extract the fields selected by ``request``.

        Args:
            path: Audio file to read.
            request: Optional field flags; defaults to tags only.

        Returns:
            AudioInfo: Extracted metadata.

        Raises:
            DecodeError: If the file cannot be decoded in either parsing mode.
        """
        request = request or ExtractionRequest()
        decoded = self._probe.decode(path, request)
        info = self._extractor.extract(decoded, request)
        logger.debug("Extracted %s - %s from %s", info.artist, info.title, path)
        return info

