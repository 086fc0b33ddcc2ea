"""Mutagen-backed implementation of the decoder port.

Where: src/tagprobe/features/extraction/adapters/mutagen_decoder.py
What: Decode audio files in strict or relaxed mode into ``DecodedTagFile`` values.
Why: Confine every mutagen call and error type to one adapter.

Strict mode trusts ``mutagen.File``: the best-scoring format only, its own tag
block only, and only pictures stored where the format puts them. Relaxed mode
tries every format whose header scores, salvages standalone ID3/APEv2 tags
when no format loads, collects stray tag blocks as secondary containers and
decodes pictures from non-standard comment fields.
"""

from __future__ import annotations

import math
import os
from datetime import timedelta
from decimal import Decimal
from os import PathLike
from typing import Any, ClassVar, final

import mutagen
from mutagen import FileType, MutagenError
from mutagen.aac import AAC
from mutagen.aiff import AIFF
from mutagen.apev2 import APENoHeaderError, APEv2
from mutagen.asf import ASF
from mutagen.dsf import DSF
from mutagen.flac import FLAC
from mutagen.id3 import ID3, ID3NoHeaderError
from mutagen.monkeysaudio import MonkeysAudio
from mutagen.mp3 import MP3
from mutagen.mp4 import MP4
from mutagen.musepack import Musepack
from mutagen.oggflac import OggFLAC
from mutagen.oggopus import OggOpus
from mutagen.oggspeex import OggSpeex
from mutagen.oggvorbis import OggVorbis
from mutagen.optimfrog import OptimFROG
from mutagen.trueaudio import TrueAudio
from mutagen.wave import WAVE
from mutagen.wavpack import WavPack

from tagprobe.platform.logging import logger
from tagprobe.shared import DecodeError

from ..domain.tag_model import (
    AudioProperties,
    DecodedTagFile,
    ParseOptions,
    ParsingMode,
    TagContainer,
)
from .container_readers import read_container

__all__ = ["MutagenDecoder", "seconds_to_timedelta"]

_HEADER_SIZE = 128


def _kbps(bits_per_second: float | int | None) -> int | None:
    if not bits_per_second or bits_per_second <= 0:
        return None
    return round(bits_per_second / 1000)


def seconds_to_timedelta(seconds: float) -> timedelta:
    """Convert a stream length in seconds to a timedelta, truncated to microseconds."""
    if not math.isfinite(seconds) or seconds <= 0:
        return timedelta(0)
    # str() keeps the shortest round-tripping decimal, so 1.999 stays 1.999.
    return timedelta(microseconds=int(Decimal(str(seconds)) * 1_000_000))


@final
class MutagenDecoder:
    """Read audio files with mutagen."""

    # Relaxed mode candidates, in mutagen's own tie-breaking order.
    FORMATS: ClassVar[tuple[type[FileType], ...]] = (
        MP3,
        TrueAudio,
        OggSpeex,
        OggVorbis,
        OggFLAC,
        FLAC,
        AIFF,
        MonkeysAudio,
        WavPack,
        Musepack,
        OptimFROG,
        ASF,
        OggOpus,
        AAC,
        MP4,
        DSF,
        WAVE,
    )

    def read(self, path: str | PathLike[str], options: ParseOptions) -> DecodedTagFile:
        """Decode ``path`` according to ``options``.

        Raises:
            DecodeError: If the file is missing, unrecognized or unreadable.
        """
        if options.parsing_mode is ParsingMode.RELAXED:
            return self._read_relaxed(path, options)
        return self._read_strict(path, options)

    def _read_strict(self, path: str | PathLike[str], options: ParseOptions) -> DecodedTagFile:
        try:
            audio = mutagen.File(path)
        except (MutagenError, OSError) as exc:
            raise DecodeError(str(exc), path) from exc
        if audio is None:
            raise DecodeError("unrecognized audio format", path)

        logger.debug("Strict decode of %s as %s", path, type(audio).__name__)
        return self._build(path, audio, options, relaxed=False)

    def _read_relaxed(self, path: str | PathLike[str], options: ParseOptions) -> DecodedTagFile:
        last_error: str | None = None
        for kind in self._rank_formats(path):
            try:
                audio = kind(path)
            except Exception as exc:
                logger.debug("Relaxed decode of %s as %s failed: %s", path, kind.__name__, exc)
                last_error = str(exc) or type(exc).__name__
                continue
            logger.debug("Relaxed decode of %s as %s", path, kind.__name__)
            return self._build(path, audio, options, relaxed=True)

        salvaged = self._salvage_tags(path, options)
        if salvaged is not None:
            return salvaged
        raise DecodeError(last_error or "unrecognized audio format", path)

    def _rank_formats(self, path: str | PathLike[str]) -> list[type[FileType]]:
        """Return every format whose header score is positive, best first."""

        filename = os.fspath(path)
        try:
            with open(filename, "rb") as fileobj:
                header = fileobj.read(_HEADER_SIZE)
                scored: list[tuple[int, int, type[FileType]]] = []
                for index, kind in enumerate(self.FORMATS):
                    _ = fileobj.seek(0)
                    score = kind.score(filename, fileobj, header)
                    if score > 0:
                        scored.append((score, -index, kind))
        except OSError as exc:
            raise DecodeError(exc.strerror or str(exc), path) from exc

        scored.sort(key=lambda item: (item[0], item[1]), reverse=True)
        return [kind for _, _, kind in scored]

    def _build(
        self,
        path: str | PathLike[str],
        audio: Any,
        options: ParseOptions,
        *,
        relaxed: bool,
    ) -> DecodedTagFile:
        primary: TagContainer | None = None
        secondary: list[TagContainer] = []

        if options.read_tags:
            if audio.tags is not None:
                primary = read_container(
                    audio.tags,
                    audio_file=audio,
                    read_cover_art=options.read_cover_art,
                    relaxed=relaxed,
                )
            if relaxed:
                secondary = self._stray_containers(path, audio.tags, options)

        properties = self._properties(path, audio.info) if options.read_properties else None
        return DecodedTagFile(
            file_type=type(audio).__name__,
            primary=primary,
            secondary=tuple(secondary),
            audio_properties=properties,
        )

    def _stray_containers(
        self,
        path: str | PathLike[str],
        owned: object | None,
        options: ParseOptions,
    ) -> list[TagContainer]:
        """Collect ID3 and APEv2 blocks the format itself did not claim."""

        containers: list[TagContainer] = []
        for tags in (
            None if isinstance(owned, ID3) else self._load_id3(path),
            None if isinstance(owned, APEv2) else self._load_ape(path),
        ):
            if tags is None or not len(tags):
                continue
            container = read_container(tags, read_cover_art=options.read_cover_art, relaxed=True)
            if container is not None:
                containers.append(container)
        return containers

    def _salvage_tags(self, path: str | PathLike[str], options: ParseOptions) -> DecodedTagFile | None:
        """Build a tag-only result when no audio format could be parsed."""

        containers = self._stray_containers(path, None, options) if options.read_tags else []
        if not containers:
            return None
        logger.debug("Salvaged %d tag block(s) from %s", len(containers), path)
        primary, *rest = containers
        return DecodedTagFile(file_type=primary.kind, primary=primary, secondary=tuple(rest))

    @staticmethod
    def _load_id3(path: str | PathLike[str]) -> ID3 | None:
        try:
            return ID3(path)
        except ID3NoHeaderError:
            return None
        except MutagenError as exc:
            logger.debug("Ignoring unreadable ID3 block in %s: %s", path, exc)
            return None

    @staticmethod
    def _load_ape(path: str | PathLike[str]) -> APEv2 | None:
        try:
            return APEv2(path)
        except APENoHeaderError:
            return None
        except MutagenError as exc:
            logger.debug("Ignoring unreadable APEv2 block in %s: %s", path, exc)
            return None

    @staticmethod
    def _properties(path: str | PathLike[str], info: Any) -> AudioProperties:
        length = float(getattr(info, "length", 0) or 0)
        overall: int | None = None
        if length > 0:
            try:
                overall = _kbps(os.path.getsize(path) * 8 / length)
            except OSError:
                overall = None

        return AudioProperties(
            duration=seconds_to_timedelta(length),
            sample_rate=getattr(info, "sample_rate", None) or None,
            audio_bitrate=_kbps(getattr(info, "bitrate", None)),
            overall_bitrate=overall,
            channels=getattr(info, "channels", None) or None,
        )
