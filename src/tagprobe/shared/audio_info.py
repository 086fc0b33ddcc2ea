# Where: tagprobe.shared.audio_info
# What: Request flags and the AudioInfo result record shared across features.
# Why: Keep the public call contract in one place for the reader, CLI and media session.

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ExtractionRequest:
    """Capability flags selecting which optional fields to extract.

    Title, artist and album are always attempted. Every other field is gated
    by exactly one flag so callers only pay for what they ask for.
    """

    need_cover: bool = False
    need_lyrics: bool = False
    need_audio_properties: bool = False
    # year, genre and album artist
    need_extra_tags: bool = False

    @classmethod
    def everything(cls) -> "ExtractionRequest":
        """Request every optional field."""

        return cls(
            need_cover=True,
            need_lyrics=True,
            need_audio_properties=True,
            need_extra_tags=True,
        )


@dataclass(slots=True, frozen=True)
class AudioInfo:
    """Metadata extracted from one audio file.

    Unrequested fields are always ``None``; requested fields are ``None`` when
    the file does not carry them.
    """

    title: str | None = None
    artist: str | None = None
    album: str | None = None
    cover: bytes | None = None
    lyrics: str | None = None
    duration_ms: int | None = None
    # kbps
    bitrate: int | None = None
    sample_rate: int | None = None
    year: int | None = None
    genre: str | None = None
    album_artist: str | None = None


__all__ = ["AudioInfo", "ExtractionRequest"]
