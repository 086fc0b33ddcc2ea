"""In-memory representation of a decoded audio file.

Where: src/tagprobe/features/extraction/domain/tag_model.py
What: Define tag containers, pictures, audio properties and decode options.
Why: Give the probe and extractor a library-neutral model they can be tested against.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum

__all__ = [
    "AudioProperties",
    "DecodedTagFile",
    "ParseOptions",
    "ParsingMode",
    "Picture",
    "StandardKey",
    "TagContainer",
]


class StandardKey(str, Enum):
    """Format-neutral tag keys understood by every container."""

    TITLE = "title"
    ARTIST = "artist"
    ALBUM = "album"
    ALBUM_ARTIST = "album_artist"
    GENRE = "genre"
    YEAR = "year"
    LYRICS = "lyrics"


class ParsingMode(str, Enum):
    """How strictly a decode pass follows the container format."""

    STRICT = "strict"
    RELAXED = "relaxed"


@dataclass(slots=True, frozen=True)
class ParseOptions:
    """Options handed to a decoder for a single pass."""

    parsing_mode: ParsingMode = ParsingMode.STRICT
    read_tags: bool = True
    read_cover_art: bool = True
    read_properties: bool = True


@dataclass(slots=True, frozen=True)
class Picture:
    """An embedded image."""

    data: bytes
    mime_type: str | None = None
    # ID3/FLAC picture type code, 3 is the front cover
    picture_type: int | None = None


@dataclass(slots=True, frozen=True)
class AudioProperties:
    """Structural stream characteristics. Bitrates are in kbps."""

    duration: timedelta = timedelta(0)
    sample_rate: int | None = None
    audio_bitrate: int | None = None
    overall_bitrate: int | None = None
    channels: int | None = None


@dataclass(slots=True, frozen=True)
class TagContainer:
    """One tag block (ID3v2, Vorbis comments, MP4 atoms, ...) of a file."""

    kind: str
    fields: Mapping[StandardKey, str] = field(default_factory=dict)
    images: tuple[Picture, ...] = ()

    def standard_field(self, key: StandardKey) -> str | None:
        """Return the value stored under ``key``, if any."""

        value = self.fields.get(key)
        return value if value else None

    def pictures(self) -> tuple[Picture, ...]:
        """Return embedded pictures in file order."""

        return self.images


@dataclass(slots=True, frozen=True)
class DecodedTagFile:
    """Result of one successful decode pass.

    Containers are ordered by priority: ``primary`` is the one the decoding
    library treats as authoritative, ``secondary`` holds the rest.
    """

    file_type: str
    primary: TagContainer | None = None
    secondary: tuple[TagContainer, ...] = ()
    audio_properties: AudioProperties | None = None

    def primary_tag(self) -> TagContainer | None:
        return self.primary

    def secondary_tags(self) -> tuple[TagContainer, ...]:
        return self.secondary

    def primary_or_first_tag(self) -> TagContainer | None:
        """Return the primary container, else the first secondary one."""

        if self.primary is not None:
            return self.primary
        return self.secondary[0] if self.secondary else None

    def properties(self) -> AudioProperties | None:
        return self.audio_properties
