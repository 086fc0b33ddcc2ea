"""Per-format readers turning mutagen tag objects into tag containers.

Where: src/tagprobe/features/extraction/adapters/container_readers.py
What: Map ID3, Vorbis comment, MP4, APEv2 and ASF tags onto standardized keys and pictures.
Why: Keep format quirks out of the decoder so each tag scheme lives in one class.
"""

from __future__ import annotations

import abc
import base64
import binascii
import struct
from typing import Any, ClassVar

from typing_extensions import override

from mutagen import MutagenError
from mutagen._vorbis import VCommentDict
from mutagen.apev2 import APEv2, BINARY, TEXT
from mutagen.asf import ASFTags
from mutagen.flac import Picture as FlacPicture
from mutagen.flac import VCFLACDict
from mutagen.id3 import ID3
from mutagen.mp4 import MP4Cover, MP4Tags

from tagprobe.platform.logging import logger
from tagprobe.shared.images import sniff_image_mime

from ..domain.tag_model import Picture, StandardKey, TagContainer

__all__ = [
    "ApeReader",
    "AsfReader",
    "BaseContainerReader",
    "Id3Reader",
    "Mp4Reader",
    "VorbisReader",
    "parse_wm_picture",
    "read_container",
]


class BaseContainerReader(abc.ABC):
    """Common container building: key lookup plus picture collection."""

    KIND: ClassVar[str] = ""
    TAGS_CLASS: ClassVar[type]

    # Native keys tried in order for each standardized key.
    TAG_MAPPING: ClassVar[dict[StandardKey, tuple[str, ...]]] = {}

    def matches(self, tags: object) -> bool:
        return isinstance(tags, self.TAGS_CLASS)

    def read(
        self,
        tags: Any,
        *,
        audio_file: object | None = None,
        read_cover_art: bool = True,
        relaxed: bool = False,
    ) -> TagContainer:
        """Build a container from a mutagen tag object.

        Args:
            tags: The mutagen tags instance.
            audio_file: The owning mutagen file, for formats storing pictures outside the tags.
            read_cover_art: Whether to collect pictures at all.
            relaxed: Also decode pictures hidden in comment fields.
        """
        fields: dict[StandardKey, str] = {}
        for key, names in self.TAG_MAPPING.items():
            for name in names:
                value = self._get_tag_value(tags, name)
                if value:
                    fields[key] = value
                    break

        pictures: list[Picture] = []
        if read_cover_art:
            pictures.extend(self._native_pictures(tags, audio_file))
            if relaxed:
                pictures.extend(self._embedded_pictures(tags))

        return TagContainer(kind=self.KIND, fields=fields, images=tuple(pictures))

    @abc.abstractmethod
    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        """Get the first non-empty string for a native key."""
        raise NotImplementedError

    def _native_pictures(self, tags: Any, audio_file: object | None) -> list[Picture]:
        return []

    def _embedded_pictures(self, tags: Any) -> list[Picture]:
        return []

    @staticmethod
    def _first_text(values: Any) -> str | None:
        if values is None:
            return None
        if isinstance(values, (str, bytes)) or not hasattr(values, "__iter__"):
            values = [values]
        for item in values:
            text = str(getattr(item, "value", item)).strip()
            if text:
                return text
        return None


class Id3Reader(BaseContainerReader):
    """ID3v2 (and upgraded ID3v1) frames."""

    KIND: ClassVar[str] = "ID3v2"
    TAGS_CLASS: ClassVar[type] = ID3

    TAG_MAPPING: ClassVar[dict[StandardKey, tuple[str, ...]]] = {
        StandardKey.TITLE: ("TIT2",),
        StandardKey.ARTIST: ("TPE1",),
        StandardKey.ALBUM: ("TALB",),
        StandardKey.ALBUM_ARTIST: ("TPE2",),
        StandardKey.GENRE: ("TCON",),
        StandardKey.YEAR: ("TDRC", "TYER", "TORY"),
        StandardKey.LYRICS: ("USLT",),
    }

    @override
    def _get_tag_value(self, tags: ID3, key: str) -> str | None:
        for frame in tags.getall(key):
            if key == "TCON":
                value = self._first_text(frame.genres)
            else:
                value = self._first_text(frame.text)
            if value:
                return value
        return None

    @override
    def _native_pictures(self, tags: ID3, audio_file: object | None) -> list[Picture]:
        return [
            Picture(data=bytes(frame.data), mime_type=frame.mime or None, picture_type=int(frame.type))
            for frame in tags.getall("APIC")
            if frame.data
        ]


class VorbisReader(BaseContainerReader):
    """Vorbis comments (FLAC, Ogg Vorbis/Opus/Speex/FLAC)."""

    KIND: ClassVar[str] = "VorbisComments"
    TAGS_CLASS: ClassVar[type] = VCommentDict

    TAG_MAPPING: ClassVar[dict[StandardKey, tuple[str, ...]]] = {
        StandardKey.TITLE: ("title",),
        StandardKey.ARTIST: ("artist",),
        StandardKey.ALBUM: ("album",),
        StandardKey.ALBUM_ARTIST: ("albumartist", "album artist", "album_artist"),
        StandardKey.GENRE: ("genre",),
        StandardKey.YEAR: ("date", "year", "originaldate"),
        StandardKey.LYRICS: ("lyrics", "unsyncedlyrics"),
    }

    @override
    def _get_tag_value(self, tags: VCommentDict, key: str) -> str | None:
        return self._first_text(tags.get(key))

    @override
    def _native_pictures(self, tags: VCommentDict, audio_file: object | None) -> list[Picture]:
        blocks = getattr(audio_file, "pictures", None) or []
        pictures = [
            Picture(data=bytes(block.data), mime_type=block.mime or None, picture_type=int(block.type))
            for block in blocks
            if block.data
        ]
        # Ogg streams keep pictures only in the comment block.
        if not isinstance(tags, VCFLACDict):
            pictures.extend(self._block_pictures(tags))
        return pictures

    @override
    def _embedded_pictures(self, tags: VCommentDict) -> list[Picture]:
        pictures = self._block_pictures(tags) if isinstance(tags, VCFLACDict) else []

        mimes = tags.get("coverartmime") or []
        for index, raw in enumerate(tags.get("coverart") or []):
            try:
                data = base64.b64decode(raw)
            except (binascii.Error, ValueError) as exc:
                logger.debug("Skipping malformed COVERART: %s", exc)
                continue
            if data:
                mime = mimes[index] if index < len(mimes) else sniff_image_mime(data)
                pictures.append(Picture(data=data, mime_type=mime, picture_type=None))
        return pictures

    @staticmethod
    def _block_pictures(tags: VCommentDict) -> list[Picture]:
        pictures: list[Picture] = []
        for raw in tags.get("metadata_block_picture") or []:
            try:
                block = FlacPicture(base64.b64decode(raw))
            except (binascii.Error, MutagenError, ValueError, struct.error) as exc:
                logger.debug("Skipping malformed METADATA_BLOCK_PICTURE: %s", exc)
                continue
            if block.data:
                pictures.append(
                    Picture(data=bytes(block.data), mime_type=block.mime or None, picture_type=int(block.type))
                )
        return pictures


class Mp4Reader(BaseContainerReader):
    """iTunes-style MP4 atoms."""

    KIND: ClassVar[str] = "MP4"
    TAGS_CLASS: ClassVar[type] = MP4Tags

    TAG_MAPPING: ClassVar[dict[StandardKey, tuple[str, ...]]] = {
        StandardKey.TITLE: ("\xa9nam",),
        StandardKey.ARTIST: ("\xa9ART",),
        StandardKey.ALBUM: ("\xa9alb",),
        StandardKey.ALBUM_ARTIST: ("aART",),
        StandardKey.GENRE: ("\xa9gen",),
        StandardKey.YEAR: ("\xa9day",),
        StandardKey.LYRICS: ("\xa9lyr",),
    }

    @override
    def _get_tag_value(self, tags: MP4Tags, key: str) -> str | None:
        return self._first_text(tags.get(key))

    @override
    def _native_pictures(self, tags: MP4Tags, audio_file: object | None) -> list[Picture]:
        pictures: list[Picture] = []
        for cover in tags.get("covr") or []:
            if not cover:
                continue
            fmt = getattr(cover, "imageformat", None)
            mime = "image/png" if fmt == MP4Cover.FORMAT_PNG else "image/jpeg"
            pictures.append(Picture(data=bytes(cover), mime_type=mime, picture_type=None))
        return pictures


class ApeReader(BaseContainerReader):
    """APEv2 items (Monkey's Audio, WavPack, Musepack, trailing tags on MP3)."""

    KIND: ClassVar[str] = "APEv2"
    TAGS_CLASS: ClassVar[type] = APEv2

    TAG_MAPPING: ClassVar[dict[StandardKey, tuple[str, ...]]] = {
        StandardKey.TITLE: ("Title",),
        StandardKey.ARTIST: ("Artist",),
        StandardKey.ALBUM: ("Album",),
        StandardKey.ALBUM_ARTIST: ("Album Artist", "AlbumArtist"),
        StandardKey.GENRE: ("Genre",),
        StandardKey.YEAR: ("Year", "Date"),
        StandardKey.LYRICS: ("Lyrics", "Unsynced Lyrics"),
    }

    @override
    def _get_tag_value(self, tags: APEv2, key: str) -> str | None:
        value = tags.get(key)
        if value is None or value.kind != TEXT:
            return None
        return self._first_text(str(value).split("\0"))

    @override
    def _native_pictures(self, tags: APEv2, audio_file: object | None) -> list[Picture]:
        pictures: list[Picture] = []
        for key, value in tags.items():
            if not key.lower().startswith("cover art") or value.kind != BINARY:
                continue
            # Binary cover items are "<file name>\0<image bytes>".
            _, sep, data = bytes(value.value).partition(b"\0")
            if not sep or not data:
                continue
            pictures.append(Picture(data=data, mime_type=sniff_image_mime(data), picture_type=None))
        return pictures


class AsfReader(BaseContainerReader):
    """Windows Media (ASF) attributes."""

    KIND: ClassVar[str] = "ASF"
    TAGS_CLASS: ClassVar[type] = ASFTags

    TAG_MAPPING: ClassVar[dict[StandardKey, tuple[str, ...]]] = {
        StandardKey.TITLE: ("Title",),
        StandardKey.ARTIST: ("Author", "WM/AlbumArtist"),
        StandardKey.ALBUM: ("WM/AlbumTitle",),
        StandardKey.ALBUM_ARTIST: ("WM/AlbumArtist",),
        StandardKey.GENRE: ("WM/Genre",),
        StandardKey.YEAR: ("WM/Year",),
        StandardKey.LYRICS: ("WM/Lyrics",),
    }

    @override
    def _get_tag_value(self, tags: ASFTags, key: str) -> str | None:
        return self._first_text(tags.get(key))

    @override
    def _native_pictures(self, tags: ASFTags, audio_file: object | None) -> list[Picture]:
        pictures: list[Picture] = []
        for attribute in tags.get("WM/Picture") or []:
            try:
                picture = parse_wm_picture(bytes(attribute.value))
            except (ValueError, struct.error) as exc:
                logger.debug("Skipping malformed WM/Picture: %s", exc)
                continue
            pictures.append(picture)
        return pictures


_WM_PICTURE_HEADER = 5


def _read_utf16z(data: bytes, pos: int) -> tuple[str, int]:
    end = pos
    while end + 1 < len(data):
        if data[end : end + 2] == b"\x00\x00":
            return data[pos:end].decode("utf-16-le", "replace"), end + 2
        end += 2
    raise ValueError("unterminated UTF-16 string")


def parse_wm_picture(data: bytes) -> Picture:
    """Parse a WM/Picture attribute: type, size, MIME, description, image bytes."""

    if len(data) < _WM_PICTURE_HEADER:
        raise ValueError("truncated picture header")
    picture_type = data[0]
    (size,) = struct.unpack_from("<I", data, 1)
    mime, pos = _read_utf16z(data, _WM_PICTURE_HEADER)
    _description, pos = _read_utf16z(data, pos)
    image = data[pos : pos + size]
    if not image:
        raise ValueError("empty picture data")
    return Picture(data=image, mime_type=mime or sniff_image_mime(image), picture_type=picture_type)


_READERS: tuple[BaseContainerReader, ...] = (
    Id3Reader(),
    VorbisReader(),
    Mp4Reader(),
    ApeReader(),
    AsfReader(),
)


def read_container(
    tags: object,
    *,
    audio_file: object | None = None,
    read_cover_art: bool = True,
    relaxed: bool = False,
) -> TagContainer | None:
    """Convert any supported mutagen tag object into a container.

    Returns None for tag types without a reader.
    """
    for reader in _READERS:
        if reader.matches(tags):
            return reader.read(
                tags,
                audio_file=audio_file,
                read_cover_art=read_cover_art,
                relaxed=relaxed,
            )
    logger.debug("No container reader for tags of type %s", type(tags).__name__)
    return None
