"""
Summary: Project requested fields out of a decoded audio file.
Why: Keep per-field selection and fallback rules independent of how the file was decoded.
"""

from __future__ import annotations

from typing import final

from tagprobe.platform.logging import logger
from tagprobe.shared import AudioInfo, ExtractionRequest

from ..domain.tag_model import StandardKey
from ._tag_utils import duration_to_ms, first_non_empty, parse_year
from .ports import DecodedTagFilePort

__all__ = ["FieldExtractor"]


@final
class FieldExtractor:
    """Build an ``AudioInfo`` from a decoded file.

    Tag fields come from a single container: the primary one, or the first
    secondary one when there is no primary. Containers are never merged.
    """

    def extract(self, decoded: DecodedTagFilePort, request: ExtractionRequest) -> AudioInfo:
        """Extract the fields selected by ``request``.

        Args:
            decoded: Result of a successful decode pass.
            request: Flags selecting the optional fields.

        Returns:
            AudioInfo: Requested fields, ``None`` where the file lacks them.
        """
        values: dict[str, object] = {}

        tag = decoded.primary_or_first_tag()
        if tag is not None:
            logger.debug("Reading fields from %s container", tag.kind)
            values["title"] = tag.standard_field(StandardKey.TITLE)
            values["artist"] = tag.standard_field(StandardKey.ARTIST)
            values["album"] = tag.standard_field(StandardKey.ALBUM)

            if request.need_cover:
                pictures = tag.pictures()
                if pictures:
                    values["cover"] = bytes(pictures[0].data)

            if request.need_lyrics:
                values["lyrics"] = tag.standard_field(StandardKey.LYRICS)

            if request.need_extra_tags:
                values["year"] = parse_year(tag.standard_field(StandardKey.YEAR))
                values["genre"] = tag.standard_field(StandardKey.GENRE)
                values["album_artist"] = tag.standard_field(StandardKey.ALBUM_ARTIST)

        if request.need_audio_properties:
            props = decoded.properties()
            if props is not None:
                values["duration_ms"] = duration_to_ms(props.duration)
                values["sample_rate"] = props.sample_rate or None
                values["bitrate"] = first_non_empty(props.audio_bitrate, props.overall_bitrate)

        return AudioInfo(**values)  # pyright: ignore[reportArgumentType]
