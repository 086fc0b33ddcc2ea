"""Shared fakes for extraction tests."""

from __future__ import annotations

from datetime import timedelta
from os import PathLike
from typing import Callable

import pytest

from tagprobe.features.extraction import (
    AudioProperties,
    DecodedTagFile,
    ParseOptions,
    ParsingMode,
    Picture,
    StandardKey,
    TagContainer,
)
from tagprobe.shared import DecodeError

PNG_BYTES: bytes = b"\x89PNG\r\n\x1a\n" + b"\x00" * 24


class FakeDecoder:
    """Decoder returning canned results per parsing mode and recording calls."""

    def __init__(
        self,
        strict: DecodedTagFile | DecodeError,
        relaxed: DecodedTagFile | DecodeError,
    ) -> None:
        self.strict: DecodedTagFile | DecodeError = strict
        self.relaxed: DecodedTagFile | DecodeError = relaxed
        self.calls: list[ParseOptions] = []

    def read(self, path: str | PathLike[str], options: ParseOptions) -> DecodedTagFile:
        self.calls.append(options)
        result = self.strict if options.parsing_mode is ParsingMode.STRICT else self.relaxed
        if isinstance(result, DecodeError):
            raise result
        return result


@pytest.fixture
def fake_decoder() -> Callable[..., FakeDecoder]:
    """Build a ``FakeDecoder`` from strict/relaxed results."""

    def _factory(
        strict: DecodedTagFile | DecodeError,
        relaxed: DecodedTagFile | DecodeError,
    ) -> FakeDecoder:
        return FakeDecoder(strict, relaxed)

    return _factory


@pytest.fixture
def full_container() -> TagContainer:
    """A container carrying every standard field and a cover."""

    return TagContainer(
        kind="ID3v2",
        fields={
            StandardKey.TITLE: "Night Drive",
            StandardKey.ARTIST: "The Testers",
            StandardKey.ALBUM: "Fixtures",
            StandardKey.ALBUM_ARTIST: "Various",
            StandardKey.GENRE: "Synthwave",
            StandardKey.YEAR: "2019-06-01",
            StandardKey.LYRICS: "first line\nsecond line",
        },
        images=(Picture(data=PNG_BYTES, mime_type="image/png", picture_type=3),),
    )


@pytest.fixture
def full_properties() -> AudioProperties:
    return AudioProperties(
        duration=timedelta(seconds=1.999),
        sample_rate=44100,
        audio_bitrate=320,
        overall_bitrate=325,
        channels=2,
    )
