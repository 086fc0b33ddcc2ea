"""Data structures exchanged with an OS media-control surface."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MediaControlEvent(str, Enum):
    """Transport button presses reported by the media surface."""

    PLAY = "play"
    PAUSE = "pause"
    NEXT = "next"
    PREVIOUS = "previous"
    UNKNOWN = "unknown"

    @staticmethod
    def from_button_name(name: str) -> "MediaControlEvent":
        """Translate a platform button name, falling back to ``UNKNOWN``."""

        normalized = name.strip().lower()
        for event in MediaControlEvent:
            if event.value == normalized:
                return event
        return MediaControlEvent.UNKNOWN


class PlaybackState(str, Enum):
    """Playback status shown by the media surface."""

    PLAYING = "playing"
    PAUSED = "paused"


@dataclass(slots=True, frozen=True)
class DisplayUpdate:
    """Now-playing text and artwork. ``image_data`` wins over ``image_path``."""

    title: str
    artist: str
    image_path: str | None = None
    image_data: bytes | None = None


@dataclass(slots=True, frozen=True)
class TimelineUpdate:
    """Playback position and length in milliseconds."""

    position_ms: int
    duration_ms: int

    def __post_init__(self) -> None:
        if self.position_ms < 0 or self.duration_ms < 0:
            raise ValueError("timeline values must be non-negative")


__all__ = ["DisplayUpdate", "MediaControlEvent", "PlaybackState", "TimelineUpdate"]
