"""No-op media session used where no native binding exists."""

from __future__ import annotations

from typing import final

from tagprobe.platform.logging import logger

from ..domain.models import DisplayUpdate, PlaybackState, TimelineUpdate
from ..usecases.ports import ControlEventCallback


@final
class NullMediaSession:
    """Accept every update, publish nothing, never emit control events.

    The last update of each kind is kept so callers and tests can inspect it.
    """

    def __init__(self) -> None:
        self.state: PlaybackState | None = None
        self.display: DisplayUpdate | None = None
        self.timeline: TimelineUpdate | None = None
        self.callbacks: list[ControlEventCallback] = []
        self.closed: bool = False

    def subscribe(self, callback: ControlEventCallback) -> None:
        self.callbacks.append(callback)

    def update_state(self, state: PlaybackState) -> None:
        self.state = state

    def update_display(
        self,
        title: str,
        artist: str,
        image_path: str | None = None,
        image_data: bytes | None = None,
    ) -> None:
        self.display = DisplayUpdate(
            title=title,
            artist=artist,
            image_path=image_path,
            image_data=image_data,
        )
        logger.debug("Media session display: %s - %s", artist, title)

    def update_timeline(self, position_ms: int, duration_ms: int) -> None:
        self.timeline = TimelineUpdate(position_ms=position_ms, duration_ms=duration_ms)

    def close(self) -> None:
        self.callbacks.clear()
        self.closed = True


__all__ = ["NullMediaSession"]
