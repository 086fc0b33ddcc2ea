"""
Summary: Port for platform media-session bindings.
Why: Keep OS-specific now-playing integrations out of the extraction core.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from ..domain.models import MediaControlEvent, PlaybackState

ControlEventCallback = Callable[[MediaControlEvent], None]


@runtime_checkable
class MediaSessionPort(Protocol):
    """Capability interface of an OS media-control surface."""

    def subscribe(self, callback: ControlEventCallback) -> None:
        """Register a callback for transport button presses."""
        ...

    def update_state(self, state: PlaybackState) -> None:
        """Publish the playback status."""
        ...

    def update_display(
        self,
        title: str,
        artist: str,
        image_path: str | None = None,
        image_data: bytes | None = None,
    ) -> None:
        """Publish now-playing text and artwork."""
        ...

    def update_timeline(self, position_ms: int, duration_ms: int) -> None:
        """Publish playback position and length."""
        ...

    def close(self) -> None:
        """Release the platform session."""
        ...


__all__ = ["ControlEventCallback", "MediaSessionPort"]
