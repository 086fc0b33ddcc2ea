"""Where: src/tagprobe/features/media_session/usecases/now_playing.py
What: Feed an extracted AudioInfo into a media session.
Why: Cover bytes from extraction map directly onto the session's image data.
"""

from __future__ import annotations

from tagprobe.shared import AudioInfo

from .ports import MediaSessionPort


def publish_now_playing(
    session: MediaSessionPort,
    info: AudioInfo,
    *,
    position_ms: int = 0,
    image_path: str | None = None,
) -> None:
    """Publish display and timeline for ``info``.

    Missing title or artist are sent as empty strings and a missing duration
    as zero. ``image_path`` is only used when ``info`` carries no cover.
    """
    session.update_display(
        info.title or "",
        info.artist or "",
        image_path=None if info.cover else image_path,
        image_data=info.cover,
    )
    session.update_timeline(max(position_ms, 0), info.duration_ms or 0)


__all__ = ["publish_now_playing"]
