# Where: tagprobe.features.media_session.__init__
# What: Expose the media session port, value types and factory.
# Why: Let hosts publish now-playing data without touching platform code.

from .adapters import NullMediaSession, create_media_session, register_media_session
from .domain.models import DisplayUpdate, MediaControlEvent, PlaybackState, TimelineUpdate
from .usecases.now_playing import publish_now_playing
from .usecases.ports import ControlEventCallback, MediaSessionPort

__all__ = [
    "ControlEventCallback",
    "DisplayUpdate",
    "MediaControlEvent",
    "MediaSessionPort",
    "NullMediaSession",
    "PlaybackState",
    "TimelineUpdate",
    "create_media_session",
    "publish_now_playing",
    "register_media_session",
]
