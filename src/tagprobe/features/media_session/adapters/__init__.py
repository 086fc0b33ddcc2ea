"""Summary: Platform-keyed media session factory.
Why: Pick a native binding when one exists and a no-op session otherwise."""

from __future__ import annotations

import sys
from collections.abc import Callable

from tagprobe.platform.logging import logger

from ..usecases.ports import MediaSessionPort
from .null_session import NullMediaSession

SessionFactory = Callable[[], MediaSessionPort]

# Native bindings register here by ``sys.platform`` value.
_FACTORIES: dict[str, SessionFactory] = {}


def register_media_session(platform: str, factory: SessionFactory) -> None:
    """Register a native session factory for ``platform``."""

    _FACTORIES[platform] = factory


def create_media_session(platform: str | None = None) -> MediaSessionPort:
    """Create the media session for ``platform`` (defaults to ``sys.platform``)."""

    key = platform or sys.platform
    factory = _FACTORIES.get(key)
    if factory is None:
        logger.debug("No native media session for %s; using no-op session", key)
        return NullMediaSession()
    return factory()


__all__ = ["NullMediaSession", "create_media_session", "register_media_session"]
