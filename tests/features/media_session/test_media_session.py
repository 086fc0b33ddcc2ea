"""Tests for the media session port, factory and now-playing publisher."""

from __future__ import annotations

import pytest
from pytest_mock import MockerFixture

import tagprobe.features.media_session.adapters as session_adapters
from tagprobe.features.media_session import (
    DisplayUpdate,
    MediaControlEvent,
    MediaSessionPort,
    NullMediaSession,
    PlaybackState,
    TimelineUpdate,
    create_media_session,
    publish_now_playing,
    register_media_session,
)
from tagprobe.shared import AudioInfo


class TestModels:
    """Test cases for media session value types."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("play", MediaControlEvent.PLAY),
            (" Pause ", MediaControlEvent.PAUSE),
            ("NEXT", MediaControlEvent.NEXT),
            ("previous", MediaControlEvent.PREVIOUS),
            ("fast_forward", MediaControlEvent.UNKNOWN),
        ],
    )
    def test_from_button_name(self, name: str, expected: MediaControlEvent) -> None:
        assert MediaControlEvent.from_button_name(name) is expected

    def test_negative_timeline_rejected(self) -> None:
        with pytest.raises(ValueError):
            _ = TimelineUpdate(position_ms=-1, duration_ms=1000)


class TestNullMediaSession:
    """Test cases for the no-op session."""

    def test_satisfies_port(self) -> None:
        assert isinstance(NullMediaSession(), MediaSessionPort)

    def test_records_updates_and_close(self) -> None:
        session = NullMediaSession()
        events: list[MediaControlEvent] = []
        session.subscribe(events.append)

        session.update_state(PlaybackState.PLAYING)
        session.update_timeline(500, 2000)
        session.close()

        assert session.state is PlaybackState.PLAYING
        assert session.timeline == TimelineUpdate(position_ms=500, duration_ms=2000)
        assert session.callbacks == []
        assert session.closed
        assert events == []


class TestFactory:
    """Test cases for platform session selection."""

    def test_unregistered_platform_gets_null_session(self) -> None:
        assert isinstance(create_media_session("plan9"), NullMediaSession)

    def test_registered_factory_is_used(self, monkeypatch: pytest.MonkeyPatch) -> None:
        native = NullMediaSession()
        monkeypatch.setattr(session_adapters, "_FACTORIES", {})

        register_media_session("testos", lambda: native)

        assert create_media_session("testos") is native


class TestPublishNowPlaying:
    """Test cases for publish_now_playing."""

    def test_cover_bytes_become_image_data(self) -> None:
        session = NullMediaSession()
        info = AudioInfo(title="Song", artist="Singer", cover=b"png", duration_ms=1999)

        publish_now_playing(session, info, position_ms=250, image_path="/tmp/fallback.png")

        assert session.display == DisplayUpdate(title="Song", artist="Singer", image_data=b"png")
        assert session.timeline == TimelineUpdate(position_ms=250, duration_ms=1999)

    def test_missing_fields_use_defaults(self) -> None:
        session = NullMediaSession()

        publish_now_playing(session, AudioInfo(), position_ms=-5, image_path="/tmp/art.jpg")

        assert session.display == DisplayUpdate(title="", artist="", image_path="/tmp/art.jpg")
        assert session.timeline == TimelineUpdate(position_ms=0, duration_ms=0)

    def test_works_with_any_port_implementation(self, mocker: MockerFixture) -> None:
        session = mocker.Mock(spec=NullMediaSession)

        publish_now_playing(session, AudioInfo(title="T", artist="A", duration_ms=10))

        session.update_display.assert_called_once_with("T", "A", image_path=None, image_data=None)
        session.update_timeline.assert_called_once_with(0, 10)
