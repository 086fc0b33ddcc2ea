"""Smoke tests for unified entry points.

These tests assert that `python -m tagprobe` and the console script
both resolve to the CLI's `main` function exposed under `tagprobe.ui.cli`.
"""

from importlib import import_module
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from tagprobe.shared import AudioInfo


def test_module_entry_point_exposes_main() -> None:
    """`python -m tagprobe` path exposes a `main` callable."""
    m = import_module("tagprobe.__main__")
    assert hasattr(m, "main")


def test_console_script_target_exposes_main() -> None:
    """Console script points to `tagprobe.ui.cli:main` and is importable."""
    m = import_module("tagprobe.ui.cli")
    assert hasattr(m, "main")


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    from tagprobe.config import Config

    config_path = tmp_path / "config.toml"
    monkeypatch.setenv("TAGPROBE_CONFIG", str(config_path))
    Config.reset()
    return config_path


@pytest.mark.usefixtures("isolated_config")
def test_process_command_exits_nonzero_on_failed_file(mocker: MockerFixture) -> None:
    from tagprobe.shared import DecodeError
    from tagprobe.ui.cli import CommandProcessor

    _ = mocker.patch(
        "tagprobe.ui.cli.commands.inspect.read_audio_info",
        side_effect=DecodeError("unrecognized audio format"),
    )

    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command(["inspect", "broken.mp3", "--quiet"])
    assert exc_info.value.code == 1


@pytest.mark.usefixtures("isolated_config")
def test_process_command_success(mocker: MockerFixture) -> None:
    from tagprobe.ui.cli import CommandProcessor

    read = mocker.patch(
        "tagprobe.ui.cli.commands.inspect.read_audio_info",
        return_value=AudioInfo(title="Fine"),
    )

    CommandProcessor.process_command(["inspect", "fine.mp3", "--quiet"])

    read.assert_called_once()


def test_process_command_init_config(isolated_config: Path) -> None:
    from tagprobe.ui.cli import CommandProcessor

    CommandProcessor.process_command(["init-config"])

    assert isolated_config.exists()


@pytest.mark.usefixtures("isolated_config")
def test_keyboard_interrupt_exits_130(mocker: MockerFixture) -> None:
    from tagprobe.ui.cli import CommandProcessor

    _ = mocker.patch("tagprobe.ui.cli.commands.inspect.read_audio_info", side_effect=KeyboardInterrupt)

    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command(["inspect", "a.mp3", "--quiet"])
    assert exc_info.value.code == 130
