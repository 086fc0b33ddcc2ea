"""Shared fixtures for CLI tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from tagprobe.config import Config
from tagprobe.platform.logging import setup_logger


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the CLI at a throwaway configuration file."""

    config_path = tmp_path / "config" / "config.toml"
    monkeypatch.setenv("TAGPROBE_CONFIG", str(config_path))
    Config.reset()
    yield config_path
    Config.reset()
    _ = setup_logger()
