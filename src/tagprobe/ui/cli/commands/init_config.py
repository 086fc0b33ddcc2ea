"""Write a default configuration file."""

from __future__ import annotations

from pathlib import Path
from typing import final

from tagprobe.config import Config, default_config_path
from tagprobe.ui.cli.args.options import InitConfigArgs


@final
class InitConfigCommand:
    """Command for creating the configuration file."""

    def __init__(self, args: InitConfigArgs, target: Path | None = None) -> None:
        self.args: InitConfigArgs = args
        self.target: Path = target or default_config_path()

    def execute(self) -> bool:
        """Create the file; returns False when it already existed and was kept."""

        config = Config()
        if self.args.force:
            _ = config.save(self.target)
            return True
        return config.save_if_missing(self.target)
