"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final

from tagprobe.shared import ExtractionRequest


@final
@dataclass(slots=True)
class InspectArgs:
    """Command line arguments for the ``inspect`` subcommand."""

    command: Literal["inspect"]
    paths: list[Path]
    request: ExtractionRequest
    as_json: bool
    save_cover: Path | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class InitConfigArgs:
    """Command line arguments for the ``init-config`` subcommand."""

    command: Literal["init-config"]
    force: bool


CLIArgs = InspectArgs | InitConfigArgs

__all__ = ["CLIArgs", "InitConfigArgs", "InspectArgs"]
