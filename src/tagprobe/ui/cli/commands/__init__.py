"""Command execution package for CLI."""

from tagprobe.ui.cli.commands.init_config import InitConfigCommand
from tagprobe.ui.cli.commands.inspect import InspectCommand, InspectResult

__all__ = ["InitConfigCommand", "InspectCommand", "InspectResult"]
