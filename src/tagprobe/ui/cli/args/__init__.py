"""Command line argument handling package."""

from tagprobe.ui.cli.args.options import CLIArgs, InitConfigArgs, InspectArgs
from tagprobe.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs", "InitConfigArgs", "InspectArgs"]
