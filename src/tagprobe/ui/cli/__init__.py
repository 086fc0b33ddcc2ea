"""Command line interface package."""

from tagprobe.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
