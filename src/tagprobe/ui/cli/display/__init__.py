"""Console rendering helpers for the CLI."""

from .result import InfoDisplay, audio_info_to_dict

__all__ = ["InfoDisplay", "audio_info_to_dict"]
