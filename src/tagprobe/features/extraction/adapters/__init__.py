"""Mutagen adapters implementing the extraction decoder port."""

from .mutagen_decoder import MutagenDecoder

__all__ = ["MutagenDecoder"]
