# Where: tagprobe.shared.__init__
# What: Provide a concise import surface for shared dataclasses and errors.
# Why: Encourage consistent reuse of the call contract across features.

"""Shared cross-cutting types exposed at the package level."""

from .audio_info import AudioInfo, ExtractionRequest
from .errors import DecodeError, TagprobeError

__all__ = ["AudioInfo", "DecodeError", "ExtractionRequest", "TagprobeError"]
