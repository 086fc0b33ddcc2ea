"""tagprobe: option-gated audio metadata extraction with a strict/relaxed probe."""

from tagprobe.application.services import read_audio_info
from tagprobe.shared import AudioInfo, DecodeError, ExtractionRequest, TagprobeError

__version__ = "0.1.0"

__all__ = [
    "AudioInfo",
    "DecodeError",
    "ExtractionRequest",
    "TagprobeError",
    "__version__",
    "read_audio_info",
]
