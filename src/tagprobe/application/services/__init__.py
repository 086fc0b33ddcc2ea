"""Summary: Service entry points for hosts and the CLI.
Why: Keep adapter wiring out of feature use cases."""

from .audio_info_service import default_reader, read_audio_info

__all__ = ["default_reader", "read_audio_info"]
