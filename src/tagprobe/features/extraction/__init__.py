# Where: tagprobe.features.extraction.__init__
# What: Expose the extraction facade, strategy, extractor and tag model.
# Why: Provide a cohesive import surface for the CLI and host integrations.

from .domain.tag_model import (
    AudioProperties,
    DecodedTagFile,
    ParseOptions,
    ParsingMode,
    Picture,
    StandardKey,
    TagContainer,
)
from .usecases.audio_info_reader import AudioInfoReader
from .usecases.field_extractor import FieldExtractor
from .usecases.ports import DecodedTagFilePort, TagContainerPort, TagDecoderPort
from .usecases.probe_strategy import ProbeOutcome, ProbeState, ProbeStrategy

__all__ = [
    "AudioInfoReader",
    "AudioProperties",
    "DecodedTagFile",
    "DecodedTagFilePort",
    "FieldExtractor",
    "ParseOptions",
    "ParsingMode",
    "Picture",
    "ProbeOutcome",
    "ProbeState",
    "ProbeStrategy",
    "StandardKey",
    "TagContainer",
    "TagContainerPort",
    "TagDecoderPort",
]
