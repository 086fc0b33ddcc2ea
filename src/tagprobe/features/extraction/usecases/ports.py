"""
Summary: Ports defining what the extraction use cases need from a decoder.
Why: Keep probe and extractor rules independent of the decoding library so tests can use fakes.
"""

from __future__ import annotations

from collections.abc import Sequence
from os import PathLike
from typing import Protocol, runtime_checkable

from ..domain.tag_model import AudioProperties, ParseOptions, Picture, StandardKey


@runtime_checkable
class TagContainerPort(Protocol):
    """Port for a single tag container."""

    kind: str

    def standard_field(self, key: StandardKey) -> str | None:
        """Return the string stored under a standardized key."""
        ...

    def pictures(self) -> Sequence[Picture]:
        """Return embedded pictures in file order."""
        ...


@runtime_checkable
class DecodedTagFilePort(Protocol):
    """Port for the decoded representation of one file."""

    def primary_tag(self) -> TagContainerPort | None:
        """Return the container the library treats as authoritative."""
        ...

    def secondary_tags(self) -> Sequence[TagContainerPort]:
        """Return the remaining containers in priority order."""
        ...

    def primary_or_first_tag(self) -> TagContainerPort | None:
        """Return the primary container, else the first secondary one."""
        ...

    def properties(self) -> AudioProperties | None:
        """Return stream properties when they were read."""
        ...


@runtime_checkable
class TagDecoderPort(Protocol):
    """Port for a decoder able to read a file in a given parsing mode."""

    def read(self, path: str | PathLike[str], options: ParseOptions) -> DecodedTagFilePort:
        """Decode ``path``.

        Raises:
            DecodeError: If the file cannot be opened or parsed.
        """
        ...


__all__ = ["DecodedTagFilePort", "TagContainerPort", "TagDecoderPort"]
