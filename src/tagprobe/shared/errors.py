"""Summary: Exception types raised across the tagprobe boundary.
Why: Give callers one error kind to catch for unreadable files."""

from __future__ import annotations

from os import PathLike


class TagprobeError(Exception):
    """Base class for tagprobe errors."""


class DecodeError(TagprobeError):
    """Raised when an audio file cannot be opened or parsed.

    Attributes:
        message: Message reported by the underlying decoder.
        path: File the decoder was asked to read, when known.
    """

    message: str
    path: str | None

    def __init__(self, message: str, path: str | PathLike[str] | None = None) -> None:
        self.message = message
        self.path = str(path) if path is not None else None
        super().__init__(message)

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.path}: {self.message}"


__all__ = ["DecodeError", "TagprobeError"]
