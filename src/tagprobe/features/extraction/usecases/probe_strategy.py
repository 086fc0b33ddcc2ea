"""Two-tier decode strategy.

Where: src/tagprobe/features/extraction/usecases/probe_strategy.py
What: Run a strict decode pass and escalate to a relaxed pass when it falls short.
Why: Strict decoding is cheap and correct for well-formed files; malformed ones need
     a permissive re-read that must never be merged with the abandoned strict state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from os import PathLike
from typing import ClassVar, final

from tagprobe.platform.logging import logger
from tagprobe.shared import DecodeError, ExtractionRequest

from ..domain.tag_model import ParseOptions, ParsingMode
from .ports import DecodedTagFilePort, TagDecoderPort

__all__ = ["ProbeOutcome", "ProbeState", "ProbeStrategy", "is_sufficient"]


class ProbeState(str, Enum):
    """Progression of a single probe."""

    UNATTEMPTED = "unattempted"
    FAST_PASS_FAILED = "fast_pass_failed"
    FALLBACK_ATTEMPTED = "fallback_attempted"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(slots=True)
class ProbeOutcome:
    """Record of the states a probe went through and what it produced."""

    state: ProbeState = ProbeState.UNATTEMPTED
    history: list[ProbeState] = field(default_factory=lambda: [ProbeState.UNATTEMPTED])
    decoded: DecodedTagFilePort | None = None
    error: DecodeError | None = None
    fast_pass_reason: str | None = None

    def advance(self, state: ProbeState) -> None:
        self.state = state
        self.history.append(state)

    @property
    def used_fallback(self) -> bool:
        return ProbeState.FALLBACK_ATTEMPTED in self.history


def is_sufficient(decoded: DecodedTagFilePort, request: ExtractionRequest) -> str | None:
    """Check a strict-pass result against the request.

    Returns:
        None when the result can be used as-is, otherwise the reason it cannot.
    """
    primary = decoded.primary_tag()
    # Any secondary container counts as "has a tag", even without a primary one.
    if primary is None and not decoded.secondary_tags():
        return "no tag container"
    if request.need_cover and (primary is None or not primary.pictures()):
        return "primary tag has no cover"
    return None


@final
class ProbeStrategy:
    """Decode a file, escalating from strict to relaxed parsing when needed."""

    STRICT_OPTIONS: ClassVar[ParseOptions] = ParseOptions()

    def __init__(self, decoder: TagDecoderPort) -> None:
        self._decoder: TagDecoderPort = decoder

    @staticmethod
    def relaxed_options(request: ExtractionRequest) -> ParseOptions:
        """Build the reduced-scope options for the fallback pass."""

        return ParseOptions(
            parsing_mode=ParsingMode.RELAXED,
            read_tags=True,
            read_cover_art=request.need_cover,
            read_properties=request.need_audio_properties,
        )

    def probe(self, path: str | PathLike[str], request: ExtractionRequest) -> ProbeOutcome:
        """Run the probe and report every state it passed through.

        Never raises for decode failures; they are recorded on the outcome.
        """
        outcome = ProbeOutcome()

        try:
            candidate = self._decoder.read(path, self.STRICT_OPTIONS)
        except DecodeError as exc:
            outcome.fast_pass_reason = exc.message
        else:
            outcome.fast_pass_reason = is_sufficient(candidate, request)
            if outcome.fast_pass_reason is None:
                outcome.decoded = candidate
                outcome.advance(ProbeState.SUCCESS)
                logger.debug(
                    "Fast pass accepted for %s",
                    path,
                    extra={"probe_event": "probe.fast.accepted", "source_path": str(path)},
                )
                return outcome

        # The strict result is dropped here, never patched with relaxed data.
        outcome.advance(ProbeState.FAST_PASS_FAILED)
        logger.debug(
            "Fast pass insufficient for %s: %s",
            path,
            outcome.fast_pass_reason,
            extra={
                "probe_event": "probe.fast.insufficient",
                "source_path": str(path),
                "reason": outcome.fast_pass_reason,
            },
        )

        outcome.advance(ProbeState.FALLBACK_ATTEMPTED)
        try:
            outcome.decoded = self._decoder.read(path, self.relaxed_options(request))
        except DecodeError as exc:
            outcome.error = exc if exc.path is not None else DecodeError(exc.message, path)
            outcome.advance(ProbeState.FAILED)
            logger.debug(
                "Relaxed pass failed for %s: %s",
                path,
                exc.message,
                extra={
                    "probe_event": "probe.fallback.failed",
                    "source_path": str(path),
                    "reason": exc.message,
                },
            )
            return outcome

        outcome.advance(ProbeState.SUCCESS)
        logger.debug(
            "Relaxed pass decoded %s",
            path,
            extra={"probe_event": "probe.fallback.success", "source_path": str(path)},
        )
        return outcome

    def decode(self, path: str | PathLike[str], request: ExtractionRequest) -> DecodedTagFilePort:
        """Decode ``path`` for ``request``.

        Raises:
            DecodeError: If both the strict and the relaxed pass fail.
        """
        outcome = self.probe(path, request)
        if outcome.decoded is None:
            raise outcome.error or DecodeError("decode failed", path)
        return outcome.decoded
