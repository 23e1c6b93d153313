"""Segmenter — one forward pass from reply text to classified segments."""

from __future__ import annotations

from loguru import logger

from replyseg.models import (
    BlockMode,
    Classification,
    DropReason,
    DroppedLine,
    ResponseSegment,
    ScanState,
)
from replyseg.segmenter.detectors import Detector, default_detectors
from replyseg.segmenter.filters import count_artifacts
from replyseg.segmenter.heuristics import ends_implicit_block
from replyseg.segmenter.preprocess import preprocess, split_lines
from replyseg.vocabulary import DEFAULT_VOCABULARY, Vocabulary


def segment_reply(
    text: str,
    vocabulary: Vocabulary | None = None,
    detectors: list[Detector] | None = None,
) -> Classification:
    """Classify every line of *text* as code or prose.

    Fence markers and ``Copy``/``Edit`` labels are consumed and reported in
    :attr:`Classification.dropped`; every other line yields exactly one
    :class:`ResponseSegment`, in input order.  An unterminated fence runs to
    the end of the input.
    """
    vocabulary = vocabulary or DEFAULT_VOCABULARY
    detectors = detectors if detectors is not None else default_detectors(vocabulary)

    lines = split_lines(preprocess(text))
    result = Classification(line_count=len(lines))
    state = ScanState()

    for i, line in enumerate(lines):
        if state.pending_skip > 0:
            state.pending_skip -= 1
            result.dropped.append(DroppedLine(i, line, DropReason.ARTIFACT))
            logger.debug("segment.artifact line={} text={!r}", i, line)
            continue

        if state.in_code_block and _closes(detectors, line, state):
            logger.debug("segment.close line={} language={!r}", i, state.current_language)
            state.close()
            result.dropped.append(DroppedLine(i, line, DropReason.FENCE))
            continue

        opener = _opens(detectors, line, state)
        if opener is not None:
            detector, language = opener
            state.open(language, detector.mode)
            logger.debug(
                "segment.open line={} detector={} language={!r}", i, detector.name, language
            )
            if detector.consumes_marker:
                result.dropped.append(DroppedLine(i, line, DropReason.FENCE))
                continue
            result.segments.append(state.segment(line))
            if detector.mode is BlockMode.IMPLICIT:
                state.pending_skip = count_artifacts(lines, i + 1, vocabulary)
            continue

        result.segments.append(state.segment(line))

        if state.mode is BlockMode.IMPLICIT and ends_implicit_block(lines, i, vocabulary):
            logger.debug("segment.close line={} language={!r}", i, state.current_language)
            state.close()

    return result


def classify(text: str, vocabulary: Vocabulary | None = None) -> list[ResponseSegment]:
    """Return just the segments of :func:`segment_reply`."""
    return segment_reply(text, vocabulary).segments


def _closes(detectors: list[Detector], line: str, state: ScanState) -> bool:
    return any(d.closes(line, state) for d in detectors)


def _opens(
    detectors: list[Detector], line: str, state: ScanState
) -> tuple[Detector, str] | None:
    for d in detectors:
        language = d.opens(line, state)
        if language is not None:
            return d, language
    return None
