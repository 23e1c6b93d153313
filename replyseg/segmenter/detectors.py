"""Block detectors — decide which lines open and close code blocks.

Two detectors run on every line:

* :class:`ExplicitFenceDetector` — ```` ```lang ```` / ``~~~`` fences.
* :class:`BareLanguageDetector` — a line holding only a language name, left
  behind when the chat UI strips the fences.  It has no closer of its own;
  see :mod:`replyseg.segmenter.heuristics`.
"""

from __future__ import annotations

import re
from typing import Protocol, runtime_checkable

from replyseg.models import BlockMode, ScanState
from replyseg.vocabulary import Vocabulary

_FENCE_OPEN = re.compile(r"^\s*(```|~~~)\s*([A-Za-z0-9+#._-]*)\s*$")
_FENCE_CLOSE = re.compile(r"^\s*(```|~~~)\s*$")


@runtime_checkable
class Detector(Protocol):
    """Contract shared by the block detectors."""

    name: str
    mode: BlockMode  # mode of the blocks this detector opens
    consumes_marker: bool  # opening/closing lines are markers, not content

    def opens(self, line: str, state: ScanState) -> str | None:
        """Return the language of the block *line* opens, or None.

        An empty string means "opens a block without a language".
        """
        ...

    def closes(self, line: str, state: ScanState) -> bool:
        """Return True if *line* closes the block described by *state*."""
        ...


class ExplicitFenceDetector:
    name = "fence"
    mode = BlockMode.FENCED
    consumes_marker = True

    def opens(self, line: str, state: ScanState) -> str | None:
        if state.mode is BlockMode.FENCED:
            return None
        m = _FENCE_OPEN.match(line)
        if m is None:
            return None
        return m.group(2).lower()

    def closes(self, line: str, state: ScanState) -> bool:
        return state.mode is BlockMode.FENCED and _FENCE_CLOSE.match(line) is not None


class BareLanguageDetector:
    name = "bare_language"
    mode = BlockMode.IMPLICIT
    consumes_marker = False

    def __init__(self, vocabulary: Vocabulary) -> None:
        self.vocabulary = vocabulary

    def opens(self, line: str, state: ScanState) -> str | None:
        # Inside a fence a language word is just code.
        if state.mode is BlockMode.FENCED:
            return None
        if not self.vocabulary.is_language(line):
            return None
        return self.vocabulary.language_of(line)

    def closes(self, line: str, state: ScanState) -> bool:
        # Implicit blocks are closed by the explanation heuristic.
        return False


def default_detectors(vocabulary: Vocabulary) -> list[Detector]:
    """Detectors in evaluation order; the first one to fire wins."""
    return [ExplicitFenceDetector(), BareLanguageDetector(vocabulary)]
