"""Data models used throughout replyseg."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

# ---------------------------------------------------------------------------
# Segment
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ResponseSegment:
    """One classified line of an assistant reply."""

    text: str
    is_code: bool = False
    language: str = ""  # empty for prose

    @property
    def kind(self) -> str:
        return "code" if self.is_code else "prose"


# ---------------------------------------------------------------------------
# Scan state
# ---------------------------------------------------------------------------


class BlockMode(enum.Enum):
    """Which detector opened the current code block."""

    NONE = "none"
    FENCED = "fenced"
    IMPLICIT = "implicit"

    def __str__(self) -> str:
        return self.value


@dataclass
class ScanState:
    """Mutable state of a single classification pass.

    Built fresh by every call and thrown away afterwards.
    """

    in_code_block: bool = False
    current_language: str = ""
    pending_skip: int = 0
    mode: BlockMode = BlockMode.NONE

    def open(self, language: str, mode: BlockMode) -> None:
        self.in_code_block = True
        self.current_language = language
        self.mode = mode

    def close(self) -> None:
        self.in_code_block = False
        self.current_language = ""
        self.mode = BlockMode.NONE

    def segment(self, text: str) -> ResponseSegment:
        """Stamp *text* with the state that currently prevails."""
        if self.in_code_block:
            return ResponseSegment(text, True, self.current_language)
        return ResponseSegment(text)


# ---------------------------------------------------------------------------
# Dropped lines
# ---------------------------------------------------------------------------


class DropReason(enum.Enum):
    ARTIFACT = "artifact"  # Copy / Edit label under a language line
    FENCE = "fence"  # consumed ``` / ~~~ marker

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DroppedLine:
    """A preprocessed line that produced no segment."""

    index: int  # 0-indexed position in the preprocessed text
    text: str
    reason: DropReason


# ---------------------------------------------------------------------------
# Classification result (aggregate)
# ---------------------------------------------------------------------------


@dataclass
class Classification:
    """Complete output of one classification call."""

    segments: list[ResponseSegment] = field(default_factory=list)
    dropped: list[DroppedLine] = field(default_factory=list)
    line_count: int = 0

    # ---- helpers ----
    @property
    def code_count(self) -> int:
        return sum(1 for s in self.segments if s.is_code)

    @property
    def prose_count(self) -> int:
        return len(self.segments) - self.code_count

    @property
    def text(self) -> str:
        """Emitted lines joined back together."""
        return "\n".join(s.text for s in self.segments)

    def dropped_by(self, reason: DropReason) -> list[DroppedLine]:
        return [d for d in self.dropped if d.reason is reason]


# ---------------------------------------------------------------------------
# Block grouping (for renderers)
# ---------------------------------------------------------------------------


@dataclass
class Block:
    """A run of consecutive segments with the same kind and language."""

    is_code: bool
    language: str
    segments: list[ResponseSegment] = field(default_factory=list)

    @property
    def lines(self) -> list[str]:
        return [s.text for s in self.segments]


def group_blocks(segments: Iterable[ResponseSegment]) -> Iterator[Block]:
    """Group consecutive segments sharing ``is_code`` and ``language``."""
    current: Block | None = None
    for seg in segments:
        if current is None or (seg.is_code, seg.language) != (current.is_code, current.language):
            if current is not None:
                yield current
            current = Block(is_code=seg.is_code, language=seg.language)
        current.segments.append(seg)
    if current is not None:
        yield current
