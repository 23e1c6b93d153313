"""Explanation heuristic — when does an implicit code block end?

Implicit blocks have no closing marker.  On a blank line we peek at the next
non-blank line; if it reads like prose ("This will ...", "Note:", "1. ...")
the block ends there.  Anything else stays code: over-including a trailing
line is preferred to cutting a real block short.
"""

from __future__ import annotations

from collections.abc import Sequence

from replyseg.vocabulary import Vocabulary


def is_indented(line: str) -> bool:
    """True if *line* is indented by four spaces or a tab."""
    return line.startswith("    ") or line.startswith("\t")


def next_non_blank(lines: Sequence[str], start: int) -> str | None:
    for i in range(start, len(lines)):
        if lines[i].strip():
            return lines[i]
    return None


def ends_implicit_block(lines: Sequence[str], index: int, vocabulary: Vocabulary) -> bool:
    """Decide whether the blank line at ``lines[index]`` ends the block."""
    if lines[index].strip():
        return False
    following = next_non_blank(lines, index + 1)
    if following is None:
        return False
    if is_indented(following) or vocabulary.is_language(following):
        return False
    return vocabulary.is_explanation(following)
