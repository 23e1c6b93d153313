"""Preprocessor — clean a raw reply before it is split into lines."""

from __future__ import annotations

import re

# "Thought for 12s" preamble line emitted by the chat UI, plus any blank
# lines between it and the answer. Indentation of the answer is kept.
_THOUGHT_PREAMBLE = re.compile(r"\A[ \t]*Thought for[ \t]*\d+s[ \t]*(?:\n[ \t]*(?=\n))*(?:\n|\Z)")


def preprocess(text: str) -> str:
    """Trim *text* and drop a leading ``Thought for Ns`` line (once)."""
    text = text.strip()
    return _THOUGHT_PREAMBLE.sub("", text, count=1)


def split_lines(text: str) -> list[str]:
    """Split preprocessed text into lines; the empty string has none."""
    if not text:
        return []
    return text.split("\n")
