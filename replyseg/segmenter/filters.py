"""Artifact filter — UI labels that trail a bare language line.

The chat UI renders ``Copy`` / ``Edit`` buttons next to the language label of
a code block; when the page text is scraped they land on their own lines.
"""

from __future__ import annotations

from collections.abc import Sequence

from replyseg.vocabulary import Vocabulary


def count_artifacts(lines: Sequence[str], start: int, vocabulary: Vocabulary) -> int:
    """Count artifact lines beginning at ``lines[start]``.

    Looks at no more than ``vocabulary.artifact_window`` lines and stops at
    the first line that is not an artifact label.
    """
    count = 0
    end = min(len(lines), start + vocabulary.artifact_window)
    for i in range(start, end):
        if not vocabulary.is_artifact(lines[i]):
            break
        count += 1
    return count
