"""Heuristic vocabulary — the word lists the segmenter matches against.

All lists live in one frozen :class:`Vocabulary` so they can be swapped or
extended (see :mod:`replyseg.config`) without touching the scan loop.

YAML format (``vocabulary:`` section of ``.replyseg.yml``)::

    vocabulary:
      languages: [python, go]            # replaces the built-in list
      extra_languages: [zig]             # appended to the effective list
      explanation_markers: ["note:"]     # replaces
      extra_explanation_markers: ["nb:"] # appended
      artifact_labels: [Copy, Edit]
      artifact_window: 2
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# ---------------------------------------------------------------------------
# Built-in tables
# ---------------------------------------------------------------------------

DEFAULT_LANGUAGES: tuple[str, ...] = (
    "python", "javascript", "java", "go", "rust", "c++", "c", "php",
    "ruby", "swift", "kotlin", "typescript", "html", "css", "sql",
    "bash", "shell", "powershell", "json", "xml", "yaml", "dockerfile",
    "markdown", "text", "plaintext", "output",
)

# Matched as prefixes of the lower-cased, trimmed line.
DEFAULT_EXPLANATION_MARKERS: tuple[str, ...] = (
    # labels
    "output:", "example:", "note:",
    "hasil:", "contoh:", "catatan:",
    # sentence starters (English)
    "this will", "this code", "you can", "if you", "when you",
    # sentence starters (Malay)
    "kalau", "jika", "untuk", "ini akan", "kod ini", "awak boleh",
    "saya", "anda", "bila", "apabila", "nak saya", "boleh juga",
    # numbered lists
    "1.", "2.", "3.", "4.", "5.",
)

DEFAULT_ARTIFACT_LABELS: tuple[str, ...] = ("Copy", "Edit")
DEFAULT_ARTIFACT_WINDOW = 2


class VocabularyError(ValueError):
    """Raised when a vocabulary is built from invalid values."""


# ---------------------------------------------------------------------------
# Data class
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Vocabulary:
    """Immutable word lists for the segmentation heuristics."""

    languages: frozenset[str] = field(default_factory=lambda: frozenset(DEFAULT_LANGUAGES))
    explanation_markers: tuple[str, ...] = DEFAULT_EXPLANATION_MARKERS
    artifact_labels: frozenset[str] = field(
        default_factory=lambda: frozenset(DEFAULT_ARTIFACT_LABELS)
    )
    artifact_window: int = DEFAULT_ARTIFACT_WINDOW

    def __post_init__(self) -> None:
        if self.artifact_window < 0:
            raise VocabularyError(
                f"artifact_window must be >= 0, got {self.artifact_window}"
            )
        if any(not m for m in self.explanation_markers):
            raise VocabularyError("explanation markers must be non-empty strings")

    def is_language(self, line: str) -> bool:
        """Return True if *line* is nothing but a recognised language name."""
        return line.strip().lower() in self.languages

    def language_of(self, line: str) -> str:
        return line.strip().lower()

    def is_artifact(self, line: str) -> bool:
        return line.strip() in self.artifact_labels

    def is_explanation(self, line: str) -> bool:
        lowered = line.strip().lower()
        return any(lowered.startswith(m) for m in self.explanation_markers)


DEFAULT_VOCABULARY = Vocabulary()


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------


def build_vocabulary(raw: dict[str, Any] | None) -> Vocabulary:
    """Build a :class:`Vocabulary` from a raw ``vocabulary:`` mapping.

    Unknown keys are ignored.  Raises :class:`VocabularyError` when a value
    has the wrong shape.
    """
    if not raw:
        return DEFAULT_VOCABULARY

    languages = _str_list(raw, "languages", DEFAULT_LANGUAGES)
    languages += _str_list(raw, "extra_languages", ())
    markers = _str_list(raw, "explanation_markers", DEFAULT_EXPLANATION_MARKERS)
    markers += _str_list(raw, "extra_explanation_markers", ())
    labels = _str_list(raw, "artifact_labels", DEFAULT_ARTIFACT_LABELS)

    window = raw.get("artifact_window", DEFAULT_ARTIFACT_WINDOW)
    try:
        window = int(window)
    except (TypeError, ValueError) as exc:
        raise VocabularyError(f"artifact_window must be an integer, got {window!r}") from exc

    return Vocabulary(
        languages=frozenset(lang.strip().lower() for lang in languages if lang.strip()),
        explanation_markers=tuple(dict.fromkeys(m.strip().lower() for m in markers if m.strip())),
        artifact_labels=frozenset(label.strip() for label in labels if label.strip()),
        artifact_window=window,
    )


def _str_list(raw: dict[str, Any], key: str, default: tuple[str, ...]) -> list[str]:
    """Read *key* from *raw* as a list of strings."""
    if key not in raw:
        return list(default)
    val = raw[key]
    if isinstance(val, str):
        return [val]
    if isinstance(val, list):
        return [str(v) for v in val]
    raise VocabularyError(f"{key} must be a list of strings, got {type(val).__name__}")
