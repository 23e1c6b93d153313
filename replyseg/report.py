"""Report rendering — text, JSON and debug outputs for classified replies."""

from __future__ import annotations

import json
from typing import Any

from markdown_it import MarkdownIt

import replyseg
from replyseg.models import Classification, ResponseSegment, group_blocks

# ---------------------------------------------------------------------------
# ANSI styles
# ---------------------------------------------------------------------------

_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_RED = "\033[91m"
_YELLOW = "\033[93m"
_BLUE = "\033[94m"
_PURPLE = "\033[95m"
_CYAN = "\033[96m"
_NAVY_BG = "\033[48;5;17m"
_CODE_FG = "\033[97m"  # bright white

_HEADING_COLORS = {1: _CYAN, 2: _PURPLE}  # h3 and deeper use blue

_md = MarkdownIt()


# ---------------------------------------------------------------------------
# Text output
# ---------------------------------------------------------------------------


def _paint(text: str, style: str, color: bool) -> str:
    return f"{style}{text}{_RESET}" if color else text


def _style_prose(line: str, color: bool = True) -> str:
    """Style one prose line from its Markdown structure.

    Headings are coloured by level and bullet items get a ``•`` marker;
    anything else is returned untouched.
    """
    stripped = line.strip()
    if not stripped:
        return line
    tokens = _md.parse(stripped)
    if not tokens:
        return line
    first = tokens[0]
    if first.type == "heading_open":
        level = int(first.tag[1:])
        return _paint(line, _BOLD + _HEADING_COLORS.get(level, _BLUE), color)
    if first.type == "bullet_list_open":
        content = next((t.content for t in tokens if t.type == "inline"), "")
        indent = line[: len(line) - len(line.lstrip())]
        return f"{indent}{_paint('•', _YELLOW, color)} {content}".rstrip()
    return line


def _render_code_block(
    language: str,
    segments: list[ResponseSegment],
    color: bool,
    line_numbers: bool,
) -> list[str]:
    lines: list[str] = []
    label = f"📄 {language.upper()} code" if language else "📄 code"
    lines.append(_paint(label, _BLUE, color))

    width = max((len(s.text.expandtabs(4)) for s in segments), default=0)
    for n, seg in enumerate(segments, start=1):
        text = seg.text.expandtabs(4).ljust(width)
        if color:
            text = f"{_NAVY_BG}{_CODE_FG} {text} {_RESET}"
        if line_numbers:
            text = f"{_paint(f'{n:2d}', _YELLOW, color)} │ {text}"
        lines.append(text)
    return lines


def render_text(
    segments: list[ResponseSegment],
    color: bool = True,
    line_numbers: bool = False,
) -> str:
    """Produce terminal output for *segments*."""
    lines: list[str] = []
    for block in group_blocks(segments):
        if block.is_code:
            lines.extend(
                _render_code_block(block.language, block.segments, color, line_numbers)
            )
        else:
            lines.extend(_style_prose(s.text, color) for s in block.segments)
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# JSON output
# ---------------------------------------------------------------------------


def _segment_to_dict(seg: ResponseSegment) -> dict[str, Any]:
    return {
        "text": seg.text,
        "is_code": seg.is_code,
        "language": seg.language,
    }


def render_json(result: Classification) -> str:
    """Produce stable JSON output (segments in input order)."""
    blocks = [b for b in group_blocks(result.segments) if b.is_code]
    doc: dict[str, Any] = {
        "tool": "replyseg",
        "version": replyseg.__version__,
        "summary": {
            "lines": result.line_count,
            "segments": len(result.segments),
            "code": result.code_count,
            "prose": result.prose_count,
            "dropped": len(result.dropped),
            "code_blocks": len(blocks),
            "languages": sorted({b.language for b in blocks if b.language}),
        },
        "segments": [_segment_to_dict(s) for s in result.segments],
        "dropped": [
            {"line": d.index + 1, "text": d.text, "reason": str(d.reason)}
            for d in result.dropped
        ],
    }
    return json.dumps(doc, indent=2, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Debug output
# ---------------------------------------------------------------------------


def render_debug(text: str, color: bool = True) -> str:
    """Show the raw reply line by line with whitespace and markers exposed."""
    raw_lines = text.split("\n")
    lines: list[str] = []
    lines.append(_paint("🔍 DEBUG: Raw Response Content", _YELLOW, color))
    lines.append(_paint("=" * 51, _BLUE, color))
    for n, line in enumerate(raw_lines, start=1):
        shown = line.replace("\t", _paint("[TAB]", _CYAN, color))
        shown = shown.replace("    ", _paint("[4SP]", _CYAN, color))
        for marker, style in (("```", _RED), ("~~~", _RED), ("Copy", _YELLOW), ("Edit", _YELLOW)):
            if marker in line:
                shown = shown.replace(marker, _paint(marker, style, color))
        lines.append(f"{_paint(f'{n:3d}:', _DIM, color)} {shown}")
    lines.append(_paint("=" * 51, _BLUE, color))
    lines.append(_paint(f"Total lines: {len(raw_lines)}", _CYAN, color))
    return "\n".join(lines)
