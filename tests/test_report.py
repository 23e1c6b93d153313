"""Tests for report rendering."""

import json

import replyseg
from replyseg.models import ResponseSegment
from replyseg.report import render_debug, render_json, render_text
from replyseg.segmenter.segmenter import segment_reply

REPLY = "Here you go:\npython\nCopy\nEdit\nprint(1)\n\nThis will print 1."


class TestTextOutput:
    def test_plain_structure(self):
        result = segment_reply(REPLY)
        output = render_text(result.segments, color=False)
        assert output.splitlines() == [
            "Here you go:",
            "📄 PYTHON code",
            "python  ",
            "print(1)",
            "        ",
            "This will print 1.",
        ]

    def test_code_lines_padded_to_block_width(self):
        segs = [ResponseSegment("a", True, "go"), ResponseSegment("abc", True, "go")]
        lines = render_text(segs, color=False).splitlines()
        assert lines[1:] == ["a  ", "abc"]

    def test_line_numbers(self):
        segs = [ResponseSegment("x = 1", True, ""), ResponseSegment("y = 2", True, "")]
        lines = render_text(segs, color=False, line_numbers=True).splitlines()
        assert lines[0] == "📄 code"
        assert lines[1] == " 1 │ x = 1"
        assert lines[2] == " 2 │ y = 2"

    def test_color_applies_code_background(self):
        segs = [ResponseSegment("x", True, "go")]
        output = render_text(segs, color=True)
        assert "\033[48;5;17m" in output

    def test_headings_and_bullets(self):
        segs = [ResponseSegment("## Setup"), ResponseSegment("- install it")]
        plain = render_text(segs, color=False).splitlines()
        assert plain == ["## Setup", "• install it"]
        colored = render_text(segs, color=True)
        assert "\033[1m" in colored

    def test_plain_prose_untouched(self):
        segs = [ResponseSegment("1. first step"), ResponseSegment("just text")]
        assert render_text(segs, color=False) == "1. first step\njust text"

    def test_empty(self):
        assert render_text([]) == ""


class TestJsonOutput:
    def test_valid_json(self):
        doc = json.loads(render_json(segment_reply(REPLY)))
        assert doc["tool"] == "replyseg"
        assert doc["version"] == replyseg.__version__

    def test_summary_counts(self):
        doc = json.loads(render_json(segment_reply(REPLY)))
        summary = doc["summary"]
        assert summary["lines"] == 7
        assert summary["segments"] == 5
        assert summary["code"] == 3
        assert summary["prose"] == 2
        assert summary["dropped"] == 2
        assert summary["code_blocks"] == 1
        assert summary["languages"] == ["python"]

    def test_segments_in_order(self):
        doc = json.loads(render_json(segment_reply("```sh\nls\n```\nok")))
        assert doc["segments"] == [
            {"text": "ls", "is_code": True, "language": "sh"},
            {"text": "ok", "is_code": False, "language": ""},
        ]
        assert doc["dropped"][0] == {"line": 1, "text": "```sh", "reason": "fence"}


class TestDebugOutput:
    def test_markers_exposed(self):
        output = render_debug("python\nCopy\n\tx\n    y", color=False)
        lines = output.splitlines()
        assert "  1: python" in lines
        assert "  3: [TAB]x" in lines
        assert "  4: [4SP]y" in lines
        assert lines[-1] == "Total lines: 4"

    def test_fence_highlighted_with_color(self):
        output = render_debug("```go", color=True)
        assert "\033[91m```" in output
