"""Tests for the click CLI."""

import json

import pytest
from click.testing import CliRunner
from loguru import logger

import replyseg.config as config_mod
from replyseg.cli import main

REPLY = "Thought for 3s\npython\nCopy\nprint(1)\n\nNote: prints 1"


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    """Run from an empty directory with no user config."""
    monkeypatch.setattr(config_mod, "USER_CONFIG_PATH", tmp_path / "absent.yml")
    monkeypatch.chdir(tmp_path)
    yield
    logger.remove()
    logger.disable("replyseg")


@pytest.fixture
def runner():
    return CliRunner()


class TestClassify:
    def test_stdin_text(self, runner):
        result = runner.invoke(main, ["classify", "--no-color"], input=REPLY)
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "📄 PYTHON code",
            "python  ",
            "print(1)",
            "        ",
            "Note: prints 1",
        ]

    def test_file_json(self, runner, tmp_path):
        reply = tmp_path / "reply.txt"
        reply.write_text(REPLY)
        result = runner.invoke(main, ["classify", str(reply), "--format", "json"])
        assert result.exit_code == 0
        doc = json.loads(result.output)
        assert doc["summary"]["code"] == 3
        assert doc["dropped"] == [{"line": 2, "text": "Copy", "reason": "artifact"}]

    def test_debug_format(self, runner):
        result = runner.invoke(main, ["classify", "--format", "debug", "--no-color"],
                               input="a\tb")
        assert result.exit_code == 0
        assert "  1: a[TAB]b" in result.output

    def test_debug_shows_raw_input(self, runner):
        result = runner.invoke(main, ["classify", "--format", "debug", "--no-color"],
                               input="Thought for 2s\nx")
        assert "  1: Thought for 2s" in result.output
        assert "Total lines: 2" in result.output

    def test_missing_file(self, runner):
        result = runner.invoke(main, ["classify", "nope.txt"])
        assert result.exit_code == 1
        assert "cannot read" in result.output

    def test_project_config_applies(self, runner, tmp_path):
        (tmp_path / ".replyseg.yml").write_text("render:\n  format: json\n")
        result = runner.invoke(main, ["classify"], input="hi")
        assert json.loads(result.output)["summary"]["prose"] == 1

    def test_flag_overrides_config(self, runner, tmp_path):
        (tmp_path / ".replyseg.yml").write_text("render:\n  format: json\n")
        result = runner.invoke(main, ["classify", "--format", "text"], input="hi")
        assert result.output.strip() == "hi"

    def test_explicit_config_vocabulary(self, runner, tmp_path):
        cfg = tmp_path / "custom.yml"
        cfg.write_text("vocabulary:\n  extra_languages: [zig]\n")
        result = runner.invoke(
            main, ["classify", "--config", str(cfg), "--format", "json"], input="zig\nx"
        )
        doc = json.loads(result.output)
        assert doc["summary"]["languages"] == ["zig"]


class TestVocab:
    def test_defaults(self, runner):
        result = runner.invoke(main, ["vocab"])
        assert result.exit_code == 0
        assert "built-in defaults" in result.output
        assert "python" in result.output
        assert "Artifact window: 2" in result.output


class TestVersion:
    def test_version(self, runner):
        import replyseg

        result = runner.invoke(main, ["--version"])
        assert replyseg.__version__ in result.output
