"""CLI — click-based command-line interface."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from replyseg import __version__
from replyseg.config import RENDER_FORMATS, load_config
from replyseg.logging_utils import configure_logging
from replyseg.report import render_debug, render_json, render_text
from replyseg.segmenter.segmenter import segment_reply


@click.group()
@click.version_option(version=__version__, prog_name="replyseg")
def main() -> None:
    """replyseg — classify assistant replies into code and prose."""


# ───────────────────────────────────────────────────────────────────
# classify
# ───────────────────────────────────────────────────────────────────

@main.command()
@click.argument("path", required=False, default="-",
                type=click.Path(allow_dash=True, dir_okay=False))
@click.option("--format", "fmt", default=None,
              type=click.Choice(RENDER_FORMATS, case_sensitive=False),
              help="Output format (default: text).")
@click.option("--config", "config_path", default=None,
              type=click.Path(exists=True, dir_okay=False),
              help="Explicit config file (skips project/user lookup).")
@click.option("--no-color", "no_color", is_flag=True, default=False,
              help="Disable ANSI colours.")
@click.option("--line-numbers", "line_numbers_flag", is_flag=True, default=None,
              help="Number the lines of each code block.")
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Log scan decisions to stderr.")
def classify(
    path: str,
    fmt: str | None,
    config_path: str | None,
    no_color: bool,
    line_numbers_flag: bool | None,
    verbose: bool,
) -> None:
    """Classify a reply read from PATH (or stdin) and print it."""
    configure_logging(verbose=verbose)

    cfg = load_config(cwd=str(Path.cwd()), config_path=config_path)

    # CLI flags override config values
    effective_fmt = (fmt or cfg.render.format).lower()
    effective_color = cfg.render.color and not no_color
    effective_line_numbers = (
        line_numbers_flag if line_numbers_flag is not None else cfg.render.line_numbers
    )

    try:
        with click.open_file(path, encoding="utf-8", errors="replace") as fh:
            text = fh.read()
    except OSError as exc:
        click.echo(f"Error: cannot read {path}: {exc}", err=True)
        sys.exit(1)

    if effective_fmt == "debug":
        click.echo(render_debug(text, color=effective_color))
        return

    result = segment_reply(text, cfg.vocabulary)
    if effective_fmt == "json":
        click.echo(render_json(result))
    else:
        click.echo(render_text(result.segments, color=effective_color,
                               line_numbers=effective_line_numbers))


# ───────────────────────────────────────────────────────────────────
# vocab
# ───────────────────────────────────────────────────────────────────

@main.command()
@click.option("--config", "config_path", default=None,
              type=click.Path(exists=True, dir_okay=False),
              help="Explicit config file (skips project/user lookup).")
def vocab(config_path: str | None) -> None:
    """Show the effective heuristic vocabulary."""
    cfg = load_config(cwd=str(Path.cwd()), config_path=config_path)
    v = cfg.vocabulary
    source = cfg.project_config_path or cfg.user_config_path or "built-in defaults"
    click.echo(f"Source:          {source}")
    click.echo(f"Languages:       {', '.join(sorted(v.languages))}")
    click.echo(f"Markers:         {', '.join(v.explanation_markers)}")
    click.echo(f"Artifact labels: {', '.join(sorted(v.artifact_labels))}")
    click.echo(f"Artifact window: {v.artifact_window}")
