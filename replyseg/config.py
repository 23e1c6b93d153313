"""Unified configuration loader for replyseg.

Configuration is resolved in priority order: **project > user > defaults**.

1. **Project-level** — ``.replyseg.yml`` in (or above) the working directory.
2. **User-level** — ``~/.replyseg/config.yml``.
3. **Built-in defaults** — the vocabulary in :mod:`replyseg.vocabulary` and
   plain text rendering with colour.

Both files share the same format::

    # .replyseg.yml  or  ~/.replyseg/config.yml
    vocabulary:
      extra_languages: [zig, elixir]
      extra_explanation_markers: ["tip:"]
      artifact_labels: [Copy, Edit]
      artifact_window: 2

    render:
      color: true
      format: text        # text | json | debug
      line_numbers: false

Project-level values override user-level values.  CLI flags override both.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from replyseg.vocabulary import (
    DEFAULT_VOCABULARY,
    Vocabulary,
    VocabularyError,
    build_vocabulary,
)

CONFIG_FILENAME = ".replyseg.yml"
USER_CONFIG_DIR = Path.home() / ".replyseg"
USER_CONFIG_PATH = USER_CONFIG_DIR / "config.yml"

RENDER_FORMATS = ("text", "json", "debug")


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass
class RenderConfig:
    """Render sub-configuration."""

    color: bool = True
    format: str = "text"
    line_numbers: bool = False


@dataclass
class ReplySegConfig:
    """Top-level configuration container (vocabulary + render)."""

    vocabulary_raw: dict[str, Any] = field(default_factory=dict)
    render: RenderConfig = field(default_factory=RenderConfig)

    # Where the effective config was loaded from (None = defaults only).
    project_config_path: str | None = None
    user_config_path: str | None = None

    @cached_property
    def vocabulary(self) -> Vocabulary:
        """The frozen vocabulary, built once per config object.

        An invalid ``vocabulary:`` section falls back to the defaults.
        """
        try:
            return build_vocabulary(self.vocabulary_raw)
        except VocabularyError as exc:
            logger.warning("config.invalid vocabulary error={}", exc)
            return DEFAULT_VOCABULARY


# ---------------------------------------------------------------------------
# Public loader
# ---------------------------------------------------------------------------


def load_config(
    cwd: str | None = None,
    config_path: str | Path | None = None,
) -> ReplySegConfig:
    """Load merged configuration (project > user > defaults).

    Parameters
    ----------
    cwd:
        Directory to search for ``.replyseg.yml``.  When *None*, only
        the user-level file (and defaults) are considered.
    config_path:
        Explicit config file path.  When given, *only* this file is
        loaded (no project/user search).
    """
    if config_path is not None:
        raw = _load_yaml(Path(config_path).expanduser())
        cfg = _raw_to_config(raw)
        cfg.project_config_path = str(config_path) if raw else None
        return cfg

    user_raw = _load_yaml(USER_CONFIG_PATH)
    user_source = str(USER_CONFIG_PATH) if user_raw else None

    project_raw: dict | None = None
    project_source: str | None = None
    if cwd is not None:
        project_path = _find_project_config(cwd)
        if project_path is not None:
            project_raw = _load_yaml(project_path)
            project_source = str(project_path) if project_raw else None

    cfg = _raw_to_config(_merge_raw(project_raw, user_raw))
    cfg.project_config_path = project_source
    cfg.user_config_path = user_source
    logger.debug("config.load project={} user={}", project_source, user_source)
    return cfg


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _find_project_config(cwd: str) -> Path | None:
    """Search for ``.replyseg.yml`` in *cwd* and ancestors."""
    p = Path(cwd)
    candidates = [p / CONFIG_FILENAME]
    for parent in p.parents:
        candidates.append(parent / CONFIG_FILENAME)
        if (parent / ".git").exists():
            break
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def _load_yaml(path: Path) -> dict | None:
    """Load a YAML file, returning *None* on missing/invalid files."""
    path = path.expanduser()
    if not path.is_file():
        return None
    try:
        raw = yaml.safe_load(path.read_text())
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("config.invalid path={} error={}", path, exc)
        return None
    return raw if isinstance(raw, dict) else None


def _merge_raw(project: dict | None, user: dict | None) -> dict:
    """Merge project and user raw dicts section by section (project wins)."""
    base: dict = {}
    for source in (user, project):
        if not source:
            continue
        for key in ("vocabulary", "render"):
            section = source.get(key)
            if isinstance(section, dict):
                base.setdefault(key, {}).update(section)
    return base


def _raw_to_config(raw: dict | None) -> ReplySegConfig:
    """Convert a raw YAML dict to a ``ReplySegConfig``."""
    if not raw:
        return ReplySegConfig()

    vocab_raw = raw.get("vocabulary", {})
    if not isinstance(vocab_raw, dict):
        vocab_raw = {}

    render_raw = raw.get("render", {})
    if not isinstance(render_raw, dict):
        render_raw = {}

    fmt = str(render_raw.get("format", "text")).lower()
    if fmt not in RENDER_FORMATS:
        logger.warning("config.invalid render.format={!r}, using text", fmt)
        fmt = "text"

    return ReplySegConfig(
        vocabulary_raw=dict(vocab_raw),
        render=RenderConfig(
            color=bool(render_raw.get("color", True)),
            format=fmt,
            line_numbers=bool(render_raw.get("line_numbers", False)),
        ),
    )
