"""
Stable facade for the markdown_tree package.

Import only from here in apps/CLI:
    from clidocs_project.markdown_tree import (...)
"""

from __future__ import annotations

# ── Types & config ────────────────────────────────────────────────────────────
from .core import HelpStyle, Stack, TargetError, join
from .config import DEFAULT_STYLE, DEFAULT_WIDTH, DocsConfig, load_config

# ── Help text (one command) ───────────────────────────────────────────────────
from .helptext import CommandView, presentation_view, render_help

# ── Documents (whole tree) ────────────────────────────────────────────────────
from .document import markdown, markdown_for, render
from .readme import render_readme
from .targets import load_target, to_command

# ── I/O ───────────────────────────────────────────────────────────────────────
from .io import is_up_to_date, write_text


__all__ = [
    # types & config
    "HelpStyle", "Stack", "TargetError", "join",
    "DEFAULT_STYLE", "DEFAULT_WIDTH", "DocsConfig", "load_config",

    # help text
    "CommandView", "presentation_view", "render_help",

    # documents
    "markdown", "markdown_for", "render", "render_readme",
    "load_target", "to_command",

    # io
    "is_up_to_date", "write_text",
]
