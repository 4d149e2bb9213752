# markdown_tree/document.py
"""
Markdown reference for a whole command tree.

Every command gets one section: a heading whose level is its depth in the
tree and which lists the full command path, followed by its usage text in a
fenced ``text`` block. Sections follow declaration order, depth first, and
are separated by one blank line. When the usage text itself contains a run of
three or more backticks, that section's fence is one backtick longer than the
longest run, so the block cannot close early.

Example output for a group ``cargo`` with a ``build`` subcommand::

    # `cargo`
    ```text
    Usage: cargo <COMMAND>
    ...
    ```

    ## `cargo` `build`
    ```text
    Usage: cargo build [OPTIONS]
    ...
    ```
"""

from __future__ import annotations

import copy
import io
import logging
import re
from typing import Any, Optional

import click

from .config import DEFAULT_STYLE, DEFAULT_WIDTH, FENCE_LANG
from .core import HelpStyle, Stack, join
from .helptext import presentation_view, render_help, subcommands
from .targets import to_command

logger = logging.getLogger(__name__)

_BACKTICK_RUN = re.compile(r"`{3,}")


def markdown(command: click.Command, *, name: Optional[str] = None,
             style: HelpStyle = DEFAULT_STYLE, width: int = DEFAULT_WIDTH) -> str:
    """Render `command` and all of its subcommands as one markdown document.

    `name` replaces the root's displayed name (typer groups are often
    unnamed); the caller's command is not modified. Raises ValueError when
    the root ends up with no name at all.
    """
    if name and name != command.name:
        command = copy.copy(command)
        command.name = name
    if not command.name:
        raise ValueError("root command has no name; pass name=...")
    buf = io.StringIO()
    render(buf, Stack.empty(), command, style=style, width=width)
    return buf.getvalue()


def markdown_for(target: Any, **kwargs) -> str:
    """Shorthand for `markdown(to_command(target))`; accepts typer apps and factories."""
    return markdown(to_command(target), **kwargs)


def render(buf: io.StringIO, path: Stack[str], command: click.Command, *,
           style: HelpStyle = DEFAULT_STYLE, width: int = DEFAULT_WIDTH) -> None:
    """Append the section for `command`, then its subcommands', to `buf`."""
    if path:
        buf.write("\n\n")
    path = path.pushed(command.name)
    buf.write("#" * len(path))
    for component in path:
        buf.write(f" `{component}`")

    bin_name = join(path)
    logger.debug("rendering %s", bin_name)
    view = presentation_view(command, bin_name)
    text = render_help(view, style, width).strip()
    fence = fence_for(text)
    buf.write(f"\n{fence}{FENCE_LANG}\n{text}\n{fence}")

    for sub in subcommands(view.command):
        render(buf, path, sub, style=style, width=width)


def fence_for(text: str) -> str:
    """A backtick fence longer than any backtick run inside `text`."""
    longest = max((len(m.group(0)) for m in _BACKTICK_RUN.finditer(text)), default=2)
    return "`" * max(3, longest + 1)


__all__ = ["markdown", "markdown_for", "render", "fence_for"]
