# markdown_tree/readme.py
from __future__ import annotations

from typing import Optional

import click

from .document import fence_for, markdown


def render_readme(command: click.Command, *, title: str, description: str = "",
                  snippet: Optional[str] = None, snippet_lang: str = "python",
                  **markdown_kwargs) -> str:
    """
    Standalone page: title, description, optionally the source that defines
    the CLI, a rule, then the command reference.
    """
    parts = [f"# `{title}`"]
    if description.strip():
        parts.append(description.strip())
    if snippet and snippet.strip():
        code = snippet.strip()
        fence = fence_for(code)
        parts.append("")
        parts.append("So given the following code:")
        parts.append(f"{fence}{snippet_lang}\n{code}\n{fence}")
        parts.append("")
        parts.append("You get the markdown that follows,\n"
                     "with subcommands handled as you'd expect.")
    parts.append("---")
    parts.append(markdown(command, **markdown_kwargs))
    return "\n".join(parts) + "\n"


__all__ = ["render_readme"]
