# clidocs_project/cli/clidocsctl.py
from __future__ import annotations

import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer

from clidocs_project.markdown_tree.config import DocsConfig, coerce_style, coerce_width, load_config
from clidocs_project.markdown_tree.core import HelpStyle, TargetError
from clidocs_project.markdown_tree.document import markdown
from clidocs_project.markdown_tree.io import is_up_to_date, read_text, with_final_newline, write_text
from clidocs_project.markdown_tree.readme import render_readme
from clidocs_project.markdown_tree.targets import default_name, load_target, to_command

import click


app = typer.Typer(name="clidocsctl", add_completion=False, no_args_is_help=True,
                  help="Markdown reference docs for click and typer CLIs.")


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _fail(msg: str) -> None:
    typer.echo(f"⚠️  {msg}", err=True)
    raise typer.Exit(code=2)


def _settings(target: Optional[str], config: Optional[Path], **overrides) -> DocsConfig:
    """Config file values, with any non-None CLI flag taking precedence."""
    try:
        cfg = load_config(config)
        given = {k: v for k, v in overrides.items() if v is not None}
        if "style" in given:
            given["style"] = coerce_style(given["style"])
        if "width" in given:
            given["width"] = coerce_width(given["width"])
        cfg = replace(cfg, **given)
    except ValueError as e:
        _fail(f"bad config: {e}")
    if target:
        cfg = replace(cfg, target=target)
    if not cfg.target:
        _fail("no TARGET given and no 'target' in the config file")
    return cfg


def _command(cfg: DocsConfig) -> click.Command:
    # targets in the working directory import like they would from `python -c`
    cwd = str(Path.cwd())
    if cwd not in sys.path:
        sys.path.insert(0, cwd)
    try:
        return to_command(load_target(cfg.target))
    except TargetError as e:
        _fail(str(e))


def _root_name(cfg: DocsConfig, command: click.Command) -> str:
    """Display name of the root: --name, then the command's own, then the module."""
    return cfg.name or command.name or default_name(cfg.target)


# ------------------------------------------------------------------------------
# render → markdown to stdout or a file
# ------------------------------------------------------------------------------
@app.command("render")
def render_cmd(
    target: Optional[str]  = typer.Argument(None, help="Import path of the CLI, e.g. 'pkg.cli:app'"),
    out: Optional[Path]    = typer.Option(None, "--out", "-o", help="Write here instead of stdout"),
    name: Optional[str]    = typer.Option(None, help="Display name of the root command"),
    style: Optional[HelpStyle] = typer.Option(None, help="Help layout: long|click"),
    width: Optional[int]   = typer.Option(None, help="Wrap width of the usage text"),
    config: Optional[Path] = typer.Option(None, help="YAML settings (default: ./clidocs.yaml if present)"),
    verbose: bool          = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Render the command tree as markdown."""
    _setup_logging(verbose)
    cfg = _settings(target, config, out=out, name=name, style=style, width=width)
    command = _command(cfg)
    md = markdown(command, name=_root_name(cfg, command), style=cfg.style, width=cfg.width)
    if cfg.out is None:
        typer.echo(md)
        return
    write_text(cfg.out, with_final_newline(md))
    typer.echo(f"[render] wrote {cfg.target} → {cfg.out}")


# ------------------------------------------------------------------------------
# check → is a committed markdown file stale?
# ------------------------------------------------------------------------------
@app.command("check")
def check_cmd(
    target: Optional[str]  = typer.Argument(None, help="Import path of the CLI, e.g. 'pkg.cli:app'"),
    against: Optional[Path] = typer.Option(None, help="Markdown file to compare with (default: config 'out')"),
    update: bool           = typer.Option(False, help="Rewrite the file when it is stale"),
    name: Optional[str]    = typer.Option(None, help="Display name of the root command"),
    style: Optional[HelpStyle] = typer.Option(None, help="Help layout: long|click"),
    width: Optional[int]   = typer.Option(None, help="Wrap width of the usage text"),
    config: Optional[Path] = typer.Option(None, help="YAML settings (default: ./clidocs.yaml if present)"),
    verbose: bool          = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Exit 1 when the markdown file differs from a fresh render."""
    _setup_logging(verbose)
    cfg = _settings(target, config, out=against, name=name, style=style, width=width)
    if cfg.out is None:
        _fail("nothing to check: pass --against or set 'out' in the config file")
    command = _command(cfg)
    md = markdown(command, name=_root_name(cfg, command), style=cfg.style, width=cfg.width)
    if is_up_to_date(cfg.out, md):
        typer.echo(f"[check] {cfg.out} is up to date")
        return
    if update:
        write_text(cfg.out, with_final_newline(md))
        typer.echo(f"[check] updated {cfg.out}")
        return
    typer.echo(f"[check] {cfg.out} is stale; rerun with --update", err=True)
    raise typer.Exit(code=1)


# ------------------------------------------------------------------------------
# readme → title + intro + snippet + reference
# ------------------------------------------------------------------------------
@app.command("readme")
def readme_cmd(
    target: Optional[str]   = typer.Argument(None, help="Import path of the CLI, e.g. 'pkg.cli:app'"),
    title: Optional[str]    = typer.Option(None, help="Page title (default: root command name)"),
    description: Optional[str] = typer.Option(None, help="Paragraph under the title"),
    snippet: Optional[Path] = typer.Option(None, help="Source file shown before the reference"),
    out: Optional[Path]     = typer.Option(None, "--out", "-o", help="Write here instead of stdout"),
    name: Optional[str]     = typer.Option(None, help="Display name of the root command"),
    style: Optional[HelpStyle] = typer.Option(None, help="Help layout: long|click"),
    width: Optional[int]    = typer.Option(None, help="Wrap width of the usage text"),
    config: Optional[Path]  = typer.Option(None, help="YAML settings (default: ./clidocs.yaml if present)"),
    verbose: bool           = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Render a standalone README page around the reference."""
    _setup_logging(verbose)
    cfg = _settings(target, config, title=title, description=description, snippet=snippet,
                    out=out, name=name, style=style, width=width)
    command = _command(cfg)
    try:
        code = read_text(cfg.snippet) if cfg.snippet else None
    except OSError as e:
        _fail(f"cannot read snippet: {e}")
    page = render_readme(
        command,
        title=cfg.title or _root_name(cfg, command),
        description=cfg.description,
        snippet=code,
        name=_root_name(cfg, command), style=cfg.style, width=cfg.width,
    )
    if cfg.out is None:
        typer.echo(page, nl=False)
        return
    write_text(cfg.out, page)
    typer.echo(f"[readme] wrote {cfg.target} → {cfg.out}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
