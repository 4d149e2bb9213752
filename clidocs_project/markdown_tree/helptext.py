# markdown_tree/helptext.py
"""
Usage text for one command, as a user would see it at a terminal.

Two layouts are supported:

- ``HelpStyle.long``: long-form help with separate "Usage:", "Commands:",
  "Arguments:" and "Options:" sections, one entry per parameter with its
  description indented underneath, plus default and possible-value notes.
- ``HelpStyle.click``: click's own help formatter, pinned to a fixed width.

Both work on a *presentation view*: a shallow copy of the command with the
automatic help flag and completion options removed and the program name
replaced by the full command path.
"""

from __future__ import annotations

import copy
import enum
import inspect
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence

import click
from click.formatting import wrap_text

from .config import DEFAULT_STYLE, DEFAULT_WIDTH, DESC_INDENT
from .core import HelpStyle

# Params typer adds to every root command when completion is enabled
COMPLETION_PARAMS = frozenset({"install_completion", "show_completion"})


@dataclass(frozen=True)
class CommandView:
    """A command prepared for display under `bin_name`."""
    command:  click.Command
    bin_name: str

    def context(self, width: int = DEFAULT_WIDTH) -> click.Context:
        # context_class: typer may build its commands on a vendored click
        return self.command.context_class(
            self.command,
            info_name=self.bin_name,
            terminal_width=width,
            max_content_width=width,
        )


def presentation_view(command: click.Command, bin_name: str) -> CommandView:
    """
    Copy `command` with help scaffolding suppressed. The caller's command is
    left untouched: only attributes of the copy are reassigned.
    """
    view = copy.copy(command)
    view.add_help_option = False
    view.params = [p for p in command.params if p.name not in COMPLETION_PARAMS]
    return CommandView(command=view, bin_name=bin_name)


def subcommands(command: click.Command) -> List[click.Command]:
    """Children in declaration order (Group.list_commands would sort them)."""
    children = getattr(command, "commands", None)
    if isinstance(children, Mapping):
        return list(children.values())
    return []


def render_help(view: CommandView, style: HelpStyle = DEFAULT_STYLE,
                width: int = DEFAULT_WIDTH) -> str:
    if HelpStyle(style) is HelpStyle.click:
        return render_click_help(view, width)
    return render_long_help(view, width)


# ── click style ───────────────────────────────────────────────────────────────

def render_click_help(view: CommandView, width: int = DEFAULT_WIDTH) -> str:
    ctx = view.context(width)
    formatter = ctx.make_formatter()
    # Command.format_help directly: rich-backed subclasses print instead of formatting
    click.Command.format_help(view.command, ctx, formatter)
    return formatter.getvalue()


# ── long style ────────────────────────────────────────────────────────────────

def render_long_help(view: CommandView, width: int = DEFAULT_WIDTH) -> str:
    cmd = view.command
    arguments = _params(cmd, "argument")
    options = _params(cmd, "option")

    blocks: List[str] = []
    about = _help_text(cmd)
    if about:
        blocks.append(wrap_text(about, width, preserve_paragraphs=True))
    blocks.append("Usage: " + synopsis(view))

    visible = [c for c in subcommands(cmd) if not c.hidden]
    if visible:
        blocks.append(_commands_section(visible, width))
    if arguments:
        blocks.append(_section("Arguments", [
            _entry(_argument_metavar(a), [_help_text(a), _choices_note(a)], width)
            for a in arguments
        ]))
    if options:
        blocks.append(_section("Options", [
            _entry(_option_term(o), [_help_text(o), _default_note(o), _choices_note(o)], width)
            for o in options
        ]))
    return "\n\n".join(blocks)


def synopsis(view: CommandView) -> str:
    """`bin [OPTIONS] --required <VALUE> <ARG> [OPT_ARG] <COMMAND>`"""
    cmd = view.command
    pieces = [view.bin_name]
    options = _params(cmd, "option")
    if any(not o.required for o in options):
        pieces.append("[OPTIONS]")
    for o in options:
        if o.required:
            flag = _long_form(o)
            pieces.append(flag if o.is_flag else f"{flag} {_value_placeholder(o)}")
    pieces.extend(_argument_metavar(p) for p in _params(cmd, "argument"))
    if subcommands(cmd):
        invoke_bare = getattr(cmd, "invoke_without_command", False)
        pieces.append("[COMMAND]" if invoke_bare else "<COMMAND>")
    return " ".join(pieces)


def _section(title: str, entries: Sequence[str]) -> str:
    return f"{title}:\n" + "\n\n".join(entries)


def _entry(term: str, paragraphs: Sequence[Optional[str]], width: int) -> str:
    body = "\n\n".join(p for p in paragraphs if p)
    if not body:
        return f"  {term}"
    indent = " " * DESC_INDENT
    wrapped = wrap_text(body, width, initial_indent=indent,
                        subsequent_indent=indent, preserve_paragraphs=True)
    return f"  {term}\n{wrapped}"


def _commands_section(children: Sequence[click.Command], width: int) -> str:
    names = [c.name or "" for c in children]
    col = max(len(n) for n in names)
    rows = []
    for name, child in zip(names, children):
        short = child.get_short_help_str(limit=width)
        rows.append(f"  {name:<{col}}  {short}".rstrip())
    return "Commands:\n" + "\n".join(rows)


# --- param helpers ---

def _params(cmd: click.Command, kind: str) -> List[click.Parameter]:
    """Visible params of one kind ("argument" or "option"), in declaration order."""
    return [p for p in cmd.params
            if getattr(p, "param_type_name", None) == kind and not _hidden(p)]


def _hidden(param: click.Parameter) -> bool:
    return bool(getattr(param, "hidden", False))


def _help_text(obj: Any) -> str:
    """Cleaned help of a command or param; text after \\f is click-internal."""
    text = getattr(obj, "help", None)
    if not text:
        return ""
    return inspect.cleandoc(text).partition("\f")[0].strip()


def _value_name(param: click.Parameter) -> str:
    if param.metavar:
        return param.metavar.strip("<>[]").rstrip(".")
    return (param.name or "").upper()


def _argument_metavar(arg: click.Argument) -> str:
    name = _value_name(arg)
    text = f"<{name}>" if arg.required else f"[{name}]"
    return text + "..." if arg.nargs == -1 else text


def _value_placeholder(opt: click.Option) -> str:
    text = f"<{_value_name(opt)}>"
    return text + "..." if opt.multiple or opt.nargs != 1 else text


def _long_form(opt: click.Option) -> str:
    longs = [o for o in opt.opts if o.startswith("--")]
    return (longs or opt.opts)[0]


def _option_term(opt: click.Option) -> str:
    # shorts first; sorted() is stable so declaration order holds otherwise
    flags = sorted(opt.opts, key=lambda o: o.startswith("--")) + list(opt.secondary_opts)
    term = ", ".join(flags)
    if opt.is_flag or opt.count:
        return term
    return f"{term} {_value_placeholder(opt)}"


def _display(value: Any) -> str:
    if isinstance(value, enum.Enum):
        value = value.value
    if isinstance(value, (list, tuple)):
        return ", ".join(_display(v) for v in value)
    return str(value)


def _default_note(opt: click.Option) -> Optional[str]:
    if opt.is_flag or opt.count or opt.required or opt.show_default is False:
        return None
    if isinstance(opt.show_default, str):
        return f"[default: {opt.show_default}]"
    default = opt.default
    # newer click marks "no default" with its own sentinel object
    if default is None or callable(default) or "click" in type(default).__module__:
        return None
    if isinstance(default, (list, tuple)) and not default:
        return None
    return f"[default: {_display(default)}]"


def _choices_note(param: click.Parameter) -> Optional[str]:
    choices = getattr(param.type, "choices", None)
    if not choices:
        return None
    return f"[possible values: {_display(list(choices))}]"


__all__ = [
    "COMPLETION_PARAMS", "CommandView", "presentation_view", "subcommands",
    "render_help", "render_click_help", "render_long_help", "synopsis",
]
