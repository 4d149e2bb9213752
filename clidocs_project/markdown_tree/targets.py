# markdown_tree/targets.py
from __future__ import annotations

import logging
from importlib import import_module
from typing import Any

import click
import typer
from typer.main import get_command

from .core import TargetError

logger = logging.getLogger(__name__)


def load_target(spec: str) -> Any:
    """
    Import "package.module:attr" (attr may be dotted) and return the object.
    Example: "clidocs_project.cli.clidocsctl:app"
    """
    module_name, sep, attr_path = spec.partition(":")
    if not sep or not module_name or not attr_path:
        raise TargetError(f"target must look like 'package.module:attr', got {spec!r}")
    try:
        obj: Any = import_module(module_name)
    except ImportError as e:
        raise TargetError(f"cannot import {module_name!r}: {e}") from e
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise TargetError(f"{module_name!r} has no attribute {attr_path!r}") from None
    logger.debug("loaded target %s -> %r", spec, obj)
    return obj


def to_command(obj: Any) -> click.Command:
    """
    Resolve a click command from a command, a typer app, or a zero-argument
    factory returning either of those.
    """
    resolved = _resolve(obj)
    if resolved is None and callable(obj):
        try:
            produced = obj()
        except Exception as e:
            raise TargetError(f"calling {obj!r} failed: {e}") from e
        resolved = _resolve(produced)
    if resolved is None:
        raise TargetError(f"not a click command or typer app: {obj!r}")
    return resolved


def default_name(spec: str) -> str:
    """Display name for an unnamed root: the last module component of `spec`."""
    return spec.partition(":")[0].rpartition(".")[2]


def _is_command(obj: Any) -> bool:
    # duck-typed: typer may build on its own vendored copy of click
    return (isinstance(obj, click.Command)
            or (hasattr(obj, "params") and hasattr(obj, "name")
                and callable(getattr(obj, "get_help", None))))


def _resolve(obj: Any):
    if isinstance(obj, typer.Typer):
        command = get_command(obj)
        if not _is_command(command):
            raise TargetError(f"typer returned {command!r}, which is not a command")
        return command
    if _is_command(obj):
        return obj
    return None


__all__ = ["load_target", "to_command", "default_name"]
