from __future__ import annotations
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .core import HelpStyle
from .io import read_yaml

# --- Global defaults ---
DEFAULT_WIDTH = 100
DEFAULT_STYLE = HelpStyle.long
FENCE_LANG = "text"
DESC_INDENT = 10          # column where long-help descriptions start

# Looked up in the working directory when no --config is given
CONFIG_FILENAME = "clidocs.yaml"


@dataclass(frozen=True)
class DocsConfig:
    """Settings read from a clidocs.yaml file; CLI flags override them."""
    target:      Optional[str]  = None    # "package.module:attr"
    name:        Optional[str]  = None    # root display name override
    out:         Optional[Path] = None
    style:       HelpStyle      = DEFAULT_STYLE
    width:       int            = DEFAULT_WIDTH
    title:       Optional[str]  = None    # readme title
    description: str            = ""
    snippet:     Optional[Path] = None


def coerce_style(x: Union[str, HelpStyle, None]) -> HelpStyle:
    if x is None:
        return DEFAULT_STYLE
    try:
        return HelpStyle(x)
    except ValueError:
        allowed = "|".join(s.value for s in HelpStyle)
        raise ValueError(f"unknown help style {x!r} (expected {allowed})") from None


def coerce_width(x: Any) -> int:
    if isinstance(x, bool) or not isinstance(x, int):
        raise ValueError(f"width must be an integer, got {x!r}")
    if x <= 0:
        raise ValueError(f"width must be positive, got {x}")
    return x


def config_from_mapping(raw: Dict[str, Any], *, base: Optional[Path] = None) -> DocsConfig:
    """
    Validate a mapping (usually parsed YAML) into a DocsConfig.
    Relative `out`/`snippet` paths are resolved against `base` when given.
    """
    known = {f.name for f in fields(DocsConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"unknown config keys: {', '.join(unknown)}")

    def _path(v: Any) -> Optional[Path]:
        if v in (None, ""):
            return None
        p = Path(str(v))
        return base / p if base is not None and not p.is_absolute() else p

    return DocsConfig(
        target=raw.get("target") or None,
        name=raw.get("name") or None,
        out=_path(raw.get("out")),
        style=coerce_style(raw.get("style")),
        width=coerce_width(raw.get("width", DEFAULT_WIDTH)),
        title=raw.get("title") or None,
        description=str(raw.get("description") or ""),
        snippet=_path(raw.get("snippet")),
    )


def load_config(path: Optional[Path] = None) -> DocsConfig:
    """
    Load settings from `path`, or from ./clidocs.yaml when it exists.
    Returns the defaults when there is nothing to load.
    """
    if path is None:
        path = Path(CONFIG_FILENAME)
        if not path.exists():
            return DocsConfig()
    try:
        raw = read_yaml(path)
    except (OSError, yaml.YAMLError) as e:
        raise ValueError(f"{path}: {e}") from e
    if raw is None:
        return DocsConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return config_from_mapping(raw, base=path.parent)


__all__ = [
    "DEFAULT_WIDTH", "DEFAULT_STYLE", "FENCE_LANG", "DESC_INDENT", "CONFIG_FILENAME",
    "DocsConfig", "coerce_style", "coerce_width", "config_from_mapping", "load_config",
]
