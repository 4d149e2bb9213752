from __future__ import annotations

# markdown_tree/io.py
import logging
from pathlib import Path
from typing import Any, Union

import yaml

PathLike = Union[str, Path]

logger = logging.getLogger(__name__)


def read_text(path: PathLike, encoding: str = "utf-8") -> str:
    return Path(path).read_text(encoding=encoding)


def write_text(path: PathLike, text: str, encoding: str = "utf-8") -> None:
    """
    Atomically write `text`: a sibling .tmp file is written then moved over
    the target. Parent folders are created.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(text, encoding=encoding)
    tmp.replace(path)
    logger.info("wrote %d chars to %s", len(text), path)


def read_yaml(path: PathLike) -> Any:
    """Parse a YAML document; an empty file yields None."""
    return yaml.safe_load(read_text(path))


def with_final_newline(text: str) -> str:
    return text if text.endswith("\n") else text + "\n"


def is_up_to_date(path: PathLike, rendered: str) -> bool:
    """True when `path` exists and already holds `rendered` (final newline ignored)."""
    path = Path(path)
    if not path.exists():
        return False
    return with_final_newline(read_text(path)) == with_final_newline(rendered)


__all__ = ["read_text", "write_text", "read_yaml", "with_final_newline", "is_up_to_date"]
