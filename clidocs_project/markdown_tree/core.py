# markdown_tree/core.py
"""
Core datatypes: the help style enum, the persistent path stack and `join`.
No click, no typer. Keep this dependency-free.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class HelpStyle(str, Enum):
    long  = "long"
    click = "click"


class TargetError(ValueError):
    """A docs target could not be imported or is not a command."""


# ——— Path stack ————————————————————————————————————————————————

@dataclass(frozen=True)
class Stack(Generic[T]):
    """Immutable stack of path components, root first.

    `pushed` links a new frame onto the existing one, so every recursion
    level shares its ancestors instead of copying them. Siblings pushing onto
    the same parent never see each other's components.
    """
    head:   Optional[T]          = None
    parent: Optional["Stack[T]"] = None
    depth:  int                  = 0

    @classmethod
    def empty(cls) -> "Stack[T]":
        return cls()

    def pushed(self, item: T) -> "Stack[T]":
        return Stack(item, self, self.depth + 1)

    def __len__(self) -> int:
        return self.depth

    def __iter__(self) -> Iterator[T]:
        items: List[T] = []
        node: Optional[Stack[T]] = self
        while node is not None and node.depth:
            items.append(node.head)
            node = node.parent
        return reversed(items)


def join(components: Iterable[Any]) -> str:
    """Space-separated components, e.g. a path rendered as a program name."""
    return " ".join(str(c) for c in components)


__all__ = ["HelpStyle", "TargetError", "Stack", "join"]
