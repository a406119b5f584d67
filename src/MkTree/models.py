"""Data classes for MkTree."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Line:
    content: str
    indentation: int = 0


@dataclass
class TreeItem:
    content: str
    children: list[TreeItem] = field(default_factory=list)
