from __future__ import annotations

from enum import Enum


class EntryKind(str, Enum):
    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"
    OTHER = "other"


class VerticalAlign(str, Enum):
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"

    def offset(self, content: int, available: int) -> int:
        """Rows to skip before drawing *content* rows inside *available* rows."""
        if content >= available:
            return 0
        if self is VerticalAlign.MIDDLE:
            return (available - content) // 2
        if self is VerticalAlign.BOTTOM:
            return available - content
        return 0
