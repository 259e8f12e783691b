"""Cursor, selection, and contents snapshots for documents."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True, slots=True)
class Selection:
    """Contiguous character range ``[start, start + length)``."""

    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length

    @classmethod
    def between(cls, left: int, right: int) -> "Selection":
        return cls(start=left, length=right - left)


@dataclass(frozen=True, slots=True)
class DocumentState:
    """Immutable bundle of cursor position, optional selection, and text.

    Documents swap whole states in and out of their current slot, so a
    state pushed onto the history can never be altered afterwards.
    """

    cursor: int = 0
    selection: Optional[Selection] = None
    contents: str = ""

    def with_cursor(self, cursor: int) -> "DocumentState":
        return replace(self, cursor=cursor)

    def with_selection(self, selection: Optional[Selection]) -> "DocumentState":
        return replace(self, selection=selection)

    def clear_selection(self) -> "DocumentState":
        if self.selection is None:
            return self
        return replace(self, selection=None)

    def selected_text(self) -> str:
        if self.selection is None:
            return ""
        return self.contents[self.selection.start : self.selection.end]
