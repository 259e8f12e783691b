"""Shared clipboard cell read and written by every document."""

from __future__ import annotations

from typing import Callable, List


class Clipboard:
    """Single mutable string owned by the editor.

    Documents hold a reference to this cell rather than to the editor, so the
    editor stays the only owner of both.
    """

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._listeners: List[Callable[[str], None]] = []

    @property
    def text(self) -> str:
        return self._text

    def is_empty(self) -> bool:
        return self._text == ""

    def set(self, text: str) -> None:
        self._text = text
        for listener in list(self._listeners):
            listener(text)

    def subscribe(self, listener: Callable[[str], None]) -> None:
        """Call ``listener`` with the new text after every write."""

        self._listeners.append(listener)

    def __repr__(self) -> str:
        return f"Clipboard(text={self._text!r})"
