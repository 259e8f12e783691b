"""Document façade combining state, history, and the shared clipboard."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from doc_engine.config import EditorConfig
from doc_engine.runtime import telemetry

from .clipboard import Clipboard
from .history import EditHistory
from .state import DocumentState, Selection
from .validation import clamp_cursor, selection_for


@dataclass(slots=True)
class DocumentView:
    name: str
    contents: str
    cursor: int
    selection: Optional[Selection]
    undo_depth: int
    redo_depth: int


class Document:
    """A named text buffer with one cursor and at most one selection.

    Modifying operations (``append``, ``backspace`` and ``paste``) checkpoint
    the state they replace. Navigation (``move``, ``select``) and ``copy``
    swap the current state without touching history. Malformed input is
    discarded rather than raised.
    """

    def __init__(
        self,
        name: str,
        clipboard: Clipboard,
        *,
        config: Optional[EditorConfig] = None,
        history: Optional[EditHistory] = None,
        state: Optional[DocumentState] = None,
        logger_name: str | None = None,
    ) -> None:
        self.name = name
        self.clipboard = clipboard
        self.config = config or EditorConfig()
        self.history = history or EditHistory()
        self._state = state or DocumentState()
        self._logger_name = logger_name

    @property
    def state(self) -> DocumentState:
        return self._state

    @property
    def contents(self) -> str:
        return self._state.contents

    @property
    def cursor(self) -> int:
        return self._state.cursor

    @property
    def selection(self) -> Optional[Selection]:
        return self._state.selection

    def can_undo(self) -> bool:
        return self.history.can_undo()

    def can_redo(self) -> bool:
        return self.history.can_redo()

    def snapshot(self) -> DocumentView:
        return DocumentView(
            name=self.name,
            contents=self._state.contents,
            cursor=self._state.cursor,
            selection=self._state.selection,
            undo_depth=self.history.undo_depth,
            redo_depth=self.history.redo_depth,
        )

    # -- modify --------------------------------------------------------------

    def append(self, text: str) -> str:
        """Insert ``text`` at the cursor, replacing the selection if any."""

        with self._span("append", length=len(text)):
            before = self._state
            selection = before.selection
            if selection is not None:
                start, end = selection.start, selection.end
            else:
                start = end = before.cursor
            contents = before.contents[:start] + text + before.contents[end:]
            self._commit(
                before,
                DocumentState(cursor=start + len(text), contents=contents),
            )
            return self._state.contents

    def backspace(self) -> str:
        """Delete the character before the cursor; no-op at position 0."""

        with self._span("backspace") as handle:
            before = self._state
            if before.cursor <= 0:
                handle.noop("cursor_at_start")
                return before.contents
            cursor = before.cursor - 1
            contents = before.contents[:cursor] + before.contents[cursor + 1 :]
            self._commit(before, DocumentState(cursor=cursor, contents=contents))
            return self._state.contents

    # -- navigation ----------------------------------------------------------

    def move(self, position: int) -> None:
        self._state = self._state.with_cursor(
            clamp_cursor(
                self._state,
                position,
                clamp_to_last_char=self.config.clamp_to_last_char,
            )
        )

    def select(self, left: int, right: int) -> None:
        """Select ``[left, right)``; invalid ranges are ignored.

        Equal bounds collapse to a cursor move that clears the selection.
        """

        selection = selection_for(self._state, left, right)
        if selection is None:
            telemetry.record_event(
                "document.select_ignored",
                level="debug",
                data={"document": self.name, "left": left, "right": right},
                logger_name=self._logger_name,
            )
            return
        if selection.length == 0:
            self._state = self._state.with_cursor(left).clear_selection()
            return
        self._state = self._state.with_selection(selection)

    # -- clipboard -----------------------------------------------------------

    def copy(self) -> None:
        """Copy the selection to the clipboard and always clear the selection."""

        if self._state.selection is not None:
            self.clipboard.set(self._state.selected_text())
        self._state = self._state.clear_selection()

    def paste(self) -> str:
        if self.clipboard.is_empty():
            telemetry.record_event(
                "document.paste_ignored",
                level="debug",
                data={"document": self.name},
                logger_name=self._logger_name,
            )
            return self._state.contents
        return self.append(self.clipboard.text)

    # -- history -------------------------------------------------------------

    def undo(self) -> str:
        with self._span("undo") as handle:
            restored = self.history.undo(self._state)
            if restored is None:
                handle.noop("empty_undo")
                return self._state.contents
            self._state = restored
            handle.add_metadata("redo_depth", self.history.redo_depth)
            return self._state.contents

    def redo(self) -> str:
        with self._span("redo") as handle:
            restored = self.history.redo(
                self._state, require_pending=self.config.redo_requires_history
            )
            if restored is None:
                handle.noop("empty_redo")
                return self._state.contents
            self._state = restored
            handle.add_metadata("undo_depth", self.history.undo_depth)
            return self._state.contents

    # -- internals -----------------------------------------------------------

    def _commit(self, before: DocumentState, after: DocumentState) -> None:
        self.history.checkpoint(before)
        if self.config.clear_redo_on_edit:
            self.history.discard_redo()
        self._state = after

    def _span(self, operation: str, **metadata: object):
        return telemetry.span(
            f"document::{operation}",
            logger_name=self._logger_name,
            component="document",
            metadata={"document": self.name, **metadata},
        )

    def __repr__(self) -> str:
        return (
            f"Document(name={self.name!r}, cursor={self._state.cursor}, "
            f"length={len(self._state.contents)})"
        )
