"""Undo stack and redo queue over document snapshots."""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional

from .state import DocumentState


class EditHistory:
    """Linear undo/redo history with asymmetric containers.

    Undo is a stack: the most recently displaced state comes back first.
    Redo is a queue: undone states are replayed in the order they were
    undone, not in reverse.
    """

    def __init__(self) -> None:
        self._undo: List[DocumentState] = []
        self._redo: Deque[DocumentState] = deque()

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def checkpoint(self, state: DocumentState) -> None:
        """Push ``state`` onto the undo stack."""

        self._undo.append(state)

    def undo(self, current: DocumentState) -> Optional[DocumentState]:
        """Pop the latest checkpoint, queueing ``current`` for redo.

        Returns ``None`` and leaves both containers untouched when there is
        nothing to undo.
        """

        if not self._undo:
            return None
        self._redo.append(current)
        return self._undo.pop()

    def redo(
        self, current: DocumentState, *, require_pending: bool = False
    ) -> Optional[DocumentState]:
        """Checkpoint ``current`` and dequeue the oldest undone state.

        ``current`` is pushed onto the undo stack even when the redo queue is
        empty unless ``require_pending`` is set.
        """

        if require_pending and not self._redo:
            return None
        self._undo.append(current)
        if not self._redo:
            return None
        return self._redo.popleft()

    def discard_redo(self) -> int:
        dropped = len(self._redo)
        self._redo.clear()
        return dropped

    def undo_states(self) -> tuple[DocumentState, ...]:
        """Undo stack contents, most recent first."""

        return tuple(reversed(self._undo))

    def redo_states(self) -> tuple[DocumentState, ...]:
        """Redo queue contents, next to replay first."""

        return tuple(self._redo)
