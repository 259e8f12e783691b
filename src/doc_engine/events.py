"""Synchronous event bus for host notifications."""

from __future__ import annotations

from typing import Callable, Dict

DOCUMENT_CREATED = "document.created"
DOCUMENT_SWITCHED = "document.switched"
DOCUMENT_CHANGED = "document.changed"
CLIPBOARD_UPDATED = "clipboard.updated"


class EditorBus:
    """Minimal event bus letting hosts observe editor activity."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Callable[[object], None]) -> None:
        callbacks = self._subscribers.get(event)
        if callbacks and callback in callbacks:
            callbacks.remove(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in list(self._subscribers.get(event, [])):
            callback(payload)


__all__ = [
    "EditorBus",
    "DOCUMENT_CREATED",
    "DOCUMENT_SWITCHED",
    "DOCUMENT_CHANGED",
    "CLIPBOARD_UPDATED",
]
