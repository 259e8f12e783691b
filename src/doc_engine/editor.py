"""Editor registry owning documents and the shared clipboard."""

from __future__ import annotations

from typing import Callable, Dict, Iterator, Optional

from doc_engine.buffer import Clipboard, Document
from doc_engine.config import EditorConfig
from doc_engine.events import (
    CLIPBOARD_UPDATED,
    DOCUMENT_CHANGED,
    DOCUMENT_CREATED,
    DOCUMENT_SWITCHED,
    EditorBus,
)
from doc_engine.runtime import telemetry


class EditorError(RuntimeError):
    """Base class for registry failures."""

    def __init__(self, message: str, *, name: str | None = None) -> None:
        super().__init__(message)
        self.name = name


class DuplicateDocumentError(EditorError):
    """Raised when creating a document whose name is already registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Document '{name}' already exists", name=name)


class DocumentNotFoundError(EditorError):
    """Raised when switching to a document that was never created."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Document '{name}' does not exist", name=name)


class NoActiveDocumentError(EditorError):
    """Raised when an editing command arrives before any ``switch``."""

    def __init__(self) -> None:
        super().__init__("No document is focused; call switch() first")


class Editor:
    """Maps document names to documents and forwards edits to the focused one."""

    def __init__(
        self,
        *,
        config: Optional[EditorConfig] = None,
        bus: Optional[EditorBus] = None,
        clipboard: Optional[Clipboard] = None,
        logger_name: str | None = None,
    ) -> None:
        self.config = config or EditorConfig()
        self.bus = bus or EditorBus()
        self._clipboard = clipboard or Clipboard()
        self._documents: Dict[str, Document] = {}
        self._current: Optional[Document] = None
        self._logger_name = logger_name
        self._clipboard.subscribe(
            lambda text: self.bus.emit(CLIPBOARD_UPDATED, text)
        )

    @property
    def clipboard(self) -> Clipboard:
        return self._clipboard

    @property
    def current(self) -> Optional[Document]:
        return self._current

    def names(self) -> tuple[str, ...]:
        return tuple(self._documents)

    def get(self, name: str) -> Document:
        try:
            return self._documents[name]
        except KeyError as exc:
            raise DocumentNotFoundError(name) from exc

    def create(self, name: str) -> Document:
        """Register a new empty document; focus is left unchanged."""

        if name in self._documents:
            telemetry.record_event(
                "editor.create_rejected",
                level="warning",
                data={"document": name},
                logger_name=self._logger_name,
            )
            raise DuplicateDocumentError(name)
        document = Document(
            name,
            self._clipboard,
            config=self.config,
            logger_name=self._logger_name,
        )
        self._documents[name] = document
        telemetry.record_event(
            "editor.create",
            level="debug",
            data={"document": name, "count": len(self._documents)},
            logger_name=self._logger_name,
        )
        self.bus.emit(DOCUMENT_CREATED, name)
        return document

    def switch(self, name: str) -> Document:
        document = self.get(name)
        self._current = document
        telemetry.record_event(
            "editor.switch",
            level="debug",
            data={"document": name},
            logger_name=self._logger_name,
        )
        self.bus.emit(DOCUMENT_SWITCHED, name)
        return document

    # Forwarding wrappers for the focused document.

    def append(self, text: str) -> str:
        return self._modify(lambda document: document.append(text))

    def backspace(self) -> str:
        return self._modify(Document.backspace)

    def move(self, position: int) -> None:
        self._focused().move(position)

    def select(self, left: int, right: int) -> None:
        self._focused().select(left, right)

    def copy(self) -> None:
        self._focused().copy()

    def paste(self) -> str:
        return self._modify(Document.paste)

    def undo(self) -> str:
        return self._modify(Document.undo)

    def redo(self) -> str:
        return self._modify(Document.redo)

    def _focused(self) -> Document:
        if self._current is None:
            raise NoActiveDocumentError()
        return self._current

    def _modify(self, operation: Callable[[Document], str]) -> str:
        """Run ``operation`` and emit ``DOCUMENT_CHANGED`` only if it had an effect."""

        document = self._focused()
        before = document.snapshot()
        contents = operation(document)
        after = document.snapshot()
        if after != before:
            self.bus.emit(DOCUMENT_CHANGED, after)
        return contents

    def __contains__(self, name: object) -> bool:
        return name in self._documents

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents.values())


__all__ = [
    "Editor",
    "EditorError",
    "DuplicateDocumentError",
    "DocumentNotFoundError",
    "NoActiveDocumentError",
]
