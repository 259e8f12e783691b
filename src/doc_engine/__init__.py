"""In-memory multi-document text editing engine."""

from .buffer import Clipboard, Document, DocumentState, EditHistory, Selection
from .config import EditorConfig
from .editor import (
    DocumentNotFoundError,
    DuplicateDocumentError,
    Editor,
    EditorError,
    NoActiveDocumentError,
)
from .events import EditorBus

__all__ = [
    "Clipboard",
    "Document",
    "DocumentState",
    "EditHistory",
    "Selection",
    "EditorConfig",
    "Editor",
    "EditorBus",
    "EditorError",
    "DuplicateDocumentError",
    "DocumentNotFoundError",
    "NoActiveDocumentError",
]

__version__ = "0.1.0"
