"""Document state, history, and clipboard data structures."""

from .clipboard import Clipboard
from .document import Document, DocumentView
from .history import EditHistory
from .state import DocumentState, Selection
from .validation import clamp_cursor, selection_for

__all__ = [
    "Clipboard",
    "Document",
    "DocumentView",
    "DocumentState",
    "EditHistory",
    "Selection",
    "clamp_cursor",
    "selection_for",
]
