from __future__ import annotations

from typing import List

from doc_engine.buffer import Clipboard, Document, DocumentState


def make_document(contents: str, clipboard: Clipboard, *, name: str = "doc") -> Document:
    return Document(
        name,
        clipboard,
        state=DocumentState(cursor=len(contents), contents=contents),
    )


def test_copy_selection_into_clipboard() -> None:
    clipboard = Clipboard()
    document = make_document("hello world", clipboard)
    document.select(0, 5)

    document.copy()

    assert clipboard.text == "hello"
    assert document.selection is None
    assert not document.can_undo()


def test_copy_without_selection_keeps_clipboard() -> None:
    clipboard = Clipboard("kept")
    document = make_document("hello", clipboard)

    document.copy()

    assert clipboard.text == "kept"
    assert document.selection is None


def test_paste_inserts_clipboard_at_cursor() -> None:
    clipboard = Clipboard("XY")
    document = make_document("abc", clipboard)
    document.move(1)

    assert document.paste() == "aXYbc"
    assert document.cursor == 3
    assert document.can_undo()


def test_paste_replaces_selection() -> None:
    clipboard = Clipboard("new")
    document = make_document("old text", clipboard)
    document.select(0, 3)

    assert document.paste() == "new text"
    assert document.selection is None


def test_paste_with_empty_clipboard_is_noop() -> None:
    document = make_document("abc", Clipboard())

    assert document.paste() == "abc"
    assert not document.can_undo()


def test_clipboard_is_shared_between_documents() -> None:
    clipboard = Clipboard()
    source = make_document("shared text", clipboard, name="source")
    target = make_document("", clipboard, name="target")
    source.select(0, 6)
    source.copy()

    assert target.paste() == "shared"


def test_clipboard_notifies_listeners() -> None:
    clipboard = Clipboard()
    seen: List[str] = []
    clipboard.subscribe(seen.append)

    clipboard.set("one")
    clipboard.set("two")

    assert seen == ["one", "two"]
    assert not clipboard.is_empty()
