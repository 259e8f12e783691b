from __future__ import annotations

from doc_engine.buffer import Clipboard, Document, DocumentState, Selection


def make_document(
    contents: str = "", *, cursor: int | None = None, clipboard: Clipboard | None = None
) -> Document:
    state = DocumentState(
        cursor=len(contents) if cursor is None else cursor, contents=contents
    )
    return Document("doc", clipboard or Clipboard(), state=state)


def test_new_document_starts_empty() -> None:
    document = Document("fresh", Clipboard())

    view = document.snapshot()

    assert view.contents == ""
    assert view.cursor == 0
    assert view.selection is None
    assert view.undo_depth == 0
    assert view.redo_depth == 0


def test_append_inserts_at_cursor_and_advances() -> None:
    document = make_document("held", cursor=2)

    result = document.append("ywor")

    assert result == "heyworld"
    assert document.cursor == 6


def test_append_grows_contents_by_text_length() -> None:
    document = make_document("abc", cursor=1)

    for text in ("", "x", "hello world"):
        before_len = len(document.contents)
        before_cursor = document.cursor
        document.append(text)
        assert len(document.contents) == before_len + len(text)
        assert document.cursor == before_cursor + len(text)


def test_append_replaces_selection() -> None:
    document = make_document("hello world")
    document.select(6, 11)

    result = document.append("there")

    assert result == "hello there"
    assert document.cursor == 11
    assert document.selection is None


def test_append_with_selection_and_empty_text_deletes_range() -> None:
    document = make_document("abcdef")
    document.select(1, 4)

    assert document.append("") == "aef"
    assert document.cursor == 1


def test_append_checkpoints_previous_state() -> None:
    document = make_document("abc", cursor=3)

    document.append("d")

    assert document.history.undo_states() == (DocumentState(cursor=3, contents="abc"),)


def test_backspace_removes_previous_character() -> None:
    document = make_document("abc", cursor=3)

    assert document.backspace() == "ab"
    assert document.cursor == 2


def test_backspace_in_middle_of_text() -> None:
    document = make_document("abcd", cursor=2)

    assert document.backspace() == "acd"
    assert document.cursor == 1


def test_backspace_at_start_is_noop_without_history() -> None:
    document = make_document("abc", cursor=0)

    assert document.backspace() == "abc"
    assert document.cursor == 0
    assert not document.can_undo()


def test_backspace_drops_active_selection() -> None:
    document = make_document("abcdef")
    document.select(3, 6)

    document.backspace()

    assert document.contents == "abcde"
    assert document.selection is None


def test_selection_value_reports_end() -> None:
    assert Selection(start=2, length=3).end == 5
    assert Selection.between(1, 4) == Selection(start=1, length=3)
