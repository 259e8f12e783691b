from __future__ import annotations

import pytest

from doc_engine.config import EditorConfig


def test_defaults() -> None:
    config = EditorConfig()

    assert config.clamp_to_last_char is False
    assert config.clear_redo_on_edit is False
    assert config.redo_requires_history is False


def test_from_env_reads_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOC_ENGINE_CLAMP_TO_LAST_CHAR", "yes")
    monkeypatch.setenv("DOC_ENGINE_CLEAR_REDO_ON_EDIT", "1")
    monkeypatch.setenv("DOC_ENGINE_REDO_REQUIRES_HISTORY", "off")

    config = EditorConfig.from_env()

    assert config.clamp_to_last_char is True
    assert config.clear_redo_on_edit is True
    assert config.redo_requires_history is False


def test_from_env_without_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CLAMP_TO_LAST_CHAR", "CLEAR_REDO_ON_EDIT", "REDO_REQUIRES_HISTORY"):
        monkeypatch.delenv(f"DOC_ENGINE_{name}", raising=False)

    assert EditorConfig.from_env() == EditorConfig()


def test_legacy_preset() -> None:
    assert EditorConfig.legacy().clamp_to_last_char is True
