"""Behaviour switches for document editing."""

from __future__ import annotations

from dataclasses import dataclass

from doc_engine.runtime.telemetry import env_flag


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Flags covering the historical quirks of the editing model.

    The defaults keep FIFO redo replay and the unconditional checkpoint on
    ``redo`` while letting the cursor rest at end of text.
    """

    clamp_to_last_char: bool = False
    clear_redo_on_edit: bool = False
    redo_requires_history: bool = False

    @classmethod
    def from_env(cls) -> "EditorConfig":
        """Read ``DOC_ENGINE_*`` variables, falling back to the defaults."""

        defaults = cls()
        return cls(
            clamp_to_last_char=env_flag(
                "CLAMP_TO_LAST_CHAR", defaults.clamp_to_last_char
            ),
            clear_redo_on_edit=env_flag(
                "CLEAR_REDO_ON_EDIT", defaults.clear_redo_on_edit
            ),
            redo_requires_history=env_flag(
                "REDO_REQUIRES_HISTORY", defaults.redo_requires_history
            ),
        )

    @classmethod
    def legacy(cls) -> "EditorConfig":
        """Configuration reproducing every historical quirk."""

        return cls(clamp_to_last_char=True)


__all__ = ["EditorConfig"]
