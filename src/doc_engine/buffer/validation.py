"""Bounds helpers shared across document operations.

Nothing in here raises: out-of-range input is clamped or discarded.
"""

from __future__ import annotations

from typing import Optional

from .state import DocumentState, Selection


def clamp_cursor(
    state: DocumentState, position: int, *, clamp_to_last_char: bool = False
) -> int:
    """Clamp ``position`` into the cursor range of ``state``.

    With ``clamp_to_last_char`` the upper bound is the last character rather
    than the end of the text, matching the historical behaviour.
    """

    upper = len(state.contents)
    if clamp_to_last_char:
        upper = max(upper - 1, 0)
    if position < 0:
        return 0
    if position > upper:
        return upper
    return position


def selection_for(state: DocumentState, left: int, right: int) -> Optional[Selection]:
    """Return the selection spanning ``[left, right)`` or ``None`` when invalid.

    ``left == right`` is valid but yields an empty-length selection; callers
    treat that as a plain cursor move.
    """

    length = len(state.contents)
    if left > right:
        return None
    if left < 0 or right < 0:
        return None
    if left > length or right > length:
        return None
    return Selection.between(left, right)
