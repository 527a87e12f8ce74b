"""Classification of raw key presses into typeahead navigation actions."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

_TAB_KEYS = frozenset({"tab"})
_ESCAPE_KEYS = frozenset({"escape"})
_ENTER_KEYS = frozenset({"enter", "return"})


class KeyEvent(Protocol):
    """Anything carrying a key identifier and a shift flag."""

    key: str
    shift: bool


class KeyAction(Enum):
    """Navigation actions the typeahead reacts to."""

    TAB_FORWARD = "tab_forward"
    TAB_BACKWARD = "tab_backward"
    ESCAPE = "escape"
    ENTER = "enter"
    OTHER = "other"


def is_tab_forward(event: KeyEvent) -> bool:
    """Tab without shift."""
    return event.key in _TAB_KEYS and not event.shift


def is_tab_backward(event: KeyEvent) -> bool:
    """Tab with shift."""
    return event.key in _TAB_KEYS and event.shift


def is_escape(event: KeyEvent) -> bool:
    return event.key in _ESCAPE_KEYS


def is_enter(event: KeyEvent) -> bool:
    return event.key in _ENTER_KEYS


def classify(event: KeyEvent) -> KeyAction:
    """Map a key press to the single action it represents.

    Args:
        event: The key press to classify.

    Returns:
        The matching action, or ``KeyAction.OTHER`` for keys the typeahead
        leaves to the default handler.
    """
    if is_tab_forward(event):
        return KeyAction.TAB_FORWARD
    if is_tab_backward(event):
        return KeyAction.TAB_BACKWARD
    if is_escape(event):
        return KeyAction.ESCAPE
    if is_enter(event):
        return KeyAction.ENTER
    return KeyAction.OTHER
