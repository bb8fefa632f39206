"""Keyboard input helpers for rich_select.

Raw key strings come from ``readchar.readkey()``. This module turns them
into :class:`KeyEvent` values the navigation state understands, and keeps
the small predicate helpers the prompt loop uses for Enter/Escape.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import Enum

import readchar


class Key(str, Enum):
    """Symbolic key identities understood by the navigation state."""

    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    BACKSPACE = "backspace"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class KeyEvent:
    """One key press: a symbolic key plus the literal character, if any."""

    key: Key
    char: str | None = None

    @property
    def is_text_input(self) -> bool:
        """True when the event carries a printable (non-control) character."""
        return self.char is not None and len(self.char) == 1 and not is_control(self.char)


# Terminals disagree on Home/End; readchar only names one spelling.
_SEQUENCES: dict[str, Key] = {
    readchar.key.UP: Key.UP,
    readchar.key.DOWN: Key.DOWN,
    readchar.key.HOME: Key.HOME,
    readchar.key.END: Key.END,
    readchar.key.PAGE_UP: Key.PAGE_UP,
    readchar.key.PAGE_DOWN: Key.PAGE_DOWN,
    "\x1b[1~": Key.HOME,
    "\x1b[4~": Key.END,
    "\x1bOH": Key.HOME,
    "\x1bOF": Key.END,
}


def is_control(char: str) -> bool:
    """Check if a single character is a control character (category Cc)."""
    return unicodedata.category(char) == "Cc"


def is_enter(key: str) -> bool:
    """Check if key is Enter/Return."""
    return key in (readchar.key.ENTER, "\r", "\n")


def is_escape(key: str) -> bool:
    """Check if key is Escape (handles terminal variations)."""
    return key in (readchar.key.ESC, "\x1b", "\x1b\x1b")


def is_backspace(key: str) -> bool:
    """Check if key is backspace (handles terminal variations)."""
    return key in (readchar.key.BACKSPACE, "\x7f", "\b")


def parse_key(raw: str, vim_keys: bool = False) -> KeyEvent:
    """Translate a raw readchar key string into a KeyEvent.

    Args:
        raw: String returned by ``readchar.readkey()``.
        vim_keys: Treat ``j``/``k`` as Down/Up. Leave this off when search
            is enabled, otherwise those letters could never be typed.

    Returns:
        KeyEvent with ``Key.OTHER`` for anything that is not navigation.
        Single characters are always carried in ``char`` so the search
        engine can decide whether they are text input.
    """
    if raw in _SEQUENCES:
        return KeyEvent(_SEQUENCES[raw])
    if is_backspace(raw):
        return KeyEvent(Key.BACKSPACE, raw)
    if vim_keys and raw in ("j", "k"):
        return KeyEvent(Key.DOWN if raw == "j" else Key.UP)
    if len(raw) == 1:
        return KeyEvent(Key.OTHER, raw)
    return KeyEvent(Key.OTHER)
