"""Incremental search: text editing, match predicates and jump targets."""

from __future__ import annotations

from typing import Callable, TypeVar

from .catalog import ItemCatalog
from .components import SelectionMode
from .keys import Key, KeyEvent

T = TypeVar("T")

SearchPredicate = Callable[[T, str], bool]
Converter = Callable[[T], str]


def substring_search(converter: Converter) -> SearchPredicate:
    """Build the default predicate: case-insensitive substring match.

    Args:
        converter: Turns a payload into its display text.

    Returns:
        Predicate ``(payload, text) -> bool``.
    """

    def _matches(data, text: str) -> bool:
        return text.casefold() in converter(data).casefold()

    return _matches


def edit_search_text(text: str, event: KeyEvent) -> tuple[str, bool]:
    """Apply one key event to the search text.

    A printable character is appended, Backspace drops the last character
    of non-empty text, anything else is ignored.

    Returns:
        (new_text, changed)
    """
    if event.is_text_input:
        return text + event.char, True
    if event.key == Key.BACKSPACE and text:
        return text[:-1], True
    return text, False


def first_match(
    catalog: ItemCatalog[T],
    predicate: SearchPredicate,
    text: str,
    mode: SelectionMode,
) -> int | None:
    """Position of the first selectable item matching text, or None."""
    for i, item in enumerate(catalog):
        if item.is_selectable(mode) and predicate(item.data, text):
            return i
    return None
