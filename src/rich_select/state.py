"""Navigation and search state machine for a selection list.

``ListPromptState`` owns the item catalog and options of one prompt and
holds its current ``NavigationState``. Each key event goes through
``transition`` (pure) or ``update`` (applies the result), which returns
whether the caller needs to redraw.

Index coordinates: while filter-mode search is filtering (filter mode on
and search text non-empty) the index is a row of the filtered view;
otherwise it is a catalog position. In both cases it is the row of
``visible_positions`` that should be highlighted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Generic, Iterable, TypeVar

from .catalog import ItemCatalog
from .components import ListItem, SelectionMode
from .config import ListPromptOptions
from .errors import InvalidConfigurationError
from .keys import Key, KeyEvent
from .search import Converter, edit_search_text, first_match, substring_search
from .view import first_or_default, last_or_default, leaf_positions, resolve_view

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NavigationState:
    """Snapshot of the mutable part of a prompt.

    Attributes:
        index: Highlighted row (see module docstring for coordinates).
        search_text: Accumulated search text.
        search_positions: Filtered view from the last text change, or None
            before the first one.
    """

    index: int = 0
    search_text: str = ""
    search_positions: tuple[int, ...] | None = None


class ListPromptState(Generic[T]):
    """Keyboard navigation and incremental search over an item catalog.

    Args:
        catalog: Items to navigate (an ItemCatalog or any iterable of ListItem).
        converter: Payload to display text; required even when a custom
            search predicate is supplied.
        options: Navigation/search options (defaults if omitted).

    Raises:
        InvalidConfigurationError: If converter is missing.

    Example:
        state = ListPromptState(ItemCatalog.from_values(["a", "b"]), str)
        state.update(KeyEvent(Key.DOWN))  # True
        state.current.data                # "b"
    """

    def __init__(
        self,
        catalog: ItemCatalog[T] | Iterable[ListItem[T]],
        converter: Converter | None,
        options: ListPromptOptions | None = None,
    ):
        if converter is None or not callable(converter):
            raise InvalidConfigurationError("converter", "a callable text converter is required")

        self.catalog: ItemCatalog[T] = (
            catalog if isinstance(catalog, ItemCatalog) else ItemCatalog(catalog)
        )
        self.converter = converter
        self.options = options or ListPromptOptions()
        self.search_predicate = self.options.search_predicate or substring_search(converter)

        self._leaf_positions: list[int] | None = None
        if self.skips_groups:
            self._leaf_positions = leaf_positions(self.catalog)
            self.state = NavigationState(index=first_or_default(self._leaf_positions))
        else:
            self.state = NavigationState(index=0)

    # Configuration helpers

    @property
    def skips_groups(self) -> bool:
        """Skip-unselectable navigation is in effect."""
        return self.options.skip_unselectable_items and self.options.mode == SelectionMode.LEAF

    @property
    def item_count(self) -> int:
        return len(self.catalog)

    def is_filtering(self, state: NavigationState | None = None) -> bool:
        """Filter mode is on and there is search text to filter by."""
        state = state or self.state
        return self.options.only_show_searched_text and bool(state.search_text)

    # Read side for renderers

    @property
    def index(self) -> int:
        return self.state.index

    @property
    def search_text(self) -> str:
        return self.state.search_text

    @property
    def visible_positions(self) -> list[int]:
        """Catalog positions the renderer should draw, in order."""
        if self.is_filtering():
            return list(self.state.search_positions or ())
        return list(range(self.item_count))

    @property
    def current_position(self) -> int | None:
        """Catalog position of the highlighted item, or None if there is none."""
        if self.is_filtering():
            positions = self.state.search_positions or ()
            if 0 <= self.state.index < len(positions):
                return positions[self.state.index]
            return None
        if 0 <= self.state.index < self.item_count:
            return self.state.index
        return None

    @property
    def current(self) -> ListItem[T] | None:
        position = self.current_position
        return None if position is None else self.catalog[position]

    # Transitions

    def update(self, event: KeyEvent) -> bool:
        """Apply one key event to the held state.

        Returns:
            True if the highlighted index or search text changed.
        """
        new_state, changed = self.transition(self.state, event)
        if changed:
            logger.debug(
                "%s: index %d -> %d, search %r -> %r",
                event.key,
                self.state.index,
                new_state.index,
                self.state.search_text,
                new_state.search_text,
            )
        self.state = new_state
        return changed

    def transition(
        self, state: NavigationState, event: KeyEvent
    ) -> tuple[NavigationState, bool]:
        """Compute the state following event without mutating anything.

        Returns:
            (next_state, changed)
        """
        filtering = self.is_filtering(state)

        if self.skips_groups and not filtering:
            index = self._move_in_view(state.index, event.key, self._leaf_positions or [])
        else:
            index = self._move_raw(state.index, event.key)
            if filtering:
                index = _clamp_to_view(index, len(state.search_positions or ()))

        search_text = state.search_text
        search_positions = state.search_positions
        if self.options.search_enabled:
            search_text, edited = edit_search_text(state.search_text, event)
            if edited:
                index, search_positions = self._apply_search(index, search_text, search_positions)

        next_state = replace(
            state,
            index=self._normalize(index),
            search_text=search_text,
            search_positions=search_positions,
        )
        changed = (
            next_state.index != state.index or next_state.search_text != state.search_text
        )
        return next_state, changed

    def _move_in_view(self, index: int, key: Key, view: list[int]) -> int:
        """Move within a view of catalog positions (skip-over-groups)."""
        current = view.index(index) if index in view else -1
        wrap = self.options.wrap_around
        page_size = self.options.page_size

        if key == Key.UP:
            if current > 0:
                return view[current - 1]
            return last_or_default(view) if wrap else index
        if key == Key.DOWN:
            if current < len(view) - 1:
                return view[current + 1]
            return first_or_default(view) if wrap else index
        if key == Key.HOME:
            return first_or_default(view)
        if key == Key.END:
            return last_or_default(view)
        if key == Key.PAGE_UP:
            offset = max(current - page_size, 0)
            return view[offset] if offset < len(view) else index
        if key == Key.PAGE_DOWN:
            offset = min(current + page_size, len(view) - 1)
            return view[offset] if 0 <= offset < len(view) else index
        return index

    def _move_raw(self, index: int, key: Key) -> int:
        """Unrestricted movement; bounds are applied later."""
        page_size = self.options.page_size
        return {
            Key.UP: index - 1,
            Key.DOWN: index + 1,
            Key.HOME: 0,
            Key.END: self.item_count - 1,
            Key.PAGE_UP: index - page_size,
            Key.PAGE_DOWN: index + page_size,
        }.get(key, index)

    def _apply_search(
        self,
        index: int,
        search_text: str,
        search_positions: tuple[int, ...] | None,
    ) -> tuple[int, tuple[int, ...] | None]:
        """Relocate the highlight after the search text changed."""
        if self.options.only_show_searched_text:
            search_positions = tuple(
                resolve_view(
                    self.catalog,
                    self.search_predicate,
                    search_text,
                    leaves_only=self.skips_groups,
                    filter_matches=True,
                )
            )
            if search_text:
                return 0, search_positions
            # Back to the unfiltered list: first navigable catalog position.
            return first_or_default(list(search_positions)), search_positions

        match = first_match(self.catalog, self.search_predicate, search_text, self.options.mode)
        if match is not None:
            index = match
        return index, search_positions

    def _normalize(self, index: int) -> int:
        count = self.item_count
        if count == 0:
            return 0
        if self.options.wrap_around:
            return (count + index % count) % count
        return max(0, min(index, count - 1))


def _clamp_to_view(index: int, size: int) -> int:
    """Clamp into [0, size - 1]; an empty view resolves to 0."""
    if size == 0:
        return 0
    return max(0, min(index, size - 1))
