"""Interactive selection prompt using Rich.Live.

Reads keys with readchar, feeds them to a ListPromptState and redraws
only when the state reports a change.

Example:
    from rich_select import ItemCatalog, SelectionPrompt

    prompt = SelectionPrompt(
        ItemCatalog.from_values(["apple", "banana", "cherry"]),
        converter=str,
        title="Fruit",
    )
    choice = prompt.show()  # "banana", or None if cancelled
"""

from __future__ import annotations

import logging
from typing import Generic, Iterable, TypeVar

import readchar
from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.panel import Panel

from .catalog import ItemCatalog
from .components import ListItem
from .config import ListPromptOptions
from .errors import InvalidConfigurationError
from .keys import is_enter, is_escape, parse_key
from .search import Converter
from .state import ListPromptState
from .themes import DEFAULT_THEME, Theme

T = TypeVar("T")

logger = logging.getLogger(__name__)


class SelectionPrompt(Generic[T]):
    """Keyboard-driven single selection list.

    Keyboard controls:
        - Up/Down, PageUp/PageDown, Home/End: Navigate (j/k when search is off)
        - Printable keys / Backspace: Edit search text (when search is on)
        - Enter: Accept the highlighted item if it is selectable
        - Esc / Ctrl+C: Cancel

    Args:
        catalog: Items to choose from.
        converter: Payload to display text (also used by default search).
        options: Navigation/search options.
        title: Panel title.
        console: Rich Console for output (auto-created if not provided).
        theme: Visual theme.

    Raises:
        InvalidConfigurationError: If the catalog is empty or converter missing.
    """

    def __init__(
        self,
        catalog: ItemCatalog[T] | Iterable[ListItem[T]],
        converter: Converter | None,
        options: ListPromptOptions | None = None,
        title: str = "Select",
        console: Console | None = None,
        theme: Theme | None = None,
    ):
        self.state: ListPromptState[T] = ListPromptState(catalog, converter, options)
        if not self.state.catalog:
            raise InvalidConfigurationError("catalog", "at least one item is required")

        self.converter = converter
        self.title = title
        self.console = console or Console()
        self.theme = theme or DEFAULT_THEME
        self.window_offset = 0
        self.result: T | None = None
        self.cancelled = False
        self.should_exit = False

    @property
    def options(self) -> ListPromptOptions:
        return self.state.options

    def _update_window(self, row: int, total: int, max_visible: int) -> None:
        """Update window offset to keep the highlighted row visible."""
        if total <= max_visible:
            self.window_offset = 0
            return

        self.window_offset = min(self.window_offset, total - max_visible)
        if row < self.window_offset:
            self.window_offset = row
        elif row >= self.window_offset + max_visible:
            self.window_offset = row - max_visible + 1

    def _render_item(self, item: ListItem[T], is_selected: bool) -> str:
        theme = self.theme
        text = escape(self.converter(item.data))
        indent = theme.indent * item.depth

        if is_selected:
            cursor = f"[{theme.selected_color}]{theme.cursor_icon}[/{theme.selected_color}]"
            return f"{cursor} {indent}[{theme.selected_color}]{text}[/{theme.selected_color}]"
        if item.is_group:
            return f"  {indent}[{theme.group_color}]{text}[/{theme.group_color}]"
        return f"  {indent}{text}"

    def _search_line(self) -> str:
        theme = self.theme
        if self.state.search_text:
            return (
                f"[{theme.search_color}]{theme.search_icon} "
                f"{escape(self.state.search_text)}[/{theme.search_color}]"
            )
        return f"[{theme.dim_color}]{theme.search_icon} type to search[/{theme.dim_color}]"

    def render(self) -> Panel:
        """Render the list as a Rich Panel."""
        theme = self.theme
        visible = self.state.visible_positions
        row = self.state.index
        max_visible = self.options.page_size

        lines = []
        if self.options.search_enabled:
            lines.append(self._search_line())

        if not visible:
            lines.append(f"[{theme.match_color}]  No matching items[/{theme.match_color}]")
        else:
            self._update_window(row, len(visible), max_visible)
            window_end = min(self.window_offset + max_visible, len(visible))

            if self.window_offset > 0:
                lines.append(
                    f"[{theme.dim_color}]  {theme.scroll_up_icon} "
                    f"{self.window_offset} more above[/{theme.dim_color}]"
                )

            for i in range(self.window_offset, window_end):
                item = self.state.catalog[visible[i]]
                lines.append(self._render_item(item, is_selected=i == row))

            items_below = len(visible) - window_end
            if items_below > 0:
                lines.append(
                    f"[{theme.dim_color}]  {theme.scroll_down_icon} "
                    f"{items_below} more below[/{theme.dim_color}]"
                )

        hints = f"{theme.scroll_up_icon}{theme.scroll_down_icon} navigate • Enter select • Esc cancel"
        if self.options.search_enabled:
            hints += " • type to search"
        footer = f"[{theme.dim_color}]{hints}[/{theme.dim_color}]"

        return Panel(
            "\n".join(lines) + f"\n\n{footer}",
            title=f"[bold]{escape(self.title)}[/bold]",
            border_style=theme.border_color,
            width=theme.panel_width,
        )

    def _accept(self) -> None:
        current = self.state.current
        if current is None or not current.is_selectable(self.options.mode):
            return
        self.result = current.data
        self.should_exit = True
        logger.debug("Selected item at position %s", self.state.current_position)

    def handle_key(self, key: str) -> bool:
        """Handle one raw key.

        Returns:
            True if the panel needs to be redrawn.
        """
        if is_enter(key):
            self._accept()
            return False
        if is_escape(key):
            self.cancelled = True
            self.should_exit = True
            return False

        event = parse_key(key, vim_keys=not self.options.search_enabled)
        return self.state.update(event)

    def show(self) -> T | None:
        """Display the prompt and block until the user chooses or cancels.

        Returns:
            The chosen payload, or None when cancelled.
        """
        with Live(
            self.render(), console=self.console, refresh_per_second=20, transient=True
        ) as live:
            while not self.should_exit:
                try:
                    key = readchar.readkey()
                except (KeyboardInterrupt, EOFError):
                    self.cancelled = True
                    break
                if self.handle_key(key):
                    live.update(self.render())

        return None if self.cancelled else self.result
