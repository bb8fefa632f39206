"""Keyboard-driven selection lists for the terminal.

A navigation-and-search state machine plus a Rich.Live prompt on top of it.

Example:
    from rich_select import Choice, ItemCatalog, ListPromptOptions, SelectionPrompt

    catalog = ItemCatalog.from_choices([
        Choice("Fruit").add("apple", "banana"),
        Choice("Vegetables").add("carrot"),
    ])
    prompt = SelectionPrompt(
        catalog,
        converter=str,
        options=ListPromptOptions(skip_unselectable_items=True, search_enabled=True),
    )
    result = prompt.show()  # "banana", or None if cancelled
"""

__version__ = "0.1.0"

from .catalog import ItemCatalog
from .components import Choice, ListItem, SelectionMode
from .config import ListPromptOptions, load_config, options_from_config
from .errors import InvalidConfigurationError, RichSelectError
from .keys import Key, KeyEvent, parse_key
from .prompt import SelectionPrompt
from .search import edit_search_text, first_match, substring_search
from .state import ListPromptState, NavigationState
from .themes import DEFAULT_THEME, Theme
from .view import leaf_positions, matching_positions, resolve_view

__all__ = [
    # State machine
    "ListPromptState",
    "NavigationState",
    "ListPromptOptions",
    # Items
    "ItemCatalog",
    "ListItem",
    "Choice",
    "SelectionMode",
    # Keys
    "Key",
    "KeyEvent",
    "parse_key",
    # Views and search
    "leaf_positions",
    "matching_positions",
    "resolve_view",
    "substring_search",
    "edit_search_text",
    "first_match",
    # Prompt
    "SelectionPrompt",
    "Theme",
    "DEFAULT_THEME",
    # Config and errors
    "load_config",
    "options_from_config",
    "InvalidConfigurationError",
    "RichSelectError",
]
