"""Configurable themes for the selection prompt.

The Theme dataclass holds the colours, icons and layout of the rendered
list. Values can be overridden from the ``theme`` section of the config.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Theme:
    """Visual theme for the selection prompt.

    All colors use Rich markup format (e.g., "green", "bold cyan", "dim").

    Attributes:
        selected_color: Color for the highlighted row and cursor.
        group_color: Color for group header rows.
        dim_color: Color for hints and secondary text.
        search_color: Color for the search line.
        match_color: Color for the no-match notice.
        border_color: Color for panel border.

        cursor_icon: Character shown next to the highlighted row.
        search_icon: Prefix for the search line.
        scroll_up_icon: Character indicating more rows above.
        scroll_down_icon: Character indicating more rows below.
        indent: Text repeated once per nesting level.

        panel_width: Fixed width of the panel (None to fill the terminal).
    """

    # Colors
    selected_color: str = "cyan"
    group_color: str = "bold"
    dim_color: str = "dim"
    search_color: str = "yellow"
    match_color: str = "red"
    border_color: str = "cyan"

    # Icons
    cursor_icon: str = "›"
    search_icon: str = "/"
    scroll_up_icon: str = "↑"
    scroll_down_icon: str = "↓"
    indent: str = "  "

    # Layout
    panel_width: int | None = 80

    def with_overrides(self, overrides: dict[str, Any]) -> "Theme":
        """Return a copy with known fields replaced.

        Unknown keys are ignored; values of the wrong type are skipped
        with a warning.
        """
        values = {}
        for f in fields(self):
            if f.name not in overrides:
                continue
            value = overrides[f.name]
            if not _valid_value(f.name, value, getattr(self, f.name)):
                logger.warning("Ignoring theme.%s: unexpected value %r", f.name, value)
                continue
            values[f.name] = value
        return replace(self, **values)


def _valid_value(name: str, value: Any, default: Any) -> bool:
    if name == "panel_width":
        return value is None or (
            isinstance(value, int) and not isinstance(value, bool) and value > 0
        )
    return isinstance(value, type(default))


DEFAULT_THEME = Theme()
