"""Prompt options and YAML-based defaults.

Options live in a frozen ``ListPromptOptions`` value fixed at prompt
construction. User defaults can be kept in
``~/.config/rich-select/config.yaml``; anything missing falls back to
``DEFAULT_CONFIG``.
"""

from __future__ import annotations

import copy
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Callable

import yaml

from .components import SelectionMode
from .errors import InvalidConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "page_size": 10,
    "wrap_around": False,
    "mode": "leaf",
    "skip_unselectable_items": False,
    "search_enabled": False,
    "only_show_searched_text": False,
    "debug": False,
    "theme": {},
}


@dataclass(frozen=True)
class ListPromptOptions:
    """Navigation and search options for one prompt.

    Attributes:
        page_size: PageUp/PageDown distance and rendered window height.
        wrap_around: Wrap at view boundaries instead of stopping.
        mode: LEAF restricts results to non-group items.
        skip_unselectable_items: With LEAF mode, navigate leaves only.
        search_enabled: Feed key events to the search engine.
        only_show_searched_text: Filter to matches (True) or jump to the
            first match (False).
        search_predicate: Custom ``(payload, text) -> bool``; None uses
            case-insensitive substring matching on the converter output.
    """

    page_size: int = 10
    wrap_around: bool = False
    mode: SelectionMode = SelectionMode.LEAF
    skip_unselectable_items: bool = False
    search_enabled: bool = False
    only_show_searched_text: bool = False
    search_predicate: Callable[[Any, str], bool] | None = None

    def __post_init__(self):
        if isinstance(self.mode, str) and not isinstance(self.mode, SelectionMode):
            object.__setattr__(self, "mode", SelectionMode.from_string(self.mode))
        elif not isinstance(self.mode, SelectionMode):
            raise InvalidConfigurationError("mode", f"expected a SelectionMode, got {self.mode!r}")
        if isinstance(self.page_size, bool) or not isinstance(self.page_size, int):
            raise InvalidConfigurationError("page_size", f"expected an integer, got {self.page_size!r}")
        if self.page_size < 1:
            raise InvalidConfigurationError("page_size", "must be at least 1")
        if self.search_predicate is not None and not callable(self.search_predicate):
            raise InvalidConfigurationError("search_predicate", "must be callable")


_OPTION_KEYS = {f.name for f in fields(ListPromptOptions)} - {"search_predicate"}


def get_config_dir() -> Path:
    """Get the rich-select config directory."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(xdg_config) / "rich-select"


def get_config_path() -> Path:
    """Get the path to the default config file."""
    return get_config_dir() / "config.yaml"


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load config, merged over defaults.

    A missing file gives the defaults silently; an unreadable or
    malformed one gives the defaults with a warning.
    """
    config_path = path or get_config_path()
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return copy.deepcopy(DEFAULT_CONFIG)
    except (yaml.YAMLError, OSError) as e:
        logger.warning("Ignoring unreadable config %s: %s", config_path, e)
        return copy.deepcopy(DEFAULT_CONFIG)

    if data is None:
        return copy.deepcopy(DEFAULT_CONFIG)
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a mapping", config_path)
        return copy.deepcopy(DEFAULT_CONFIG)

    unknown = sorted(set(data) - set(DEFAULT_CONFIG))
    if unknown:
        logger.warning("Unknown config keys in %s: %s", config_path, ", ".join(unknown))
    if "theme" in data and not isinstance(data["theme"], dict):
        logger.warning("Ignoring theme in %s: expected a mapping", config_path)
        data = dict(data, theme={})
    return _deep_merge(copy.deepcopy(DEFAULT_CONFIG), data)


def save_config(cfg: dict[str, Any], path: Path | None = None) -> None:
    """Save config as YAML."""
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        yaml.dump(cfg, f, default_flow_style=False, sort_keys=False)


def options_from_config(cfg: dict[str, Any], **overrides: Any) -> ListPromptOptions:
    """Build ListPromptOptions from a config dict.

    Keyword overrides (e.g. from CLI flags) win over the config; None
    values are ignored so unset flags don't clobber the file.

    Raises:
        InvalidConfigurationError: For an invalid page size or mode.
    """
    values = {key: cfg[key] for key in _OPTION_KEYS if key in cfg}
    values.update({key: value for key, value in overrides.items() if value is not None})
    return ListPromptOptions(**values)
