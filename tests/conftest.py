"""Pytest fixtures for rich-select tests."""

import pytest

from rich_select.catalog import ItemCatalog
from rich_select.components import Choice, ListItem
from rich_select.config import ListPromptOptions
from rich_select.keys import Key, KeyEvent
from rich_select.state import ListPromptState


@pytest.fixture
def flat_catalog():
    """Five plain leaves: alpha .. epsilon."""
    return ItemCatalog.from_values(["alpha", "beta", "gamma", "delta", "epsilon"])


@pytest.fixture
def grouped_catalog():
    """[Group A, A1, A2, Group B, B1]."""
    return ItemCatalog.from_choices([
        Choice("A").add("A1", "A2"),
        Choice("B").add("B1"),
    ])


@pytest.fixture
def fruit_catalog():
    """Groups of fruit and vegetables, used by the search tests."""
    return ItemCatalog([
        ListItem("Fruit", is_group=True),
        ListItem("apple", depth=1),
        ListItem("banana", depth=1),
        ListItem("cherry", depth=1),
        ListItem("Vegetables", is_group=True),
        ListItem("carrot", depth=1),
        ListItem("celery", depth=1),
    ])


@pytest.fixture
def make_state():
    """Factory for ListPromptState with keyword options."""
    def _make(catalog, converter=str, **options):
        return ListPromptState(catalog, converter, ListPromptOptions(**options))

    return _make


@pytest.fixture
def press():
    """Feed keys to a state; strings are typed character by character.

    Returns the list of changed flags, one per event.
    """
    def _press(state, *keys):
        changed = []
        for key in keys:
            if isinstance(key, Key):
                changed.append(state.update(KeyEvent(key)))
            else:
                for char in key:
                    changed.append(state.update(KeyEvent(Key.OTHER, char)))
        return changed

    return _press
