"""Item building blocks for rich_select.

This module provides the value types the rest of the package works on:
- SelectionMode: which items may be the result of a prompt
- ListItem: one immutable row of the catalog (leaf or group header)
- Choice: a tree node used to describe hierarchical choices before flattening
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

from .errors import InvalidConfigurationError

T = TypeVar("T")


class SelectionMode(str, Enum):
    """Which items count as valid navigation results."""

    LEAF = "leaf"
    LEAF_OR_GROUP = "leaf_or_group"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, value: str) -> "SelectionMode":
        """Parse a config/CLI string, raising InvalidConfigurationError."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise InvalidConfigurationError(
                "mode", f"{value!r} is not one of: {choices}"
            ) from None


@dataclass(frozen=True)
class ListItem(Generic[T]):
    """One entry of the item catalog.

    Attributes:
        data: Opaque payload handed back when the item is chosen.
        is_group: True for non-leaf header rows.
        depth: Nesting level, used only for indentation when rendering.
    """

    data: T
    is_group: bool = False
    depth: int = 0

    def is_selectable(self, mode: SelectionMode) -> bool:
        """Whether this item may be the result under the given mode."""
        return not self.is_group or mode != SelectionMode.LEAF


@dataclass
class Choice(Generic[T]):
    """Hierarchical choice: a payload plus optional children.

    A choice with children becomes a group header when flattened.
    """

    data: T
    children: list["Choice[T]"] = field(default_factory=list)

    def add(self, *children: "Choice[T] | T") -> "Choice[T]":
        """Append children (bare payloads are wrapped) and return self."""
        for child in children:
            self.children.append(child if isinstance(child, Choice) else Choice(child))
        return self
