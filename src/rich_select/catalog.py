"""Immutable ordered item catalog."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Sequence, TypeVar, overload

from .components import Choice, ListItem

T = TypeVar("T")


class ItemCatalog(Sequence[ListItem[T]]):
    """Fixed-length, read-only sequence of ListItems for one prompt.

    Built once and shared by reference with the view and search helpers.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[ListItem[T]] = ()):
        self._items: tuple[ListItem[T], ...] = tuple(items)

    @classmethod
    def from_values(cls, values: Iterable[T]) -> "ItemCatalog[T]":
        """Build a flat catalog of leaves."""
        return cls(ListItem(value) for value in values)

    @classmethod
    def from_choices(cls, choices: Iterable[Choice[T]]) -> "ItemCatalog[T]":
        """Flatten a choice tree depth first.

        A choice with children becomes a group header followed by its
        children, one level deeper.
        """
        items: list[ListItem[T]] = []

        def _walk(nodes: Iterable[Choice[T]], depth: int) -> None:
            for node in nodes:
                items.append(ListItem(node.data, is_group=bool(node.children), depth=depth))
                _walk(node.children, depth + 1)

        _walk(choices, 0)
        return cls(items)

    @overload
    def __getitem__(self, index: int) -> ListItem[T]: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[ListItem[T], ...]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ListItem[T]]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"ItemCatalog({list(self._items)!r})"

    def positions_where(self, predicate: Callable[[ListItem[T]], bool]) -> list[int]:
        """Catalog positions of items satisfying predicate, in order."""
        return [i for i, item in enumerate(self._items) if predicate(item)]
