"""View resolution: which catalog positions are navigable right now.

Views are plain ordered lists of catalog positions. They are computed by
explicit calls: the leaf view once when a prompt state is built, the
filtered view every time the search text changes. Nothing here caches.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from .catalog import ItemCatalog
from .search import SearchPredicate

T = TypeVar("T")

logger = logging.getLogger(__name__)


def leaf_positions(catalog: ItemCatalog[T]) -> list[int]:
    """Positions of all non-group items."""
    return catalog.positions_where(lambda item: not item.is_group)


def matching_positions(
    catalog: ItemCatalog[T],
    predicate: SearchPredicate,
    text: str,
    leaves_only: bool = False,
) -> list[int]:
    """Positions whose payload matches text, optionally leaves only.

    The predicate is called once per candidate item.
    """
    positions = [
        i
        for i, item in enumerate(catalog)
        if not (leaves_only and item.is_group) and predicate(item.data, text)
    ]
    logger.debug("Filtered view for %r: %d of %d items", text, len(positions), len(catalog))
    return positions


def resolve_view(
    catalog: ItemCatalog[T],
    predicate: SearchPredicate,
    text: str,
    *,
    leaves_only: bool,
    filter_matches: bool,
) -> list[int]:
    """Compute the navigable view for the given configuration.

    Args:
        catalog: Items of the prompt.
        predicate: Match predicate, used only when filtering.
        text: Current search text. Empty text never filters.
        leaves_only: Skip-unselectable navigation is in effect.
        filter_matches: Filter-mode search is on.

    Returns:
        Ordered catalog positions; possibly empty.
    """
    if filter_matches and text:
        return matching_positions(catalog, predicate, text, leaves_only=leaves_only)
    if leaves_only:
        return leaf_positions(catalog)
    return list(range(len(catalog)))


def first_or_default(view: list[int], default: int = 0) -> int:
    """First entry of view, or default when the view is empty."""
    return view[0] if view else default


def last_or_default(view: list[int], default: int = 0) -> int:
    """Last entry of view, or default when the view is empty."""
    return view[-1] if view else default
