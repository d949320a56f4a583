"""Weighted result container ordered by descending priority."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class PrioritySlice(Generic[T]):
    """
    Pairs items with a ranking weight.

    Sorting is descending by weight and stable, so items with equal weight
    keep the order they were appended in. No deduplication is performed.
    """

    def __init__(self) -> None:
        self._pairs: list[tuple[float, T]] = []

    def append(self, weight: float, item: T) -> None:
        """Add an item with its ranking weight."""
        self._pairs.append((weight, item))

    def sort(self) -> PrioritySlice[T]:
        """Sort pairs by descending weight in place and return self."""
        # list.sort stays stable with reverse=True
        self._pairs.sort(key=lambda pair: pair[0], reverse=True)
        return self

    def underlying(self) -> list[T]:
        """Return the items in current order without their weights."""
        return [item for _, item in self._pairs]

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[tuple[float, T]]:
        return iter(self._pairs)
