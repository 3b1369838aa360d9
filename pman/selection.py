"""Ordered list with a single clamped selection."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class SelectableList(Generic[T]):
    """Items plus an optional selected index.

    Non-empty lists always have an index in ``[0, len)``; empty lists have
    ``None``. Moving past either end holds at the boundary.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)
        self._index: int | None = 0 if self._items else None

    @property
    def items(self) -> list[T]:
        return self._items

    @property
    def index(self) -> int | None:
        return self._index

    @property
    def selected(self) -> T | None:
        if self._index is None:
            return None
        return self._items[self._index]

    def next(self) -> None:
        if self._index is not None and self._index < len(self._items) - 1:
            self._index += 1

    def previous(self) -> None:
        if self._index is not None and self._index > 0:
            self._index -= 1

    def select(self, index: int) -> None:
        if not self._items:
            return
        self._index = max(0, min(index, len(self._items) - 1))

    def select_first(self, predicate: Callable[[T], bool]) -> bool:
        """Select the first item matching ``predicate``; report success."""
        for i, item in enumerate(self._items):
            if predicate(item):
                self._index = i
                return True
        return False

    def replace(self, items: Iterable[T]) -> None:
        """Swap in a new sequence, keeping the index where still valid."""
        self._items = list(items)
        if not self._items:
            self._index = None
        elif self._index is None:
            self._index = 0
        else:
            self._index = min(self._index, len(self._items) - 1)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __bool__(self) -> bool:
        return bool(self._items)
