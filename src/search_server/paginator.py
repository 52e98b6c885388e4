"""Splitting ordered results into fixed-size pages."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Generic, TypeVar

from search_server.exceptions import InvalidArgumentError

T = TypeVar("T")


class Page(Generic[T]):
    """A contiguous view ``items[start:stop]``; the items are not copied."""

    def __init__(self, items: Sequence[T], start: int, stop: int):
        self._items = items
        self.start = start
        self.stop = stop

    def __len__(self) -> int:
        return self.stop - self.start

    def __iter__(self) -> Iterator[T]:
        for i in range(self.start, self.stop):
            yield self._items[i]

    def __getitem__(self, index: int) -> T:
        if index < 0:
            index += len(self)
        if not 0 <= index < len(self):
            raise IndexError("page index out of range")
        return self._items[self.start + index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Page):
            return list(self) == list(other)
        if isinstance(other, list):
            return list(self) == other
        return NotImplemented

    def __str__(self) -> str:
        return "".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"Page({list(self)!r})"


class Paginator(Generic[T]):
    """
    Pages over a sequence. Iterators and other non-sequences are read into a
    list once, up front.

    Every page holds exactly ``page_size`` items except possibly the last;
    an empty sequence has no pages. Iterating again starts from the first page.
    """

    def __init__(self, items: Iterable[T], page_size: int):
        if page_size <= 0:
            raise InvalidArgumentError(f"page size must be positive, got {page_size}")
        self._items = items if isinstance(items, Sequence) else list(items)
        self.page_size = page_size

    def __iter__(self) -> Iterator[Page[T]]:
        total = len(self._items)
        for start in range(0, total, self.page_size):
            yield Page(self._items, start, min(start + self.page_size, total))

    def __len__(self) -> int:
        return -(-len(self._items) // self.page_size)


def paginate(items: Iterable[T], page_size: int) -> Paginator[T]:
    return Paginator(items, page_size)
