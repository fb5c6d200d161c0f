"""A movable window over a shared, read-only sequence."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from itertools import islice
from typing import Generic, TypeVar

T = TypeVar("T")


class VecWindow(Generic[T]):
    """A view of ``items[start:end]`` that can be narrowed without copying.

    ``start`` is inclusive and ``end`` exclusive; both are absolute indices
    into ``items``.
    """

    __slots__ = ("items", "start", "end")

    def __init__(self, items: Sequence[T], start: int = 0, end: int | None = None) -> None:
        if end is None:
            end = len(items)
        if start < 0 or start > end or end > len(items):
            raise ValueError(f"invalid window {start}..{end} over {len(items)} items")
        self.items = items
        self.start = start
        self.end = end

    def __len__(self) -> int:
        return self.end - self.start

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __iter__(self) -> Iterator[T]:
        return islice(self.items, self.start, self.end)

    def __copy__(self) -> VecWindow[T]:
        return VecWindow(self.items, self.start, self.end)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VecWindow):
            return NotImplemented
        return (self.start, self.end) == (other.start, other.end) and (
            self.items is other.items or self.items == other.items
        )

    def __repr__(self) -> str:
        return repr(list(self))

    def is_empty(self) -> bool:
        """True when the window holds no elements."""
        return self.start >= self.end

    def first(self) -> T | None:
        """The first element, or None if the window is empty."""
        return None if self.is_empty() else self.items[self.start]

    def last(self) -> T | None:
        """The last element, or None if the window is empty."""
        return None if self.is_empty() else self.items[self.end - 1]

    def get(self, index: int) -> T | None:
        """The element at ``index`` relative to the window start, or None."""
        if index < 0 or index >= len(self):
            return None
        return self.items[self.start + index]

    def pop_first(self) -> T | None:
        """Remove and return the first element of the window."""
        if self.is_empty():
            return None
        item = self.items[self.start]
        self.start += 1
        return item

    def pop_last(self) -> T | None:
        """Remove and return the last element of the window."""
        if self.is_empty():
            return None
        self.end -= 1
        return self.items[self.end]

    def skip(self, n: int) -> VecWindow[T]:
        """A window without the first ``n`` elements (empty if ``n`` is too large)."""
        return VecWindow(self.items, min(self.start + n, self.end), self.end)

    def take(self, n: int) -> VecWindow[T]:
        """A window of at most the first ``n`` elements."""
        return VecWindow(self.items, self.start, min(self.start + n, self.end))

    def shrink_start_to(self, new_start: int) -> None:
        """Move the start forward to ``new_start`` if it lies inside the window."""
        if self.start < new_start <= self.end:
            self.start = new_start

    def shrink_end_to(self, new_end: int) -> None:
        """Move the end back to ``new_end`` if it lies inside the window."""
        if self.start <= new_end < self.end:
            self.end = new_end

    def find(self, predicate: Callable[[T], bool]) -> int | None:
        """Relative index of the first element matching ``predicate``."""
        for offset, item in enumerate(self):
            if predicate(item):
                return offset
        return None

    def empty(self) -> VecWindow[T]:
        """An empty window over the same sequence."""
        return VecWindow(self.items, 0, 0)

    def snip(self, at: int) -> tuple[VecWindow[T], VecWindow[T]] | None:
        """Cut at relative index ``at``; the second window starts at the cut."""
        if at >= len(self):
            return None
        cut = self.start + at
        return VecWindow(self.items, self.start, cut), VecWindow(self.items, cut, self.end)

    def split(self, on: Callable[[T], bool]) -> list[VecWindow[T]]:
        """Split on matching elements, dropping them."""
        parts = self.split_including_start(on)
        return parts[:1] + [part.skip(1) for part in parts[1:]]

    def split_including_start(self, on: Callable[[T], bool]) -> list[VecWindow[T]]:
        """Split before each matching element, keeping it at the start of its part.

        The first element never starts a new part.
        """
        if self.is_empty():
            return []
        if len(self) <= 1:
            return [self]
        parts = []
        part_start = self.start
        for index, item in enumerate(
            islice(self.items, self.start + 1, self.end), start=self.start + 1
        ):
            if on(item):
                parts.append(VecWindow(self.items, part_start, index))
                part_start = index
        parts.append(VecWindow(self.items, part_start, self.end))
        return parts

    def split_once(
        self, on: Callable[[T], bool]
    ) -> tuple[VecWindow[T], VecWindow[T]] | None:
        """Split at the first matching element, dropping it; None if none match."""
        for index, item in enumerate(self, start=self.start):
            if on(item):
                return (
                    VecWindow(self.items, self.start, index),
                    VecWindow(self.items, index + 1, self.end),
                )
        return None