"""Integer range helpers producing populated lists."""

from __future__ import annotations


class IntRange:
    """An integer starting point from which lists of integers are produced."""

    def __init__(self, start: int) -> None:
        if isinstance(start, bool) or not isinstance(start, int):
            raise TypeError(f"range start must be an integer, got {type(start).__name__}")
        self._start = start

    @property
    def start(self) -> int:
        return self._start

    def to(self, end: int) -> list[int]:
        """Return the closed range from the start to ``end``, in either direction."""
        if self._start < end:
            return list(range(self._start, end + 1))
        return list(range(self._start, end - 1, -1))

    def length(self, count: int) -> list[int]:
        """Return ``start + count - 1`` consecutive integers beginning at the start."""
        size = self._start + count - 1
        if size < 0:
            raise ValueError(f"range length would be negative: {size}")
        return list(range(self._start, self._start + size))


def make_range(start: int) -> IntRange:
    """Create an IntRange beginning at ``start``."""
    return IntRange(start)


def range_from(start: int) -> IntRange:
    """Create an IntRange beginning at ``start``."""
    return make_range(start)


def range_start_at(start: int) -> IntRange:
    """Create an IntRange beginning at ``start``."""
    return make_range(start)