"""Two-dimensional unsigned integer sizes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

_MAX_COMPONENT = (1 << 32) - 1


@dataclass(frozen=True)
class Size:
    """A (width, height) pair of unsigned 32-bit integers."""

    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"size {name} must be an integer, got {type(value).__name__}")
            if not 0 <= value <= _MAX_COMPONENT:
                raise ValueError(f"size {name} out of range: {value}")

    def area(self) -> int:
        return self.width * self.height

    def components(self) -> tuple[int, int]:
        return (self.width, self.height)

    def __iter__(self) -> Iterator[int]:
        return iter(self.components())

    def __add__(self, other: object) -> "Size":
        if not isinstance(other, Size):
            return NotImplemented
        return Size(self.width + other.width, self.height + other.height)

    def __sub__(self, other: object) -> "Size":
        if not isinstance(other, Size):
            return NotImplemented
        if other.width > self.width or other.height > self.height:
            raise ValueError(f"sizes cannot be negative: {self} - {other}")
        return Size(self.width - other.width, self.height - other.height)

    def __str__(self) -> str:
        return f"[{self.width},{self.height}]"


def maximal_size(size: Size) -> Size:
    """Square size of the larger dimension, e.g. (1, 2) -> (2, 2)."""
    d = max(size.width, size.height)
    return Size(d, d)


def minimal_size(size: Size) -> Size:
    """Square size of the smaller dimension, e.g. (1, 2) -> (1, 1)."""
    d = min(size.width, size.height)
    return Size(d, d)


def transpose(size: Size) -> Size:
    """Swap width and height, e.g. (1, 2) -> (2, 1)."""
    return Size(size.height, size.width)