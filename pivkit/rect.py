"""Integer rectangles defined by a bottom-left origin and a size."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real

from .point import Point
from .size import Size
from .util import checked_unsigned_conversion


def _trunc_half(value: int) -> int:
    """Halve an integer, truncating towards zero."""
    return -((-value) // 2) if value < 0 else value // 2


def _lround(value: float) -> int:
    """Round half away from zero."""
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


@dataclass(frozen=True)
class Rect:
    """A 2D integer rectangle; bottom-left means the minimum of x and y."""

    bottom_left: Point = field(default_factory=lambda: Point(0, 0))
    size: Size = field(default_factory=Size)

    def __post_init__(self) -> None:
        origin = self.bottom_left
        if not isinstance(origin, Point):
            origin = Point(origin)
        if len(origin) != 2:
            raise ValueError(f"rect origin must be two-dimensional, got {origin}")
        if any(isinstance(c, bool) or not isinstance(c, int) for c in origin):
            raise TypeError(f"rect origin must have integer components, got {origin}")
        object.__setattr__(self, "bottom_left", origin)
        extent = self.size
        if not isinstance(extent, Size):
            extent = Size(*extent)
        object.__setattr__(self, "size", extent)

    @classmethod
    def from_size(cls, size: Size) -> "Rect":
        """Rectangle of ``size`` at the origin."""
        return cls(Point(0, 0), size)

    def _w(self) -> int:
        return checked_unsigned_conversion(self.size.width, 32)

    def _h(self) -> int:
        return checked_unsigned_conversion(self.size.height, 32)

    def top_left(self) -> Point:
        return Point(self.bottom_left[0], self.bottom_left[1] + self._h())

    def bottom_right(self) -> Point:
        return Point(self.bottom_left[0] + self._w(), self.bottom_left[1])

    def top_right(self) -> Point:
        return Point(self.bottom_left[0] + self._w(), self.bottom_left[1] + self._h())

    def midpoint(self) -> Point:
        return Point(
            self.bottom_left[0] + self.width() // 2,
            self.bottom_left[1] + self.height() // 2,
        )

    def bottom(self) -> int:
        return self.bottom_left[1]

    def top(self) -> int:
        return self.bottom() + self.height()

    def left(self) -> int:
        return self.bottom_left[0]

    def right(self) -> int:
        return self.left() + self.width()

    def width(self) -> int:
        return self.size.width

    def height(self) -> int:
        return self.size.height

    def area(self) -> int:
        return self.size.area()

    def within(self, other: "Rect") -> bool:
        """True if this rectangle lies wholly inside ``other``."""
        bl, tr = self.bottom_left, self.top_right()
        obl, otr = other.bottom_left, other.top_right()
        return bl[0] >= obl[0] and bl[1] >= obl[1] and tr[0] <= otr[0] and tr[1] <= otr[1]

    def contains(self, other: "Rect") -> bool:
        """True if ``other`` lies wholly inside this rectangle."""
        return other.within(self)

    def dilate(self, amount: int | float) -> "Rect":
        """Grow or shrink the rectangle.

        An integer grows each side by ``amount`` pixels (negative shrinks):
        ((0, 0), [10, 10]).dilate(2) -> ((-2, -2), [14, 14]).

        A float scales width and height about the centre, 1.0 leaving the
        rectangle unchanged: ((0, 0), [10, 10]).dilate(1.2) -> ((-1, -1), [12, 12]).
        """
        if isinstance(amount, int):
            return self._dilate_by_pixels(amount)
        if isinstance(amount, Real):
            return self._dilate_by_factor(float(amount))
        raise TypeError(f"dilation must be a number, got {type(amount).__name__}")

    def _dilate_by_pixels(self, d: int) -> "Rect":
        if -d >= checked_unsigned_conversion(self.width() // 2, 32) or -d >= checked_unsigned_conversion(
            self.height() // 2, 32
        ):
            raise ValueError(f"unable to dilate rect {self} as dilation is too large")
        return Rect(
            Point(self.bottom_left[0] - d, self.bottom_left[1] - d),
            Size(self.width() + 2 * d, self.height() + 2 * d),
        )

    def _dilate_by_factor(self, d: float) -> "Rect":
        if d < 0.0:
            raise ValueError(f"unable to dilate rect {self} as dilation is negative")
        w, h = self.width(), self.height()
        rw, rh = _lround(d * w), _lround(d * h)
        dw, dh = _trunc_half(w - rw), _trunc_half(h - rh)
        return Rect(
            Point(self.bottom_left[0] + dw, self.bottom_left[1] + dh),
            Size(rw, rh),
        )

    def __str__(self) -> str:
        return f"{self.bottom_left} -> {self.size}"