"""N-dimensional points and vectors with the arithmetic between them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from numbers import Real
from typing import Any


def _trunc_div(numerator: Any, divisor: Any) -> Any:
    """Divide, truncating towards zero when both operands are integers."""
    if isinstance(numerator, int) and isinstance(divisor, int):
        if divisor == 0:
            raise ZeroDivisionError("integer division by zero")
        quotient = abs(numerator) // abs(divisor)
        return quotient if (numerator >= 0) == (divisor > 0) else -quotient
    return numerator / divisor


class _Components:
    """Immutable, fixed-length sequence of numeric components."""

    __slots__ = ("_data",)

    def __init__(self, *args: Any) -> None:
        if (
            len(args) == 1
            and isinstance(args[0], Iterable)
            and not isinstance(args[0], (str, bytes))
        ):
            data = tuple(args[0])
        else:
            data = tuple(args)
        if not data:
            raise ValueError(f"{type(self).__name__} needs at least one component")
        for component in data:
            if not isinstance(component, Real):
                raise TypeError(
                    f"{type(self).__name__} components must be numbers, "
                    f"got {type(component).__name__}"
                )
        self._data = data

    @property
    def dimension(self) -> int:
        return len(self._data)

    def __getitem__(self, index):
        return self._data[index]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._data))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self._data))})"

    def _check_dimension(self, other: "_Components") -> None:
        if len(self) != len(other):
            raise ValueError(
                f"dimension mismatch: {len(self)} and {len(other)}"
            )

    def _combine(self, other: "_Components", op) -> tuple:
        self._check_dimension(other)
        return tuple(op(a, b) for a, b in zip(self._data, other._data))


class Point(_Components):
    """A position in n-dimensional space."""

    __slots__ = ()

    def __init__(self, *args: Any) -> None:
        super().__init__(*args)

    def __getitem__(self, index):
        return self._data[index]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        return super().__eq__(other)

    __hash__ = _Components.__hash__

    def __add__(self, other: object) -> "Point":
        if isinstance(other, Vector):
            return Point(self._combine(other, lambda a, b: a + b))
        return NotImplemented

    def __sub__(self, other: object):
        """Point - Point gives a Vector; Point - Vector gives a Point."""
        if isinstance(other, Point):
            return Vector(self._combine(other, lambda a, b: a - b))
        if isinstance(other, Vector):
            return Point(self._combine(other, lambda a, b: a - b))
        return NotImplemented

    def __str__(self) -> str:
        return "(" + ",".join(str(c) for c in self._data) + ")"


class Vector(_Components):
    """A displacement in n-dimensional space."""

    __slots__ = ()

    def __init__(self, *args: Any) -> None:
        super().__init__(*args)

    def __getitem__(self, index):
        return self._data[index]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        return super().__eq__(other)

    __hash__ = _Components.__hash__

    def __add__(self, other: object) -> "Vector":
        if isinstance(other, Vector):
            return Vector(self._combine(other, lambda a, b: a + b))
        return NotImplemented

    def __sub__(self, other: object) -> "Vector":
        if isinstance(other, Vector):
            return Vector(self._combine(other, lambda a, b: a - b))
        return NotImplemented

    def __mul__(self, factor: object) -> "Vector":
        if isinstance(factor, Real):
            return Vector(tuple(c * factor for c in self._data))
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, divisor: object) -> "Vector":
        """Divide each component; integer components truncate towards zero."""
        if isinstance(divisor, Real):
            return Vector(tuple(_trunc_div(c, divisor) for c in self._data))
        return NotImplemented

    def __str__(self) -> str:
        return "[" + ",".join(str(c) for c in self._data) + "]"