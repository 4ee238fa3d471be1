"""Two-dimensional images stored as a contiguous list of pixels."""

from __future__ import annotations

from numbers import Real
from typing import Any, Iterator

from .pixels import Complex, G, ValueType, convert, is_pixel_type, pixeltype_name
from .rect import Rect
from .size import Size


def _to_rect(geometry: Any) -> Rect:
    if isinstance(geometry, Rect):
        return geometry
    if isinstance(geometry, Size):
        return Rect.from_size(geometry)
    width, height = geometry
    return Rect.from_size(Size(width, height))


def _to_size(size: Any) -> Size:
    if isinstance(size, Size):
        return size
    width, height = size
    return Size(width, height)


def _zero_like(pixel: Any) -> Any:
    return type(pixel)(value_type=pixel.value_type)


def _as_pixel(value: Any, template: Any) -> Any:
    """Make ``value`` a pixel of the same kind and value type as ``template``."""
    if is_pixel_type(value):
        if type(value) is not type(template):
            raise TypeError(
                f"cannot store {type(value).__name__} in an image of {type(template).__name__}"
            )
        if value.value_type is not template.value_type:
            return convert(value, type(template), template.value_type)
        return value
    if isinstance(template, G) and isinstance(value, Real):
        return G(value, template.value_type)
    if isinstance(template, Complex) and isinstance(value, (Real, complex)):
        return Complex(value.real, value.imag, template.value_type)
    raise TypeError(f"cannot store {value!r} as {type(template).__name__} pixel")


class Image:
    """A width x height grid of pixels of a single kind, stored row by row."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, geometry: Size | Rect | tuple[int, int], fill: Any = None) -> None:
        """Create an image of ``geometry`` with every pixel set to ``fill``.

        ``fill`` defaults to a zero double greyscale pixel; a plain number
        becomes a double greyscale pixel.
        """
        if fill is None:
            fill = G(0.0)
        elif not is_pixel_type(fill):
            fill = _as_pixel(fill, G(0.0, ValueType.DOUBLE))
        self._rect = _to_rect(geometry)
        self._blank = _zero_like(fill)
        self._data: list[Any] = [fill] * self._rect.area()

    @classmethod
    def from_expression(cls, expression: Any) -> "Image":
        """Evaluate an expression providing ``size()`` and indexed pixels."""
        size = expression.size()
        pixels = [expression[i] for i in range(size.area())]
        if not pixels:
            return cls(size)
        first = pixels[0] if is_pixel_type(pixels[0]) else _as_pixel(pixels[0], G(0.0))
        image = cls(size, first)
        image._data = [_as_pixel(p, image._blank) for p in pixels]
        return image

    def convert(self, target: type, value_type: ValueType | None = None) -> "Image":
        """Return a copy with every pixel converted to ``target``."""
        result = Image(self._rect, convert(self._blank, target, value_type))
        result._data = [convert(p, target, value_type) for p in self._data]
        return result

    def resize(self, size: Size | tuple[int, int]) -> None:
        """Change the size in place, keeping the origin; pixel contents become meaningless."""
        size = _to_size(size)
        if size == self.size():
            return
        self._rect = Rect(self._rect.bottom_left, size)
        count = size.area()
        self._data = self._data[:count] + [self._blank] * (count - len(self._data))

    def _index(self, key: Any) -> int:
        if isinstance(key, int) and not isinstance(key, bool):
            if not 0 <= key < len(self._data):
                raise IndexError(f"pixel index {key} out of range ({len(self._data)} pixels)")
            return key
        try:
            x, y = key
        except (TypeError, ValueError) as exc:
            raise TypeError(f"pixel key must be an index or an (x, y) pair, got {key!r}") from exc
        if not (0 <= x < self.width() and 0 <= y < self.height()):
            raise IndexError(f"pixel ({x}, {y}) outside image of size {self.size()}")
        return y * self.width() + x

    def __getitem__(self, key: Any) -> Any:
        return self._data[self._index(key)]

    def __setitem__(self, key: Any, value: Any) -> None:
        self._data[self._index(key)] = _as_pixel(value, self._blank)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return self._rect == other._rect and self._data == other._data

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._data)

    def line(self, index: int) -> list[Any]:
        """Return a copy of row ``index``."""
        if not 0 <= index < self.height():
            raise IndexError(f"line out of range ({index}, max is: {self.height()})")
        start = index * self.width()
        return self._data[start:start + self.width()]

    def width(self) -> int:
        return self._rect.width()

    def height(self) -> int:
        return self._rect.height()

    def size(self) -> Size:
        return self._rect.size

    def pixel_count(self) -> int:
        return self._rect.area()

    def rect(self) -> Rect:
        return self._rect

    def swap(self, other: "Image") -> None:
        """Exchange contents with ``other``."""
        self._rect, other._rect = other._rect, self._rect
        self._data, other._data = other._data, self._data
        self._blank, other._blank = other._blank, self._blank

    def __str__(self) -> str:
        return (
            f"image<{pixeltype_name(self._blank)}>[{self._rect}][{id(self):#x}] "
            f"data @ {id(self._data):#x}"
        )


def is_image_type(value: object) -> bool:
    """True for images and for views onto an image."""
    if isinstance(value, Image):
        return True
    underlying = getattr(value, "underlying", None)
    return callable(underlying) and isinstance(underlying(), Image)