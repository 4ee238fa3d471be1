"""Lazy per-pixel arithmetic over images.

Expressions are trees of nodes. Each node reports its ``size()`` and gives
pixel ``i`` through indexing. Nothing is computed until a pixel is read or
the tree is evaluated into an image.
"""

from __future__ import annotations

import operator
from numbers import Real
from typing import Any, Callable, Iterator

from .image import Image, is_image_type
from .pixels import Complex, G, is_pixel_type
from .size import Size


def _to_size(size: Any) -> Size:
    if isinstance(size, Size):
        return size
    width, height = size
    return Size(width, height)


def _is_scalar(value: object) -> bool:
    if isinstance(value, type):
        return False
    return is_pixel_type(value) or isinstance(value, (Real, complex))


class _Node:
    """Shared behaviour of expression nodes: iteration, evaluation and operators."""

    __slots__ = ()

    def size(self) -> Size:  # pragma: no cover - overridden by every node
        raise NotImplementedError

    def __len__(self) -> int:
        return self.size().area()

    def __iter__(self) -> Iterator[Any]:
        for index in range(len(self)):
            yield self[index]

    def evaluate(self) -> Image:
        """Compute every pixel into a new image."""
        return Image.from_expression(self)

    def _check_index(self, index: int) -> int:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"expression index must be an integer, got {index!r}")
        if not 0 <= index < len(self):
            raise IndexError(f"expression index {index} out of range ({len(self)} pixels)")
        return index

    def _combine(self, op: Callable[[Any, Any], Any], other: object, reflected: bool):
        if isinstance(other, _Node) or is_image_type(other) or _is_scalar(other):
            other_node = as_expression(other, self.size())
        else:
            return NotImplemented
        if reflected:
            return BinaryExpression(op, other_node, self)
        return BinaryExpression(op, self, other_node)

    def __add__(self, other: object):
        return self._combine(operator.add, other, False)

    def __radd__(self, other: object):
        return self._combine(operator.add, other, True)

    def __sub__(self, other: object):
        return self._combine(operator.sub, other, False)

    def __rsub__(self, other: object):
        return self._combine(operator.sub, other, True)

    def __mul__(self, other: object):
        return self._combine(operator.mul, other, False)

    def __rmul__(self, other: object):
        return self._combine(operator.mul, other, True)

    def __truediv__(self, other: object):
        return self._combine(operator.truediv, other, False)

    def __rtruediv__(self, other: object):
        return self._combine(operator.truediv, other, True)

    def __mod__(self, other: object):
        return self._combine(operator.mod, other, False)

    def __rmod__(self, other: object):
        return self._combine(operator.mod, other, True)

    def __neg__(self):
        return UnaryExpression(lambda v: v * -1, self)


class ConstantNode(_Node):
    """The same value at every pixel of an area of ``size``."""

    __slots__ = ("_value", "_size")

    def __init__(self, value: Any, size: Size | tuple[int, int]) -> None:
        self._value = value
        self._size = _to_size(size)

    def __getitem__(self, index: int) -> Any:
        self._check_index(index)
        return self._value

    def size(self) -> Size:
        return self._size


class ImageNode(_Node):
    """Reads pixels from an image or image view without copying them."""

    __slots__ = ("_image",)

    def __init__(self, image: Any) -> None:
        if not is_image_type(image):
            raise TypeError(f"expected an image or image view, got {type(image).__name__}")
        self._image = image

    def __getitem__(self, index: int) -> Any:
        return self._image[self._check_index(index)]

    def size(self) -> Size:
        return self._image.size()


class BinaryExpression(_Node):
    """Applies ``op`` to matching pixels of two expressions."""

    __slots__ = ("_op", "_left", "_right")

    def __init__(self, op: Callable[[Any, Any], Any], left: _Node, right: _Node) -> None:
        if left.size() != right.size():
            raise ValueError(
                f"expression operands differ in size: {left.size()} and {right.size()}"
            )
        self._op = op
        self._left = left
        self._right = right

    @property
    def left(self) -> _Node:
        return self._left

    @property
    def right(self) -> _Node:
        return self._right

    def __getitem__(self, index: int) -> Any:
        self._check_index(index)
        return self._op(self._left[index], self._right[index])

    def size(self) -> Size:
        return self._left.size()


class UnaryExpression(_Node):
    """Applies ``op`` to each pixel of an expression."""

    __slots__ = ("_op", "_operand")

    def __init__(self, op: Callable[[Any], Any], operand: _Node) -> None:
        self._op = op
        self._operand = operand

    @property
    def operand(self) -> _Node:
        return self._operand

    def __getitem__(self, index: int) -> Any:
        self._check_index(index)
        return self._op(self._operand[index])

    def size(self) -> Size:
        return self._operand.size()


def as_expression(value: Any, size: Size | tuple[int, int] | None = None) -> _Node:
    """Wrap an image, view, pixel or number as an expression node.

    Pixels and numbers become constants and need ``size``; expression nodes
    are returned unchanged.
    """
    if isinstance(value, _Node):
        return value
    if is_image_type(value):
        return ImageNode(value)
    if _is_scalar(value):
        if size is None:
            raise ValueError("a constant expression needs a size")
        return ConstantNode(value, size)
    raise TypeError(f"cannot use {type(value).__name__} in an image expression")


def _complex_operand(image: Any) -> _Node:
    node = as_expression(image)
    if isinstance(node, ConstantNode):
        raise TypeError("expected an image of complex pixels")
    if len(node) and not isinstance(node[0], Complex):
        raise TypeError(f"expected complex pixels, got {type(node[0]).__name__}")
    return node


def conj(image: Any) -> UnaryExpression:
    """Complex conjugate of each pixel."""
    return UnaryExpression(lambda v: v.conj(), _complex_operand(image))


def absolute(image: Any) -> UnaryExpression:
    """Magnitude of each pixel, as a complex pixel with zero imaginary part."""
    return UnaryExpression(lambda v: Complex(v.abs(), 0, v.value_type), _complex_operand(image))


def abs_sqr(image: Any) -> UnaryExpression:
    """Squared magnitude of each pixel, as a complex pixel with zero imaginary part."""
    return UnaryExpression(
        lambda v: Complex(v.abs_sqr(), 0, v.value_type), _complex_operand(image)
    )


def real(image: Any) -> UnaryExpression:
    """Real part of each pixel as a greyscale pixel."""
    return UnaryExpression(lambda v: G(v.real, v.value_type), _complex_operand(image))


def imag(image: Any) -> UnaryExpression:
    """Imaginary part of each pixel as a greyscale pixel."""
    return UnaryExpression(lambda v: G(v.imag, v.value_type), _complex_operand(image))