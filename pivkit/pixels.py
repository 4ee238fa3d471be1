"""Pixel types: greyscale, RGBA, YUVA and complex, with conversions between them."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, fields
from enum import Enum
from functools import total_ordering
from numbers import Real
from typing import Any


class ValueType(Enum):
    """The numeric type held in each channel of a pixel."""

    UINT8 = "uint8_t"
    UINT16 = "uint16_t"
    UINT32 = "uint32_t"
    DOUBLE = "double"

    @property
    def is_integral(self) -> bool:
        return self is not ValueType.DOUBLE

    @property
    def bits(self) -> int:
        return _BITS[self]

    @property
    def max(self) -> int | float:
        if self.is_integral:
            return (1 << self.bits) - 1
        return sys.float_info.max

    @property
    def min(self) -> int | float:
        # for double this is the smallest positive normal value
        if self.is_integral:
            return 0
        return sys.float_info.min

    def coerce(self, value: Any) -> int | float:
        """Convert ``value`` to this type: integers truncate and wrap modulo 2**bits."""
        if not self.is_integral:
            return float(value)
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError(f"cannot store {value} in {self.value}")
        return int(value) % (1 << self.bits)


_BITS = {ValueType.UINT8: 8, ValueType.UINT16: 16, ValueType.UINT32: 32, ValueType.DOUBLE: 64}


def _fmt(value: int | float) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _trunc_div(numerator: int, divisor: int) -> int:
    if divisor == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(numerator) // abs(divisor)
    return quotient if (numerator >= 0) == (divisor > 0) else -quotient


def _divide(numerator, divisor, value_type: ValueType):
    if value_type.is_integral:
        return _trunc_div(int(numerator), int(divisor))
    return numerator / divisor


def _coerce_fields(pixel: Any, names: tuple[str, ...]) -> None:
    for name in names:
        object.__setattr__(pixel, name, pixel.value_type.coerce(getattr(pixel, name)))


@total_ordering
@dataclass(frozen=True)
class G:
    """Greyscale pixel."""

    value: int | float = 0
    value_type: ValueType = ValueType.DOUBLE

    def __post_init__(self) -> None:
        _coerce_fields(self, ("value",))

    def _operand(self, other: object):
        if isinstance(other, G):
            return other.value
        if isinstance(other, Real):
            return other
        return None

    def __int__(self) -> int:
        return int(self.value)

    def __float__(self) -> float:
        return float(self.value)

    def __add__(self, other: object) -> "G":
        o = self._operand(other)
        if o is None:
            return NotImplemented
        return G(self.value + o, self.value_type)

    __radd__ = __add__

    def __sub__(self, other: object) -> "G":
        o = self._operand(other)
        if o is None:
            return NotImplemented
        return G(self.value - o, self.value_type)

    def __mul__(self, other: object) -> "G":
        o = self._operand(other)
        if o is None:
            return NotImplemented
        return G(self.value * o, self.value_type)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "G":
        """Divide; integral pixels truncate towards zero."""
        o = self._operand(other)
        if o is None:
            return NotImplemented
        return G(_divide(self.value, o, self.value_type), self.value_type)

    def __mod__(self, other: object) -> "G":
        o = self._operand(other)
        if o is None:
            return NotImplemented
        if not self.value_type.is_integral or isinstance(o, float):
            raise TypeError("modulo is only defined for integral pixels")
        remainder = self.value - _trunc_div(self.value, o) * o
        return G(remainder, self.value_type)

    def __lt__(self, other: object) -> bool:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        return self.value < o

    def __str__(self) -> str:
        return f"g{_fmt(self.value)}"


@dataclass(frozen=True)
class RGBA:
    """Packed red, green, blue and alpha pixel."""

    r: int | float = 0
    g: int | float = 0
    b: int | float = 0
    a: int | float = 0
    value_type: ValueType = ValueType.UINT8

    def __post_init__(self) -> None:
        _coerce_fields(self, ("r", "g", "b", "a"))

    @classmethod
    def grey(cls, value, value_type: ValueType = ValueType.UINT8) -> "RGBA":
        """Grey pixel with every colour channel ``value`` and full alpha."""
        return cls(value, value, value, value_type.max, value_type)

    def __str__(self) -> str:
        return f"rgba({_fmt(self.r)}, {_fmt(self.g)}, {_fmt(self.b)}, {_fmt(self.a)})"


@dataclass(frozen=True)
class YUVA:
    """Packed luma, chroma and alpha pixel."""

    y: int | float = 0
    u: int | float = 0
    v: int | float = 0
    a: int | float = 0
    value_type: ValueType = ValueType.UINT8

    def __post_init__(self) -> None:
        _coerce_fields(self, ("y", "u", "v", "a"))

    @classmethod
    def grey(cls, value, value_type: ValueType = ValueType.UINT8) -> "YUVA":
        """Grey pixel: luma ``value``, no chroma, full alpha."""
        return cls(value, 0, 0, value_type.max, value_type)

    def __str__(self) -> str:
        return f"yuva({_fmt(self.y)}, {_fmt(self.u)}, {_fmt(self.v)}, {_fmt(self.a)})"


@dataclass(frozen=True)
class Complex:
    """Complex pixel; ordering compares magnitudes."""

    real: int | float = 0
    imag: int | float = 0
    value_type: ValueType = ValueType.DOUBLE

    def __post_init__(self) -> None:
        _coerce_fields(self, ("real", "imag"))

    @staticmethod
    def _parts(other: object):
        if isinstance(other, Complex):
            return other.real, other.imag
        if isinstance(other, (Real, complex)):
            return other.real, other.imag
        return None

    def _make(self, real, imag) -> "Complex":
        return Complex(real, imag, self.value_type)

    def __add__(self, other: object) -> "Complex":
        parts = self._parts(other)
        if parts is None:
            return NotImplemented
        return self._make(self.real + parts[0], self.imag + parts[1])

    def __radd__(self, other: object) -> "Complex":
        return self.__add__(other)

    def __sub__(self, other: object) -> "Complex":
        parts = self._parts(other)
        if parts is None:
            return NotImplemented
        return self._make(self.real - parts[0], self.imag - parts[1])

    def __rsub__(self, other: object) -> "Complex":
        parts = self._parts(other)
        if parts is None:
            return NotImplemented
        return self._make(parts[0] - self.real, parts[1] - self.imag)

    def __mul__(self, other: object) -> "Complex":
        parts = self._parts(other)
        if parts is None:
            return NotImplemented
        a, b = self.real, self.imag
        c, d = parts
        return self._make(a * c - b * d, b * c + a * d)

    def __rmul__(self, other: object) -> "Complex":
        return self.__mul__(other)

    def _divide(self, a, b, c, d) -> "Complex":
        denom = c * c + d * d
        if denom == 0:
            raise ZeroDivisionError("complex division by zero")
        vt = self.value_type
        return self._make(_divide(a * c + b * d, denom, vt), _divide(b * c - a * d, denom, vt))

    def __truediv__(self, other: object) -> "Complex":
        parts = self._parts(other)
        if parts is None:
            return NotImplemented
        return self._divide(self.real, self.imag, *parts)

    def __rtruediv__(self, other: object) -> "Complex":
        parts = self._parts(other)
        if parts is None:
            return NotImplemented
        return self._divide(parts[0], parts[1], self.real, self.imag)

    def _magnitude_of(self, other: object):
        if isinstance(other, Complex):
            return other.abs_sqr()
        return None

    def __lt__(self, other: object) -> bool:
        m = self._magnitude_of(other)
        return NotImplemented if m is None else self.abs_sqr() < m

    def __le__(self, other: object) -> bool:
        m = self._magnitude_of(other)
        return NotImplemented if m is None else self.abs_sqr() <= m

    def __gt__(self, other: object) -> bool:
        m = self._magnitude_of(other)
        return NotImplemented if m is None else self.abs_sqr() > m

    def __ge__(self, other: object) -> bool:
        m = self._magnitude_of(other)
        return NotImplemented if m is None else self.abs_sqr() >= m

    def __complex__(self) -> complex:
        return complex(self.real, self.imag)

    def conj(self) -> "Complex":
        return self._make(self.real, -self.imag)

    def abs_sqr(self) -> int | float:
        return (self * self.conj()).real

    def abs(self) -> int | float:
        return self.value_type.coerce(math.sqrt(self.abs_sqr()))

    def __str__(self) -> str:
        sign = " " if self.imag < 0 else " +"
        return f"{_fmt(self.real)}{sign}{_fmt(self.imag)}j"


_PIXEL_TYPES = (G, RGBA, YUVA, Complex)
_NAMES = {G: "g", RGBA: "rgba", YUVA: "yuva", Complex: "complex"}


def complex_exp(value: Complex) -> Complex:
    """Complex exponential of a complex pixel."""
    e = math.exp(value.real)
    return Complex(e * math.cos(value.imag), e * math.sin(value.imag), value.value_type)


def is_pixel_type(value: object) -> bool:
    """True for pixel instances or pixel classes."""
    if isinstance(value, type):
        return value in _PIXEL_TYPES
    return isinstance(value, _PIXEL_TYPES)


def _channels(pixel: Any) -> tuple:
    return tuple(getattr(pixel, f.name) for f in fields(pixel) if f.name != "value_type")


def convert(pixel: Any, target: type, value_type: ValueType | None = None) -> Any:
    """Convert ``pixel`` to pixel class ``target`` holding ``value_type``.

    The value type defaults to that of ``pixel``. Raises TypeError when no
    conversion between the two pixel kinds exists.
    """
    if not is_pixel_type(pixel) or not is_pixel_type(target) or not isinstance(target, type):
        raise TypeError(f"cannot convert {pixel!r} to {target!r}")
    vt = value_type if value_type is not None else pixel.value_type
    if type(pixel) is target:
        return target(*_channels(pixel), value_type=vt)
    if isinstance(pixel, RGBA) and target is G:
        if pixel.value_type.is_integral:
            grey = (pixel.r * 218 + pixel.g * 732 + pixel.b * 74) >> 10
        else:
            grey = 0.2126 * pixel.r + 0.7152 * pixel.g + 0.0722 * pixel.b
        return G(grey, vt)
    if isinstance(pixel, G) and target is RGBA:
        return RGBA.grey(pixel.value, vt)
    if isinstance(pixel, Complex) and target is G:
        return G(pixel.abs(), vt)
    if isinstance(pixel, G) and target is Complex:
        return Complex(pixel.value, 0, vt)
    raise TypeError(f"no conversion from {type(pixel).__name__} to {target.__name__}")


def pixeltype_name(pixel: Any) -> str:
    """Name such as ``g<uint8_t>``; empty for combinations without a standard name."""
    prefix = _NAMES.get(type(pixel))
    if prefix is None:
        return ""
    vt = pixel.value_type
    if vt is ValueType.DOUBLE and type(pixel) not in (G, Complex):
        return ""
    return f"{prefix}<{vt.value}>"