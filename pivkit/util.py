"""Small general-purpose helpers: bit tests, checked conversions and stream utilities."""

from __future__ import annotations

import threading
from itertools import islice
from typing import IO, Any, Iterable, TypeVar

T = TypeVar("T")

_UINT64_MASK = (1 << 64) - 1


def is_pow2(value: int) -> bool:
    """Return True if ``value``, taken as an unsigned 64-bit integer, is a power of two."""
    v = int(value) & _UINT64_MASK
    return v != 0 and v == (v & -v)


def checked_unsigned_conversion(value: int, bits: int) -> int:
    """Convert an unsigned ``value`` to a signed integer of width ``bits``.

    Raises OverflowError when the value would not fit.
    """
    value = int(value)
    if value < 0:
        raise ValueError(f"unable to convert {value}: value is not unsigned")
    limit = (1 << (bits - 1)) - 1
    if value > limit:
        raise OverflowError(
            f"unable to convert {value} to int{bits} as value would be truncated"
        )
    return value


def strided_copy(source: Iterable[T], count: int, stride: int = 1) -> list[T]:
    """Return ``count`` items of ``source``, taking every ``stride``-th item."""
    if stride < 1:
        raise ValueError(f"stride must be positive, got {stride}")
    result = list(islice(islice(source, 0, None, stride), count))
    if len(result) < count:
        raise IndexError(
            f"source holds only {len(result)} items at stride {stride}, {count} requested"
        )
    return result


class EntryExitLogger:
    """Context manager writing indented entry and exit markers to a stream."""

    _state = threading.local()

    def __init__(self, stream: IO[str], name: str) -> None:
        self._stream = stream
        self._name = name
        self._thread_id = threading.get_ident()

    @classmethod
    def _indent(cls) -> int:
        return getattr(cls._state, "indent", 0)

    def __enter__(self) -> "EntryExitLogger":
        type(self)._state.indent = self._indent() + 1
        self._stream.write(f"{'>' * self._indent()} ({self._thread_id}) {self._name}\n")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._stream.write(f"{'<' * self._indent()} ({self._thread_id}) {self._name}\n")
        type(self)._state.indent = self._indent() - 1


class Peeker:
    """Context manager allowing reads ahead on a stream, rewinding it on exit."""

    def __init__(self, stream: IO[Any]) -> None:
        self._stream = stream
        seekable = getattr(stream, "seekable", None)
        try:
            if seekable is not None and not seekable():
                raise OSError("stream is not seekable")
            self._position = stream.tell()
        except (OSError, AttributeError, ValueError) as exc:
            raise RuntimeError(
                "input stream doesn't support input position indicator"
            ) from exc

    def __enter__(self) -> "Peeker":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._stream.seek(self._position)

    def peek(self, count: int) -> Any:
        """Read ``count`` items from the stream; the position is restored on exit."""
        return self._stream.read(count)