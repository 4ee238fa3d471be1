"""String conversion for enumerations."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

E = TypeVar("E", bound=Enum)


def to_string(value) -> str:
    """Return the name of an enum member, or the decimal value otherwise."""
    if isinstance(value, Enum):
        return value.name
    return str(int(value))


def from_string(enum_type: type[E], text: str) -> E:
    """Return the member of ``enum_type`` named ``text``, or its zero-valued member."""
    try:
        return enum_type[text]
    except KeyError:
        return enum_type(0)