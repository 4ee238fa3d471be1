"""Formatting helpers for sequences."""

from __future__ import annotations

from typing import Iterable


def join(container: Iterable[object], separator: str = ", ") -> str:
    """Format items as ``[a, b, c]`` using ``separator`` between them."""
    return "[" + separator.join(str(item) for item in container) + "]"