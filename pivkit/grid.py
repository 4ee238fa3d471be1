"""Generation of centred grids of interrogation windows."""

from __future__ import annotations

from numbers import Real
from typing import Sequence

from .point import Point
from .rect import Rect
from .size import Size


def generate_cartesian_grid(
    image_size: Size,
    interrogation_size: Size,
    offset: float | Sequence[int],
) -> list[Rect]:
    """Return a centred grid of rectangles of ``interrogation_size`` over an image.

    ``offset`` is either a fraction of the window size in [0, 1] or a pair
    of (x, y) pixel steps. Rectangles are ordered row by row, x fastest.
    For an image of [100,50], windows of [32,32] and offset 0.5 the
    bottom-left corners are (2,1), (18,1), ..., (66,1), (2,17), ..., (66,17).
    """
    if isinstance(offset, Real):
        if not 0.0 <= offset <= 1.0:
            raise ValueError("offsets must be between 0.0 and 1.0")
        offsets = (
            int(interrogation_size.width * offset),
            int(interrogation_size.height * offset),
        )
    else:
        offsets = tuple(offset)
        if len(offsets) != 2:
            raise ValueError(f"offsets must be an (x, y) pair, got {offsets}")

    if image_size.area() == 0:
        raise ValueError("image size must be non-zero")
    if interrogation_size.area() == 0:
        raise ValueError("interrogation size must be non-zero")
    x_offset, y_offset = offsets
    if x_offset <= 0 or y_offset <= 0:
        raise ValueError("offsets must be non-zero")
    if (
        interrogation_size.width > image_size.width
        or interrogation_size.height > image_size.height
    ):
        raise ValueError("interrogation size is bigger than image")

    spare_x = image_size.width - interrogation_size.width
    spare_y = image_size.height - interrogation_size.height
    x_count = 1 + spare_x // x_offset
    y_count = 1 + spare_y // y_offset
    x_start = (spare_x - x_offset * (x_count - 1)) // 2
    y_start = (spare_y - y_offset * (y_count - 1)) // 2

    return [
        Rect(Point(x_start + x * x_offset, y_start + y * y_offset), interrogation_size)
        for y in range(y_count)
        for x in range(x_count)
    ]