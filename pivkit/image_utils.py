"""Algorithms over images and image views.

Covers peak finding, sub-pixel fitting, filling, channel splitting and
joining, transposition, quadrant swapping and extraction.
"""

from __future__ import annotations

import math
from typing import Any, Callable

from .image import Image
from .image_view import ImageView, create_image_view
from .pixels import RGBA, Complex, G
from .point import Point
from .rect import Rect
from .size import Size


def _zero_of(source: Any) -> Any:
    """A zero pixel of the same kind and value type as those in ``source``, if any."""
    sample = next(iter(source), None)
    if sample is None:
        return None
    return type(sample)(value_type=sample.value_type)


def _copy_pixels(source: Any, geometry: Size | Rect) -> Image:
    result = Image(geometry, _zero_of(source))
    for index, pixel in enumerate(source):
        result[index] = pixel
    return result


def get_underlying(image: Image | ImageView) -> Image:
    """Return the image itself, or the image a view looks at."""
    if isinstance(image, ImageView):
        return image.underlying()
    if isinstance(image, Image):
        return image
    raise TypeError(f"expected an image or image view, got {type(image).__name__}")


def find_peaks(image: Image | ImageView, num_peaks: int, peak_radius: int) -> list[ImageView]:
    """Find up to ``num_peaks`` local maxima, highest first.

    Each peak is returned as a square view of side ``2 * peak_radius + 1``
    centred on the maximum.
    """
    if peak_radius < 1:
        raise ValueError(f"peak radius must be at least 1, got {peak_radius}")
    side = 2 * peak_radius + 1
    peaks: list[ImageView] = []
    for h in range(peak_radius, image.height() - 2 * peak_radius):
        above = image.line(h - 1)
        line = image.line(h)
        below = image.line(h + 1)
        for w in range(peak_radius, image.width() - peak_radius):
            centre = line[w]
            if line[w - 1] < centre and line[w + 1] < centre and above[w] < centre and below[w] < centre:
                window = Rect(Point(w - peak_radius, h - peak_radius), Size(side, side))
                peaks.append(create_image_view(image, window))

    peaks.sort(key=lambda view: view[(peak_radius, peak_radius)], reverse=True)
    return peaks[:max(num_peaks, 0)]


def _log(value: Any) -> float:
    v = float(value)
    if v > 0.0:
        return math.log(v)
    if v == 0.0:
        return -math.inf
    return math.nan


def _gaussian_offset(left: Any, centre: Any, right: Any) -> float:
    ll, lc, lr = _log(left), _log(centre), _log(right)
    numerator = ll - lr
    denominator = 2.0 * (ll + lr - 2.0 * lc)
    if denominator == 0.0:
        return 0.0
    return numerator / denominator


def fit_simple_gaussian(image: Image | ImageView) -> Point:
    """Fit one-dimensional Gaussians through a 3x3 peak; return its sub-pixel centre."""
    if image.size() != Size(3, 3):
        raise ValueError("fit_simple_gaussian: input must be 3x3")
    mid = image.rect().midpoint()
    dx = _gaussian_offset(image[(0, 1)], image[(1, 1)], image[(2, 1)])
    dy = _gaussian_offset(image[(1, 0)], image[(1, 1)], image[(1, 2)])
    return Point(mid[0] + dx, mid[1] + dy)


def apply(image: Image | ImageView, op: Callable[[int, Any], Any]) -> Image | ImageView:
    """Replace each pixel by ``op(index, pixel)``; returns ``image``."""
    for index in range(image.pixel_count()):
        image[index] = op(index, image[index])
    return image


def fill(image: Image | ImageView, value: Any) -> Image | ImageView:
    """Set every pixel to ``value``, or to ``value(x, y)`` when it is callable."""
    generate = value if callable(value) else (lambda _x, _y: value)
    for y in range(image.height()):
        for x in range(image.width()):
            image[(x, y)] = generate(x, y)
    return image


def pixel_sum(image: Image | ImageView) -> int | float:
    """Sum of all greyscale pixels: an int for integral pixels, a float otherwise."""
    total: int | float = 0
    integral = True
    for pixel in image:
        if not isinstance(pixel, G):
            raise TypeError(f"pixel_sum needs greyscale pixels, got {type(pixel).__name__}")
        integral = pixel.value_type.is_integral
        total += int(pixel) if integral else float(pixel)
    return total if integral else float(total)


def split_to_channels(image: Image | ImageView) -> tuple[Image, ...]:
    """Split RGBA pixels into (r, g, b, a) images, complex pixels into (real, imag)."""
    sample = next(iter(image), None)
    if isinstance(sample, RGBA):
        names = ("r", "g", "b", "a")
    elif isinstance(sample, Complex):
        names = ("real", "imag")
    elif sample is None:
        raise ValueError("cannot split an empty image")
    else:
        raise TypeError(f"cannot split {type(sample).__name__} pixels into channels")
    value_type = sample.value_type
    channels = tuple(
        Image(Size(image.width(), image.height()), G(0, value_type)) for _ in names
    )
    for index, pixel in enumerate(image):
        for channel, name in zip(channels, names):
            channel[index] = G(getattr(pixel, name), value_type)
    return channels


def join_from_channels(*args: Image | ImageView) -> Image:
    """Join four greyscale images into RGBA, or two into complex (real, imag)."""
    if len(args) == 4:
        target = RGBA
    elif len(args) == 2:
        target = Complex
    else:
        raise TypeError(f"join_from_channels takes 2 or 4 images, got {len(args)}")
    first = args[0]
    if any(channel.size() != first.size() for channel in args[1:]):
        raise ValueError("source images must have matching dimensions")
    sample = next(iter(first), None)
    if sample is not None and not isinstance(sample, G):
        raise TypeError(f"channels must be greyscale, got {type(sample).__name__}")
    value_type = sample.value_type if sample is not None else G().value_type
    result = Image(Size(first.width(), first.height()), target(value_type=value_type))
    for index, values in enumerate(zip(*args)):
        result[index] = target(*(v.value for v in values), value_type=value_type)
    return result


def transpose(image: Image | ImageView, out: Image | ImageView | None = None) -> Image | ImageView:
    """Swap rows and columns.

    Writes into ``out`` when given, which must have transposed dimensions,
    and returns it; otherwise returns a new image.
    """
    if out is None:
        out = Image(Size(image.height(), image.width()), _zero_of(image))
    elif not (image.width() == out.height() and image.height() == out.width()):
        raise ValueError(
            f"input and output must have transposed dimensions: {image.size()}, {out.size()}"
        )
    for y in range(image.height()):
        for x, pixel in enumerate(image.line(y)):
            out[(y, x)] = pixel
    return out


def swap_quadrants(image: Image | ImageView) -> Image | ImageView:
    """Swap quadrants 1 and 3, and 2 and 4, of an even-sized image in place."""
    width, height = image.width(), image.height()
    half_w, half_h = width // 2, height // 2
    for h in range(height):
        partner = (h + half_h) % height
        for w in range(half_w):
            here, there = (w, h), ((w + half_w) % width, partner)
            image[here], image[there] = image[there], image[here]
    return image


def extract(image: Image | ImageView, rect: Rect) -> Image:
    """Copy the pixels of ``rect`` into a new image that keeps ``rect`` as its geometry."""
    bounds = Rect.from_size(image.size())
    if not bounds.contains(rect):
        raise ValueError(
            "extract: rectangle to extract is too large for image: "
            f"image: {image.rect()} r: {rect}"
        )
    if rect.bottom_left == Point(0, 0) and rect.size == image.size():
        return _copy_pixels(image, image.rect())

    result = Image(rect, _zero_of(image))
    for h in range(rect.height()):
        row = image.line(rect.bottom() + h)[rect.left():rect.right()]
        for x, pixel in enumerate(row):
            result[(x, h)] = pixel
    return result