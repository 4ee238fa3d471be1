"""Views onto a rectangular portion of an image, sharing its pixels."""

from __future__ import annotations

from typing import Any, Iterator

from .image import Image
from .pixels import pixeltype_name
from .point import Point
from .rect import Rect
from .size import Size


class ImageView:
    """A window onto part of an image, with the same pixel interface as Image.

    Pixel access is in local coordinates of the view; reads and writes go
    through to the underlying image. ``rect()`` reports the view's position
    in global coordinates, i.e. offset by the image's own origin.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, source: "Image | ImageView", rect: Rect) -> None:
        """Create a view of ``rect`` within ``source``, an image or another view.

        Raises IndexError when ``rect`` does not fit inside ``source``.
        """
        if isinstance(source, ImageView):
            bounds = Rect.from_size(source.size())
            if not bounds.contains(rect):
                raise IndexError(
                    f"image_view ({rect}) not contained within image_view ({bounds})"
                )
            self._image = source.underlying()
            self._rect = Rect(
                Point(source._rect.left() + rect.left(), source._rect.bottom() + rect.bottom()),
                rect.size,
            )
        elif isinstance(source, Image):
            bounds = Rect.from_size(source.size())
            if not bounds.contains(rect):
                raise IndexError(f"image view ({rect}) not contained within image ({bounds})")
            self._image = source
            self._rect = rect
        else:
            raise TypeError(f"cannot create a view onto {type(source).__name__}")

    def resize(self, width: int, height: int) -> None:
        """Change the viewed size, keeping the bottom-left corner.

        Raises IndexError when the new view would exceed the image.
        """
        new_rect = Rect(self._rect.bottom_left, Size(width, height))
        bounds = Rect.from_size(self._image.size())
        if not bounds.contains(new_rect):
            raise IndexError(
                f"resize: image view ({new_rect}) not contained within image ({bounds})"
            )
        self._rect = new_rect

    def __eq__(self, other: object) -> bool:
        """Views are equal when they look at the same portion of the same image."""
        if not isinstance(other, ImageView):
            return NotImplemented
        return self._image is other._image and self._rect == other._rect

    def _global_key(self, key: Any) -> tuple[int, int]:
        width = self._rect.width()
        if isinstance(key, int) and not isinstance(key, bool):
            if not 0 <= key < self._rect.area():
                raise IndexError(
                    f"index outside of allowed area: {key} >= {self._rect.area()}"
                )
            x, y = key % width, key // width
        else:
            try:
                x, y = key
            except (TypeError, ValueError) as exc:
                raise TypeError(
                    f"pixel key must be an index or an (x, y) pair, got {key!r}"
                ) from exc
            if not (0 <= x < width and 0 <= y < self._rect.height()):
                raise IndexError(f"pixel ({x}, {y}) outside view of size {self.size()}")
        return self._rect.left() + x, self._rect.bottom() + y

    def __getitem__(self, key: Any) -> Any:
        return self._image[self._global_key(key)]

    def __setitem__(self, key: Any, value: Any) -> None:
        self._image[self._global_key(key)] = value

    def __iter__(self) -> Iterator[Any]:
        left, bottom = self._rect.left(), self._rect.bottom()
        for y in range(self._rect.height()):
            for x in range(self._rect.width()):
                yield self._image[(left + x, bottom + y)]

    def line(self, index: int) -> list[Any]:
        """Return a copy of row ``index`` of the view."""
        if not 0 <= index < self.height():
            raise IndexError(f"line out of range ({index}, max is: {self.height()})")
        row = self._image.line(self._rect.bottom() + index)
        return row[self._rect.left():self._rect.right()]

    def width(self) -> int:
        return self._rect.width()

    def height(self) -> int:
        return self._rect.height()

    def size(self) -> Size:
        return self._rect.size

    def pixel_count(self) -> int:
        return self._rect.area()

    def rect(self) -> Rect:
        """The viewed area in global coordinates."""
        image_rect = self._image.rect()
        return Rect(
            Point(image_rect.left() + self._rect.left(), image_rect.bottom() + self._rect.bottom()),
            self._rect.size,
        )

    def underlying(self) -> Image:
        """The image being viewed."""
        return self._image

    def __str__(self) -> str:
        sample = next(iter(self._image), None)
        return f"image_view<{pixeltype_name(sample)}>[{self.rect()}][{id(self._image):#x}]"


def create_image_view(source: "Image | ImageView", rect: Rect) -> ImageView:
    """Create a view of ``rect`` within an image or another view."""
    return ImageView(source, rect)