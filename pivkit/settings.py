"""Processing, display, batch and output settings with change notifications."""

from __future__ import annotations

import dataclasses
from collections import defaultdict
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Callable

from .size import Size


class Processor(IntEnum):
    FFT_CORRELATOR = 0


class Detector(IntEnum):
    GAUSSIAN_SUB_PIXEL = 0


class OutputFormat(IntEnum):
    TEXT = 0
    HDF5 = 1


class Signal(Enum):
    IMAGE_SIZE_CHANGED = "image_size_changed"
    PROCESS_SETTINGS_CHANGED = "process_settings_changed"
    VECTOR_SETTING_CHANGED = "vector_setting_changed"


@dataclass(frozen=True)
class Roi:
    """Region of interest given by inclusive pixel edges; y grows downwards."""

    left: int = 0
    top: int = 0
    right: int = -1
    bottom: int = -1

    @classmethod
    def from_geometry(cls, x: int, y: int, width: int, height: int) -> "Roi":
        return cls(x, y, x + width - 1, y + height - 1)

    @property
    def width(self) -> int:
        return self.right - self.left + 1

    @property
    def height(self) -> int:
        return self.bottom - self.top + 1


Colour = tuple[int, int, int]

_CYAN: Colour = (0, 255, 255)
_RED: Colour = (255, 0, 0)


class Settings:
    """Holds analysis settings and notifies listeners when some of them change."""

    def __init__(self) -> None:
        # processing
        self._delta_x = 16
        self._delta_y = 16
        self._overlap_x = 50
        self._overlap_y = 50
        self._int_length_x = 32
        self._int_length_y = 32
        self._image_size: Size | None = None
        self._is_mask = False
        self.processor = Processor.FFT_CORRELATOR
        self.detector = Detector.GAUSSIAN_SUB_PIXEL
        self._roi = Roi(0, 0, -1, -1)
        self._roi_set = False

        # vectors
        self._vector_colour_unfiltered: Colour = _CYAN
        self._vector_colour_filtered: Colour = _RED
        self._vector_scale = 5.0
        self._vector_sub = 0.0

        # filters
        self.filter_options: Any = None

        # session and output
        self.exp_name = "PIV"
        self.output_folder = ""
        self.output_format = OutputFormat.TEXT

        # batch
        self.batch_filter = False
        self.batch_mask = False
        self.batch_show_image = False
        self.batch_show_vectors = False
        self.batch_threading = True

        self._listeners: dict[Signal, list[Callable[[], Any]]] = defaultdict(list)

    # notifications

    def connect(self, signal: Signal, callback: Callable[[], Any]) -> None:
        """Call ``callback`` with no arguments whenever ``signal`` is emitted."""
        self._listeners[Signal(signal)].append(callback)

    def _emit(self, signal: Signal) -> None:
        for callback in list(self._listeners[signal]):
            callback()

    # processing

    @property
    def delta_x(self) -> int:
        return self._delta_x

    @property
    def delta_y(self) -> int:
        return self._delta_y

    @property
    def int_length_x(self) -> int:
        return self._int_length_x

    @property
    def int_length_y(self) -> int:
        return self._int_length_y

    def set_overlap_x(self, percent: int) -> None:
        """Set the window overlap in x as a percentage; recomputes the x step."""
        self._overlap_x = percent
        self._change_delta_x()

    def set_overlap_y(self, percent: int) -> None:
        """Set the window overlap in y as a percentage; recomputes the y step."""
        self._overlap_y = percent
        self._change_delta_y()

    def set_window_exponent_x(self, exponent: int) -> None:
        """Set the x window length to 2**(4 + exponent) pixels."""
        self._int_length_x = int(2.0 ** (4 + exponent))
        self._change_delta_x()

    def set_window_exponent_y(self, exponent: int) -> None:
        """Set the y window length to 2**(4 + exponent) pixels."""
        self._int_length_y = int(2.0 ** (4 + exponent))
        self._change_delta_y()

    def _change_delta_x(self) -> None:
        self._delta_x = int(self._int_length_x * (100 - self._overlap_x) / 100)
        self._emit(Signal.PROCESS_SETTINGS_CHANGED)

    def _change_delta_y(self) -> None:
        self._delta_y = int(self._int_length_y * (100 - self._overlap_y) / 100)
        self._emit(Signal.PROCESS_SETTINGS_CHANGED)

    @property
    def image_size(self) -> Size | None:
        return self._image_size

    def set_image_size(self, size: Size) -> None:
        """Record the image size; the first call sets the ROI to the whole image."""
        changed = size != self._image_size
        self._image_size = size
        if not self._roi_set:
            self.set_roi(Roi.from_geometry(0, 0, size.width, size.height))
            self._roi_set = True
        elif changed:
            roi = self._roi
            if roi.left < 0:
                roi = dataclasses.replace(roi, left=0)
            if roi.right > size.width or roi.right < 0:
                roi = dataclasses.replace(roi, right=size.width)
            if roi.bottom > size.height or roi.bottom < 0:
                roi = dataclasses.replace(roi, bottom=size.height)
            if roi.top < 0:
                roi = dataclasses.replace(roi, top=0)
            self._roi = roi
        if changed:
            self._emit(Signal.IMAGE_SIZE_CHANGED)

    @property
    def is_mask(self) -> bool:
        return self._is_mask

    def set_mask(self, enabled: bool) -> None:
        """Enable or disable masking, for interactive and batch use alike."""
        self.batch_mask = enabled
        self._is_mask = enabled
        self._emit(Signal.IMAGE_SIZE_CHANGED)

    @property
    def roi(self) -> Roi:
        return self._roi

    def set_roi(self, roi: Roi) -> None:
        """Set the region of interest, clamping it against the image where known."""
        if roi.left < 0:
            roi = dataclasses.replace(roi, left=0)
        if self._image_size is not None:
            if roi.right > self._image_size.width:
                roi = dataclasses.replace(roi, left=self._image_size.width)
            if roi.bottom > self._image_size.height:
                roi = dataclasses.replace(roi, bottom=self._image_size.height)
        if roi.top < 0:
            roi = dataclasses.replace(roi, top=0)
        self._roi = roi

    # vectors

    @property
    def vector_colour_filtered(self) -> Colour:
        return self._vector_colour_filtered

    def set_vector_colour_filtered(self, colour: Colour) -> None:
        self._vector_colour_filtered = colour
        self._emit(Signal.VECTOR_SETTING_CHANGED)

    @property
    def vector_colour_unfiltered(self) -> Colour:
        return self._vector_colour_unfiltered

    def set_vector_colour_unfiltered(self, colour: Colour) -> None:
        self._vector_colour_unfiltered = colour
        self._emit(Signal.VECTOR_SETTING_CHANGED)

    @property
    def vector_scale(self) -> float:
        return self._vector_scale

    def set_vector_scale(self, scale: float) -> None:
        self._vector_scale = scale
        self._emit(Signal.VECTOR_SETTING_CHANGED)

    @property
    def vector_sub(self) -> float:
        return self._vector_sub

    def set_vector_sub(self, sub: float) -> None:
        self._vector_sub = sub
        self._emit(Signal.VECTOR_SETTING_CHANGED)