import pytest

from pivkit.settings import (
    Detector,
    OutputFormat,
    Processor,
    Roi,
    Settings,
    Signal,
)
from pivkit.size import Size


def _counter(settings, signal):
    calls = []
    settings.connect(signal, lambda: calls.append(signal))
    return calls


def test_defaults():
    s = Settings()
    assert (s.delta_x, s.delta_y) == (16, 16)
    assert (s.int_length_x, s.int_length_y) == (32, 32)
    assert s.processor is Processor.FFT_CORRELATOR
    assert s.detector is Detector.GAUSSIAN_SUB_PIXEL
    assert s.output_format is OutputFormat.TEXT
    assert s.vector_scale == 5.0
    assert s.vector_sub == 0.0
    assert s.batch_threading is True
    assert s.is_mask is False
    assert s.image_size is None


def test_output_format_values():
    assert OutputFormat.HDF5 == 1
    assert OutputFormat.TEXT == 0
    s = Settings()
    assert s.output_format == 0
    assert s.processor == 0
    assert s.detector == 0


def test_overlap_zero_gives_full_step():
    s = Settings()
    s.set_overlap_x(0)
    s.set_overlap_y(0)
    assert s.delta_x == s.int_length_x
    assert s.delta_y == s.int_length_y


def test_overlap_half():
    s = Settings()
    s.set_overlap_x(50)
    assert s.delta_x == s.int_length_x // 2


def test_overlap_emits_signal():
    s = Settings()
    calls = _counter(s, Signal.PROCESS_SETTINGS_CHANGED)
    s.set_overlap_x(25)
    s.set_overlap_y(25)
    assert len(calls) == 2


def test_window_exponent():
    s = Settings()
    s.set_window_exponent_x(1)
    assert s.int_length_x == 32
    s.set_window_exponent_y(1)
    first = s.int_length_y
    s.set_window_exponent_y(2)
    assert s.int_length_y == 2 * first
    assert s.delta_y == s.int_length_y // 2


def test_first_image_size_sets_roi():
    s = Settings()
    calls = _counter(s, Signal.IMAGE_SIZE_CHANGED)
    s.set_image_size(Size(100, 50))
    assert s.roi == Roi.from_geometry(0, 0, 100, 50)
    assert (s.roi.width, s.roi.height) == (100, 50)
    assert len(calls) == 1
    s.set_image_size(Size(100, 50))
    assert len(calls) == 1


def test_changed_image_size_clamps_roi():
    s = Settings()
    s.set_image_size(Size(100, 50))
    s.set_image_size(Size(40, 30))
    assert s.roi.right == 40
    assert s.roi.bottom == 30
    assert s.image_size == Size(40, 30)


def test_set_roi_clamps_negative_edges():
    s = Settings()
    s.set_image_size(Size(100, 50))
    s.set_roi(Roi(-5, -3, 20, 20))
    assert s.roi.left == 0
    assert s.roi.top == 0
    assert s.roi.right == 20


def test_set_roi_clamps_bottom():
    s = Settings()
    s.set_image_size(Size(100, 50))
    s.set_roi(Roi(0, 0, 10, 70))
    assert s.roi.bottom == 50


def test_mask_sets_batch_mask_and_emits():
    s = Settings()
    calls = _counter(s, Signal.IMAGE_SIZE_CHANGED)
    s.set_mask(True)
    assert s.is_mask is True
    assert s.batch_mask is True
    assert len(calls) == 1


@pytest.mark.parametrize(
    "setter, value, getter",
    [
        ("set_vector_scale", 2.5, "vector_scale"),
        ("set_vector_sub", 1.5, "vector_sub"),
        ("set_vector_colour_filtered", (1, 2, 3), "vector_colour_filtered"),
        ("set_vector_colour_unfiltered", (4, 5, 6), "vector_colour_unfiltered"),
    ],
)
def test_vector_settings_emit(setter, value, getter):
    s = Settings()
    calls = _counter(s, Signal.VECTOR_SETTING_CHANGED)
    getattr(s, setter)(value)
    assert getattr(s, getter) == value
    assert len(calls) == 1


def test_connect_rejects_unknown_signal():
    s = Settings()
    with pytest.raises(ValueError):
        s.connect("no_such_signal", lambda: None)