import pytest

from pivkit.grid import generate_cartesian_grid
from pivkit.point import Point
from pivkit.rect import Rect
from pivkit.size import Size

IMAGE = Size(100, 50)
WINDOW = Size(32, 32)

DOCUMENTED_CORNERS = [
    (2, 1), (18, 1), (34, 1), (50, 1), (66, 1),
    (2, 17), (18, 17), (34, 17), (50, 17), (66, 17),
]


def test_documented_example_with_percentage():
    grid = generate_cartesian_grid(IMAGE, WINDOW, 0.5)
    assert [tuple(r.bottom_left) for r in grid] == DOCUMENTED_CORNERS


def test_documented_example_with_pixel_offsets():
    grid = generate_cartesian_grid(IMAGE, WINDOW, (16, 16))
    assert [tuple(r.bottom_left) for r in grid] == DOCUMENTED_CORNERS


def test_percentage_and_pixel_forms_agree():
    assert generate_cartesian_grid(IMAGE, WINDOW, 0.25) == generate_cartesian_grid(
        IMAGE, WINDOW, (8, 8)
    )


def test_all_windows_inside_image_with_window_size():
    image_rect = Rect.from_size(IMAGE)
    grid = generate_cartesian_grid(IMAGE, Size(16, 8), (5, 3))
    assert grid
    assert all(image_rect.contains(r) for r in grid)
    assert all(r.size == Size(16, 8) for r in grid)


def test_grid_is_centred():
    grid = generate_cartesian_grid(Size(101, 77), Size(10, 10), (7, 9))
    left_margin = min(r.left() for r in grid)
    right_margin = 101 - max(r.right() for r in grid)
    bottom_margin = min(r.bottom() for r in grid)
    top_margin = 77 - max(r.top() for r in grid)
    assert abs(left_margin - right_margin) <= 1
    assert abs(bottom_margin - top_margin) <= 1


def test_window_equal_to_image_gives_single_rect():
    grid = generate_cartesian_grid(Size(32, 32), WINDOW, 0.5)
    assert grid == [Rect(Point(0, 0), WINDOW)]


def test_percentage_out_of_range_raises():
    with pytest.raises(ValueError, match="between"):
        generate_cartesian_grid(IMAGE, WINDOW, 1.5)
    with pytest.raises(ValueError, match="between"):
        generate_cartesian_grid(IMAGE, WINDOW, -0.1)


def test_zero_image_size_raises():
    with pytest.raises(ValueError, match="image size"):
        generate_cartesian_grid(Size(0, 50), WINDOW, (16, 16))


def test_zero_interrogation_size_raises():
    with pytest.raises(ValueError, match="interrogation size must be non-zero"):
        generate_cartesian_grid(IMAGE, Size(0, 0), (16, 16))


def test_zero_offset_raises():
    with pytest.raises(ValueError, match="non-zero"):
        generate_cartesian_grid(IMAGE, WINDOW, 0.0)
    with pytest.raises(ValueError, match="non-zero"):
        generate_cartesian_grid(IMAGE, WINDOW, (0, 16))


def test_window_bigger_than_image_raises():
    with pytest.raises(ValueError, match="bigger"):
        generate_cartesian_grid(Size(20, 20), WINDOW, (16, 16))