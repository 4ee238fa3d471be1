import pytest

from pivkit.image import Image, is_image_type
from pivkit.pixels import Complex, G, RGBA, ValueType
from pivkit.point import Point
from pivkit.rect import Rect
from pivkit.size import Size


def _g8(v):
    return G(v, ValueType.UINT8)


def test_construct_fills_every_pixel():
    img = Image(Size(4, 3), _g8(7))
    assert img.pixel_count() == img.size().area()
    assert list(img) == [_g8(7)] * img.pixel_count()
    assert (img.width(), img.height()) == (4, 3)


def test_construct_from_tuple_and_rect():
    r = Rect(Point(5, 6), Size(2, 2))
    assert Image(r).rect() == r
    assert Image((3, 2)).rect() == Rect.from_size(Size(3, 2))


def test_default_pixel_is_zero_double_grey():
    img = Image(Size(2, 2))
    assert img[0] == G(0.0)


def test_point_and_index_access_agree():
    img = Image(Size(5, 4), _g8(0))
    img[(3, 2)] = _g8(9)
    assert img[Point(3, 2)] == _g8(9)
    assert img.line(2)[3] == _g8(9)
    assert img[2 * img.width() + 3] == _g8(9)


def test_setting_number_coerces_to_pixel_type():
    img = Image(Size(2, 2), _g8(0))
    img[1] = 12
    assert img[1] == _g8(12)


def test_setting_wrong_pixel_kind_raises():
    img = Image(Size(2, 2), _g8(0))
    with pytest.raises(TypeError):
        img[0] = RGBA.grey(1)


def test_out_of_range_access_raises():
    img = Image(Size(3, 3))
    with pytest.raises(IndexError):
        img[9]
    with pytest.raises(IndexError):
        img[(3, 0)]
    with pytest.raises(IndexError):
        img.line(3)


def test_equality():
    a = Image(Size(2, 3), _g8(1))
    b = Image(Size(2, 3), _g8(1))
    assert a == b
    b[0] = _g8(2)
    assert not (a == b)


def test_resize_keeps_origin_and_counts():
    img = Image(Rect(Point(1, 1), Size(2, 2)), _g8(3))
    img.resize(Size(4, 5))
    assert img.rect().bottom_left == Point(1, 1)
    assert img.size() == Size(4, 5)
    assert len(list(img)) == img.pixel_count()
    img.resize((1, 1))
    assert len(list(img)) == img.pixel_count()


def test_resize_same_size_is_noop():
    img = Image(Size(2, 2), _g8(3))
    before = list(img)
    img.resize(Size(2, 2))
    assert list(img) == before


class _Ramp:
    def __init__(self, size):
        self._size = size

    def size(self):
        return self._size

    def __getitem__(self, i):
        return G(i, ValueType.UINT16)


def test_from_expression_evaluates_every_pixel():
    expr = _Ramp(Size(3, 2))
    img = Image.from_expression(expr)
    assert img.size() == expr.size()
    assert list(img) == [expr[i] for i in range(expr.size().area())]


def test_convert_round_trip():
    img = Image(Size(2, 2), G(1.5))
    img[3] = G(4.0)
    as_complex = img.convert(Complex)
    assert as_complex[3] == Complex(4.0, 0.0)
    assert as_complex.convert(G) == img


def test_iteration_and_reverse():
    img = Image.from_expression(_Ramp(Size(2, 2)))
    assert list(reversed(img)) == list(img)[::-1]


def test_swap():
    a = Image(Size(1, 2), _g8(1))
    b = Image(Size(3, 1), _g8(2))
    a_copy = Image(Size(1, 2), _g8(1))
    a.swap(b)
    assert b == a_copy
    assert a.size() == Size(3, 1)


def test_str_starts_with_type_and_rect():
    img = Image(Size(3, 2))
    assert str(img).startswith("image<g<double>>[(0,0) -> [3,2]]")


def test_is_image_type():
    assert is_image_type(Image(Size(1, 1)))
    assert not is_image_type([G(0.0)])