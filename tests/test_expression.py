import pytest

from pivkit.expression import (
    BinaryExpression,
    ConstantNode,
    ImageNode,
    UnaryExpression,
    abs_sqr,
    absolute,
    as_expression,
    conj,
    imag,
    real,
)
from pivkit.image import Image
from pivkit.image_view import create_image_view
from pivkit.pixels import Complex, G, ValueType
from pivkit.point import Point
from pivkit.rect import Rect
from pivkit.size import Size


def _grey_image(values, width, value_type=ValueType.DOUBLE):
    height = len(values) // width
    image = Image(Size(width, height), G(0, value_type))
    for index, value in enumerate(values):
        image[index] = G(value, value_type)
    return image


def _complex_image(pairs):
    image = Image(Size(len(pairs), 1), Complex(0.0, 0.0))
    for index, (re, im) in enumerate(pairs):
        image[index] = Complex(re, im)
    return image


@pytest.fixture
def first():
    return _grey_image([1.0, 2.0, 3.0, 4.0], 2)


@pytest.fixture
def second():
    return _grey_image([0.5, 1.5, 2.5, 3.5], 2)


def test_image_node_reads_pixels(first):
    node = ImageNode(first)
    assert [node[i] for i in range(4)] == list(first)
    assert node.size() == first.size()


def test_image_node_rejects_out_of_range(first):
    with pytest.raises(IndexError):
        ImageNode(first)[4]


def test_constant_node_repeats_value():
    node = ConstantNode(G(2.0), Size(3, 2))
    assert list(node) == [G(2.0)] * 6
    assert node.size() == Size(3, 2)
    with pytest.raises(IndexError):
        node[6]


def test_add_then_subtract_round_trip(first, second):
    expr = (as_expression(first) + second) - second
    assert isinstance(expr, BinaryExpression)
    assert expr.evaluate() == first


def test_multiply_and_divide_by_one(first):
    node = as_expression(first)
    assert (node * 1).evaluate() == first
    assert (node / 1).evaluate() == first


def test_constant_on_left(first):
    assert (G(0.0) + as_expression(first)).evaluate() == first
    assert (1 * as_expression(first)).evaluate() == first


def test_modulo_of_integral_pixels():
    image = _grey_image([1, 2, 3, 4], 2, ValueType.UINT8)
    result = (as_expression(image) % 10).evaluate()
    assert result == image


def test_negation_cancels(first):
    node = as_expression(first)
    result = (-node + node).evaluate()
    assert result == Image(first.size(), G(0.0))


def test_expression_size_follows_operands(first, second):
    expr = as_expression(first) + second
    assert expr.size() == first.size()
    assert len(expr) == first.pixel_count()


def test_size_mismatch_raises(first):
    with pytest.raises(ValueError):
        as_expression(first) + Image(Size(3, 3))


def test_unsupported_operand_raises(first):
    with pytest.raises(TypeError):
        as_expression(first) + "pixel"


def test_as_expression_constant_needs_size():
    with pytest.raises(ValueError):
        as_expression(G(1.0))


def test_as_expression_rejects_strings():
    with pytest.raises(TypeError):
        as_expression("pixel", Size(1, 1))


def test_as_expression_returns_nodes_unchanged(first):
    node = as_expression(first)
    assert as_expression(node) is node


def test_expression_over_image_view():
    image = _grey_image([float(v) for v in range(9)], 3)
    view = create_image_view(image, Rect(Point(1, 1), Size(2, 2)))
    result = (as_expression(view) * 1).evaluate()
    assert list(result) == list(view)
    assert result.size() == view.size()


def test_conj_twice_is_identity():
    image = _complex_image([(1.0, 2.0), (3.0, -1.0)])
    assert conj(conj(image).evaluate()).evaluate() == image


def test_conj_negates_imaginary_part():
    pairs = [(1.0, 2.0), (3.0, -1.0)]
    image = _complex_image(pairs)
    conjugated = conj(image).evaluate()
    assert [p.imag for p in conjugated] == [-im for _, im in pairs]
    assert [p.real for p in conjugated] == [re for re, _ in pairs]


def test_real_and_imag_split():
    pairs = [(1.0, 2.0), (3.0, -1.0)]
    image = _complex_image(pairs)
    assert [p.value for p in real(image).evaluate()] == [re for re, _ in pairs]
    assert [p.value for p in imag(image).evaluate()] == [im for _, im in pairs]


def test_absolute_magnitude():
    image = _complex_image([(3.0, 4.0)])
    result = absolute(image)
    assert isinstance(result, UnaryExpression)
    assert result[0] == Complex(5.0, 0.0)


def test_abs_sqr_matches_absolute():
    image = _complex_image([(1.0, 2.0), (3.0, -1.0)])
    magnitudes = [p.real for p in absolute(image)]
    squares = [p.real for p in abs_sqr(image)]
    for m, s in zip(magnitudes, squares):
        assert s == pytest.approx(m * m)
    assert all(p.imag == 0.0 for p in abs_sqr(image))


def test_complex_functions_reject_grey_images(first):
    with pytest.raises(TypeError):
        conj(first)
    with pytest.raises(TypeError):
        real(first)