import pytest

from pivkit.ranges import IntRange, make_range, range_from, range_start_at


def test_to_ascending():
    assert make_range(3).to(6) == [3, 4, 5, 6]


def test_to_descending():
    assert make_range(5).to(2) == [5, 4, 3, 2]


def test_to_single():
    assert make_range(4).to(4) == [4]


@pytest.mark.parametrize("start,end", [(-3, 7), (10, -2), (0, 0), (2, 100)])
def test_to_invariants(start, end):
    result = make_range(start).to(end)
    assert result[0] == start
    assert result[-1] == end
    assert len(result) == abs(end - start) + 1
    steps = {b - a for a, b in zip(result, result[1:])}
    assert steps <= {1, -1}
    assert len(steps) <= 1


def test_length_from_one():
    assert make_range(1).length(3) == [1, 2, 3]


def test_length_consecutive():
    result = range_from(7).length(4)
    assert result[0] == 7
    assert all(b - a == 1 for a, b in zip(result, result[1:]))


def test_length_negative_raises():
    with pytest.raises(ValueError):
        make_range(0).length(-5)


def test_aliases_agree():
    assert range_from(2).to(5) == range_start_at(2).to(5) == IntRange(2).to(5)


def test_non_integer_start():
    with pytest.raises(TypeError):
        make_range(1.5)