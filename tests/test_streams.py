from pivkit.point import Point
from pivkit.streams import join


def test_join_default_separator():
    assert join([1, 2, 3]) == "[1, 2, 3]"


def test_join_empty():
    assert join([]) == "[]"


def test_join_custom_separator():
    assert join(["a", "b"], "; ") == "[a; b]"


def test_join_single_item_has_no_separator():
    assert join([42], "|") == "[42]"


def test_join_uses_str_of_items():
    assert join([Point(1, 2)]) == "[(1,2)]"