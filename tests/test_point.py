import pytest

from coursekit.point import Point


def test_str_format():
    assert str(Point(1, 2)) == "(1,2)"


def test_addition():
    assert Point(1, 2) + Point(2, 3) == Point(3, 5)


def test_addition_is_componentwise():
    p1, p2 = Point(7, -4), Point(10, 20)
    total = p1 + p2
    assert total[0] == p1[0] + p2[0]
    assert total[1] == p1[1] + p2[1]


def test_subscript_get_and_set():
    q = Point(99, -5)
    q[0] = -99
    assert q[0] == -99
    assert q[1] == -5


def test_bad_index_raises():
    p = Point(1, 2)
    with pytest.raises(IndexError):
        p[2]
    with pytest.raises(IndexError):
        p[-1] = 0
    assert p.to_list() == [1, 2]


def test_to_list():
    assert Point(1, 2).to_list() == [1, 2]


def test_equality():
    assert Point(1, 2) == Point(1, 2)
    assert not (Point(1, 2) == Point(2, 1))