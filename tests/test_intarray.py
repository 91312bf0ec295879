import pytest

from coursekit.intarray import IntArray


@pytest.fixture
def zero_one():
    array = IntArray(2)
    array[1] = 1
    return array


def test_size_is_correct():
    assert len(IntArray(2)) == 2


def test_initial_values_are_zero():
    array = IntArray(2)
    assert array[0] == 0
    assert array[1] == 0


def test_modified_value_persists():
    array = IntArray(2)
    array[1] = 10
    assert array[1] == 10


def test_copy_has_same_data(zero_one):
    copy = zero_one.copy()
    assert len(copy) == 2
    assert copy[0] == 0
    assert copy[1] == 1


def test_modifying_copy_leaves_original(zero_one):
    copy = zero_one.copy()
    copy[0] = 10
    assert copy[0] == 10
    assert zero_one[0] == 0


def test_copy_assign_replaces_larger_array(zero_one):
    copy = IntArray(5)
    assert len(copy) == 5
    copy = zero_one.copy()
    assert len(copy) == 2
    assert copy[1] == 1
    copy[0] = 10
    assert zero_one[0] == 0


def test_take_moves_data(zero_one):
    source = zero_one.copy()
    moved = source.take()
    assert len(moved) == 2
    assert moved[0] == 0
    assert moved[1] == 1
    assert len(source) == 0


def test_out_of_range_index_raises(zero_one):
    with pytest.raises(IndexError):
        zero_one[2]
    with pytest.raises(IndexError):
        zero_one[-1] = 3
    assert len(zero_one) == 2
    assert zero_one[0] == 0
    assert zero_one[1] == 1


def test_negative_size_raises():
    with pytest.raises(ValueError):
        IntArray(-1)