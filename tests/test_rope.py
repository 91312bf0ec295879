import pytest

from coursekit.rope import Rope


@pytest.mark.parametrize(
    "parts",
    [["a"], ["abc"], ["abc", "def"], ["abc", "", "def"], [""], ["", "abc", "def", ""]],
)
def test_iteration_matches_str(parts):
    rope = Rope(parts)
    assert "".join(rope) == str(rope)


def test_characters_across_pieces():
    assert str(Rope(["", "abc", "def", ""])) == "abcdef"
    assert list(Rope(["abc", "", "def"])) == list("abcdef")


def test_empty_piece_yields_nothing():
    assert list(Rope([""])) == []


def test_iterable_twice():
    rope = Rope(["ab", "c"])
    assert list(rope) == list(rope)
    assert len(list(rope)) == 3