import pytest

from coursekit.adjacency import AdjacencyList


@pytest.fixture
def sample():
    adj = AdjacencyList()
    adj.add_edge("how", 5)
    adj.add_edge("are", 8)
    adj.add_edge("are", 2)
    return adj


def test_add_edge_rejects_duplicate():
    adj = AdjacencyList()
    assert adj.add_edge("b", 1)
    assert not adj.add_edge("b", 1)
    assert len(adj) == 1


def test_iteration_is_sorted(sample):
    assert list(sample) == [("are", 2), ("are", 8), ("how", 5)]


def test_reversed_is_reverse_of_iteration(sample):
    assert list(reversed(sample)) == list(sample)[::-1]


def test_neighbours_and_weights(sample):
    assert sample.neighbours() == ["are", "how"]
    assert sample.weights("are") == [2, 8]
    assert sample.weights("missing") == []


def test_has_edge_and_contains(sample):
    assert sample.has_edge("how")
    assert not sample.has_edge("you?")
    assert sample.contains("are", 8)
    assert not sample.contains("are", 5)
    assert not sample.contains("you?", 1)


def test_delete_node(sample):
    sample.delete_node("are")
    assert sample.neighbours() == ["how"]
    assert len(sample) == 1
    sample.delete_node("absent")
    assert len(sample) == 1


def test_edge_set_is_a_copy(sample):
    weights = sample.edge_set("are")
    assert weights == {2, 8}
    weights.add(100)
    assert sample.weights("are") == [2, 8]
    assert sample.edge_set("missing") == set()
    assert not sample.has_edge("missing")


def test_set_edge_set(sample):
    sample.set_edge_set("you?", [3, 1])
    assert sample.weights("you?") == [1, 3]
    assert len(sample) == 5


def test_erase_returns_next_pair(sample):
    assert sample.erase("are", 2) == ("are", 8)
    assert not sample.contains("are", 2)


def test_erase_last_weight_moves_to_next_node(sample):
    assert sample.erase("are", 8) == ("how", 5)
    assert sample.erase("are", 2) == ("how", 5)
    assert not sample.has_edge("are")


def test_erase_final_edge_returns_none(sample):
    assert sample.erase("how", 5) is None
    assert list(sample) == [("are", 2), ("are", 8)]


def test_erase_missing_edge_leaves_list_unchanged(sample):
    before = list(sample)
    assert sample.erase("are", 99) is None
    assert sample.erase("nowhere", 2) is None
    assert list(sample) == before


def test_copy_is_independent(sample):
    duplicate = sample.copy()
    assert duplicate == sample
    duplicate.add_edge("you?", 1)
    assert duplicate != sample
    assert not sample.has_edge("you?")


def test_equality():
    first = AdjacencyList()
    second = AdjacencyList()
    assert first == second
    first.add_edge("x", 1)
    second.add_edge("x", 2)
    assert first != second
    second.erase("x", 2)
    second.add_edge("x", 1)
    assert first == second


def test_str_format():
    adj = AdjacencyList()
    adj.add_edge("1", 2)
    adj.add_edge("1", 1)
    assert str(adj) == "  1 | 1\n  1 | 2\n"
    assert str(AdjacencyList()) == ""