"""Outgoing edges of a single graph node, grouped by destination."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from typing import Any


class AdjacencyList:
    """Maps each destination node to the set of weights of edges leading to it.

    Destinations are kept in ascending order, and so are the weights for each
    destination. Iterating yields ``(destination, weight)`` pairs in that order.
    """

    def __init__(self) -> None:
        self._edges: dict[Hashable, set[Any]] = {}

    def add_edge(self, node: Hashable, weight: Any) -> bool:
        """Add an edge to ``node``; return False if that exact edge exists."""
        weights = self._edges.setdefault(node, set())
        if weight in weights:
            return False
        weights.add(weight)
        return True

    def has_edge(self, node: Hashable) -> bool:
        """Return True if ``node`` has an entry in this list."""
        return node in self._edges

    def delete_node(self, node: Hashable) -> None:
        """Drop every edge leading to ``node``."""
        self._edges.pop(node, None)

    def edge_set(self, node: Hashable) -> set[Any]:
        """Return a copy of the weights of edges to ``node``."""
        return set(self._edges.get(node, ()))

    def set_edge_set(self, node: Hashable, weights: Iterable[Any]) -> None:
        """Replace the weights of edges to ``node`` with ``weights``."""
        self._edges[node] = set(weights)

    def neighbours(self) -> list[Hashable]:
        """Return the destination nodes in ascending order."""
        return sorted(self._edges)

    def weights(self, node: Hashable) -> list[Any]:
        """Return the weights of edges to ``node`` in ascending order."""
        return sorted(self._edges.get(node, ()))

    def contains(self, node: Hashable, weight: Any) -> bool:
        """Return True if an edge to ``node`` with ``weight`` exists."""
        return weight in self._edges.get(node, ())

    def erase(self, node: Hashable, weight: Any) -> tuple[Hashable, Any] | None:
        """Remove one edge and return the pair that followed it.

        Returns None when the removed edge was the last one, or when no such
        edge existed. A destination left without weights is dropped.
        """
        weights = self._edges.get(node)
        if weights is None or weight not in weights:
            return None
        weights.discard(weight)
        if not weights:
            del self._edges[node]
        for pair in self:
            if (pair[0], pair[1]) > (node, weight) if pair[0] == node else pair[0] > node:
                return pair
        return None

    def copy(self) -> AdjacencyList:
        """Return an independent copy."""
        duplicate = AdjacencyList()
        duplicate._edges = {node: set(weights) for node, weights in self._edges.items()}
        return duplicate

    def __len__(self) -> int:
        return sum(len(weights) for weights in self._edges.values())

    def __iter__(self) -> Iterator[tuple[Hashable, Any]]:
        for node in sorted(self._edges):
            for weight in sorted(self._edges[node]):
                yield node, weight

    def __reversed__(self) -> Iterator[tuple[Hashable, Any]]:
        for node in sorted(self._edges, reverse=True):
            for weight in sorted(self._edges[node], reverse=True):
                yield node, weight

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AdjacencyList):
            return NotImplemented
        return self._edges == other._edges

    def __str__(self) -> str:
        return "".join(f"  {node} | {weight}\n" for node, weight in self)