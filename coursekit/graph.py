"""A directed weighted multigraph with ordered nodes and edges."""

from __future__ import annotations

import sys
from collections.abc import Hashable, Iterable, Iterator
from typing import Any

from coursekit.adjacency import AdjacencyList

Edge = tuple[Hashable, Hashable, Any]


class GraphError(RuntimeError):
    """Raised when an operation refers to nodes that are not in the graph."""


class EdgeCursor:
    """A bidirectional position within a graph's ordered sequence of edges.

    A cursor either rests on an edge ``(src, dst, weight)`` or sits one past
    the last edge, at the end. Cursors compare equal only when they belong
    to the same graph and rest on the same position.
    """

    def __init__(self, graph: Graph, key: Edge | None) -> None:
        self._graph = graph
        self._key = key

    def value(self) -> Edge:
        """Return the edge under the cursor."""
        if self._key is None:
            raise GraphError("Cannot read the value of a cursor at the end")
        return self._key

    def advance(self) -> EdgeCursor:
        """Move to the next edge, or to the end; return the cursor."""
        if self._key is None:
            raise GraphError("Cannot advance a cursor past the end")
        self._key = self._graph._successor(self._key)
        return self

    def retreat(self) -> EdgeCursor:
        """Move to the previous edge; return the cursor."""
        previous = self._graph._predecessor(self._key)
        if previous is None:
            raise GraphError("Cannot move a cursor before the first edge")
        self._key = previous
        return self

    def at_end(self) -> bool:
        """Return True if the cursor is past the last edge."""
        return self._key is None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EdgeCursor):
            return NotImplemented
        return self._graph is other._graph and self._key == other._key

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "EdgeCursor(end)" if self._key is None else f"EdgeCursor{self._key!r}"


class Graph:
    """Nodes in ascending order, each with its outgoing weighted edges."""

    def __init__(self, nodes: Iterable[Hashable] = ()) -> None:
        self._nodes: dict[Hashable, AdjacencyList] = {}
        for node in nodes:
            self.insert_node(node)

    @classmethod
    def from_edges(cls, edges: Iterable[Edge]) -> Graph:
        """Build a graph from ``(src, dst, weight)`` triples, adding nodes as needed."""
        graph = cls()
        for src, dst, weight in edges:
            graph.insert_node(src)
            graph.insert_node(dst)
            graph.insert_edge(src, dst, weight)
        return graph

    def copy(self) -> Graph:
        """Return an independent copy of the graph."""
        duplicate = Graph()
        duplicate._nodes = {node: adj.copy() for node, adj in self._nodes.items()}
        return duplicate

    def insert_node(self, node: Hashable) -> bool:
        """Add ``node``; return False if it is already present."""
        if node in self._nodes:
            return False
        self._nodes[node] = AdjacencyList()
        return True

    def insert_edge(self, src: Hashable, dst: Hashable, weight: Any) -> bool:
        """Add an edge; return False if that exact edge already exists."""
        if src not in self._nodes or dst not in self._nodes:
            raise GraphError(
                "Cannot call Graph::InsertEdge when either src or dst node does not exist"
            )
        return self._nodes[src].add_edge(dst, weight)

    def delete_node(self, node: Hashable) -> bool:
        """Remove ``node`` with all its edges; return False if it was absent."""
        if self._nodes.pop(node, None) is None:
            return False
        for adjacency in self._nodes.values():
            adjacency.delete_node(node)
        return True

    def _edges_touching(self, node: Hashable) -> list[Edge]:
        return [edge for edge in self if edge[0] == node or edge[1] == node]

    def replace(self, old: Hashable, new: Hashable) -> bool:
        """Rename ``old`` to ``new``; return False if ``new`` already exists."""
        if old not in self._nodes:
            raise GraphError("Cannot call Graph::Replace on a node that doesn't exist")
        if new in self._nodes:
            return False
        self._redirect(old, new)
        return True

    def merge_replace(self, old: Hashable, new: Hashable) -> None:
        """Move every edge of ``old`` onto ``new`` and remove ``old``."""
        if old not in self._nodes or new not in self._nodes:
            raise GraphError(
                "Cannot call Graph::MergeReplace on old or new data "
                "if they don't exist in the graph"
            )
        if old == new:
            return
        self._redirect(old, new)

    def _redirect(self, old: Hashable, new: Hashable) -> None:
        edges = self._edges_touching(old)
        self.insert_node(new)
        self.delete_node(old)
        for src, dst, weight in edges:
            self.insert_edge(
                new if src == old else src, new if dst == old else dst, weight
            )

    def is_node(self, node: Hashable) -> bool:
        """Return True if ``node`` is in the graph."""
        return node in self._nodes

    def clear(self) -> None:
        """Remove every node and edge."""
        self._nodes.clear()

    def is_connected(self, src: Hashable, dst: Hashable) -> bool:
        """Return True if at least one edge leads from ``src`` to ``dst``."""
        if src not in self._nodes or dst not in self._nodes:
            raise GraphError(
                "Cannot call Graph::IsConnected if src or dst node don't exist in the graph"
            )
        return self._nodes[src].has_edge(dst)

    def nodes(self) -> list[Hashable]:
        """Return all nodes in ascending order."""
        return sorted(self._nodes)

    def connected(self, node: Hashable) -> list[Hashable]:
        """Return the destinations of ``node``'s outgoing edges in ascending order."""
        if node not in self._nodes:
            raise IndexError(
                "Cannot call Graph::GetConnected if src doesn't exist in the graph"
            )
        return self._nodes[node].neighbours()

    def weights(self, src: Hashable, dst: Hashable) -> list[Any]:
        """Return the weights of edges from ``src`` to ``dst`` in ascending order."""
        if src not in self._nodes or dst not in self._nodes:
            raise IndexError(
                "Cannot call Graph::GetWeights if src or dst node don't exist in the graph"
            )
        return self._nodes[src].weights(dst)

    def find(self, src: Hashable, dst: Hashable, weight: Any) -> EdgeCursor:
        """Return a cursor on the given edge, or the end cursor if it is absent."""
        adjacency = self._nodes.get(src)
        if adjacency is None or not adjacency.contains(dst, weight):
            return self.end()
        return EdgeCursor(self, (src, dst, weight))

    def erase_edge(self, src: Hashable, dst: Hashable, weight: Any) -> bool:
        """Remove one edge; return False if it did not exist."""
        cursor = self.find(src, dst, weight)
        if cursor.at_end():
            return False
        self.erase(cursor)
        return True

    def erase(self, cursor: EdgeCursor) -> EdgeCursor:
        """Remove the edge under ``cursor``; return a cursor on the edge after it."""
        if cursor.at_end():
            return self.end()
        src, dst, weight = cursor.value()
        adjacency = self._nodes.get(src)
        if adjacency is None or not adjacency.contains(dst, weight):
            return self.end()
        adjacency.erase(dst, weight)
        return EdgeCursor(self, self._successor((src, dst, weight)))

    def _successor(self, key: Edge) -> Edge | None:
        return next((edge for edge in self if edge > key), None)

    def _predecessor(self, key: Edge | None) -> Edge | None:
        edges = reversed(self)
        if key is None:
            return next(edges, None)
        return next((edge for edge in edges if edge < key), None)

    def begin(self) -> EdgeCursor:
        """Return a cursor on the first edge, or the end cursor if there are none."""
        return EdgeCursor(self, next(iter(self), None))

    def end(self) -> EdgeCursor:
        """Return the cursor one past the last edge."""
        return EdgeCursor(self, None)

    def num_nodes(self) -> int:
        """Return the number of nodes."""
        return len(self._nodes)

    def num_edges(self) -> int:
        """Return the number of edges."""
        return sum(len(adjacency) for adjacency in self._nodes.values())

    def __iter__(self) -> Iterator[Edge]:
        for src in sorted(self._nodes):
            for dst, weight in self._nodes[src]:
                yield src, dst, weight

    def __reversed__(self) -> Iterator[Edge]:
        for src in sorted(self._nodes, reverse=True):
            for dst, weight in reversed(self._nodes[src]):
                yield src, dst, weight

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._nodes == other._nodes

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join(
            f"{node} (\n{self._nodes[node]})\n" for node in sorted(self._nodes)
        )


def main(argv: list[str] | None = None) -> int:
    """Build a small sample graph, merge two of its nodes and print it."""
    out = sys.stdout
    graph = Graph(["hello", "how", "are", "you?"])
    graph.insert_edge("hello", "how", 5)
    graph.insert_edge("hello", "are", 8)
    graph.insert_edge("hello", "are", 2)
    graph.insert_edge("how", "you?", 1)
    graph.insert_edge("how", "hello", 4)
    graph.insert_edge("are", "you?", 3)

    out.write(f"{graph}\n")
    graph.merge_replace("how", "are")
    out.write(f"{graph}\n")

    src, dst, weight = graph.begin().value()
    out.write(f"{src} {dst} {weight}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())