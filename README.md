# coursekit

A collection of small, self-contained data structures and utilities:

- `coursekit.graph` – `Graph`, a directed, weighted multigraph, plus
  `EdgeCursor` for walking back and forth over its edges, and `GraphError`.
- `coursekit.adjacency` – `AdjacencyList`, the per-node store of outgoing edges.
- `coursekit.stacks` – `Stack` (list backed) and `LinkedStack` (linked nodes).
- `coursekit.rope` – `Rope`, a sequence of strings iterated character by character.
- `coursekit.point` – `Point`, a 2-D integer point with addition and indexing.
- `coursekit.intarray` – `IntArray`, a fixed-size, zero-initialised array of integers.
- `coursekit.bookstore` – `BookSale` records, `add`, `read_sales` and `summarise`.
- `coursekit.lexicon` – `load_lexicon`, reading a whitespace-separated word list.
- `coursekit.factorial` – `factorial`.

No third-party dependencies. Requires Python 3.10 or later.

## Installing

```
pip install .
```

## The graph

Nodes and edge weights must be hashable and orderable. Nodes, edges and
weights are always returned in ascending order. Inserting an edge that already
exists (same source, destination and weight) changes nothing and returns
`False`.

```python
from coursekit.graph import Graph, GraphError

g = Graph(["hello", "how", "are", "you?"])
g.insert_edge("hello", "how", 5)
g.insert_edge("hello", "are", 8)
g.insert_edge("hello", "are", 2)
g.insert_edge("how", "you?", 1)

g.connected("hello")          # ['are', 'how']
g.weights("hello", "are")     # [2, 8]
list(g)                       # (src, dst, weight) tuples in ascending order

g.merge_replace("how", "are") # fold "how" into "are"
print(g)
```

Other operations: `Graph.from_edges(...)` builds a graph from
`(src, dst, weight)` triples, adding the nodes as needed; `copy`,
`insert_node`, `delete_node`, `replace` (rename a node; returns `False` if the
new name is taken), `is_node`, `is_connected`, `nodes`, `clear`, `num_nodes`,
`num_edges`, and `reversed(g)`. Two graphs compare equal when they hold the
same nodes and edges.

Errors:

- `insert_edge`, `is_connected`, `replace` and `merge_replace` raise
  `GraphError` (a `RuntimeError`) when a node they need is missing.
- `connected` and `weights` raise `IndexError` when a node is missing.

### Cursors

`find(src, dst, weight)` returns an `EdgeCursor` on that edge, or the end
cursor (`end()`) when it is absent. `begin()` gives a cursor on the first edge.
A cursor has `value()`, `advance()`, `retreat()` and `at_end()`; cursors are
equal only when they belong to the same graph and sit on the same edge.

`erase(cursor)` removes the edge and returns a cursor on the edge after it;
`erase_edge(src, dst, weight)` returns whether anything was removed.

## Stacks, ropes, points and arrays

```python
from coursekit.stacks import Stack, LinkedStack
from coursekit.rope import Rope
from coursekit.point import Point
from coursekit.intarray import IntArray

s = Stack()
s.push(1)
s.push(2)
s.top()                       # 2
str(s)                        # '1 2 '

ls = LinkedStack()
ls.push(5)
ls.push(4)
list(ls)                      # [4, 5]

"".join(Rope(["abc", "", "def"]))   # 'abcdef'

p = Point(1, 2) + Point(2, 3)
str(p)                        # '(3,5)'
p.to_list()                   # [3, 5]

a = IntArray(2)
a[1] = 10
moved = a.take()              # moved has [0, 10]; len(a) is now 0
```

Popping or reading the top of an empty stack raises `IndexError`, as does an
out-of-range index on a `Point` or `IntArray`.

## Lexicons and factorials

`load_lexicon(path)` returns the set of words in a UTF-8 text file and raises
`LexiconError` if the file cannot be opened or read. `factorial(n)` returns
`n!`, with every value below 2 giving 1.

## Command-line tools

Print a sample graph, the same graph after merging `how` into `are`, and its
first edge:

```
coursekit-graph-demo
```

Summarise book sales read from standard input as whitespace-separated
`name units price` records; consecutive records for the same book are combined
and printed as `units*name@$price = $revenue`. With no records it prints
`No data?!` to standard error and exits with status 1:

```
coursekit-bookstore < sales.txt
```

## What it does not do

`load_lexicon` only reads a word list; the package has no word-ladder search or
other command that uses it. Graphs live in memory only and cannot be saved or
loaded.

## Running the tests

```
pip install .[test]
pytest
```