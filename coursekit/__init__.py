"""Small data structures: a weighted multigraph, stacks, ropes, points, arrays and book-sale tallies."""

__version__ = "0.1.0"