"""A string held as a sequence of pieces, iterated character by character."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import chain


class Rope:
    """A sequence of string pieces that iterates over their characters in order."""

    def __init__(self, parts: Iterable[str]) -> None:
        self._parts = tuple(parts)

    def __iter__(self) -> Iterator[str]:
        return chain.from_iterable(self._parts)

    def __str__(self) -> str:
        return "".join(self._parts)

    def __repr__(self) -> str:
        return f"Rope({list(self._parts)!r})"