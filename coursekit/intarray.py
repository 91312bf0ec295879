"""A fixed-size, zero-initialised array of integers."""

from __future__ import annotations

import operator


class IntArray:
    """An array of integers whose size is fixed at construction."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("IntArray size must not be negative")
        self._values = [0] * size

    def _check(self, index: int) -> int:
        position = operator.index(index)
        if not 0 <= position < len(self._values):
            raise IndexError("IntArray index out of range")
        return position

    def __getitem__(self, index: int) -> int:
        return self._values[self._check(index)]

    def __setitem__(self, index: int, value: int) -> None:
        self._values[self._check(index)] = value

    def __len__(self) -> int:
        return len(self._values)

    def copy(self) -> IntArray:
        """Return an independent array holding the same values."""
        duplicate = IntArray(0)
        duplicate._values = list(self._values)
        return duplicate

    def take(self) -> IntArray:
        """Move the contents into a new array, leaving this one empty."""
        moved = IntArray(0)
        moved._values, self._values = self._values, []
        return moved

    def __repr__(self) -> str:
        return f"IntArray({self._values!r})"