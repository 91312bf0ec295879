"""A two-dimensional integer point."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Point:
    """A point with integer coordinates, indexable as ``[0]`` and ``[1]``."""

    x: int
    y: int

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __getitem__(self, index: int) -> int:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError("Point index must be 0 or 1")

    def __setitem__(self, index: int, value: int) -> None:
        if index == 0:
            self.x = value
        elif index == 1:
            self.y = value
        else:
            raise IndexError("Point index must be 0 or 1")

    def __str__(self) -> str:
        return f"({self.x},{self.y})"

    def to_list(self) -> list[int]:
        """Return the coordinates as ``[x, y]``."""
        return [self.x, self.y]