"""Two stacks: one backed by a list, one by linked nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """A last-in, first-out stack backed by a list."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """Put ``item`` on top."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def top(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def empty(self) -> bool:
        """Return True if the stack holds nothing."""
        return not self._items

    def __str__(self) -> str:
        return "".join(f"{item} " for item in self._items)


@dataclass
class _Node:
    value: int
    next: Optional[_Node]


class LinkedStack:
    """A stack of integers kept as a chain of nodes; iterates from the top."""

    def __init__(self) -> None:
        self._head: _Node | None = None

    def push(self, value: int) -> None:
        """Put ``value`` on top."""
        self._head = _Node(value, self._head)

    def pop(self) -> int:
        """Remove and return the top value."""
        if self._head is None:
            raise IndexError("pop from an empty stack")
        value = self._head.value
        self._head = self._head.next
        return value

    def top(self) -> int:
        """Return the top value without removing it."""
        if self._head is None:
            raise IndexError("top of an empty stack")
        return self._head.value

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next