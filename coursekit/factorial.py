"""Recursive-definition factorial over plain integers."""

from __future__ import annotations

import math


def factorial(number: int) -> int:
    """Return ``number!``, treating every value below 2 as having factorial 1."""
    return math.prod(range(2, number + 1))