"""Book sale records and a summariser for runs of sales of the same book."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from typing import TextIO


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass
class BookSale:
    """Units of one book sold at a given price."""

    name: str = ""
    units_sold: int = 0
    price: float = 0.0

    def revenue(self) -> float:
        """Return the total takings for this sale."""
        return self.units_sold * self.price

    def combine(self, other: BookSale) -> BookSale:
        """Add the units of ``other`` to this sale and return this sale."""
        self.units_sold += other.units_sold
        return self

    def __str__(self) -> str:
        return (
            f"{self.units_sold}*{self.name}@${_fmt(self.price)}"
            f" = ${_fmt(self.revenue())}"
        )


def add(lhs: BookSale, rhs: BookSale) -> BookSale:
    """Return a new sale combining ``lhs`` and ``rhs``; neither is changed."""
    return replace(lhs).combine(rhs)


def read_sales(stream: TextIO) -> Iterator[BookSale]:
    """Yield sales read as whitespace-separated ``name units price`` triples.

    Reading stops at the first incomplete or malformed record.
    """
    tokens = iter(stream.read().split())
    for name, units, price in zip(tokens, tokens, tokens):
        try:
            yield BookSale(name, int(units), float(price))
        except ValueError:
            return


def summarise(sales: Iterable[BookSale]) -> Iterator[BookSale]:
    """Yield one combined sale for each run of consecutive sales of a book."""
    current: BookSale | None = None
    for sale in sales:
        if current is not None and current.name == sale.name:
            current.combine(sale)
            continue
        if current is not None:
            yield current
        current = replace(sale)
    if current is not None:
        yield current


def main(argv: list[str] | None = None) -> int:
    """Read sales from standard input and print one line per run of a book."""
    summary = list(summarise(read_sales(sys.stdin)))
    if not summary:
        print("No data?!", file=sys.stderr)
        return 1
    for sale in summary:
        print(sale)
    return 0


if __name__ == "__main__":
    sys.exit(main())