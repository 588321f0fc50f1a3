"""A bounded positional list holding polynomial coefficients."""

from __future__ import annotations

import sys
from typing import Iterator, TextIO

CAPACITY = 100


class ListOverflowError(Exception):
    """Raised when inserting into a full list."""


class ListUnderflowError(Exception):
    """Raised when deleting from an empty list."""


class BoundedList:
    """A list of integers with a fixed capacity and 1-based positions."""

    def __init__(self, capacity: int = CAPACITY) -> None:
        self.capacity = capacity
        self._items: list[int] = []

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, position: int, value: int) -> None:
        """Insert at a 1-based position, clamped to the list's bounds."""
        if len(self._items) == self.capacity:
            raise ListOverflowError("overflow!")
        position = min(max(position, 1), len(self._items) + 1)
        self._items.insert(position - 1, value)

    def delete(self, position: int) -> int:
        """Remove and return the value at a 1-based position."""
        if not self._items:
            raise ListUnderflowError("underflow !")
        if not 1 <= position <= len(self._items):
            raise IndexError("This element is not in the list!")
        return self._items.pop(position - 1)

    def format(self) -> str:
        """Return each value followed by its index, as the listing prints them."""
        return "".join(f"{value} {index}" for index, value in enumerate(self._items))

    def evaluate(self, x: int) -> int:
        """Evaluate the polynomial whose i-th coefficient is the i-th value."""
        return int(sum(coeff * x**power for power, coeff in enumerate(self._items)))


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise EOFError("unexpected end of input") from None


def _insert(values: BoundedList, position: int, value: int) -> None:
    try:
        values.insert(position, value)
    except ListOverflowError as exc:
        print(f" {exc}")


def _delete(values: BoundedList, position: int) -> None:
    try:
        values.delete(position)
    except (ListUnderflowError, IndexError) as exc:
        print(f" {exc}")


def main(argv: list[str] | None = None) -> int:
    """Read coefficients and edits from standard input, print the value."""
    tokens = _tokens(sys.stdin)
    values = BoundedList()
    try:
        x = _read_int(tokens)
        n = _read_int(tokens)
        for position in range(1, n + 2):
            _insert(values, position, _read_int(tokens))
        print(values.format())
        if _read_int(tokens):
            while True:
                index = _read_int(tokens)
                _delete(values, index)
                _insert(values, index, _read_int(tokens))
                print(values.format())
                if not _read_int(tokens):
                    break
    except EOFError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(values.evaluate(x))
    return 0


if __name__ == "__main__":
    sys.exit(main())