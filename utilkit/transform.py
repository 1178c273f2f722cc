"""Mapping, filtering, reversing and deleting on sequences."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

S = TypeVar("S")
D = TypeVar("D")
T = TypeVar("T")


class IndexOutOfRangeError(IndexError):
    """Raised when an index lies outside a sequence."""

    def __init__(self, length: int, index: int) -> None:
        super().__init__(f"index out of range, length {length}, index {index}")
        self.length = length
        self.index = index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndexOutOfRangeError):
            return NotImplemented
        return (self.length, self.index) == (other.length, other.index)

    def __hash__(self) -> int:
        return hash((self.length, self.index))


def filter_map(
    src: Sequence[S] | None, m: Callable[[int, S], tuple[D, bool]]
) -> list[D]:
    """Map each (index, element) through m, keeping values whose flag is true."""
    result = []
    for i, item in enumerate(src or ()):
        value, ok = m(i, item)
        if ok:
            result.append(value)
    return result


def map_indexed(src: Sequence[S] | None, m: Callable[[int, S], D]) -> list[D]:
    """Map each (index, element) through m."""
    return [m(i, item) for i, item in enumerate(src or ())]


def reverse(src: Sequence[T] | None) -> list[T]:
    """Return a new list with the elements in reverse order."""
    return list(reversed(src or ()))


def reverse_self(src: list[T] | None) -> None:
    """Reverse the list in place."""
    if src:
        src.reverse()


def delete(src: Sequence[T] | None, index: int) -> list[T]:
    """Return a new list without the element at index.

    Raises IndexOutOfRangeError when index is negative or too large.
    """
    items = list(src or ())
    if not 0 <= index < len(items):
        raise IndexOutOfRangeError(len(items), index)
    return items[:index] + items[index + 1 :]