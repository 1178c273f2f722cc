"""Membership tests on sequences, by equality or by a custom predicate."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

EqualFunc = Callable[[Any, Any], bool]


def contains(src: Iterable[T] | None, dst: T) -> bool:
    """Return True if dst occurs in src."""
    return dst in (src or ())


def contains_func(src: Iterable[T] | None, dst: T, equal: EqualFunc) -> bool:
    """Return True if some element v of src satisfies equal(v, dst)."""
    return any(equal(v, dst) for v in (src or ()))


def contains_any(src: Iterable[H] | None, dst: Iterable[H] | None) -> bool:
    """Return True if any element of dst occurs in src."""
    src_set = set(src or ())
    return any(v in src_set for v in (dst or ()))


def contains_any_func(
    src: Sequence[T] | None, dst: Iterable[T] | None, equal: EqualFunc
) -> bool:
    """Return True if any element of dst matches some element of src."""
    src_items = list(src or ())
    return any(equal(s, d) for d in (dst or ()) for s in src_items)


def contains_all(src: Iterable[H] | None, dst: Iterable[H] | None) -> bool:
    """Return True if every element of dst occurs in src."""
    src_set = set(src or ())
    return all(v in src_set for v in (dst or ()))


def contains_all_func(
    src: Sequence[T] | None, dst: Iterable[T] | None, equal: EqualFunc
) -> bool:
    """Return True if every element of dst matches some element of src."""
    src_items = list(src or ())
    return all(contains_func(src_items, d, equal) for d in (dst or ()))