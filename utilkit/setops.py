"""Set operations on sequences, deduplicating their results.

The plain variants need hashable elements; the ``*_func`` variants accept
any elements together with an equality predicate.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from typing import TypeVar

from utilkit.contains import EqualFunc, contains_func

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def _deduplicate(items: Iterable[H]) -> list[H]:
    return list(dict.fromkeys(items))


def _deduplicate_func(items: Sequence[T], equal: EqualFunc) -> list[T]:
    # Keeps the last of each group of equal elements.
    return [
        v
        for k, v in enumerate(items)
        if not contains_func(items[k + 1 :], v, equal)
    ]


def diff_set(src: Iterable[H] | None, dst: Iterable[H] | None) -> list[H]:
    """Elements of src absent from dst, deduplicated."""
    excluded = set(dst or ())
    return [v for v in _deduplicate(src or ()) if v not in excluded]


def diff_set_func(
    src: Sequence[T] | None, dst: Sequence[T] | None, equal: EqualFunc
) -> list[T]:
    """Elements of src with no equal in dst, deduplicated."""
    dst_items = list(dst or ())
    kept = [v for v in (src or ()) if not contains_func(dst_items, v, equal)]
    return _deduplicate_func(kept, equal)


def intersect_set(src: Iterable[H] | None, dst: Iterable[H] | None) -> list[H]:
    """Elements present in both src and dst, deduplicated."""
    src_set = set(src or ())
    return _deduplicate(v for v in (dst or ()) if v in src_set)


def intersect_set_func(
    src: Sequence[T] | None, dst: Sequence[T] | None, equal: EqualFunc
) -> list[T]:
    """Elements of src that have an equal in dst, deduplicated."""
    dst_items = list(dst or ())
    common = [s for s in (src or ()) if any(equal(d, s) for d in dst_items)]
    return _deduplicate_func(common, equal)


def symmetric_diff_set(src: Iterable[H] | None, dst: Iterable[H] | None) -> list[H]:
    """Elements present in exactly one of src and dst, deduplicated."""
    src_items = _deduplicate(src or ())
    dst_items = _deduplicate(dst or ())
    src_set, dst_set = set(src_items), set(dst_items)
    return [v for v in src_items if v not in dst_set] + [
        v for v in dst_items if v not in src_set
    ]


def symmetric_diff_set_func(
    src: Sequence[T] | None, dst: Sequence[T] | None, equal: EqualFunc
) -> list[T]:
    """Elements with no equal on the other side, deduplicated."""
    src_items = list(src or ())
    dst_items = list(dst or ())
    common = [s for s in src_items if any(equal(s, d) for d in dst_items)]
    rest = [
        v for v in (*src_items, *dst_items) if not contains_func(common, v, equal)
    ]
    return _deduplicate_func(rest, equal)


def union_set(src: Iterable[H] | None, dst: Iterable[H] | None) -> list[H]:
    """Elements present in src or dst, deduplicated."""
    return _deduplicate([*(src or ()), *(dst or ())])


def union_set_func(
    src: Sequence[T] | None, dst: Sequence[T] | None, equal: EqualFunc
) -> list[T]:
    """Elements of dst and src, deduplicated by the predicate."""
    return _deduplicate_func([*(dst or ()), *(src or ())], equal)