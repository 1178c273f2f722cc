"""Locating elements in sequences."""

from __future__ import annotations

from collections.abc import Sequence
from operator import eq
from typing import TypeVar

from utilkit.contains import EqualFunc

T = TypeVar("T")


def index(src: Sequence[T] | None, dst: T) -> int:
    """Index of the first element equal to dst, or -1."""
    return index_func(src, dst, eq)


def index_func(src: Sequence[T] | None, dst: T, equal: EqualFunc) -> int:
    """Index of the first element v with equal(v, dst), or -1."""
    return next((k for k, v in enumerate(src or ()) if equal(v, dst)), -1)


def last_index(src: Sequence[T] | None, dst: T) -> int:
    """Index of the last element equal to dst, or -1."""
    return last_index_func(src, dst, eq)


def last_index_func(src: Sequence[T] | None, dst: T, equal: EqualFunc) -> int:
    """Index of the last element v with equal(dst, v), or -1."""
    items = src or ()
    return next(
        (k for k in reversed(range(len(items))) if equal(dst, items[k])), -1
    )


def index_all(src: Sequence[T] | None, dst: T) -> list[int]:
    """Indexes of all elements equal to dst."""
    return index_all_func(src, dst, eq)


def index_all_func(src: Sequence[T] | None, dst: T, equal: EqualFunc) -> list[int]:
    """Indexes of all elements v with equal(v, dst)."""
    return [k for k, v in enumerate(src or ()) if equal(v, dst)]