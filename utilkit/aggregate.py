"""Aggregate helpers over sequences of real numbers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

N = TypeVar("N", int, float)


def _materialise(values: Iterable[N] | None) -> list[N]:
    items = list(values or ())
    if not items:
        raise ValueError("at least one value is required")
    return items


def max_of(values: Iterable[N]) -> N:
    """Return the largest value; raise ValueError when there is none."""
    return max(_materialise(values))


def min_of(values: Iterable[N]) -> N:
    """Return the smallest value; raise ValueError when there is none."""
    return min(_materialise(values))


def sum_of(values: Iterable[N] | None) -> N:
    """Return the sum of the values, 0 for an empty or missing sequence."""
    return sum(values or ())