"""A thread-safe pool of reusable objects."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class Pool(Generic[T]):
    """Hands out pooled objects, creating new ones with factory when empty."""

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._items: list[T] = []
        self._lock = threading.Lock()

    def get(self) -> T:
        """Take an object from the pool, or make a new one."""
        with self._lock:
            if self._items:
                return self._items.pop()
        return self._factory()

    def put(self, item: T) -> None:
        """Return an object to the pool."""
        with self._lock:
            self._items.append(item)