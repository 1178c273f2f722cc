"""A value holder with atomic load, store, swap and compare-and-swap."""

from __future__ import annotations

import threading
from typing import Generic, TypeVar

T = TypeVar("T")


class AtomicValue(Generic[T]):
    """Holds one value, guarding every access with a lock."""

    def __init__(self, val: T | None = None) -> None:
        self._val = val
        self._lock = threading.Lock()

    def load(self) -> T | None:
        """Return the current value."""
        with self._lock:
            return self._val

    def store(self, val: T) -> None:
        """Replace the current value."""
        with self._lock:
            self._val = val

    def swap(self, new: T) -> T | None:
        """Store new and return the previous value."""
        with self._lock:
            old, self._val = self._val, new
            return old

    def compare_and_swap(self, old: T | None, new: T) -> bool:
        """Store new if the current value equals old; report whether it did."""
        with self._lock:
            current = self._val
            if current is old or current == old:
                self._val = new
                return True
            return False