"""A dictionary that is safe to share between threads."""

from __future__ import annotations

import threading
from collections.abc import Callable, Hashable
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class SyncMap(Generic[K, V]):
    """A thread-safe mapping.

    A missing key and a key stored with the value None are distinct: the
    ``ok``/``loaded`` flags returned by the methods tell them apart.
    """

    def __init__(self) -> None:
        self._data: dict[K, V] = {}
        self._lock = threading.Lock()

    def load(self, key: K) -> tuple[V | None, bool]:
        """Return (value, True) if key is present, else (None, False)."""
        with self._lock:
            if key in self._data:
                return self._data[key], True
            return None, False

    def store(self, key: K, value: V) -> None:
        """Set the value for key."""
        with self._lock:
            self._data[key] = value

    def load_or_store(self, key: K, value: V) -> tuple[V, bool]:
        """Return the existing value and True, or store value and return it with False."""
        with self._lock:
            if key in self._data:
                return self._data[key], True
            self._data[key] = value
            return value, False

    def load_and_delete(self, key: K) -> tuple[V | None, bool]:
        """Remove key, returning its previous value and whether it was present."""
        with self._lock:
            if key in self._data:
                return self._data.pop(key), True
            return None, False

    def delete(self, key: K) -> None:
        """Remove key if present."""
        with self._lock:
            self._data.pop(key, None)

    def range(self, f: Callable[[K, V], bool]) -> None:
        """Call f(key, value) for each entry until f returns False."""
        with self._lock:
            items = list(self._data.items())
        for key, value in items:
            if not f(key, value):
                break