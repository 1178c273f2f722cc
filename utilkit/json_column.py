"""A column value stored as JSON text."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import asdict, dataclass, field, is_dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def _json_default(obj: Any) -> Any:
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _dump_json(value: Any) -> bytes:
    """Encode value as compact UTF-8 JSON; dataclasses become objects."""
    text = json.dumps(
        value, separators=(",", ":"), ensure_ascii=False, default=_json_default
    )
    return text.encode("utf-8")


def _load_json(data: bytes, factory: Callable[[Any], Any] | None) -> Any:
    """Decode JSON bytes, passing the result through factory when given."""
    obj = json.loads(data)
    return factory(obj) if factory is not None else obj


@dataclass
class JsonColumn(Generic[T]):
    """A value kept in the database as JSON.

    ``factory`` turns the decoded JSON (dicts, lists, ...) into the wanted
    type when scanning, for instance a dataclass constructor.
    """

    val: T | None = None
    valid: bool = False
    factory: Callable[[Any], T] | None = field(default=None, compare=False, repr=False)

    def value(self) -> bytes | None:
        """Return the JSON encoding of val, or None when the column is not valid."""
        if not self.valid:
            return None
        return _dump_json(self.val)

    def scan(self, src: Any) -> None:
        """Load val from JSON given as bytes or str; None leaves the column as is."""
        if src is None:
            return
        if isinstance(src, (bytes, bytearray, memoryview)):
            data = bytes(src)
        elif isinstance(src, str):
            data = src.encode("utf-8")
        else:
            raise TypeError(f"JsonColumn.scan does not support src type {src!r}")
        self.val = _load_json(data, self.factory)
        self.valid = True