"""A column value stored encrypted with AES-GCM."""

from __future__ import annotations

import os
import struct
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from utilkit.json_column import _dump_json, _load_json

T = TypeVar("T")

_NONCE_SIZE = 12
_KEY_SIZES = (16, 24, 32)


class ValueKind(Enum):
    """How a value is turned into bytes before encryption."""

    STRING = "string"
    BYTES = "bytes"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    INT = "int"
    UINT = "uint"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    JSON = "json"


_STRUCT_FORMATS = {
    ValueKind.INT8: ">b",
    ValueKind.INT16: ">h",
    ValueKind.INT32: ">i",
    ValueKind.INT64: ">q",
    ValueKind.UINT8: ">B",
    ValueKind.UINT16: ">H",
    ValueKind.UINT32: ">I",
    ValueKind.UINT64: ">Q",
    ValueKind.INT: ">q",
    ValueKind.UINT: ">Q",
    ValueKind.FLOAT32: ">f",
    ValueKind.FLOAT64: ">d",
}


class InvalidColumnError(ValueError):
    """Raised when encrypting a column that is not valid."""

    def __init__(self) -> None:
        super().__init__("EncryptColumn is not valid")


class KeyLengthError(ValueError):
    """Raised when the key is not 16, 24 or 32 bytes long."""

    def __init__(self, length: int) -> None:
        super().__init__(f"EncryptColumn only supports 16/24/32 byte keys, got {length}")
        self.length = length


def _infer_kind(val: Any) -> ValueKind:
    if isinstance(val, str):
        return ValueKind.STRING
    if isinstance(val, (bytes, bytearray)):
        return ValueKind.BYTES
    if isinstance(val, bool):
        return ValueKind.JSON
    if isinstance(val, int):
        return ValueKind.INT
    if isinstance(val, float):
        return ValueKind.FLOAT64
    return ValueKind.JSON


@dataclass
class EncryptColumn(Generic[T]):
    """A value kept in the database encrypted with AES-GCM.

    Strings and bytes are encrypted as they are, numbers as big-endian
    binary of the width given by ``kind``, anything else as JSON. When
    ``kind`` is None it is inferred from ``val``.
    """

    val: T | None = None
    valid: bool = False
    key: str | bytes = ""
    kind: ValueKind | None = None
    factory: Callable[[Any], T] | None = field(default=None, compare=False, repr=False)

    def value(self) -> bytes:
        """Return nonce followed by the sealed serialised value."""
        if not self.valid:
            raise InvalidColumnError()
        cipher = self._cipher()
        plaintext = self._serialise()
        nonce = os.urandom(_NONCE_SIZE)
        return nonce + cipher.encrypt(nonce, plaintext, None)

    def scan(self, src: Any) -> None:
        """Decrypt src (bytes or str) and load val from it."""
        if isinstance(src, (bytes, bytearray, memoryview)):
            data = self._decrypt(bytes(src))
        elif isinstance(src, str):
            try:
                data = self._decrypt(src.encode("utf-8", "surrogateescape"))
            except (KeyLengthError, InvalidTag):
                # Undecryptable text is ignored and leaves the column untouched.
                return
        else:
            raise TypeError(f"EncryptColumn.scan does not support src type {src!r}")
        try:
            self.val = self._deserialise(data)
        except Exception:
            self.valid = False
            raise
        self.valid = True

    def _cipher(self) -> AESGCM:
        key = self.key.encode("utf-8") if isinstance(self.key, str) else bytes(self.key)
        if len(key) not in _KEY_SIZES:
            raise KeyLengthError(len(key))
        return AESGCM(key)

    def _decrypt(self, data: bytes) -> bytes:
        cipher = self._cipher()
        return cipher.decrypt(data[:_NONCE_SIZE], data[_NONCE_SIZE:], None)

    def _resolved_kind(self) -> ValueKind:
        if self.kind is not None:
            return self.kind
        return ValueKind.JSON if self.val is None else _infer_kind(self.val)

    def _serialise(self) -> bytes:
        kind = self._resolved_kind()
        if kind is ValueKind.STRING:
            return str(self.val).encode("utf-8", "surrogateescape")
        if kind is ValueKind.BYTES:
            return bytes(self.val)  # type: ignore[arg-type]
        if kind is ValueKind.JSON:
            return _dump_json(self.val)
        try:
            return struct.pack(_STRUCT_FORMATS[kind], self.val)
        except struct.error as exc:
            raise ValueError(f"cannot encode {self.val!r} as {kind.value}") from exc

    def _deserialise(self, data: bytes) -> Any:
        kind = self._resolved_kind()
        if kind is ValueKind.STRING:
            return data.decode("utf-8", "surrogateescape")
        if kind is ValueKind.BYTES:
            return data
        if kind is ValueKind.JSON:
            return _load_json(data, self.factory)
        fmt = _STRUCT_FORMATS[kind]
        if len(data) < struct.calcsize(fmt):
            raise ValueError(f"not enough data to decode {kind.value}")
        return struct.unpack_from(fmt, data)[0]