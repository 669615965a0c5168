"""
'api/blob.py': Blob type returned by the classic client for bytes fields.
"""
from typing import Union

from .bytes import Bytes


class Blob:
    """Classic wrapper around `Bytes`; same content, different public type."""

    def __init__(self, byte_string: bytes):
        self._delegate = Bytes(byte_string)

    @classmethod
    def from_base64_string(cls, base64_string: str) -> "Blob":
        return cls(Bytes.from_base64_string(base64_string).to_bytes())

    @classmethod
    def from_bytes(cls, array: Union[bytes, bytearray, memoryview]) -> "Blob":
        return cls(Bytes.from_bytes(array).to_bytes())

    def to_base64(self) -> str:
        return self._delegate.to_base64()

    def to_bytes(self) -> bytes:
        return self._delegate.to_bytes()

    def is_equal(self, other: "Blob") -> bool:
        return isinstance(other, Blob) and self._delegate.is_equal(other._delegate)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Blob):
            return NotImplemented
        return self.is_equal(other)

    def __hash__(self) -> int:
        return hash(self._delegate)

    def __repr__(self) -> str:
        return f"Blob(base64: {self.to_base64()})"
