"""
'api/bytes.py': Immutable byte array returned for bytes fields.
"""
import base64
from typing import Union

from ..model.values import normalize_byte_string


class Bytes:
    """An immutable sequence of bytes, as stored in a bytes field."""

    def __init__(self, byte_string: bytes):
        self._byte_string = bytes(byte_string)

    @classmethod
    def from_base64_string(cls, base64_string: str) -> "Bytes":
        """
        Raises:
            InvalidArgumentError: If the string is not valid base64.
        """
        return cls(normalize_byte_string(base64_string))

    @classmethod
    def from_bytes(cls, array: Union[bytes, bytearray, memoryview]) -> "Bytes":
        return cls(normalize_byte_string(array))

    def to_base64(self) -> str:
        return base64.b64encode(self._byte_string).decode("ascii")

    def to_bytes(self) -> bytes:
        return self._byte_string

    def is_equal(self, other: "Bytes") -> bool:
        return isinstance(other, Bytes) and self._byte_string == other._byte_string

    def __eq__(self, other) -> bool:
        if not isinstance(other, Bytes):
            return NotImplemented
        return self.is_equal(other)

    def __hash__(self) -> int:
        return hash(self._byte_string)

    def __len__(self) -> int:
        return len(self._byte_string)

    def __repr__(self) -> str:
        return f"Bytes(base64: {self.to_base64()})"
