"""firestore_decoder/core/base.py"""
from abc import ABC, abstractmethod
from typing import Any

from ..api.database import BaseFirestore
from ..model.path import DocumentKey
from ..model.schemas import DatabaseId


class DecoderFlavor(ABC):
    """Abstract base for the per-flavor output constructors used by the decoder."""

    def __init__(self, firestore: BaseFirestore):
        self.firestore = firestore

    @property
    def database_id(self) -> DatabaseId:
        """Database that decoded references are expected to point into."""
        return self.firestore.database_id

    @abstractmethod
    def convert_bytes(self, byte_string: bytes) -> Any:
        """Wrap normalized bytes in the flavor's blob type."""

    @abstractmethod
    def convert_reference(self, key: DocumentKey) -> Any:
        """Bind a document key to the flavor's reference type."""
