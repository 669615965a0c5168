"""
'api/reference.py': Reference handles produced when decoding reference fields.
"""
from typing import Any, Optional

from .database import BaseFirestore, Firestore
from ..model.path import DocumentKey


class DocumentReference:
    """
    Reference to a document, as returned by the modular and lite clients.

    Args:
        firestore (BaseFirestore): Client context the reference belongs to.
        converter (Optional[Any]): Converter applied when reading the document,
            None for raw data.
        key (DocumentKey): Database-relative key of the document.
    """

    def __init__(self, firestore: BaseFirestore, converter: Optional[Any], key: DocumentKey):
        self.firestore = firestore
        self.converter = converter
        self._key = key

    @property
    def key(self) -> DocumentKey:
        return self._key

    @property
    def id(self) -> str:
        return self._key.id

    @property
    def path(self) -> str:
        return self._key.path.canonical_string()

    def with_converter(self, converter: Optional[Any]) -> "DocumentReference":
        return type(self)(self.firestore, converter, self._key)

    def is_equal(self, other: "DocumentReference") -> bool:
        return (
            type(other) is type(self)
            and self.firestore is other.firestore
            and self._key == other._key
            and self.converter == other.converter
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, DocumentReference):
            return NotImplemented
        return self.is_equal(other)

    def __hash__(self) -> int:
        return hash((id(self.firestore), self._key))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path!r})"


class CompatDocumentReference(DocumentReference):
    """Reference handle of the classic client."""

    def __init__(self, key: DocumentKey, firestore: Firestore, converter: Optional[Any] = None):
        super().__init__(firestore, converter, key)

    @classmethod
    def for_key(cls, key: DocumentKey, firestore: Firestore, converter: Optional[Any]) -> "CompatDocumentReference":
        return cls(key, firestore, converter)

    def with_converter(self, converter: Optional[Any]) -> "CompatDocumentReference":
        return type(self)(self._key, self.firestore, converter)
