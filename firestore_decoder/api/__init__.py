from .blob import Blob
from .bytes import Bytes
from .database import BaseFirestore, ExpFirestore, Firestore, LiteFirestore
from .reference import CompatDocumentReference, DocumentReference

__all__ = [
    "Blob",
    "Bytes",
    "BaseFirestore",
    "ExpFirestore",
    "Firestore",
    "LiteFirestore",
    "CompatDocumentReference",
    "DocumentReference",
]
