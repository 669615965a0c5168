"""
'core/flavors.py': Output constructors of the classic, modular and lite clients.
"""
from ..api.blob import Blob
from ..api.bytes import Bytes
from ..api.database import ExpFirestore, Firestore, LiteFirestore
from ..api.reference import CompatDocumentReference, DocumentReference
from ..model.path import DocumentKey
from .base import DecoderFlavor


class ClassicFlavor(DecoderFlavor):
    """Bytes become `Blob`, references become `CompatDocumentReference`."""

    def __init__(self, firestore: Firestore):
        super().__init__(firestore)

    def convert_bytes(self, byte_string: bytes) -> Blob:
        return Blob(byte_string)

    def convert_reference(self, key: DocumentKey) -> CompatDocumentReference:
        return CompatDocumentReference.for_key(key, self.firestore, converter=None)


class ExpFlavor(DecoderFlavor):
    """Bytes become `Bytes`, references become `DocumentReference`."""

    def __init__(self, firestore: ExpFirestore):
        super().__init__(firestore)

    def convert_bytes(self, byte_string: bytes) -> Bytes:
        return Bytes(byte_string)

    def convert_reference(self, key: DocumentKey) -> DocumentReference:
        return DocumentReference(self.firestore, None, key)


class LiteFlavor(ExpFlavor):
    """Same output types as `ExpFlavor`, bound to a `LiteFirestore`."""

    def __init__(self, firestore: LiteFirestore):
        super().__init__(firestore)


FLAVORS_BY_CONTEXT = {
    Firestore: ClassicFlavor,
    ExpFirestore: ExpFlavor,
    LiteFirestore: LiteFlavor,
}

CONTEXTS_BY_NAME = {
    "classic": Firestore,
    "exp": ExpFirestore,
    "lite": LiteFirestore,
}


def flavor_for(firestore) -> DecoderFlavor:
    """
    Pick the flavor matching a client context.

    Raises:
        TypeError: If the context is not one of the known client types.
    """
    flavor_type = FLAVORS_BY_CONTEXT.get(type(firestore))
    if flavor_type is None:
        raise TypeError(f"Unsupported client context: {type(firestore).__name__}")
    return flavor_type(firestore)
