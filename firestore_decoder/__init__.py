"""
Firestore value decoder
=======================

Converts ``google.firestore.v1.Value`` messages into Python values for the
classic, modular and lite client flavors.

Key Components:
- UserDataWriter: Recursive value decoder
- ClassicFlavor / ExpFlavor / LiteFlavor: Per-flavor blob and reference types
- Config: Environment and YAML configuration
"""

from .config import Config
from .exceptions import FirestoreDecoderError, InternalAssertionError, InvalidArgumentError
from .model import DatabaseId, DocumentKey, ResourcePath, ServerTimestampBehavior, value_from_json
from .api import Blob, Bytes, CompatDocumentReference, DocumentReference, ExpFirestore, Firestore, LiteFirestore
from .core import ClassicFlavor, ExpFlavor, LiteFlavor, UserDataWriter, create_writer, writer_from_config
from .utils import setup_logging

__version__ = "1.0.0"

__all__ = [
    "Config",
    "FirestoreDecoderError",
    "InternalAssertionError",
    "InvalidArgumentError",
    "DatabaseId",
    "DocumentKey",
    "ResourcePath",
    "ServerTimestampBehavior",
    "value_from_json",
    "Blob",
    "Bytes",
    "CompatDocumentReference",
    "DocumentReference",
    "ExpFirestore",
    "Firestore",
    "LiteFirestore",
    "ClassicFlavor",
    "ExpFlavor",
    "LiteFlavor",
    "UserDataWriter",
    "create_writer",
    "writer_from_config",
    "setup_logging",
]
