"""
'api/database.py': Client contexts for the three deployment flavors.

Each context only carries what decoding needs: the database the client is
bound to. The flavors differ in type, not in behavior.
"""
from typing import TYPE_CHECKING

from ..model.schemas import DatabaseId

if TYPE_CHECKING:
    from ..config import Config


class BaseFirestore:
    """Shared state of every client context."""

    def __init__(self, database_id: DatabaseId):
        self._database_id = database_id

    @classmethod
    def from_config(cls, config: "Config") -> "BaseFirestore":
        return cls(config.database_id())

    @property
    def database_id(self) -> DatabaseId:
        return self._database_id

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._database_id})"


class Firestore(BaseFirestore):
    """Classic client context. Decodes bytes to `Blob`."""


class ExpFirestore(BaseFirestore):
    """Modular client context. Decodes bytes to `Bytes`."""


class LiteFirestore(BaseFirestore):
    """Lightweight client context. Decodes bytes to `Bytes`."""
