"""
'model/schemas.py': Pydantic models and enums shared by the decoder.
"""
from enum import Enum, IntEnum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_DATABASE_NAME = "(default)"


class ServerTimestampBehavior(str, Enum):
    """How a server timestamp that is still pending is surfaced to the caller."""
    ESTIMATE = "estimate"
    PREVIOUS = "previous"
    NONE = "none"

    @classmethod
    def coerce(cls, value: Union["ServerTimestampBehavior", str, None]) -> "ServerTimestampBehavior":
        """Accept an enum member, its string value, or None (meaning NONE)."""
        if value is None:
            return cls.NONE
        return cls(value)


class TypeOrder(IntEnum):
    """Wire value kinds, in the order the backend sorts them."""
    NULL = 0
    BOOLEAN = 1
    NUMBER = 2
    TIMESTAMP = 3
    SERVER_TIMESTAMP = 4
    STRING = 5
    BLOB = 6
    REFERENCE = 7
    GEO_POINT = 8
    ARRAY = 9
    OBJECT = 10


class DatabaseId(BaseModel):
    """Identifies a database by project and database name."""
    model_config = ConfigDict(frozen=True)

    project_id: str = Field(..., description="Project that owns the database")
    database: str = Field(DEFAULT_DATABASE_NAME, description="Database name within the project")

    @property
    def is_default_database(self) -> bool:
        return self.database == DEFAULT_DATABASE_NAME

    def is_equal(self, other: "DatabaseId") -> bool:
        return isinstance(other, DatabaseId) and other.project_id == self.project_id and other.database == self.database

    def __str__(self) -> str:
        return f"{self.project_id}/{self.database}"
