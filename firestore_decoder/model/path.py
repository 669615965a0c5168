"""
'model/path.py': Slash-delimited resource paths and document keys.
"""
from functools import total_ordering
from typing import Iterable, List, Tuple

from ..exceptions import InvalidArgumentError
from ..utils import hard_assert

DOCUMENTS_SEGMENT = "documents"
# "projects/{p}/databases/{d}/documents"
DOCUMENT_NAME_PREFIX_LENGTH = 5


@total_ordering
class ResourcePath:
    """An immutable sequence of path segments."""

    def __init__(self, segments: Iterable[str]):
        self._segments: Tuple[str, ...] = tuple(segments)

    @classmethod
    def from_string(cls, *path_components: str) -> "ResourcePath":
        """
        Build a path from one or more slash-separated strings.

        Empty segments (leading, trailing) are dropped.

        Raises:
            InvalidArgumentError: If a component contains '//'.
        """
        segments: List[str] = []
        for path in path_components:
            if "//" in path:
                raise InvalidArgumentError(
                    f"Invalid segment ({path}). Paths must not contain // in them."
                )
            segments.extend(segment for segment in path.split("/") if segment)
        return cls(segments)

    @classmethod
    def empty_path(cls) -> "ResourcePath":
        return cls(())

    @property
    def segments(self) -> Tuple[str, ...]:
        return self._segments

    @property
    def length(self) -> int:
        return len(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def is_empty(self) -> bool:
        return not self._segments

    def get(self, index: int) -> str:
        hard_assert(0 <= index < self.length, f"Index out of range: {index}")
        return self._segments[index]

    def first_segment(self) -> str:
        return self.get(0)

    def last_segment(self) -> str:
        return self.get(self.length - 1)

    def child(self, *segments: str) -> "ResourcePath":
        return type(self)(self._segments + segments)

    def pop_first(self, count: int = 1) -> "ResourcePath":
        hard_assert(self.length >= count, f"Can't call pop_first({count}) on path {self}")
        return type(self)(self._segments[count:])

    def pop_last(self) -> "ResourcePath":
        hard_assert(not self.is_empty(), "Can't call pop_last() on empty path")
        return type(self)(self._segments[:-1])

    def is_prefix_of(self, other: "ResourcePath") -> bool:
        return self.length <= other.length and other.segments[:self.length] == self._segments

    def canonical_string(self) -> str:
        return "/".join(self._segments)

    def __str__(self) -> str:
        return self.canonical_string()

    def __repr__(self) -> str:
        return f"ResourcePath({self.canonical_string()!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, ResourcePath):
            return NotImplemented
        return self._segments == other._segments

    def __lt__(self, other: "ResourcePath") -> bool:
        if not isinstance(other, ResourcePath):
            return NotImplemented
        return self._segments < other._segments

    def __hash__(self) -> int:
        return hash(self._segments)


@total_ordering
class DocumentKey:
    """Database-relative path of a single document, e.g. 'rooms/eros'."""

    def __init__(self, path: ResourcePath):
        hard_assert(
            DocumentKey.is_document_key(path),
            f"Invalid DocumentKey with an odd number of segments: {path}",
        )
        self._path = path

    @staticmethod
    def is_document_key(path: ResourcePath) -> bool:
        return not path.is_empty() and path.length % 2 == 0

    @classmethod
    def from_path(cls, path: str) -> "DocumentKey":
        return cls(ResourcePath.from_string(path))

    @classmethod
    def from_segments(cls, segments: Iterable[str]) -> "DocumentKey":
        return cls(ResourcePath(segments))

    @classmethod
    def from_name(cls, name: str) -> "DocumentKey":
        """Key for a full document resource name ('projects/.../documents/...')."""
        resource_path = ResourcePath.from_string(name)
        hard_assert(is_valid_document_name(resource_path), f"Tried to parse an invalid key: {name}")
        return cls(resource_path.pop_first(DOCUMENT_NAME_PREFIX_LENGTH))

    @property
    def path(self) -> ResourcePath:
        return self._path

    @property
    def id(self) -> str:
        return self._path.last_segment()

    @property
    def collection_path(self) -> ResourcePath:
        return self._path.pop_last()

    def has_collection_id(self, collection_id: str) -> bool:
        return self._path.get(self._path.length - 2) == collection_id

    def __str__(self) -> str:
        return str(self._path)

    def __repr__(self) -> str:
        return f"DocumentKey({str(self._path)!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, DocumentKey):
            return NotImplemented
        return self._path == other._path

    def __lt__(self, other: "DocumentKey") -> bool:
        if not isinstance(other, DocumentKey):
            return NotImplemented
        return self._path < other._path

    def __hash__(self) -> int:
        return hash(self._path)


def is_valid_resource_name(path: ResourcePath) -> bool:
    """True for 'projects/{p}/databases/{d}[/...]'."""
    return (
        path.length >= 4
        and path.get(0) == "projects"
        and path.get(2) == "databases"
    )


def is_valid_document_name(path: ResourcePath) -> bool:
    """True for 'projects/{p}/databases/{d}/documents/{collection}/{id}[/...]'."""
    return (
        is_valid_resource_name(path)
        and path.length > DOCUMENT_NAME_PREFIX_LENGTH
        and path.get(4) == DOCUMENTS_SEGMENT
        and (path.length - DOCUMENT_NAME_PREFIX_LENGTH) % 2 == 0
    )
