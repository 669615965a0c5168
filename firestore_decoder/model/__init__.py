from .schemas import DatabaseId, ServerTimestampBehavior, TypeOrder, DEFAULT_DATABASE_NAME
from .path import DocumentKey, ResourcePath, is_valid_document_name, is_valid_resource_name
from .server_timestamps import get_local_write_time, get_previous_value, is_server_timestamp, server_timestamp
from .values import (
    normalize_byte_string,
    normalize_number,
    normalize_timestamp,
    type_order,
    value_from_json,
)

__all__ = [
    "DatabaseId",
    "ServerTimestampBehavior",
    "TypeOrder",
    "DEFAULT_DATABASE_NAME",
    "DocumentKey",
    "ResourcePath",
    "is_valid_document_name",
    "is_valid_resource_name",
    "get_local_write_time",
    "get_previous_value",
    "is_server_timestamp",
    "server_timestamp",
    "normalize_byte_string",
    "normalize_number",
    "normalize_timestamp",
    "type_order",
    "value_from_json",
]
