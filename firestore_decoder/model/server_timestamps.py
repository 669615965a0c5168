"""
'model/server_timestamps.py': Local representation of server timestamps that are still pending.

A pending server timestamp is stored as a map value with three reserved fields:

    __type__             "server_timestamp"
    __local_write_time__ time of the local write, used as an estimate
    __previous_value__   value the field held before the write (optional)
"""
from datetime import datetime
from typing import Any, Optional, Union

from google.cloud.firestore_v1.types import document
from google.protobuf import timestamp_pb2

from ..utils import hard_assert

SERVER_TIMESTAMP_SENTINEL = "server_timestamp"
TYPE_KEY = "__type__"
PREVIOUS_VALUE_KEY = "__previous_value__"
LOCAL_WRITE_TIME_KEY = "__local_write_time__"


def _fields(value: Any):
    return getattr(value, "_pb", value).map_value.fields


def is_server_timestamp(value: Any) -> bool:
    """True if `value` is the sentinel map of a pending server timestamp."""
    if value is None:
        return False
    value_pb = getattr(value, "_pb", value)
    if value_pb.WhichOneof("value_type") != "map_value":
        return False
    fields = value_pb.map_value.fields
    if TYPE_KEY not in fields:
        return False
    type_value = fields[TYPE_KEY]
    return (
        type_value.WhichOneof("value_type") == "string_value"
        and type_value.string_value == SERVER_TIMESTAMP_SENTINEL
    )


def get_previous_value(value: Any) -> Optional[Any]:
    """
    Value the field held before the pending write, or None.

    Nested pending writes are unwrapped, so the result is never itself a
    server timestamp.
    """
    fields = _fields(value)
    if PREVIOUS_VALUE_KEY not in fields:
        return None
    previous_value = fields[PREVIOUS_VALUE_KEY]
    if is_server_timestamp(previous_value):
        return get_previous_value(previous_value)
    return previous_value


def get_local_write_time(value: Any) -> timestamp_pb2.Timestamp:
    """Timestamp of the local write that created the pending server timestamp."""
    fields = _fields(value)
    hard_assert(
        LOCAL_WRITE_TIME_KEY in fields
        and fields[LOCAL_WRITE_TIME_KEY].WhichOneof("value_type") == "timestamp_value",
        "Server timestamp is missing its local write time",
    )
    return fields[LOCAL_WRITE_TIME_KEY].timestamp_value


def server_timestamp(
    local_write_time: Union[timestamp_pb2.Timestamp, datetime],
    previous_value: Optional[Any] = None,
) -> Any:
    """
    Build the sentinel value for a pending server timestamp.

    Args:
        local_write_time: When the write was issued locally.
        previous_value: The value being overwritten, if any. A previous value
            that is itself pending is replaced by its own previous value.

    Returns:
        A raw ``Value`` message holding the sentinel map.
    """
    value_cls = document.Value.pb()

    if isinstance(local_write_time, datetime):
        write_time = timestamp_pb2.Timestamp()
        write_time.FromDatetime(local_write_time)
    else:
        write_time = local_write_time

    fields = {
        TYPE_KEY: value_cls(string_value=SERVER_TIMESTAMP_SENTINEL),
        LOCAL_WRITE_TIME_KEY: value_cls(timestamp_value=write_time),
    }

    if previous_value is not None:
        previous_pb = getattr(previous_value, "_pb", previous_value)
        if is_server_timestamp(previous_pb):
            previous_pb = get_previous_value(previous_pb)
        if previous_pb is not None:
            fields[PREVIOUS_VALUE_KEY] = previous_pb

    return value_cls(map_value=document.MapValue.pb()(fields=fields))
