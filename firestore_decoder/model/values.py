"""
'model/values.py': Inspection and normalization helpers for wire values.

Wire values are ``google.firestore.v1.Value`` messages. Both the proto-plus
wrappers from ``google.cloud.firestore_v1.types`` and raw protobuf messages
are accepted; every helper here works on the raw message.
"""
import base64
import binascii
import calendar
import re
from datetime import datetime
from typing import Any, Dict, Mapping, Tuple, Union

from google.cloud.firestore_v1.types import document
from google.protobuf import json_format
from google.protobuf import timestamp_pb2

from .schemas import TypeOrder
from .server_timestamps import is_server_timestamp
from ..exceptions import InvalidArgumentError
from ..utils import fail, hard_assert

ISO_TIMESTAMP_REG_EXP = re.compile(r"^\d{4}-\d\d-\d\dT\d\d:\d\d:\d\d(?:\.(\d+))?Z$")

_TYPE_ORDER_BY_FIELD: Dict[str, TypeOrder] = {
    "null_value": TypeOrder.NULL,
    "boolean_value": TypeOrder.BOOLEAN,
    "integer_value": TypeOrder.NUMBER,
    "double_value": TypeOrder.NUMBER,
    "timestamp_value": TypeOrder.TIMESTAMP,
    "string_value": TypeOrder.STRING,
    "bytes_value": TypeOrder.BLOB,
    "reference_value": TypeOrder.REFERENCE,
    "geo_point_value": TypeOrder.GEO_POINT,
    "array_value": TypeOrder.ARRAY,
    "map_value": TypeOrder.OBJECT,
}

TimestampLike = Union[timestamp_pb2.Timestamp, Mapping[str, Any], str]


def to_value_pb(value: Any) -> Any:
    """Unwrap a proto-plus ``Value`` into its raw protobuf message."""
    return getattr(value, "_pb", value)


def value_kind(value: Any) -> str:
    """Name of the populated ``value_type`` field, or '' when none is set."""
    return to_value_pb(value).WhichOneof("value_type") or ""


def type_order(value: Any) -> TypeOrder:
    """
    Classify a wire value.

    Args:
        value: A ``Value`` message (proto-plus or raw).

    Returns:
        TypeOrder: The kind of the value; pending server timestamps are
        reported as SERVER_TIMESTAMP rather than OBJECT.

    Raises:
        InternalAssertionError: If no known field of the value is populated.
    """
    value_pb = to_value_pb(value)
    kind = value_pb.WhichOneof("value_type")
    order = _TYPE_ORDER_BY_FIELD.get(kind)
    if order is None:
        fail(f"Invalid value type: {json_format.MessageToJson(value_pb, indent=None)}")
    if order is TypeOrder.OBJECT and is_server_timestamp(value_pb):
        return TypeOrder.SERVER_TIMESTAMP
    return order


def normalize_number(value: Union[int, float, str, None]) -> Union[int, float]:
    """Numbers pass through, numeric strings are parsed, a missing number is 0."""
    if value is None:
        return 0
    if isinstance(value, (int, float)):
        return value
    try:
        return int(value)
    except ValueError:
        return float(value)


def normalize_timestamp(date: TimestampLike) -> Tuple[int, int]:
    """
    Convert any of the wire encodings of a timestamp to ``(seconds, nanos)``.

    Accepts a ``Timestamp`` message, a ``{"seconds": ..., "nanos": ...}``
    mapping, or an RFC 3339 string in UTC ('2020-01-02T03:04:05.123Z').
    """
    hard_assert(date is not None, "Cannot normalize null or undefined timestamp.")

    if isinstance(date, str):
        match = ISO_TIMESTAMP_REG_EXP.match(date)
        hard_assert(match is not None, f"invalid timestamp: {date}")
        nanos = 0
        if match.group(1):
            nanos = int((match.group(1) + "000000000")[:9])
        parsed = datetime.strptime(date[:19], "%Y-%m-%dT%H:%M:%S")
        return calendar.timegm(parsed.timetuple()), nanos

    if isinstance(date, Mapping):
        return (
            int(normalize_number(date.get("seconds"))),
            int(normalize_number(date.get("nanos"))),
        )

    return int(normalize_number(date.seconds)), int(normalize_number(date.nanos))


def normalize_byte_string(blob: Union[bytes, bytearray, memoryview, str]) -> bytes:
    """Raw bytes pass through; strings are taken to be base64 encoded."""
    if isinstance(blob, str):
        try:
            return base64.b64decode(blob, validate=True)
        except (binascii.Error, ValueError) as e:
            raise InvalidArgumentError("Failed to construct data from Base64 string", cause=e)
    return bytes(blob)


def value_from_json(data: Mapping[str, Any]) -> Any:
    """
    Parse the REST/JSON encoding of a value into a raw ``Value`` message.

    Example:
        >>> value_from_json({"mapValue": {"fields": {"n": {"integerValue": "5"}}}})
    """
    return json_format.ParseDict(data, document.Value.pb()())
