"""
'core/writer.py': UserDataWriter converts wire values into the Python values handed to application code.
"""
import logging
from typing import Any, Dict, List, Optional, Union

from google.api_core.datetime_helpers import DatetimeWithNanoseconds
from google.cloud.firestore_v1 import GeoPoint
from google.protobuf import timestamp_pb2

from ..api.database import BaseFirestore
from ..config import Config
from ..model.path import DOCUMENT_NAME_PREFIX_LENGTH, DocumentKey, ResourcePath, is_valid_document_name
from ..model.schemas import DatabaseId, ServerTimestampBehavior, TypeOrder
from ..model.server_timestamps import get_local_write_time, get_previous_value
from ..model.values import (
    TimestampLike,
    normalize_byte_string,
    normalize_number,
    normalize_timestamp,
    to_value_pb,
    type_order,
    value_kind,
)
from ..utils import LOGGER_NAME, fail, hard_assert, setup_logging
from .base import DecoderFlavor
from .flavors import CONTEXTS_BY_NAME, flavor_for

BehaviorLike = Union[ServerTimestampBehavior, str, None]


class UserDataWriter:
    """
    Recursive decoder from ``google.firestore.v1.Value`` to Python values.

    The flavor decides which types bytes and reference fields decode to;
    everything else is shared. A writer holds no per-call state and may be
    used from several threads at once.
    """

    def __init__(
        self,
        flavor: DecoderFlavor,
        logger: Optional[logging.Logger] = None,
        default_behavior: BehaviorLike = ServerTimestampBehavior.NONE,
    ):
        """
        Args:
            flavor (DecoderFlavor): Output constructors and expected database.
            logger (Logger): Receives cross-database reference diagnostics.
            default_behavior: Server timestamp policy used when `decode` is
                called without one.
        """
        self.flavor = flavor
        self.logger = logger or logging.getLogger(LOGGER_NAME)
        self.default_behavior = ServerTimestampBehavior.coerce(default_behavior)

    def decode(self, value: Any, server_timestamp_behavior: BehaviorLike = None) -> Any:
        """
        Convert a wire value into its Python equivalent.

        Args:
            value: A ``Value`` message, proto-plus or raw.
            server_timestamp_behavior: 'estimate', 'previous' or 'none'. Applied
                to every pending server timestamp in the tree.

        Returns:
            Any: None, bool, int, float, str, DatetimeWithNanoseconds, GeoPoint,
            list, dict, or the flavor's blob and reference types.

        Raises:
            InternalAssertionError: If the value (or a nested value) has no
                recognized type, or holds a malformed reference.
        """
        if server_timestamp_behavior is None:
            behavior = self.default_behavior
        else:
            behavior = ServerTimestampBehavior.coerce(server_timestamp_behavior)
        return self._convert_value(to_value_pb(value), behavior)

    def _convert_value(self, value_pb: Any, behavior: ServerTimestampBehavior) -> Any:
        order = type_order(value_pb)

        if order is TypeOrder.NULL:
            return None
        if order is TypeOrder.BOOLEAN:
            return value_pb.boolean_value
        if order is TypeOrder.NUMBER:
            if value_kind(value_pb) == "integer_value":
                return normalize_number(value_pb.integer_value)
            return normalize_number(value_pb.double_value)
        if order is TypeOrder.TIMESTAMP:
            return self._convert_timestamp(value_pb.timestamp_value)
        if order is TypeOrder.SERVER_TIMESTAMP:
            return self._convert_server_timestamp(value_pb, behavior)
        if order is TypeOrder.STRING:
            return value_pb.string_value
        if order is TypeOrder.BLOB:
            return self.flavor.convert_bytes(normalize_byte_string(value_pb.bytes_value))
        if order is TypeOrder.REFERENCE:
            return self._convert_reference(value_pb.reference_value)
        if order is TypeOrder.GEO_POINT:
            return self._convert_geo_point(value_pb.geo_point_value)
        if order is TypeOrder.ARRAY:
            return self._convert_array(value_pb.array_value, behavior)
        if order is TypeOrder.OBJECT:
            return self._convert_object(value_pb.map_value, behavior)

        fail(f"Invalid value type: {order!r}")

    def _convert_object(self, map_value: Any, behavior: ServerTimestampBehavior) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        for key, value in map_value.fields.items():
            result[key] = self._convert_value(value, behavior)
        return result

    def _convert_array(self, array_value: Any, behavior: ServerTimestampBehavior) -> List[Any]:
        return [self._convert_value(value, behavior) for value in array_value.values]

    def _convert_geo_point(self, lat_lng: Any) -> GeoPoint:
        return GeoPoint(
            normalize_number(lat_lng.latitude),
            normalize_number(lat_lng.longitude),
        )

    def _convert_server_timestamp(self, value_pb: Any, behavior: ServerTimestampBehavior) -> Any:
        if behavior is ServerTimestampBehavior.PREVIOUS:
            previous_value = get_previous_value(value_pb)
            if previous_value is None:
                return None
            return self._convert_value(previous_value, behavior)
        if behavior is ServerTimestampBehavior.ESTIMATE:
            return self._convert_timestamp(get_local_write_time(value_pb))
        return None

    def _convert_timestamp(self, value: TimestampLike) -> DatetimeWithNanoseconds:
        seconds, nanos = normalize_timestamp(value)
        return DatetimeWithNanoseconds.from_timestamp_pb(
            timestamp_pb2.Timestamp(seconds=seconds, nanos=nanos)
        )

    def _convert_reference(self, name: str) -> Any:
        key = self.convert_document_key(name, self.flavor.database_id)
        return self.flavor.convert_reference(key)

    def convert_document_key(self, name: str, expected_database_id: DatabaseId) -> DocumentKey:
        """
        Parse a document resource name into a key within the expected database.

        A name pointing into another database is logged and then treated as a
        reference into `expected_database_id`.

        Raises:
            InternalAssertionError: If `name` is not a document resource name.
        """
        resource_path = ResourcePath.from_string(name)
        hard_assert(
            is_valid_document_name(resource_path),
            f"ReferenceValue is not valid {name}",
        )
        database_id = DatabaseId(project_id=resource_path.get(1), database=resource_path.get(3))
        key = DocumentKey(resource_path.pop_first(DOCUMENT_NAME_PREFIX_LENGTH))

        if not database_id.is_equal(expected_database_id):
            # TODO: resolve foreign references once clients can address more than one database.
            self.logger.error(
                f"[convert_document_key] Document {key} contains a document "
                f"reference within a different database "
                f"({database_id.project_id}/{database_id.database}) which is not "
                f"supported. It will be treated as a reference in the current "
                f"database ({expected_database_id.project_id}/{expected_database_id.database}) "
                f"instead."
            )
        return key


def create_writer(
    firestore: BaseFirestore,
    logger: Optional[logging.Logger] = None,
    default_behavior: BehaviorLike = ServerTimestampBehavior.NONE,
) -> UserDataWriter:
    """
    Build a writer for a client context, picking the flavor from its type.

    Raises:
        TypeError: If `firestore` is not a known client context.
    """
    return UserDataWriter(flavor_for(firestore), logger=logger, default_behavior=default_behavior)


def writer_from_config(config: Config, logger: Optional[logging.Logger] = None) -> UserDataWriter:
    """
    Build the client context named by `config.flavor` and a writer for it.

    Also configures the package logger from `config.log_level` and
    `config.log_file`.

    Raises:
        ValueError: If the configuration is incomplete or names an unknown
            flavor, server timestamp policy or log level.
    """
    config.validate()
    setup_logging(config.log_level, config.log_file)
    firestore = CONTEXTS_BY_NAME[config.flavor].from_config(config)
    return create_writer(firestore, logger=logger, default_behavior=config.server_timestamps)
