import pytest
from google.cloud.firestore_v1.types import document
from google.protobuf import timestamp_pb2
from google.type import latlng_pb2

from firestore_decoder import DatabaseId, ExpFirestore, Firestore, LiteFirestore, create_writer
from firestore_decoder.model.server_timestamps import (
    LOCAL_WRITE_TIME_KEY,
    PREVIOUS_VALUE_KEY,
    SERVER_TIMESTAMP_SENTINEL,
    TYPE_KEY,
)

Value = document.Value.pb()
MapValue = document.MapValue.pb()
ArrayValue = document.ArrayValue.pb()

PROJECT = "test-project"
DATABASE = "(default)"


def to_wire(obj):
    """Build a raw Value message from a plain Python object."""
    if isinstance(obj, Value):
        return obj
    if obj is None:
        return Value(null_value=0)
    if isinstance(obj, bool):
        return Value(boolean_value=obj)
    if isinstance(obj, int):
        return Value(integer_value=obj)
    if isinstance(obj, float):
        return Value(double_value=obj)
    if isinstance(obj, str):
        return Value(string_value=obj)
    if isinstance(obj, bytes):
        return Value(bytes_value=obj)
    if isinstance(obj, timestamp_pb2.Timestamp):
        return Value(timestamp_value=obj)
    if isinstance(obj, latlng_pb2.LatLng):
        return Value(geo_point_value=obj)
    if isinstance(obj, list):
        return Value(array_value=ArrayValue(values=[to_wire(item) for item in obj]))
    if isinstance(obj, dict):
        return Value(map_value=MapValue(fields={key: to_wire(item) for key, item in obj.items()}))
    raise TypeError(f"Cannot convert {obj!r}")


def pending(seconds, nanos=0, previous=None):
    """Sentinel map of a pending server timestamp, without unwrapping `previous`."""
    fields = {
        TYPE_KEY: Value(string_value=SERVER_TIMESTAMP_SENTINEL),
        LOCAL_WRITE_TIME_KEY: Value(timestamp_value=timestamp_pb2.Timestamp(seconds=seconds, nanos=nanos)),
    }
    if previous is not None:
        fields[PREVIOUS_VALUE_KEY] = to_wire(previous)
    return Value(map_value=MapValue(fields=fields))


def ref(path, project=PROJECT, database=DATABASE):
    return Value(reference_value=f"projects/{project}/databases/{database}/documents/{path}")


@pytest.fixture
def wire():
    return to_wire


@pytest.fixture
def database_id():
    return DatabaseId(project_id=PROJECT, database=DATABASE)


@pytest.fixture
def classic_db(database_id):
    return Firestore(database_id)


@pytest.fixture
def exp_db(database_id):
    return ExpFirestore(database_id)


@pytest.fixture
def lite_db(database_id):
    return LiteFirestore(database_id)


@pytest.fixture
def writer(classic_db):
    return create_writer(classic_db)


@pytest.fixture
def exp_writer(exp_db):
    return create_writer(exp_db)


@pytest.fixture
def lite_writer(lite_db):
    return create_writer(lite_db)


@pytest.fixture
def pending_value():
    return pending


@pytest.fixture
def reference():
    return ref
