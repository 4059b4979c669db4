"""Conversion between JSON records and DynamoDB attribute values.

Records exchanged with callers are plain JSON objects. The boto3 resource layer
accepts and returns native Python values, but with its own rules: numbers are
``Decimal`` (floats are rejected), sets come back as ``set`` and binary
attributes as ``Binary``. The helpers here keep every stored value inside a
closed set of types so nothing is coerced silently on the way in or out.
"""

import base64
import math
from decimal import Decimal, DecimalException
from typing import Any, Dict, List, Union

from boto3.dynamodb.types import DYNAMODB_CONTEXT, Binary

from ..middleware.exceptions import SerializationError

AttributeValue = Union[
    None,
    bool,
    str,
    int,
    Decimal,
    List["AttributeValue"],
    Dict[str, "AttributeValue"],
]
Record = Dict[str, AttributeValue]


def to_store_record(record: Dict[str, Any]) -> Record:
    """Convert a JSON record into a DynamoDB-compatible item.

    Args:
        record: Decoded JSON object

    Returns:
        Item whose values are all ``AttributeValue`` members

    Raises:
        SerializationError: If a value has no DynamoDB representation
    """
    if not isinstance(record, dict):
        raise SerializationError("Item must be a JSON object")
    return {
        _check_key(key, path=""): _to_store_value(value, path=key)
        for key, value in record.items()
    }


def from_store_record(item: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a DynamoDB item into a JSON-serializable record."""
    return {key: _from_store_value(value) for key, value in item.items()}


def _check_key(key: Any, path: str) -> str:
    if not isinstance(key, str) or not key:
        raise SerializationError(
            "Attribute names must be non-empty strings",
            details={"path": path, "attribute": repr(key)},
        )
    return key


def _to_store_value(value: Any, path: str) -> AttributeValue:
    # bool first: it is a subclass of int
    if value is None or isinstance(value, (bool, str)):
        return value
    if isinstance(value, int):
        return _to_number(Decimal(value), path)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise SerializationError(
                f"Non-finite number at {path}", details={"path": path}
            )
        return _to_number(Decimal(str(value)), path)
    if isinstance(value, Decimal):
        return _to_number(value, path)
    if isinstance(value, (list, tuple)):
        return [
            _to_store_value(item, f"{path}[{position}]")
            for position, item in enumerate(value)
        ]
    if isinstance(value, dict):
        return {
            _check_key(key, path): _to_store_value(item, f"{path}.{key}")
            for key, item in value.items()
        }
    raise SerializationError(
        f"Unsupported value type {type(value).__name__} at {path}",
        details={"path": path},
    )


def _to_number(value: Decimal, path: str) -> Decimal:
    if not value.is_finite():
        raise SerializationError(f"Non-finite number at {path}", details={"path": path})
    try:
        number = DYNAMODB_CONTEXT.create_decimal(value)
    except DecimalException as e:
        raise SerializationError(
            f"Number at {path} exceeds DynamoDB precision",
            details={"path": path, "error": str(e)},
        )
    return number


def _from_store_value(value: Any) -> Any:
    if isinstance(value, Decimal):
        # Whole numbers become int, everything else float; `%` would run in
        # the 28-digit default context
        if value == value.to_integral_value():
            return int(value)
        return float(value)
    if isinstance(value, Binary):
        return base64.b64encode(value.value).decode("ascii")
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, (set, frozenset)):
        return sorted((_from_store_value(item) for item in value), key=_set_sort_key)
    if isinstance(value, list):
        return [_from_store_value(item) for item in value]
    if isinstance(value, dict):
        return {key: _from_store_value(item) for key, item in value.items()}
    return value


def _set_sort_key(value: Any) -> Any:
    # DynamoDB sets are homogeneous, so this only orders strings or numbers
    return (isinstance(value, str), value)
