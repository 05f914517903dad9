"""Structural conversion of Python objects into Values."""

import dataclasses
import enum
from collections.abc import Mapping

from flatgelf.core.errors import ValueConversionError
from flatgelf.core.values import (
    VALUE_TYPES,
    Bool,
    Bytes,
    Float,
    Int,
    Map,
    Null,
    Seq,
    Str,
    Value,
)

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_U64_MAX = 2**64 - 1


def _convert_int(obj: int) -> Int:
    # @tra: Core.Adapter.Int.Range
    if _I64_MIN <= obj <= _I64_MAX:
        return Int(obj, width=64, signed=True)
    if 0 <= obj <= _U64_MAX:
        return Int(obj, width=64, signed=False)
    raise ValueConversionError(f"integer {obj} does not fit in 64 bits")


def to_value(obj: object) -> Value:
    """Convert a Python object into a Value.

    Supported inputs are None, bool, int, float, str, bytes-like objects,
    enum members (converted to their name), mappings, lists, tuples and
    dataclass instances. Values are returned unchanged.

    Args:
        obj: The object to convert.

    Returns:
        The converted Value.

    Raises:
        ValueConversionError: If the object, or anything nested inside it,
            has no Value representation.
    """
    if isinstance(obj, VALUE_TYPES):
        return obj
    if obj is None:
        return Null()
    if isinstance(obj, enum.Enum):
        return Str(obj.name)
    if isinstance(obj, bool):
        return Bool(obj)
    if isinstance(obj, int):
        return _convert_int(obj)
    if isinstance(obj, float):
        return Float(obj)
    if isinstance(obj, str):
        return Str(obj)
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return Bytes(bytes(obj))
    if isinstance(obj, Mapping):
        return Map(tuple((to_value(key), to_value(val)) for key, val in obj.items()))
    if isinstance(obj, (list, tuple)):
        return Seq(tuple(to_value(item) for item in obj))
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return Map(
            tuple(
                (Str(f.name), to_value(getattr(obj, f.name)))
                for f in dataclasses.fields(obj)
            )
        )
    # Sets have no stable iteration order, so they are rejected with the rest.
    raise ValueConversionError(f"cannot convert object of type {type(obj).__name__}")
