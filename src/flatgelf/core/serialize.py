"""Entry points that turn arbitrary objects into flat GELF fields.

Unlike ``GelfRecord.add_additional_fields``, these functions raise when the
input cannot be converted or encoded.
"""

from flatgelf.core.adapter import to_value
from flatgelf.core.encoding.ndjson import dumps, fields_to_json
from flatgelf.core.flatten import FlatMapping, flatten
from flatgelf.core.naming import KeyNamer


def to_flat_dict(data: object, namer: KeyNamer | None = None) -> FlatMapping:
    """Flatten any convertible object into GELF additional fields.

    Raises:
        ValueConversionError: If ``data`` cannot be converted to a Value.
    """
    return flatten(to_value(data), namer=namer)


def to_string(data: object, namer: KeyNamer | None = None) -> str:
    """Flatten ``data`` and encode the result as compact JSON.

    Raises:
        ValueConversionError: If ``data`` cannot be converted to a Value.
        EncodingError: If the flattened fields cannot be encoded.
    """
    return dumps(fields_to_json(to_flat_dict(data, namer)))


def to_string_pretty(data: object, namer: KeyNamer | None = None) -> str:
    """Like ``to_string`` but indented for humans."""
    return dumps(fields_to_json(to_flat_dict(data, namer)), pretty=True)
