"""JSON and NDJSON encoders for GELF records."""

import json
import logging
from collections.abc import Iterable, Mapping

from flatgelf.core.errors import EncodingError
from flatgelf.core.flatten import map_key
from flatgelf.core.models import GelfRecord
from flatgelf.core.values import (
    Bool,
    Bytes,
    Char,
    Float,
    Int,
    Map,
    Null,
    Seq,
    Str,
    Value,
)

logger = logging.getLogger(__name__)

# Top-level keys owned by the GELF schema.
RESERVED_FIELDS = frozenset(
    {
        "facility",
        "file",
        "host",
        "level",
        "_levelname",
        "line",
        "short_message",
        "timestamp",
        "version",
        "full_message",
    }
)


def value_to_json(value: Value) -> object:
    """Convert a Value into a JSON-compatible Python object.

    Byte strings become lists of byte values.
    """
    if isinstance(value, Null):
        return None
    if isinstance(value, (Bool, Int, Float, Str, Char)):
        return value.value
    if isinstance(value, Bytes):
        return list(value.value)
    if isinstance(value, Seq):
        return [value_to_json(item) for item in value.items]
    if isinstance(value, Map):
        return {map_key(key): value_to_json(item) for key, item in value.entries}
    raise EncodingError(f"not a Value: {type(value).__name__}")


def fields_to_json(fields: Mapping[str, Value]) -> dict[str, object]:
    """Convert a flat mapping into a JSON-compatible dict."""
    return {key: value_to_json(value) for key, value in fields.items()}


def record_to_dict(record: GelfRecord) -> dict[str, object]:
    """Build the GELF payload for a record.

    Additional fields are written as siblings of the schema fields. A field
    whose name matches a schema field replaces the schema value.

    Args:
        record: The record to encode.

    Returns:
        Dict in GELF field order, ``full_message`` omitted when absent.
    """
    obj: dict[str, object] = {
        "facility": record.facility,
        "file": record.file,
        "host": record.host,
        "level": int(record.level),
        "_levelname": record.levelname,
        "line": record.line,
        "short_message": record.short_message,
        "timestamp": record.timestamp,
        "version": record.version,
    }
    if record.full_message is not None:
        obj["full_message"] = record.full_message

    extra = fields_to_json(record.additional_fields)
    # @tra: Encoding.Record.ReservedFieldOverwrite
    for key in RESERVED_FIELDS.intersection(extra):
        logger.warning("additional field %r overwrites a GELF schema field", key)
    obj.update(extra)
    return obj


def dumps(obj: object, pretty: bool = False) -> str:
    """Serialize to strict JSON.

    Raises:
        EncodingError: If the object holds NaN or infinite floats, or
            anything else ``json`` cannot encode.
    """
    try:
        if pretty:
            return json.dumps(obj, indent=2, ensure_ascii=False, allow_nan=False)
        return json.dumps(
            obj, separators=(",", ":"), ensure_ascii=False, allow_nan=False
        )
    except (TypeError, ValueError) as exc:
        raise EncodingError(str(exc)) from exc


def encode_record(record: GelfRecord, pretty: bool = False) -> str:
    """Encode a single record as a JSON object."""
    return dumps(record_to_dict(record), pretty=pretty)


def encode_records(records: Iterable[GelfRecord]) -> str:
    """Encode records to newline-delimited JSON.

    Args:
        records: An iterable of GelfRecord objects.

    Returns:
        NDJSON string with one JSON object per line.
        Empty string if no records.
    """
    lines = [encode_record(record) for record in records]

    if not lines:
        return ""

    return "\n".join(lines) + "\n"
