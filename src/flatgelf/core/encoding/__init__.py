"""Encoders for GELF records and flat mappings."""

from flatgelf.core.encoding.ndjson import (
    RESERVED_FIELDS,
    encode_record,
    encode_records,
    fields_to_json,
    record_to_dict,
    value_to_json,
)

__all__ = [
    "RESERVED_FIELDS",
    "encode_record",
    "encode_records",
    "fields_to_json",
    "record_to_dict",
    "value_to_json",
]
