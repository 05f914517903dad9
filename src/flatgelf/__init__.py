"""flatgelf - flatten structured data into GELF additional fields."""

from flatgelf.adapters.logging import GelfHandler
from flatgelf.adapters.sinks import StreamRecordSink
from flatgelf.config import FlatGelfSettings, default_namer, get_settings
from flatgelf.core.adapter import to_value
from flatgelf.core.encoding import encode_record, encode_records, record_to_dict
from flatgelf.core.errors import (
    EncodingError,
    GelfError,
    InvalidKeyError,
    ValueConversionError,
)
from flatgelf.core.flatten import FlatMapping, Flattener, FlattenHooks, flatten
from flatgelf.core.levels import GelfLevel, LogLevel
from flatgelf.core.logs import debug, error, gelf_record, info, log, warn
from flatgelf.core.models import GELF_VERSION, GelfRecord
from flatgelf.core.naming import (
    DefaultKeyNamer,
    KeyNamer,
    KeyNaming,
    TypedSuffixKeyNamer,
    namer_for,
)
from flatgelf.core.ports import RecordAccessor, RecordSinkPort
from flatgelf.core.serialize import to_flat_dict, to_string, to_string_pretty

__version__ = "0.1.0"

__all__ = [
    "GELF_VERSION",
    "DefaultKeyNamer",
    "EncodingError",
    "FlatGelfSettings",
    "FlatMapping",
    "FlattenHooks",
    "Flattener",
    "GelfError",
    "GelfHandler",
    "GelfLevel",
    "GelfRecord",
    "InvalidKeyError",
    "KeyNamer",
    "KeyNaming",
    "LogLevel",
    "RecordAccessor",
    "RecordSinkPort",
    "StreamRecordSink",
    "TypedSuffixKeyNamer",
    "ValueConversionError",
    "debug",
    "default_namer",
    "encode_record",
    "encode_records",
    "error",
    "flatten",
    "gelf_record",
    "get_settings",
    "info",
    "log",
    "namer_for",
    "record_to_dict",
    "to_flat_dict",
    "to_string",
    "to_string_pretty",
    "to_value",
    "warn",
]
