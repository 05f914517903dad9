"""Python logging handler adapter for flatgelf.

This adapter bridges Python's standard library logging module to a
RecordSinkPort, turning every LogRecord into a GelfRecord.
"""

import logging
import traceback

from flatgelf.core.flatten import FlattenHooks
from flatgelf.core.models import GelfRecord
from flatgelf.core.naming import KeyNamer
from flatgelf.core.ports import RecordSinkPort

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


# Default attributes to extract from LogRecord
_DEFAULT_INCLUDE_ATTRS = ["module", "funcName"]


class GelfHandler(logging.Handler):
    """Logging handler that writes GELF records to a RecordSinkPort.

    Logger name, source path, line and level map onto the GELF schema. Extra
    attributes passed via ``extra=`` are flattened into additional fields,
    and exception tracebacks go into ``full_message``.

    Example:
        ```python
        from flatgelf import GelfHandler, StreamRecordSink

        handler = GelfHandler(StreamRecordSink())
        logging.getLogger().addHandler(handler)
        ```
    """

    def __init__(
        self,
        sink: RecordSinkPort,
        include_attrs: list[str] | None = None,
        namer: KeyNamer | None = None,
        hooks: FlattenHooks | None = None,
        level: int = logging.NOTSET,
    ) -> None:
        """Initialize the handler with a record sink.

        Args:
            sink: Sink adapter implementing RecordSinkPort.
            include_attrs: List of LogRecord attributes to include as
                additional fields. Defaults to ["module", "funcName"].
            namer: Key naming strategy. Defaults to the configured mode.
            hooks: Optional callbacks for dropped or overwritten fields.
            level: Minimum level handled.
        """
        super().__init__(level)
        self._sink = sink
        self._include_attrs = (
            include_attrs if include_attrs is not None else _DEFAULT_INCLUDE_ATTRS
        )
        self._namer = namer
        self._hooks = hooks

    def to_gelf(self, record: logging.LogRecord) -> GelfRecord:
        """Convert a LogRecord into a GelfRecord.

        Args:
            record: The log record to convert.

        Returns:
            GelfRecord stamped with the LogRecord's creation time.
        """
        gelf = GelfRecord.from_log_record(
            record, namer=self._namer, hooks=self._hooks
        ).set_timestamp(record.created)

        # Map of attribute names to their values from LogRecord
        attr_mapping: dict[str, object] = {
            "module": record.module,
            "funcName": record.funcName or "",
            "process": record.process,
            "processName": record.processName,
            "thread": record.thread,
            "threadName": record.threadName,
        }
        included = {
            key: attr_mapping[key]
            for key in self._include_attrs
            if key in attr_mapping and attr_mapping[key] is not None
        }
        gelf = gelf.add_additional_fields(included)

        # Extras are merged one at a time so a single unconvertible value
        # only drops itself.
        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOGRECORD_ATTRS:
                gelf = gelf.add_additional_fields({key: value})

        # Extract exception info if present
        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            if exc_type is not None:
                gelf = gelf.add_additional_fields(
                    {"exc_type": exc_type.__name__, "exc_message": str(exc_value)}
                )
                gelf = gelf.set_full_message(
                    "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
                )
        elif record.stack_info:
            gelf = gelf.set_full_message(record.stack_info)
        return gelf

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a log record to the sink.

        Args:
            record: The log record to emit.
        """
        try:
            self._sink.write(self.to_gelf(record))
        except Exception:
            self.handleError(record)
