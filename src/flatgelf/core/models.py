"""GELF record model.

A GelfRecord holds the fixed GELF schema fields plus a flat mapping of
additional fields. Records are immutable: every ``set_*`` method returns an
updated copy and leaves the original untouched. The additional fields are
copied on construction and exposed read-only, so two records never share
them.
"""

import logging
import socket
import time
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import ClassVar

from flatgelf.config import default_namer, get_settings
from flatgelf.core.adapter import to_value
from flatgelf.core.errors import ValueConversionError
from flatgelf.core.flatten import FlatMapping, Flattener, FlattenHooks
from flatgelf.core.levels import GelfLevel, LogLevel
from flatgelf.core.naming import KeyNamer
from flatgelf.core.ports import RecordAccessor
from flatgelf.core.values import Value, is_scalar

logger = logging.getLogger(__name__)

GELF_VERSION = "1.1"


def resolve_hostname() -> str:
    """Return the local host name, or the configured fallback."""
    try:
        host = socket.gethostname()
    except OSError:
        host = ""
    return host or get_settings().fallback_host


def now() -> float:
    """Seconds since the UNIX epoch with sub-second precision."""
    return time.time()


def _default_facility() -> str:
    return get_settings().default_facility


def _default_file() -> str:
    return get_settings().default_file


@dataclass(frozen=True)
class GelfRecord:
    """A structured log record following the GELF 1.1 payload format.

    Attributes:
        facility: Originating module or subsystem.
        file: Source file that produced the record.
        host: Name of the host that sent the record.
        level: Syslog severity; ``levelname`` is derived from it. Plain
            ordinals are accepted, unknown ones become Alert.
        line: Source line that produced the record, never negative.
        short_message: Short descriptive message.
        timestamp: Seconds since the UNIX epoch.
        full_message: Long message such as a traceback, omitted when None.
        additional_fields: Flattened extra fields, encoded as top-level keys.
            Stored as a read-only copy of the mapping passed in.
        namer: Key naming strategy used by ``add_additional_fields``.
        hooks: Callbacks for dropped data and overwritten keys.
    """

    facility: str = field(default_factory=_default_facility)
    file: str = field(default_factory=_default_file)
    host: str = field(default_factory=resolve_hostname)
    level: GelfLevel = GelfLevel.ALERT
    line: int = 0
    short_message: str = ""
    timestamp: float = field(default_factory=now)
    full_message: str | None = None
    additional_fields: Mapping[str, Value] = field(default_factory=dict)
    namer: KeyNamer = field(default_factory=default_namer, repr=False, compare=False)
    hooks: FlattenHooks = field(
        default_factory=FlattenHooks, repr=False, compare=False
    )

    version: ClassVar[str] = GELF_VERSION

    def __post_init__(self) -> None:
        # Frozen dataclass: normalise through object.__setattr__.
        object.__setattr__(self, "level", GelfLevel.from_ordinal(self.level))
        object.__setattr__(self, "line", max(int(self.line), 0))
        object.__setattr__(
            self, "additional_fields", MappingProxyType(dict(self.additional_fields))
        )

    @property
    def levelname(self) -> str:
        return self.level.levelname

    def set_message(self, short_message: str) -> "GelfRecord":
        return replace(self, short_message=short_message)

    def set_level(self, level: GelfLevel) -> "GelfRecord":
        """Set the level; the level name follows automatically."""
        return replace(self, level=level)

    def set_timestamp(self, timestamp: float) -> "GelfRecord":
        return replace(self, timestamp=timestamp)

    def set_facility(self, facility: str) -> "GelfRecord":
        return replace(self, facility=facility)

    def set_line(self, line: int) -> "GelfRecord":
        # Negative lines are clamped to 0 in __post_init__.
        return replace(self, line=line)

    def set_file(self, file: str) -> "GelfRecord":
        return replace(self, file=file)

    def set_full_message(self, full_message: str | None) -> "GelfRecord":
        return replace(self, full_message=full_message)

    def add_additional_fields(self, data: object) -> "GelfRecord":
        """Flatten ``data`` and merge it into the additional fields.

        If ``data`` cannot be converted to a Value the record is returned
        unchanged. The failure is reported to ``hooks.on_conversion_failure``
        and logged at DEBUG level, but never raised.

        Args:
            data: Any object accepted by ``to_value``.

        Returns:
            Updated record. Existing keys are overwritten on collision.
        """
        try:
            value = to_value(data)
        except ValueConversionError as exc:
            # @tra: Core.Record.AddAdditionalFields.ConversionFailure
            logger.debug("additional fields dropped: %s", exc)
            if self.hooks.on_conversion_failure is not None:
                self.hooks.on_conversion_failure(data, exc)
            return self
        flattener = Flattener(self.namer, self.hooks)
        fields: FlatMapping = dict(self.additional_fields)
        flattener.merge(fields, flattener.flatten(value))
        return replace(self, additional_fields=fields)

    def extend_additional_fields(self, flat_data: Mapping[str, object]) -> "GelfRecord":
        """Merge an already flat mapping into the additional fields.

        Keys are used as given, without a flattening pass. Plain Python
        scalars are converted with ``to_value``.

        Raises:
            ValueConversionError: If a value cannot be converted or converts
                to a Seq or Map. Nested data belongs in
                ``add_additional_fields``.
        """
        scalars: FlatMapping = {}
        for key, val in flat_data.items():
            value = to_value(val)
            if not is_scalar(value):
                raise ValueConversionError(
                    f"additional field {key!r} must be a scalar, "
                    f"got {type(value).__name__}"
                )
            scalars[key] = value
        flattener = Flattener(self.namer, self.hooks)
        fields: FlatMapping = dict(self.additional_fields)
        flattener.merge(fields, scalars)
        return replace(self, additional_fields=fields)

    @classmethod
    def from_log_record(
        cls,
        record: logging.LogRecord,
        *,
        namer: KeyNamer | None = None,
        hooks: FlattenHooks | None = None,
    ) -> "GelfRecord":
        """Build a record from a standard library logging event.

        The logger name becomes the facility and the level is mapped through
        the generic five-level scale.
        """
        # @tra: Core.Record.FromLogRecord
        level = LogLevel.from_logging_level(record.levelno).to_gelf()
        return (
            cls._blank(namer, hooks)
            .set_facility(record.name)
            .set_file(record.pathname or "")
            .set_level(level)
            .set_line(record.lineno or 0)
            .set_message(record.getMessage())
        )

    @classmethod
    def from_record(
        cls,
        source: RecordAccessor,
        *,
        namer: KeyNamer | None = None,
        hooks: FlattenHooks | None = None,
    ) -> "GelfRecord":
        """Copy any record-like object into a new GelfRecord.

        Scalar fields are copied one for one. The source's additional fields
        are passed through ``add_additional_fields`` again, so they are
        re-flattened rather than reused.
        """
        # @tra: Core.Record.FromRecord
        return (
            cls._blank(namer, hooks)
            .set_file(source.file)
            .set_facility(source.facility)
            .set_level(source.level)
            .set_line(source.line)
            .set_timestamp(source.timestamp)
            .set_message(source.short_message)
            .set_full_message(source.full_message)
            .add_additional_fields(dict(source.additional_fields))
        )

    @classmethod
    def _blank(
        cls, namer: KeyNamer | None, hooks: FlattenHooks | None
    ) -> "GelfRecord":
        kwargs: dict[str, object] = {}
        if namer is not None:
            kwargs["namer"] = namer
        if hooks is not None:
            kwargs["hooks"] = hooks
        return cls(**kwargs)  # type: ignore[arg-type]
