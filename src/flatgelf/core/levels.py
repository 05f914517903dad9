"""Severity levels and the crosswalk between GELF and generic log levels."""

import enum
import logging


class GelfLevel(enum.IntEnum):
    """Record level, equal to the standard syslog severities."""

    EMERGENCY = 0
    ALERT = 1
    CRITICAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFORMATIONAL = 6
    DEBUGGING = 7

    @classmethod
    def default(cls) -> "GelfLevel":
        return cls.ALERT

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "GelfLevel":
        """Return the level for an ordinal, falling back to Alert."""
        try:
            return cls(ordinal)
        except ValueError:
            return cls.ALERT

    @property
    def levelname(self) -> str:
        """Name as written in the ``_levelname`` field, e.g. ``Informational``."""
        return _LEVEL_NAMES[self]

    def to_log_level(self) -> "LogLevel":
        """Map to the generic five-level scale.

        Emergency, Alert, Critical and Error all collapse to Error.
        """
        return _GELF_TO_LOG.get(self, LogLevel.ERROR)


_LEVEL_NAMES = {
    GelfLevel.EMERGENCY: "Emergency",
    GelfLevel.ALERT: "Alert",
    GelfLevel.CRITICAL: "Critical",
    GelfLevel.ERROR: "Error",
    GelfLevel.WARNING: "Warning",
    GelfLevel.NOTICE: "Notice",
    GelfLevel.INFORMATIONAL: "Informational",
    GelfLevel.DEBUGGING: "Debugging",
}


class LogLevel(enum.Enum):
    """Generic five-level severity used by application loggers."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    def to_gelf(self) -> GelfLevel:
        return _LOG_TO_GELF[self]

    @classmethod
    def from_logging_level(cls, levelno: int) -> "LogLevel":
        """Map a standard library ``logging`` level number.

        Numbers below DEBUG are treated as trace output.
        """
        if levelno < logging.DEBUG:
            return cls.TRACE
        if levelno < logging.INFO:
            return cls.DEBUG
        if levelno < logging.WARNING:
            return cls.INFO
        if levelno < logging.ERROR:
            return cls.WARN
        return cls.ERROR


_LOG_TO_GELF = {
    LogLevel.TRACE: GelfLevel.DEBUGGING,
    LogLevel.DEBUG: GelfLevel.DEBUGGING,
    LogLevel.INFO: GelfLevel.INFORMATIONAL,
    LogLevel.WARN: GelfLevel.WARNING,
    LogLevel.ERROR: GelfLevel.ERROR,
}

_GELF_TO_LOG = {
    GelfLevel.DEBUGGING: LogLevel.DEBUG,
    GelfLevel.INFORMATIONAL: LogLevel.INFO,
    GelfLevel.WARNING: LogLevel.WARN,
}
