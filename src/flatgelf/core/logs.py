"""Record helper functions that capture the caller's source location."""

import sys

from flatgelf.core.levels import GelfLevel, LogLevel
from flatgelf.core.models import GelfRecord


def _caller_location(depth: int) -> tuple[str, str, int]:
    """Return (module, file, line) of the frame ``depth`` levels above the caller."""
    frame = sys._getframe(depth + 1)
    return (
        frame.f_globals.get("__name__", "__main__"),
        frame.f_code.co_filename,
        frame.f_lineno,
    )


def _build(
    level: GelfLevel,
    msg: str,
    args: tuple[object, ...],
    extra: object,
    stacklevel: int,
) -> GelfRecord:
    facility, file, line = _caller_location(stacklevel + 1)
    record = (
        GelfRecord()
        .set_facility(facility)
        .set_file(file)
        .set_line(line)
        .set_level(level)
        .set_message(msg % args if args else msg)
    )
    if extra is not None:
        record = record.add_additional_fields(extra)
    return record


def gelf_record(
    msg: str,
    *args: object,
    level: GelfLevel = GelfLevel.ALERT,
    extra: object = None,
    stacklevel: int = 1,
) -> GelfRecord:
    """Create a record stamped with the caller's module, file and line.

    Args:
        msg: Message, %-formatted with ``args`` when any are given.
        *args: Arguments for the message.
        level: Record level (default Alert).
        extra: Structured data flattened into the additional fields.
        stacklevel: Raise to attribute the record to an outer caller.

    Returns:
        GelfRecord with current timestamp.
    """
    return _build(level, msg, args, extra, stacklevel)


def log(
    level: LogLevel,
    msg: str,
    *args: object,
    extra: object = None,
    stacklevel: int = 1,
) -> GelfRecord:
    """Create a record from a generic log level.

    Args:
        level: Generic level, mapped to its GELF counterpart.
        msg: Message, %-formatted with ``args`` when any are given.
        *args: Arguments for the message.
        extra: Structured data flattened into the additional fields.
        stacklevel: Raise to attribute the record to an outer caller.

    Returns:
        GelfRecord with current timestamp and the caller's location.
    """
    return _build(level.to_gelf(), msg, args, extra, stacklevel)


def debug(msg: str, *args: object, extra: object = None) -> GelfRecord:
    """Create a Debugging record."""
    return _build(LogLevel.DEBUG.to_gelf(), msg, args, extra, 1)


def info(msg: str, *args: object, extra: object = None) -> GelfRecord:
    """Create an Informational record."""
    return _build(LogLevel.INFO.to_gelf(), msg, args, extra, 1)


def warn(msg: str, *args: object, extra: object = None) -> GelfRecord:
    """Create a Warning record."""
    return _build(LogLevel.WARN.to_gelf(), msg, args, extra, 1)


def error(msg: str, *args: object, extra: object = None) -> GelfRecord:
    """Create an Error record."""
    return _build(LogLevel.ERROR.to_gelf(), msg, args, extra, 1)
