"""Sink adapters implementing RecordSinkPort."""

from flatgelf.adapters.sinks.stream import StreamRecordSink

__all__ = [
    "StreamRecordSink",
]
