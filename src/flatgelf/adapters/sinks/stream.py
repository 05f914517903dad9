"""Sink that writes records as JSON lines to a text stream."""

import sys
from typing import TextIO

from flatgelf.core.encoding.ndjson import encode_record
from flatgelf.core.models import GelfRecord


class StreamRecordSink:
    """Writes each record as one JSON line.

    Args:
        stream: Text stream to write to. Defaults to ``sys.stderr`` at the
            time of each write, so redirected streams are honoured.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def write(self, record: GelfRecord) -> None:
        """Encode and write a record.

        Raises:
            EncodingError: If the record cannot be encoded.
        """
        stream = self.stream
        stream.write(encode_record(record) + "\n")
        stream.flush()
