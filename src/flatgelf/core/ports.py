"""Port interfaces for record sources and sinks.

These protocols define the contracts that adapters must implement.
The core domain depends only on these interfaces, not concrete implementations.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from flatgelf.core.levels import GelfLevel
from flatgelf.core.values import Value

if TYPE_CHECKING:
    from flatgelf.core.models import GelfRecord


@runtime_checkable
class RecordAccessor(Protocol):
    """Read access to the fields of a GELF-like record.

    Any object exposing these attributes can be copied into a GelfRecord
    with ``GelfRecord.from_record``.
    """

    @property
    def facility(self) -> str: ...

    @property
    def file(self) -> str: ...

    @property
    def level(self) -> GelfLevel: ...

    @property
    def line(self) -> int: ...

    @property
    def timestamp(self) -> float: ...

    @property
    def short_message(self) -> str: ...

    @property
    def full_message(self) -> str | None: ...

    @property
    def additional_fields(self) -> Mapping[str, Value]: ...


@runtime_checkable
class RecordSinkPort(Protocol):
    """Port for record sinks.

    Adapters implementing this protocol receive finished records.
    Example: StreamRecordSink.
    """

    def write(self, record: "GelfRecord") -> None:
        """Write a finished record to the sink."""
        ...
