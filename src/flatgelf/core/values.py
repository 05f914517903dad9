"""Tagged value union consumed by the flattening engine.

Every structured input is first converted to one of these variants. The
numeric variants keep their width and signedness because the typed-suffix
key naming mode depends on them.
"""

from dataclasses import dataclass

INT_WIDTHS = (8, 16, 32, 64)
FLOAT_WIDTHS = (32, 64)


@dataclass(frozen=True)
class Null:
    """The absence of a value."""


@dataclass(frozen=True)
class Bool:
    """A boolean value."""

    value: bool


@dataclass(frozen=True)
class Int:
    """An integer with an explicit width and signedness.

    Attributes:
        value: The integer value.
        width: Bit width, one of 8, 16, 32 or 64.
        signed: True for two's complement signed integers.
    """

    value: int
    width: int = 64
    signed: bool = True

    def __post_init__(self) -> None:
        if self.width not in INT_WIDTHS:
            raise ValueError(f"unsupported integer width: {self.width}")
        if self.signed:
            low, high = -(2 ** (self.width - 1)), 2 ** (self.width - 1) - 1
        else:
            low, high = 0, 2**self.width - 1
        if not low <= self.value <= high:
            kind = "i" if self.signed else "u"
            raise ValueError(f"{self.value} does not fit in {kind}{self.width}")


@dataclass(frozen=True)
class Float:
    """A floating point number with an explicit width."""

    value: float
    width: int = 64

    def __post_init__(self) -> None:
        if self.width not in FLOAT_WIDTHS:
            raise ValueError(f"unsupported float width: {self.width}")


@dataclass(frozen=True)
class Str:
    """A text string."""

    value: str


@dataclass(frozen=True)
class Bytes:
    """A byte string."""

    value: bytes


@dataclass(frozen=True)
class Char:
    """A single character."""

    value: str

    def __post_init__(self) -> None:
        if len(self.value) != 1:
            raise ValueError(f"Char must hold exactly one character, got {self.value!r}")


@dataclass(frozen=True)
class Seq:
    """An ordered sequence of values."""

    items: tuple["Value", ...] = ()


@dataclass(frozen=True)
class Map:
    """An ordered mapping of values, stored as (key, value) pairs.

    Iteration follows the stored pair order, which is fixed at construction.
    """

    entries: tuple[tuple["Value", "Value"], ...] = ()

    def keys(self) -> tuple["Value", ...]:
        return tuple(key for key, _ in self.entries)


Value = Null | Bool | Int | Float | Str | Bytes | Char | Seq | Map

SCALAR_TYPES = (Null, Bool, Int, Float, Str, Bytes, Char)
VALUE_TYPES = (*SCALAR_TYPES, Seq, Map)


def is_scalar(value: Value) -> bool:
    """Return True if the value is not a Seq or Map."""
    return isinstance(value, SCALAR_TYPES)
