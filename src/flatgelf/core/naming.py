"""Key naming strategies for flattened field names."""

import enum
from typing import Protocol, runtime_checkable

from flatgelf.core.values import Bool, Float, Int, Value


class KeyNaming(str, enum.Enum):
    """Available key naming modes."""

    DEFAULT = "default"
    TYPED = "typed"


@runtime_checkable
class KeyNamer(Protocol):
    """Builds the flattened name of a field from its path."""

    def name(self, prefix: str, local: str, leaf: Value) -> str:
        """Return the flattened name for ``local`` under ``prefix``."""
        ...


class DefaultKeyNamer:
    """Joins path segments with underscores.

    Top-level names get a leading underscore, as GELF expects for additional
    fields. An empty local name yields an empty result; this only happens at
    the root of a flattening pass.
    """

    def name(self, prefix: str, local: str, leaf: Value) -> str:
        if local == "":
            return ""
        if prefix == "":
            return f"_{local}"
        return f"{prefix}_{local}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def type_suffix(value: Value) -> str:
    """Return the schema suffix for a value's type class.

    Unsigned integers map to ``_double`` and signed integers to ``_long``.
    """
    # @tra: Core.Naming.TypedSuffix.Table
    if isinstance(value, Bool):
        return "_bool"
    if isinstance(value, Int):
        return "_long" if value.signed else "_double"
    if isinstance(value, Float):
        return "_float"
    return ""


class TypedSuffixKeyNamer(DefaultKeyNamer):
    """Default naming plus a suffix describing the leaf's type."""

    def name(self, prefix: str, local: str, leaf: Value) -> str:
        base = super().name(prefix, local, leaf)
        if not base:
            return base
        return base + type_suffix(leaf)


def namer_for(mode: KeyNaming | str) -> DefaultKeyNamer:
    """Return a namer instance for the given mode.

    Raises:
        ValueError: If the mode is unknown.
    """
    mode = KeyNaming(mode)
    if mode is KeyNaming.TYPED:
        return TypedSuffixKeyNamer()
    return DefaultKeyNamer()
