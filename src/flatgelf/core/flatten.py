"""Recursive flattening of Values into single-level field mappings."""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from flatgelf.config import default_namer
from flatgelf.core.errors import InvalidKeyError, ValueConversionError
from flatgelf.core.naming import KeyNamer
from flatgelf.core.values import Char, Map, Seq, Str, Value

logger = logging.getLogger(__name__)

FlatMapping = dict[str, Value]

# Called with (key, previous value, new value) whenever a merge overwrites a key.
CollisionHook = Callable[[str, Value, Value], None]
# Called with (original data, error) when additional fields cannot be converted.
ConversionFailureHook = Callable[[object, ValueConversionError], None]


@dataclass(frozen=True)
class FlattenHooks:
    """Optional callbacks that make silent merge behaviour observable.

    Attributes:
        on_collision: Invoked when a flattened key overwrites an existing one.
        on_conversion_failure: Invoked when additional fields are dropped
            because they could not be converted to a Value.
    """

    on_collision: CollisionHook | None = None
    on_conversion_failure: ConversionFailureHook | None = None


def map_key(key: Value) -> str:
    """Coerce a mapping key to a string.

    Raises:
        InvalidKeyError: If the key is not a Str or Char.
    """
    if isinstance(key, (Str, Char)):
        return key.value
    raise InvalidKeyError(
        f"Map keys MUST be strings or char, got {type(key).__name__}"
    )


class Flattener:
    """Flattens nested Values using a key naming strategy.

    Example:
        ```python
        from flatgelf.core.adapter import to_value

        flat = Flattener().flatten(to_value({"a": 1, "b": {"c": True}}))
        # {"_a": Int(1), "_b_c": Bool(True)}
        ```
    """

    def __init__(
        self,
        namer: KeyNamer | None = None,
        hooks: FlattenHooks | None = None,
    ) -> None:
        """Initialize the flattener.

        Args:
            namer: Key naming strategy. Defaults to the configured mode.
            hooks: Optional observability callbacks.
        """
        self._namer = namer if namer is not None else default_namer()
        self._hooks = hooks if hooks is not None else FlattenHooks()

    @property
    def namer(self) -> KeyNamer:
        return self._namer

    def flatten(self, value: Value, prefix: str = "", local: str = "") -> FlatMapping:
        """Flatten a value into a mapping of field names to scalars.

        Args:
            value: The value to flatten.
            prefix: Name of the enclosing path, empty at the root.
            local: Name of this value inside its parent, empty at the root.

        Returns:
            Ordered mapping whose values are never Seq or Map.
        """
        parts: FlatMapping = {}
        self._walk(prefix, local, value, parts)
        return parts

    def merge(self, target: FlatMapping, source: Mapping[str, Value]) -> None:
        """Merge ``source`` into ``target`` in place, last write wins."""
        for key, value in source.items():
            self._insert(target, key, value)

    def _walk(self, prefix: str, local: str, value: Value, parts: FlatMapping) -> None:
        if isinstance(value, Map):
            # @tra: Core.Flatten.Map
            new_prefix = self._namer.name(prefix, local, value)
            for key, item in value.entries:
                self._walk(new_prefix, map_key(key), item, parts)
        elif isinstance(value, Seq):
            # @tra: Core.Flatten.Seq
            new_prefix = self._namer.name(prefix, local, value)
            for index, item in enumerate(value.items):
                self._walk(new_prefix, str(index), item, parts)
        else:
            self._insert(parts, self._namer.name(prefix, local, value), value)

    def _insert(self, parts: FlatMapping, key: str, value: Value) -> None:
        if key in parts:
            # @tra: Core.Flatten.Collision
            previous = parts[key]
            logger.debug("flattened key %r overwritten", key)
            if self._hooks.on_collision is not None:
                self._hooks.on_collision(key, previous, value)
        parts[key] = value


def flatten(
    value: Value,
    prefix: str = "",
    local: str = "",
    *,
    namer: KeyNamer | None = None,
) -> FlatMapping:
    """Flatten a value with a one-off Flattener.

    Args:
        value: The value to flatten.
        prefix: Name of the enclosing path, empty at the root.
        local: Name of this value inside its parent, empty at the root.
        namer: Key naming strategy. Defaults to the configured mode.

    Returns:
        Ordered mapping of flattened names to scalar values.
    """
    return Flattener(namer).flatten(value, prefix, local)
