"""Tests for the flattening engine."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from flatgelf.core.adapter import to_value
from flatgelf.core.errors import InvalidKeyError
from flatgelf.core.flatten import Flattener, FlattenHooks, flatten, map_key
from flatgelf.core.naming import DefaultKeyNamer, TypedSuffixKeyNamer
from flatgelf.core.values import (
    Bool,
    Char,
    Int,
    Map,
    Seq,
    Str,
    Value,
    is_scalar,
)

json_like = st.recursive(
    st.none()
    | st.booleans()
    | st.integers(min_value=-(2**63), max_value=2**64 - 1)
    | st.floats(allow_nan=False)
    | st.text(max_size=10),
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(st.text(max_size=6), children, max_size=4),
    max_leaves=25,
)


def _flat(data: object) -> dict[str, Value]:
    return flatten(to_value(data), namer=DefaultKeyNamer())


class TestFlattenExamples:
    """Worked examples of flattened output."""

    @pytest.mark.tra("Core.Flatten.Map")
    @pytest.mark.tier(0)
    def test_flat_mapping(self) -> None:
        """Top-level keys gain a leading underscore."""
        assert _flat({"a": 1, "b": "x"}) == {"_a": Int(1), "_b": Str("x")}

    @pytest.mark.tra("Core.Flatten.Map")
    @pytest.mark.tier(0)
    def test_nested_mapping(self) -> None:
        """Nested map keys are joined with underscores."""
        assert _flat({"a": 1, "b": {"c": True, "d": "y"}}) == {
            "_a": Int(1),
            "_b_c": Bool(True),
            "_b_d": Str("y"),
        }

    @pytest.mark.tra("Core.Flatten.Seq")
    @pytest.mark.tier(0)
    def test_sequence_uses_indices(self) -> None:
        """Sequence elements are keyed by their index."""
        assert _flat({"a": [True, False]}) == {
            "_a_0": Bool(True),
            "_a_1": Bool(False),
        }

    @pytest.mark.tier(0)
    def test_sequence_at_root(self) -> None:
        """A root sequence yields index keys under the empty prefix."""
        assert _flat(["x", "y"]) == {"_0": Str("x"), "_1": Str("y")}

    @pytest.mark.tier(0)
    def test_deep_nesting(self) -> None:
        """Mixed map and sequence nesting joins every segment."""
        assert _flat({"a": [{"b": [1]}]}) == {"_a_0_b_0": Int(1)}

    @pytest.mark.tier(0)
    def test_root_scalar_has_empty_name(self) -> None:
        """A bare scalar is stored under the empty key."""
        assert _flat(5) == {"": Int(5)}

    @pytest.mark.tier(0)
    def test_empty_containers_produce_nothing(self) -> None:
        """Empty maps and sequences contribute no fields."""
        assert _flat({"a": {}, "b": []}) == {}

    @pytest.mark.tier(0)
    def test_char_keys_are_accepted(self) -> None:
        """Char map keys are used like strings."""
        value = Map(((Char("k"), Int(1)),))
        assert flatten(value, namer=DefaultKeyNamer()) == {"_k": Int(1)}

    @pytest.mark.tier(0)
    def test_prefix_and_local_are_honoured(self) -> None:
        """An explicit prefix and local name start the key path."""
        result = flatten(to_value({"x": 1}), "_ctx", "req", namer=DefaultKeyNamer())
        assert result == {"_ctx_req_x": Int(1)}

    @pytest.mark.tier(0)
    def test_output_follows_traversal_order(self) -> None:
        """Output keys follow depth-first traversal order."""
        assert list(_flat({"z": 1, "a": {"m": 2, "b": 3}})) == ["_z", "_a_m", "_a_b"]


class TestTypedSuffixMode:
    """Flattening with TypedSuffixKeyNamer."""

    @pytest.mark.tra("Core.Naming.TypedSuffix.Table")
    @pytest.mark.tier(0)
    def test_unsigned_signed_and_bool_suffixes(self) -> None:
        """Typed mode appends _double, _long or _bool to integer and bool leaves."""
        flattener = Flattener(TypedSuffixKeyNamer())
        unsigned = Map(((Str("n"), Int(5, width=32, signed=False)),))
        signed = Map(((Str("n"), Int(-5, width=32)),))
        boolean = Map(((Str("n"), Bool(True)),))

        assert list(flattener.flatten(unsigned)) == ["_n_double"]
        assert list(flattener.flatten(signed)) == ["_n_long"]
        assert list(flattener.flatten(boolean)) == ["_n_bool"]

    @pytest.mark.tier(0)
    def test_intermediate_segments_have_no_suffix(self) -> None:
        """Only the leaf segment carries a type suffix."""
        flattener = Flattener(TypedSuffixKeyNamer())
        result = flattener.flatten(to_value({"a": {"b": [1.5, "x"]}}))
        assert list(result) == ["_a_b_0_float", "_a_b_1"]


class TestCollisions:
    """Last-write-wins merge behaviour."""

    @pytest.mark.tra("Core.Flatten.Collision")
    @pytest.mark.tier(0)
    def test_later_branch_wins(self) -> None:
        """When two branches produce the same key the later one wins."""
        assert _flat({"a": ["seq"], "a_0": "scalar"}) == {"_a_0": Str("scalar")}
        assert _flat({"a_0": "scalar", "a": ["seq"]}) == {"_a_0": Str("seq")}

    @pytest.mark.tra("Core.Flatten.Collision")
    @pytest.mark.tier(0)
    def test_collision_hook_is_called(self) -> None:
        """The collision hook gets the key, old value and new value."""
        seen: list[tuple[str, Value, Value]] = []
        flattener = Flattener(
            DefaultKeyNamer(),
            FlattenHooks(on_collision=lambda k, old, new: seen.append((k, old, new))),
        )

        flattener.flatten(to_value({"a": ["seq"], "a_0": "scalar"}))

        assert seen == [("_a_0", Str("seq"), Str("scalar"))]

    @pytest.mark.tier(0)
    def test_merge_overwrites_existing_keys(self) -> None:
        """merge overwrites matching keys and keeps the rest."""
        flattener = Flattener(DefaultKeyNamer())
        target = {"_a": Int(1), "_b": Int(2)}
        flattener.merge(target, {"_b": Int(3), "_c": Int(4)})
        assert target == {"_a": Int(1), "_b": Int(3), "_c": Int(4)}


class TestInvalidKeys:
    """Non-string keys are programming errors."""

    @pytest.mark.tra("Core.Flatten.InvalidKey")
    @pytest.mark.tier(0)
    def test_int_key_raises_invalid_key_error(self) -> None:
        """An int map key raises InvalidKeyError."""
        with pytest.raises(InvalidKeyError, match="MUST be strings or char"):
            _flat({"ok": {1: "a"}})

    @pytest.mark.tier(0)
    def test_invalid_key_error_is_a_type_error(self) -> None:
        """InvalidKeyError is caught by except TypeError."""
        with pytest.raises(TypeError):
            map_key(Int(1))

    @pytest.mark.tier(0)
    def test_map_key_accepts_str_and_char(self) -> None:
        """map_key returns the text of Str and Char keys."""
        assert map_key(Str("abc")) == "abc"
        assert map_key(Char("c")) == "c"


class TestFlattenProperties:
    """Property-based tests for the flattening engine."""

    @pytest.mark.tra("Core.Flatten.Property.ScalarLeaves")
    @pytest.mark.tier(0)
    @given(data=json_like)
    def test_every_leaf_is_scalar(self, data: object) -> None:
        """Flattened values are always scalars."""
        assert all(is_scalar(v) for v in _flat(data).values())

    @pytest.mark.tra("Core.Flatten.Property.Deterministic")
    @pytest.mark.tier(0)
    @given(data=json_like)
    def test_flattening_is_deterministic(self, data: object) -> None:
        """Flattening the same data twice gives the same keys in the same order."""
        first = _flat(data)
        second = _flat(data)
        assert first == second
        assert list(first) == list(second)

    @pytest.mark.tra("Core.Flatten.Property.Reflatten")
    @pytest.mark.tier(0)
    @given(
        data=st.dictionaries(
            st.text(min_size=1, max_size=6),
            st.integers(min_value=-100, max_value=100) | st.text(max_size=5),
            max_size=5,
        )
    )
    def test_reflattening_flat_output_keeps_every_entry(
        self, data: dict[str, object]
    ) -> None:
        """A flat mapping flattens to one entry per key, values and order intact."""
        flat = _flat(data)
        again = flatten(
            Map(tuple((Str(k), v) for k, v in flat.items())), namer=DefaultKeyNamer()
        )

        assert list(again.values()) == list(flat.values())
        assert list(again) == ["_" + key for key in flat]

    @pytest.mark.tier(0)
    @given(data=json_like)
    def test_containers_never_leak(self, data: object) -> None:
        """No Seq or Map survives flattening."""
        assert not any(isinstance(v, (Seq, Map)) for v in _flat(data).values())
