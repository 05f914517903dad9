"""BDD step definitions for record assembly features."""

import json
from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from flatgelf.core.encoding.ndjson import encode_record
from flatgelf.core.flatten import FlattenHooks
from flatgelf.core.models import GelfRecord
from flatgelf.core.naming import DefaultKeyNamer


@dataclass
class RecordScenarioContext:
    """Shared state between steps in a record scenario."""

    record: GelfRecord | None = None
    payload: dict[str, object] = field(default_factory=dict)
    collisions: list[str] = field(default_factory=list)
    failures: list[object] = field(default_factory=list)

    @property
    def current(self) -> GelfRecord:
        assert self.record is not None, "no record in scenario"
        return self.record


@pytest.fixture
def ctx() -> RecordScenarioContext:
    """Fresh scenario context for each test."""
    return RecordScenarioContext()


# === Background Steps ===
@given(parsers.parse('a fresh record on host "{host}"'))
def step_fresh_record(ctx: RecordScenarioContext, host: str) -> None:
    hooks = FlattenHooks(
        on_collision=lambda key, old, new: ctx.collisions.append(key),
        on_conversion_failure=lambda data, exc: ctx.failures.append(data),
    )
    ctx.record = GelfRecord(host=host, namer=DefaultKeyNamer(), hooks=hooks)


# === Assembly Steps ===
@when(parsers.parse("additional fields {data} are added"))
def step_add_fields(ctx: RecordScenarioContext, data: str) -> None:
    ctx.record = ctx.current.add_additional_fields(json.loads(data))


@when("unconvertible additional fields are added")
def step_add_unconvertible(ctx: RecordScenarioContext) -> None:
    ctx.record = ctx.current.add_additional_fields({"a": object()})


@when(parsers.parse("the level is set to {ordinal:d}"))
def step_set_level(ctx: RecordScenarioContext, ordinal: int) -> None:
    ctx.record = ctx.current.set_level(ordinal)  # type: ignore[arg-type]


@when("the record is encoded")
def step_encode(ctx: RecordScenarioContext) -> None:
    ctx.payload = json.loads(encode_record(ctx.current))


# === Payload Assertions ===
@then(parsers.parse('the payload field "{name}" is {value}'))
def step_payload_field(ctx: RecordScenarioContext, name: str, value: str) -> None:
    expected = json.loads(value)
    assert name in ctx.payload
    assert ctx.payload[name] == expected
    assert type(ctx.payload[name]) is type(expected)


@then(parsers.parse('the payload has no field "{name}"'))
def step_payload_missing(ctx: RecordScenarioContext, name: str) -> None:
    assert name not in ctx.payload


@then(parsers.parse("{count:d} collision was reported"))
def step_collisions(ctx: RecordScenarioContext, count: int) -> None:
    assert len(ctx.collisions) == count


@then(parsers.parse("{count:d} conversion failure was reported"))
def step_failures(ctx: RecordScenarioContext, count: int) -> None:
    assert len(ctx.failures) == count
