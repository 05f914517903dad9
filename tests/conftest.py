"""Shared test fixtures for all test modules."""

import socket
import time
from collections.abc import Iterator

import pytest

from flatgelf.config import get_settings

_SETTINGS_ENV = (
    "FLATGELF_KEY_NAMING",
    "FLATGELF_DEFAULT_FACILITY",
    "FLATGELF_DEFAULT_FILE",
    "FLATGELF_FALLBACK_HOST",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test from default settings with an empty cache."""
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fixed_time(monkeypatch: pytest.MonkeyPatch) -> float:
    """Freeze the record clock."""
    now = 1702300000.25
    monkeypatch.setattr(time, "time", lambda: now)
    return now


@pytest.fixture
def fixed_host(monkeypatch: pytest.MonkeyPatch) -> str:
    """Pin the resolved host name."""
    monkeypatch.setattr(socket, "gethostname", lambda: "test-host")
    return "test-host"


@pytest.fixture
def typed_naming(monkeypatch: pytest.MonkeyPatch) -> None:
    """Switch the process default to typed-suffix naming."""
    monkeypatch.setenv("FLATGELF_KEY_NAMING", "typed")
    get_settings.cache_clear()
