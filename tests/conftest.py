"""Shared fixtures: isolate every test from the real process environment."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from hostenv.config import get_settings
from hostenv.snapshot import load_environment

_MANAGED_VARS = (
    "HOST",
    "USER",
    "USERNAME",
    "HOSTENV_LOG_LEVEL",
    "HOSTENV_INDENT",
    "FOO",
    "BAR",
    "BAZ",
)


def _clear_caches() -> None:
    load_environment.cache_clear()
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop variables the package reads and reset the process-wide caches."""
    for name in _MANAGED_VARS:
        monkeypatch.delenv(name, raising=False)
    _clear_caches()
    yield
    _clear_caches()
