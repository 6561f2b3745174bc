"""Runtime configuration helpers."""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from .binder import bind


@dataclass(frozen=True)
class Settings:
    hostenv_log_level: str = "info"
    hostenv_indent: int = 2


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from HOSTENV_* environment variables with sensible defaults."""
    return bind(Settings)
