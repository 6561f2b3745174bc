"""Process-wide host identity read once at startup."""
from __future__ import annotations

import os
import platform
import sys
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Optional

import psutil

from .binder import read_env_vars

DEFAULT_SEPARATOR = ":"
WINDOWS_SEPARATOR = ";"

# psutil platform flags mapped to Go-style OS family names.
_PSUTIL_FAMILIES = (
    ("LINUX", "linux"),
    ("WINDOWS", "windows"),
    ("MACOS", "darwin"),
    ("FREEBSD", "freebsd"),
    ("OPENBSD", "openbsd"),
    ("NETBSD", "netbsd"),
    ("SUNOS", "solaris"),
    ("AIX", "aix"),
)


@dataclass
class _IdentityVars:
    host: str = ""
    user: str = ""


@dataclass(frozen=True)
class EnvironmentSnapshot:
    host: str
    user: str
    separator: str = DEFAULT_SEPARATOR

    def is_linux(self) -> bool:
        return self.host == "linux"

    def is_windows(self) -> bool:
        return self.host == "windows"


def platform_family() -> str:
    """Return the OS family reported by the platform, e.g. ``linux`` or ``windows``."""
    for flag, family in _PSUTIL_FAMILIES:
        if getattr(psutil, flag, False):
            return family
    return platform.system().lower()


@lru_cache(maxsize=1)
def load_environment() -> EnvironmentSnapshot:
    """Read HOST and USER once per process, falling back to OS defaults.

    Entry points call this before building anything that asks for host identity.
    """
    identity = _IdentityVars()
    read_env_vars(identity, sep=DEFAULT_SEPARATOR)

    if not identity.host:
        identity.host = platform_family()
    if not identity.user:
        # Windows exposes the login name as USERNAME
        identity.user = os.environ.get("USERNAME", "")

    separator = WINDOWS_SEPARATOR if identity.host == "windows" else DEFAULT_SEPARATOR
    return EnvironmentSnapshot(host=identity.host, user=identity.user, separator=separator)


def host() -> str:
    return load_environment().host


def user() -> str:
    return load_environment().user


def is_linux() -> bool:
    return load_environment().is_linux()


def is_windows() -> bool:
    return load_environment().is_windows()


def separator() -> str:
    """Delimiter used to split list-valued variables."""
    return load_environment().separator


def is_little_endian() -> bool:
    return sys.byteorder == "little"


def is_big_endian() -> bool:
    return not is_little_endian()


def native_byte_order() -> str:
    """Return ``"little"`` or ``"big"``, suitable for ``int.to_bytes``."""
    return "little" if is_little_endian() else "big"


def foreign_byte_order() -> str:
    """Return the byte order opposite to the native one."""
    return "big" if is_little_endian() else "little"


def describe(snapshot: Optional[EnvironmentSnapshot] = None) -> Dict[str, Any]:
    """Summarize the host identity as a plain dict."""
    snapshot = snapshot or load_environment()
    return {
        "host": snapshot.host,
        "user": snapshot.user,
        "separator": snapshot.separator,
        "is_linux": snapshot.is_linux(),
        "is_windows": snapshot.is_windows(),
        "byte_order": native_byte_order(),
    }
