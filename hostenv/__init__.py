"""Bind dataclass fields from environment variables and report host identity."""
from importlib.metadata import PackageNotFoundError, version

from .binder import (
    BindingError,
    IllegalConversionError,
    UnsupportedFieldError,
    bind,
    read_env_vars,
)
from .snapshot import (
    EnvironmentSnapshot,
    foreign_byte_order,
    host,
    is_big_endian,
    is_linux,
    is_little_endian,
    is_windows,
    load_environment,
    native_byte_order,
    separator,
    user,
)

__all__ = [
    "BindingError",
    "EnvironmentSnapshot",
    "IllegalConversionError",
    "UnsupportedFieldError",
    "bind",
    "foreign_byte_order",
    "host",
    "is_big_endian",
    "is_linux",
    "is_little_endian",
    "is_windows",
    "load_environment",
    "native_byte_order",
    "read_env_vars",
    "separator",
    "user",
    "__version__",
]

try:
    __version__ = version("hostenv")
except PackageNotFoundError:  # pragma: no cover - fallback when package metadata missing
    __version__ = "0.1.0"
