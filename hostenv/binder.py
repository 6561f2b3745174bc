"""Bind dataclass fields from process environment variables.

Each public field is looked up under its upper-cased name. Present, non-empty
values are converted by the field's declared type:

    str        assigned verbatim
    int        strict base-10 signed integer
    list[str]  split literally on the active separator

Any other field type is rejected when a value for it is present.
"""
from __future__ import annotations

import dataclasses
import logging
import os
import re
import sys
import typing
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

T = TypeVar("T")

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Annotations the binder understands, as written under `from __future__ import annotations`.
_STRING_FORMS: Dict[str, Any] = {
    "str": str,
    "int": int,
    "list[str]": List[str],
    "List[str]": List[str],
    "typing.List[str]": List[str],
}


class BindingError(Exception):
    """Base class for environment binding failures."""


class IllegalConversionError(BindingError, ValueError):
    """A variable's text could not be converted to an integer."""

    def __init__(self, variable: str, value: str) -> None:
        super().__init__(f"read_env_vars: illegal integer conversion of {variable}={value!r}")
        self.variable = variable
        self.value = value


class UnsupportedFieldError(BindingError, TypeError):
    """A bound field is declared with a type the binder cannot convert into."""

    def __init__(self, field: str, annotation: Any, reason: str) -> None:
        super().__init__(f"read_env_vars: unexpected {reason} {annotation!r} for field {field!r}")
        self.field = field
        self.annotation = annotation


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def _owner_namespace(cls: type, name: str) -> Dict[str, Any]:
    # String annotations resolve in the module of the class that declared the field.
    owner = next(
        (base for base in reversed(cls.__mro__) if name in vars(base).get("__dataclass_fields__", {})),
        cls,
    )
    module = sys.modules.get(owner.__module__)
    return dict(vars(module)) if module is not None else {}


def _resolve_annotation(cls: type, field: dataclasses.Field) -> Any:
    annotation = field.type
    if not isinstance(annotation, str):
        return annotation
    if annotation in _STRING_FORMS:
        return _STRING_FORMS[annotation]
    try:
        return eval(annotation, _owner_namespace(cls, field.name))
    except Exception as exc:
        raise UnsupportedFieldError(field.name, annotation, "kind") from exc


def _parse_int(variable: str, value: str) -> int:
    # int() alone would also accept whitespace and digit separators
    if not _INTEGER_RE.fullmatch(value):
        raise IllegalConversionError(variable, value)
    return int(value)


def convert_value(name: str, annotation: Any, value: str, sep: str) -> Any:
    """Convert ``value`` into the type declared by ``annotation``."""
    if annotation is str:
        return value
    if annotation is int:
        return _parse_int(name.upper(), value)
    if typing.get_origin(annotation) is list:
        if typing.get_args(annotation) == (str,):
            return value.split(sep)
        raise UnsupportedFieldError(name, annotation, "type")
    raise UnsupportedFieldError(name, annotation, "kind")


def _default_separator() -> str:
    # Imported here: the snapshot itself is built with this module.
    from .snapshot import load_environment

    return load_environment().separator


def resolve_env_values(
    cls: type,
    *,
    sep: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """Return converted values for every public field of ``cls`` that has a variable set.

    Fields without a variable, or with an empty one, are absent from the result,
    and their annotations are never evaluated.
    """
    if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
        raise TypeError(f"expected a dataclass type, got {cls!r}")
    source = os.environ if environ is None else environ

    values: Dict[str, Any] = {}
    for field in dataclasses.fields(cls):
        if not _is_public(field.name):
            continue
        raw = source.get(field.name.upper())
        if not raw:
            continue
        if sep is None:
            sep = _default_separator()
        annotation = _resolve_annotation(cls, field)
        values[field.name] = convert_value(field.name, annotation, raw, sep)
        logging.debug("Bound %s.%s from %s", cls.__name__, field.name, field.name.upper())
    return values


def read_env_vars(
    target: Any,
    *,
    sep: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> None:
    """Override the fields of a dataclass instance with matching environment variables.

    Nothing is written unless every present variable converts cleanly.

    Raises:
        TypeError: ``target`` is not a mutable dataclass instance.
        IllegalConversionError: an integer field's variable is not a base-10 integer.
        UnsupportedFieldError: a variable is set for a field of an unsupported type.
    """
    if isinstance(target, type) or not dataclasses.is_dataclass(target):
        raise TypeError(f"read_env_vars expects a dataclass instance, got {target!r}")
    cls = type(target)
    if cls.__dataclass_params__.frozen:
        raise TypeError(f"{cls.__name__} is frozen; use bind() to build a bound copy")

    for name, value in resolve_env_values(cls, sep=sep, environ=environ).items():
        setattr(target, name, value)


def bind(
    cls: Type[T],
    *,
    sep: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> T:
    """Instantiate ``cls`` with its defaults and return it with environment overrides applied."""
    values = resolve_env_values(cls, sep=sep, environ=environ)
    init_names = {field.name for field in dataclasses.fields(cls) if field.init}

    bound = dataclasses.replace(cls(), **{name: value for name, value in values.items() if name in init_names})
    # replace() cannot take init=False fields; frozen classes need object.__setattr__
    for name, value in values.items():
        if name not in init_names:
            object.__setattr__(bound, name, value)
    return bound
