"""Small value predicates used by the engine and the built-in extensions.

``exists(x)`` is the positive nil check; the ``is_*`` helpers test runtime
categories. ``bool`` is deliberately not a number here, matching how the
extensions treat flags.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .markers import UNDEFINED

PRIMITIVE_TYPES = (bool, int, float, complex, str, bytes)


def exists(value: Any) -> bool:
    """Return True unless ``value`` is ``None`` or ``UNDEFINED``."""
    return value is not None and value is not UNDEFINED


def is_nil(value: Any) -> bool:
    return not exists(value)


def is_defined(value: Any) -> bool:
    return value is not UNDEFINED


def is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float, complex)) and not isinstance(value, bool)


def is_str(value: Any) -> bool:
    return isinstance(value, str)


def is_fn(value: Any) -> bool:
    return callable(value) and not isinstance(value, type)


def is_obj(value: Any) -> bool:
    """Object-like: not nil and not a primitive."""
    return exists(value) and not isinstance(value, PRIMITIVE_TYPES)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_primitive(value: Any) -> bool:
    return isinstance(value, PRIMITIVE_TYPES)


__all__ = [
    "PRIMITIVE_TYPES",
    "exists",
    "is_nil",
    "is_defined",
    "is_bool",
    "is_number",
    "is_str",
    "is_fn",
    "is_obj",
    "is_array",
    "is_mapping",
    "is_primitive",
]
