"""Canonical type names for arbitrary runtime values.

Resolution order for :func:`identify`:

1. ``None`` / ``UNDEFINED`` -> ``"null"`` / ``"undefined"``.
2. Named callables (functions, builtins, bound methods, classes) -> their
   ``__name__`` when ``func_names`` is true. ``"<lambda>"`` is anonymous.
3. The class name of the value.
4. A ``__type_tag__`` string on the value.
5. ``"NullObject"`` for object-like values with nothing above.
6. The primitive category (``"number"``, ``"string"``...).

All functions here are pure and never raise.
"""

from __future__ import annotations

from typing import Any, Optional

from .constants import (
    CATEGORY_BOOLEAN,
    CATEGORY_BYTES,
    CATEGORY_NUMBER,
    CATEGORY_OBJECT,
    CATEGORY_STRING,
    NULL_OBJECT_TYPE_NAME,
    NULL_TYPE_NAME,
    TYPE_TAG_ATTR,
    UNDEFINED_TYPE_NAME,
)
from .markers import UNDEFINED
from .predicates import is_primitive

_ANONYMOUS_NAMES = frozenset(("", "<lambda>"))


def _usable_name(name: Any) -> Optional[str]:
    if isinstance(name, str) and name not in _ANONYMOUS_NAMES:
        return name
    return None


def _tag_of(obj: Any) -> Optional[str]:
    # Arbitrary __getattr__ implementations may raise anything here.
    try:
        tag = getattr(obj, TYPE_TAG_ATTR, None)
    except Exception:  # noqa: BLE001
        return None
    return _usable_name(tag)


def category(value: Any) -> str:
    """Return the runtime category of ``value``."""
    if isinstance(value, bool):
        return CATEGORY_BOOLEAN
    if isinstance(value, (int, float, complex)):
        return CATEGORY_NUMBER
    if isinstance(value, str):
        return CATEGORY_STRING
    if isinstance(value, bytes):
        return CATEGORY_BYTES
    return CATEGORY_OBJECT


def identify(value: Any, func_names: bool = True) -> str:
    """Return the canonical type name of ``value``."""
    if value is None:
        return NULL_TYPE_NAME
    if value is UNDEFINED:
        return UNDEFINED_TYPE_NAME

    if func_names and callable(value):
        name = _usable_name(getattr(value, "__name__", None))
        if name:
            return name

    name = _usable_name(type(value).__name__)
    if name:
        return name

    tag = _tag_of(value)
    if tag:
        return tag

    if not is_primitive(value):
        return NULL_OBJECT_TYPE_NAME
    return category(value)


def class_type_name(cls: type) -> Optional[str]:
    """Return the name ``cls`` contributes to a type chain.

    The class's own ``__name__``, else a ``__type_tag__`` defined in the class
    body (inherited tags do not count), else ``None``.
    """
    name = _usable_name(cls.__name__)
    if name:
        return name
    return _usable_name(vars(cls).get(TYPE_TAG_ATTR))


__all__ = ["identify", "class_type_name", "category"]
