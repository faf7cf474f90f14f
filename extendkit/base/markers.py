"""Marker values used by the engine and by capability methods.

``UNDEFINED``
    Falsy singleton standing for "no value at all". Treated as nil together
    with ``None``: composing it returns it unchanged.

``SELF`` / ``Explicit``
    The two variants of a reference argument accepted by capability methods.
    ``SELF`` means "the value currently being extended"; ``Explicit(ref)``
    wraps a concrete reference. Bare references are accepted as shorthand for
    ``Explicit``. The engine never inspects either; only the consuming
    capability interprets them (see :func:`resolve_reference`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


class _Undefined:
    """Type of the :data:`UNDEFINED` singleton."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()


class SelfReference:
    """Stateless token meaning "the value currently being extended"."""

    _instance: "SelfReference | None" = None

    def __new__(cls) -> "SelfReference":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SELF"

    def __reduce__(self) -> str:
        return "SELF"


SELF = SelfReference()


@dataclass(frozen=True)
class Explicit:
    """A concrete reference (sibling, child, index...) passed to a capability."""

    ref: Any


RefTarget = Union[Explicit, SelfReference]


def is_self_reference(ref: Any) -> bool:
    return isinstance(ref, SelfReference)


def resolve_reference(ref: Any, current: Any) -> Any:
    """Return the concrete value a reference argument points at.

    ``SELF`` resolves to ``current``; ``Explicit(x)`` and bare values resolve
    to themselves.
    """
    if isinstance(ref, SelfReference):
        return current
    if isinstance(ref, Explicit):
        return ref.ref
    return ref


__all__ = [
    "UNDEFINED",
    "SELF",
    "SelfReference",
    "Explicit",
    "RefTarget",
    "is_self_reference",
    "resolve_reference",
]
