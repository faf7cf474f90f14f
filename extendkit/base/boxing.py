"""Composition targets: the ``Reference | PrimitiveBox`` tagged union.

Views read and write through a target rather than through the raw value so
that primitives, which reject attribute assignment, can be extended the same
way as objects. ``PrimitiveBox`` keeps rejected writes in an overlay that is
consulted before the wrapped value on reads.
"""

from __future__ import annotations

from typing import Any, Dict, Union

from .predicates import is_obj


class Reference:
    """Target wrapping an object-like value; reads and writes go straight through."""

    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value

    def unwrap(self) -> Any:
        return self.value

    def read(self, name: str) -> Any:
        return getattr(self.value, name)

    def write(self, name: str, new_value: Any) -> None:
        setattr(self.value, name, new_value)

    def delete(self, name: str) -> None:
        delattr(self.value, name)

    def __repr__(self) -> str:
        return f"Reference({self.value!r})"


class PrimitiveBox:
    """Carrier making a primitive usable as the target of a view.

    One box per composition call; never shared.
    """

    __slots__ = ("value", "overlay")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.overlay: Dict[str, Any] = {}

    def unwrap(self) -> Any:
        return self.value

    def set(self, new_inner: Any) -> None:
        """Replace the wrapped value; the overlay is kept."""
        self.value = new_inner

    def read(self, name: str) -> Any:
        if name in self.overlay:
            return self.overlay[name]
        return getattr(self.value, name)

    def write(self, name: str, new_value: Any) -> None:
        # Built-in primitives raise AttributeError; str/int subclasses may accept.
        try:
            setattr(self.value, name, new_value)
        except (AttributeError, TypeError):
            self.overlay[name] = new_value
        else:
            self.overlay.pop(name, None)

    def delete(self, name: str) -> None:
        if name in self.overlay:
            del self.overlay[name]
            return
        delattr(self.value, name)

    def __repr__(self) -> str:
        return f"PrimitiveBox({self.value!r})"


Target = Union[Reference, PrimitiveBox]


def is_object_like(value: Any) -> bool:
    """Whether ``value`` can be a view target without boxing."""
    return is_obj(value)


def box(value: Any) -> PrimitiveBox:
    return PrimitiveBox(value)


def as_target(value: Any) -> Target:
    """Tag ``value`` as a :class:`Reference` or a :class:`PrimitiveBox`."""
    return Reference(value) if is_object_like(value) else PrimitiveBox(value)


__all__ = ["Reference", "PrimitiveBox", "Target", "is_object_like", "box", "as_target"]
