"""Composite views: one capability layer over a target.

A :class:`CompositeView` answers attribute reads from its capability set
first and delegates everything else to its target, which is either another
view (the next, more general layer) or a ``Reference``/``PrimitiveBox`` around
the original value. Every layer of one composition shares the same anchor,
the original value, so capability methods always receive it as their
receiver no matter how many layers sit in front of them.

Special methods bypass ``__getattr__``, so the ones a value can meaningfully
support are defined on the view class and routed through the same layered
lookup. A capability set may therefore shadow ``__str__`` or ``__len__`` as
well as ordinary names.
"""

from __future__ import annotations

from types import MappingProxyType, MethodType, ModuleType
from typing import Any, Callable, List, Mapping, Optional

from .boxing import PrimitiveBox, Reference, as_target

_EMPTY: Mapping[str, Any] = MappingProxyType({})


def _bind(capability: Any, anchor: Any) -> Any:
    """Bind a capability value to ``anchor`` the way a method is bound."""
    if isinstance(capability, (type, MethodType)):
        return capability
    getter = getattr(type(capability), "__get__", None)
    if getter is not None:
        return getter(capability, anchor, type(anchor))
    if callable(capability):
        owner = getattr(capability, "__self__", None)
        if owner is None or isinstance(owner, ModuleType):
            return MethodType(capability, anchor)
    return capability


def _lookup(view: "CompositeView", name: str) -> Any:
    """Resolve ``name`` through ``view`` and every layer behind it."""
    while True:
        capabilities = object.__getattribute__(view, "_ek_capabilities")
        if name in capabilities:
            return _bind(capabilities[name], object.__getattribute__(view, "_ek_anchor"))
        target = object.__getattribute__(view, "_ek_target")
        if not isinstance(target, CompositeView):
            return target.read(name)
        view = target


def _innermost(view: "CompositeView") -> Any:
    target = object.__getattribute__(view, "_ek_target")
    while isinstance(target, CompositeView):
        target = object.__getattribute__(target, "_ek_target")
    return target


def _plain(value: Any) -> Any:
    return object.__getattribute__(value, "_ek_anchor") if isinstance(value, CompositeView) else value


def _unary(name: str, fallback: Optional[Callable[..., Any]] = None) -> Callable[..., Any]:
    def method(self, *args):
        try:
            impl = _lookup(self, name)
        except AttributeError:
            if fallback is not None:
                # Missing hook: let the builtin try the value's other protocols.
                return fallback(_innermost(self).unwrap(), *(_plain(a) for a in args))
            kind = type(object.__getattribute__(self, "_ek_anchor")).__name__
            raise TypeError(f"'{kind}' object does not support {name}") from None
        return impl(*(_plain(a) for a in args))

    method.__name__ = name
    return method


def _binary(name: str) -> Callable[..., Any]:
    def method(self, other):
        try:
            impl = _lookup(self, name)
        except AttributeError:
            return NotImplemented
        return impl(_plain(other))

    method.__name__ = name
    return method


def _inplace(name: str) -> Callable[..., Any]:
    def method(self, other):
        try:
            impl = _lookup(self, name)
        except AttributeError:
            return NotImplemented
        result = impl(_plain(other))
        # Mutating in-place ops return the receiver; keep the caller on the view.
        if result is object.__getattribute__(self, "_ek_anchor"):
            return self
        return result

    method.__name__ = name
    return method


class CompositeView:
    """One capability layer over a target.

    Built by :func:`build`; not meant to be instantiated directly.
    """

    __slots__ = ("_ek_target", "_ek_capabilities", "_ek_anchor", "_ek_type_name")

    def __getattr__(self, name: str) -> Any:
        return _lookup(self, name)

    def __setattr__(self, name: str, value: Any) -> None:
        _innermost(self).write(name, value)

    def __delattr__(self, name: str) -> None:
        _innermost(self).delete(name)

    @property  # type: ignore[misc]
    def __class__(self) -> type:
        return type(object.__getattribute__(self, "_ek_anchor"))

    def __dir__(self) -> List[str]:
        names = set(dir(_innermost(self).unwrap()))
        view: Any = self
        while isinstance(view, CompositeView):
            names.update(object.__getattribute__(view, "_ek_capabilities"))
            view = object.__getattribute__(view, "_ek_target")
        if isinstance(view, PrimitiveBox):
            names.update(view.overlay)
        return sorted(names)

    def __bool__(self) -> bool:
        for name in ("__bool__", "__len__"):
            try:
                impl = _lookup(self, name)
            except AttributeError:
                continue
            return bool(impl())
        return True

    def __contains__(self, item: Any) -> bool:
        try:
            impl = _lookup(self, "__contains__")
        except AttributeError:
            return any(x is item or x == item for x in iter(self))
        return bool(impl(_plain(item)))

    def __hash__(self) -> int:
        impl = _lookup(self, "__hash__")
        if impl is None:
            kind = type(object.__getattribute__(self, "_ek_anchor")).__name__
            raise TypeError(f"unhashable type: '{kind}'")
        return impl()

    __repr__ = _unary("__repr__")
    __str__ = _unary("__str__")
    __format__ = _unary("__format__")
    __bytes__ = _unary("__bytes__", bytes)
    __len__ = _unary("__len__")
    __iter__ = _unary("__iter__", iter)
    __next__ = _unary("__next__")
    __reversed__ = _unary("__reversed__", reversed)
    __getitem__ = _unary("__getitem__")
    __setitem__ = _unary("__setitem__")
    __delitem__ = _unary("__delitem__")
    __enter__ = _unary("__enter__")
    __exit__ = _unary("__exit__")
    __int__ = _unary("__int__", int)
    __float__ = _unary("__float__", float)
    __complex__ = _unary("__complex__", complex)
    __index__ = _unary("__index__")
    __round__ = _unary("__round__")
    __trunc__ = _unary("__trunc__")
    __floor__ = _unary("__floor__")
    __ceil__ = _unary("__ceil__")
    __neg__ = _unary("__neg__")
    __pos__ = _unary("__pos__")
    __abs__ = _unary("__abs__")
    __invert__ = _unary("__invert__")

    __eq__ = _binary("__eq__")
    __ne__ = _binary("__ne__")
    __lt__ = _binary("__lt__")
    __le__ = _binary("__le__")
    __gt__ = _binary("__gt__")
    __ge__ = _binary("__ge__")

    __add__ = _binary("__add__")
    __sub__ = _binary("__sub__")
    __mul__ = _binary("__mul__")
    __matmul__ = _binary("__matmul__")
    __truediv__ = _binary("__truediv__")
    __floordiv__ = _binary("__floordiv__")
    __mod__ = _binary("__mod__")
    __divmod__ = _binary("__divmod__")
    __pow__ = _binary("__pow__")
    __lshift__ = _binary("__lshift__")
    __rshift__ = _binary("__rshift__")
    __and__ = _binary("__and__")
    __xor__ = _binary("__xor__")
    __or__ = _binary("__or__")

    __radd__ = _binary("__radd__")
    __rsub__ = _binary("__rsub__")
    __rmul__ = _binary("__rmul__")
    __rmatmul__ = _binary("__rmatmul__")
    __rtruediv__ = _binary("__rtruediv__")
    __rfloordiv__ = _binary("__rfloordiv__")
    __rmod__ = _binary("__rmod__")
    __rdivmod__ = _binary("__rdivmod__")
    __rpow__ = _binary("__rpow__")
    __rlshift__ = _binary("__rlshift__")
    __rrshift__ = _binary("__rrshift__")
    __rand__ = _binary("__rand__")
    __rxor__ = _binary("__rxor__")
    __ror__ = _binary("__ror__")

    __iadd__ = _inplace("__iadd__")
    __isub__ = _inplace("__isub__")
    __imul__ = _inplace("__imul__")
    __itruediv__ = _inplace("__itruediv__")
    __ifloordiv__ = _inplace("__ifloordiv__")
    __imod__ = _inplace("__imod__")
    __iand__ = _inplace("__iand__")
    __ior__ = _inplace("__ior__")
    __ixor__ = _inplace("__ixor__")


class CallableCompositeView(CompositeView):
    """View over a callable anchor; ``callable(view)`` mirrors the original."""

    __slots__ = ()

    __call__ = _unary("__call__")


def build(
    target: Any,
    capability_set: Optional[Mapping[str, Any]],
    anchor: Any,
    type_name: Optional[str] = None,
) -> CompositeView:
    """Return a view layering ``capability_set`` over ``target``.

    ``target`` may be a raw value (tagged via ``as_target``), a
    ``Reference``/``PrimitiveBox``, or a previously built view. ``anchor`` is
    the original value every bound capability receives.
    """
    if not isinstance(target, (CompositeView, Reference, PrimitiveBox)):
        target = as_target(target)
    cls = CallableCompositeView if callable(anchor) else CompositeView
    view = object.__new__(cls)
    object.__setattr__(view, "_ek_target", target)
    object.__setattr__(view, "_ek_capabilities", capability_set if capability_set is not None else _EMPTY)
    object.__setattr__(view, "_ek_anchor", anchor)
    object.__setattr__(view, "_ek_type_name", type_name)
    return view


def is_view(obj: Any) -> bool:
    return isinstance(obj, CompositeView)


def unwrap(obj: Any) -> Any:
    """Return the original value behind a view, or ``obj`` unchanged."""
    return _plain(obj)


def view_layers(obj: Any) -> List[Optional[str]]:
    """Type names of the layers of ``obj``, outermost (most specific) first."""
    names: List[Optional[str]] = []
    while isinstance(obj, CompositeView):
        names.append(object.__getattribute__(obj, "_ek_type_name"))
        obj = object.__getattribute__(obj, "_ek_target")
    return names


def view_target(obj: "CompositeView") -> Any:
    """The innermost ``Reference``/``PrimitiveBox`` of a view."""
    return _innermost(obj)


__all__ = [
    "CompositeView",
    "CallableCompositeView",
    "build",
    "is_view",
    "unwrap",
    "view_layers",
    "view_target",
]
