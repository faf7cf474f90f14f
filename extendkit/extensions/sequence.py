"""Sequence capabilities, registered for ``list`` and aliased for ``tuple``."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Sequence


from ..base.registry import CapabilityRegistry


def last(this: Sequence[Any]) -> Any:
    """The final element, or ``None`` for an empty sequence."""
    return this[-1] if len(this) else None


def count_where(this: Sequence[Any], filter_fn: Optional[Callable[[Any], Any]] = None) -> int:
    """Number of elements passing ``filter_fn`` (all elements without one)."""
    if not callable(filter_fn):
        return len(this)
    return sum(1 for element in this if filter_fn(element))


def map_object(this: Sequence[Any], transform: Callable[[Any], Any]) -> Dict[Any, Any]:
    """Build a dict from ``(key, value)`` pairs produced by ``transform``."""
    return dict(transform(element) for element in this)


def filter_map(this: Sequence[Any], keep: Callable[[Any], Any], transform: Callable[[Any], Any]) -> List[Any]:
    return [transform(element) for element in this if keep(element)]


def sorted_by(this: Sequence[Any], transform: Callable[[Any], Any], inverse: bool = False) -> List[Any]:
    """Copy sorted by ``transform``: descending by default, ascending with ``inverse``."""
    return sorted(this, key=transform, reverse=not inverse)


CAPABILITIES = {
    "last": last,
    "count_where": count_where,
    "map_object": map_object,
    "filter_map": filter_map,
    "sorted_by": sorted_by,
}


def register(registry: CapabilityRegistry) -> None:
    registry.register("list", CAPABILITIES)
    registry.register_alias("tuple", "list")


__all__ = ["CAPABILITIES", "register", *CAPABILITIES]
