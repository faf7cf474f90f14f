"""Entry-wise capabilities for mappings.

Registered for ``dict`` and aliased for ``mappingproxy``. Callbacks receive
``(key, value, index)`` except ``map_values``, which receives
``(value, key, index)``.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping

from ..base.registry import CapabilityRegistry


def for_each(this: Mapping[Any, Any], body: Callable[[Any, Any, int], Any]) -> None:
    for index, (key, value) in enumerate(list(this.items())):
        body(key, value, index)


def map_array(this: Mapping[Any, Any], transform: Callable[[Any, Any, int], Any]) -> List[Any]:
    return [transform(key, value, index) for index, (key, value) in enumerate(this.items())]


def map_keys(this: Mapping[Any, Any], transform: Callable[[Any, Any, int], Any]) -> Dict[Any, Any]:
    return {transform(key, value, index): value for index, (key, value) in enumerate(this.items())}


def map_values(this: Mapping[Any, Any], transform: Callable[[Any, Any, int], Any]) -> Dict[Any, Any]:
    return {key: transform(value, key, index) for index, (key, value) in enumerate(this.items())}


def join(this: Mapping[Any, Any], kv_sep: str = ": ", entry_sep: str = "\n") -> str:
    """Render entries as ``key<kv_sep>value`` joined by ``entry_sep``."""
    return entry_sep.join(f"{key}{kv_sep}{value}" for key, value in this.items())


CAPABILITIES = {
    "for_each": for_each,
    "map_array": map_array,
    "map_keys": map_keys,
    "map_values": map_values,
    "join": join,
}


def register(registry: CapabilityRegistry) -> None:
    registry.register("dict", CAPABILITIES)
    registry.register_alias("mappingproxy", "dict")


__all__ = ["CAPABILITIES", "register", *CAPABILITIES]
