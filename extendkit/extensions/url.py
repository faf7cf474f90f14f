"""Capabilities for parsed URLs (``urllib.parse.urlparse``/``urlsplit`` results).

Query and fragment items use ``application/x-www-form-urlencoded`` parsing.
Single-name reads return the first value; whole-collection reads keep the
last value of repeated names.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple
from urllib.parse import parse_qsl

from ..base.registry import CapabilityRegistry
from .string import matches


def _items(text: str) -> List[Tuple[str, str]]:
    return parse_qsl(text, keep_blank_values=True)


def _first(items: List[Tuple[str, str]], name: str) -> Optional[str]:
    for key, value in items:
        if key == name:
            return value
    return None


def _collect(text: str, names: Optional[Sequence[str]]) -> Dict[str, Optional[str]]:
    items = _items(text)
    if isinstance(names, (list, tuple)):
        return {name: _first(items, name) for name in names}
    return dict(items)


def path_starts_with(this: Any, text: str) -> bool:
    return this.path.startswith(text)


def path_matches(this: Any, search: Any) -> bool:
    return matches(this.path, search)


def search_param(this: Any, name: str) -> Optional[str]:
    return _first(_items(this.query), name)


def search_params(this: Any, names: Optional[Sequence[str]] = None) -> Dict[str, Optional[str]]:
    return _collect(this.query, names)


def fragment_items(this: Any, names: Optional[Sequence[str]] = None) -> Dict[str, Optional[str]]:
    return _collect(this.fragment, names)


def fragment_item(this: Any, name: str) -> Optional[str]:
    return fragment_items(this, [name])[name]


CAPABILITIES = {
    "path_starts_with": path_starts_with,
    "path_matches": path_matches,
    "search_param": search_param,
    "search_params": search_params,
    "fragment_items": fragment_items,
    "fragment_item": fragment_item,
}


def register(registry: CapabilityRegistry) -> None:
    registry.register("ParseResult", CAPABILITIES)
    registry.register_alias("SplitResult", "ParseResult")


__all__ = ["CAPABILITIES", "register", *CAPABILITIES]
