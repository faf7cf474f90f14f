"""Ancestor type-name chains.

A value's lineage is the MRO of its class, which the interpreter computes once
at class creation. The chain lists the named classes of that MRO root-most
first, so ``type_chain(True)`` is ``["object", "int", "bool"]``.
"""

from __future__ import annotations

from typing import Any, List

from .predicates import is_nil
from .type_identity import class_type_name


def type_chain(value: Any) -> List[str]:
    """Return the ancestor type names of ``value``, most general first.

    Anonymous untagged classes contribute no entry. A name carried by several
    classes (``ParseResult`` over its namedtuple base of the same name) appears
    once, at its most derived position. Nil values have an empty chain. The
    result is recomputed on every call.
    """
    if is_nil(value):
        return []
    names: List[str] = []
    for cls in type(value).__mro__:
        name = class_type_name(cls)
        if name is not None and name not in names:
            names.append(name)
    names.reverse()
    return names


__all__ = ["type_chain"]
