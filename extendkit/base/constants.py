"""Stable type-name constants shared by the composition engine.

Kept free of imports from other engine modules so every layer (identity,
chain walking, registry, driver) can depend on it without cycles.
"""

from __future__ import annotations

# Names reported for nil values. Diagnostics only; composition short-circuits.
NULL_TYPE_NAME = "null"
UNDEFINED_TYPE_NAME = "undefined"

# Reported for object-like values with no named lineage to walk.
NULL_OBJECT_TYPE_NAME = "NullObject"

# Capability set applied to ``NullObject`` values (and the root of every chain).
GENERIC_TYPE_NAME = "object"

# Attribute consulted when a class or value has no usable ``__name__``.
TYPE_TAG_ATTR = "__type_tag__"

# Runtime categories for primitives whose class is anonymous.
CATEGORY_NUMBER = "number"
CATEGORY_STRING = "string"
CATEGORY_BOOLEAN = "boolean"
CATEGORY_BYTES = "bytes"
CATEGORY_OBJECT = "object"

__all__ = [
    "NULL_TYPE_NAME",
    "UNDEFINED_TYPE_NAME",
    "NULL_OBJECT_TYPE_NAME",
    "GENERIC_TYPE_NAME",
    "TYPE_TAG_ATTR",
    "CATEGORY_NUMBER",
    "CATEGORY_STRING",
    "CATEGORY_BOOLEAN",
    "CATEGORY_BYTES",
    "CATEGORY_OBJECT",
]
