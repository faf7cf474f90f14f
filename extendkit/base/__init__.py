"""Composition engine core.

Leaves first: type identification, chain walking, the capability registry,
composition targets (boxing), composite views, and the composition driver.
"""

from .boxing import PrimitiveBox, Reference, as_target, box, is_object_like
from .chain import type_chain
from .composer import Composer, compose
from .constants import GENERIC_TYPE_NAME, NULL_OBJECT_TYPE_NAME, TYPE_TAG_ATTR
from .errors import ErrorCode, ExtensionError
from .markers import SELF, UNDEFINED, Explicit, SelfReference, resolve_reference
from .registry import CapabilityRegistry, CapabilitySet
from .type_identity import class_type_name, identify
from .view import CompositeView, build, is_view, unwrap, view_layers

__all__ = [
    "PrimitiveBox",
    "Reference",
    "as_target",
    "box",
    "is_object_like",
    "type_chain",
    "Composer",
    "compose",
    "GENERIC_TYPE_NAME",
    "NULL_OBJECT_TYPE_NAME",
    "TYPE_TAG_ATTR",
    "ErrorCode",
    "ExtensionError",
    "SELF",
    "UNDEFINED",
    "Explicit",
    "SelfReference",
    "resolve_reference",
    "CapabilityRegistry",
    "CapabilitySet",
    "class_type_name",
    "identify",
    "CompositeView",
    "build",
    "is_view",
    "unwrap",
    "view_layers",
]
