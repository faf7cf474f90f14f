"""extendkit package

Capability composition for arbitrary Python values: register named capability
sets per type, then ``compose(value)`` to get a view of the value whose
attributes are extended by every set along its type lineage, most specific
type first.

Public API (re-exported):
    - Engine: :class:`Composer`, :func:`compose`, :class:`CapabilityRegistry`
    - Introspection: :func:`identify`, :func:`type_chain`, :func:`unwrap`,
      :func:`view_layers`, :func:`is_view`
    - Markers: ``SELF``, ``UNDEFINED``, :class:`Explicit`
    - Errors: :class:`ExtensionError`, :class:`ErrorCode`
    - Built-ins: :func:`default_registry`, :func:`register_builtin_extensions`
    - Settings: :func:`get_settings`, :class:`EngineSettings`

Example::

    from extendkit import Composer, default_registry

    _ = Composer(default_registry())
    _(7285).time_formatted()        # "2:01:25"
    _("1:30").parse_duration()      # 90
"""

from .base import (
    SELF,
    UNDEFINED,
    CapabilityRegistry,
    Composer,
    CompositeView,
    ErrorCode,
    Explicit,
    ExtensionError,
    compose,
    identify,
    is_view,
    type_chain,
    unwrap,
    view_layers,
)
from .config import EngineSettings, get_settings
from .extensions import default_registry, register_builtin_extensions

__version__ = "0.3.0"

__all__ = [
    "__version__",
    "SELF",
    "UNDEFINED",
    "CapabilityRegistry",
    "Composer",
    "CompositeView",
    "ErrorCode",
    "Explicit",
    "ExtensionError",
    "compose",
    "identify",
    "is_view",
    "type_chain",
    "unwrap",
    "view_layers",
    "EngineSettings",
    "get_settings",
    "default_registry",
    "register_builtin_extensions",
]
