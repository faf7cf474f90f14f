"""Built-in capability sets.

Each module exposes ``CAPABILITIES`` and a ``register(registry)`` hook. The
hooks are installed at start-up by :func:`register_builtin_extensions`, or all
at once through :func:`default_registry`.
"""

from __future__ import annotations

from types import ModuleType
from typing import Dict, Iterable, Optional

from ..base.errors import ErrorCode, ExtensionError
from ..base.registry import CapabilityRegistry
from ..config import EngineSettings, get_settings
from ..config.defaults import BUILTIN_EXTENSION_NAMES
from . import element, mapping, number, sequence, string, url

_MODULES: Dict[str, ModuleType] = {
    "number": number,
    "string": string,
    "mapping": mapping,
    "sequence": sequence,
    "url": url,
    "element": element,
}


def register_builtin_extensions(
    registry: CapabilityRegistry,
    names: Optional[Iterable[str]] = None,
) -> CapabilityRegistry:
    """Register the named built-in modules (all of them by default)."""
    for name in names if names is not None else BUILTIN_EXTENSION_NAMES:
        module = _MODULES.get(name)
        if module is None:
            raise ExtensionError(code=ErrorCode.VALIDATION, message=f"unknown built-in extension {name!r}")
        module.register(registry)
    return registry


def default_registry(settings: Optional[EngineSettings] = None) -> CapabilityRegistry:
    """Build a registry holding the built-ins enabled in ``settings``."""
    settings = settings if settings is not None else get_settings()
    registry = CapabilityRegistry.from_settings(settings)
    return register_builtin_extensions(registry, settings.builtin_extensions)


__all__ = ["register_builtin_extensions", "default_registry"]
