"""Registry mapping type names to capability sets.

A capability set is a mapping from property name to either a callable (bound
to the extended value on read) or a plain value. Sets are copied into
read-only mappings at registration so later mutation of the caller's dict has
no effect.

The registry is populated once during start-up and only read afterwards;
there is no locking. It is an explicit object handed to every composition
call rather than module-level state.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, List, Optional, Union

from .dto import CapabilitySetInfo
from .errors import ErrorCode, ExtensionError
from .logging import LogContext, get_logger, log_event

Capability = Union[Callable[..., Any], Any]
CapabilitySet = Mapping[str, Capability]


def binds_to_anchor(capability: Any) -> bool:
    """Return True if reading ``capability`` through a view binds it.

    Descriptors (functions, ``property``, ``staticmethod``, ``classmethod``)
    and other non-class callables are bound; classes and plain values are not.
    """
    if isinstance(capability, type):
        return False
    return hasattr(type(capability), "__get__") or callable(capability)


class CapabilityRegistry:
    """Type-name keyed store of capability sets.

    Attributes:
        warn_on_overwrite: Log a warning when a name is registered twice.
        logger: Structured logger instance.
    """

    def __init__(self, *, warn_on_overwrite: bool = True) -> None:
        self._sets: Dict[str, CapabilitySet] = {}
        self.warn_on_overwrite = warn_on_overwrite
        self.logger = get_logger("extendkit.registry")

    @classmethod
    def from_settings(cls, settings: Any) -> "CapabilityRegistry":
        return cls(warn_on_overwrite=settings.warn_on_overwrite)

    def register(self, type_name: str, capability_set: CapabilitySet) -> None:
        """Register ``capability_set`` for ``type_name``; last write wins.

        Raises:
            ExtensionError: ``VALIDATION`` if the name is empty or not a
                string, or if the set is not a mapping with string keys.
        """
        if not isinstance(type_name, str) or not type_name:
            raise ExtensionError(
                code=ErrorCode.VALIDATION,
                message=f"type name must be a non-empty string, got {type_name!r}",
            )
        if not isinstance(capability_set, Mapping):
            raise ExtensionError(
                code=ErrorCode.VALIDATION,
                message=f"capability set must be a mapping, got {type(capability_set).__name__}",
                type_name=type_name,
            )
        bad_keys = [k for k in capability_set if not isinstance(k, str) or not k]
        if bad_keys:
            raise ExtensionError(
                code=ErrorCode.VALIDATION,
                message=f"capability names must be non-empty strings: {bad_keys!r}",
                type_name=type_name,
            )

        self._store(type_name, MappingProxyType(dict(capability_set)), "register")

    def _store(self, type_name: str, frozen: CapabilitySet, operation: str) -> None:
        ctx = LogContext(type_name=type_name, operation=operation)
        if type_name in self._sets and self.warn_on_overwrite:
            log_event(self.logger, "registry.overwrite", ctx, level=logging.WARNING)
        self._sets[type_name] = frozen
        log_event(self.logger, "registry.register", ctx, level=logging.DEBUG, names=sorted(frozen))

    def register_alias(self, alias: str, type_name: str) -> None:
        """Store the set registered for ``type_name`` under ``alias`` as well.

        Both names share one read-only mapping.

        Raises:
            ExtensionError: ``NOT_FOUND`` if ``type_name`` is not registered,
                ``VALIDATION`` if ``alias`` is not a non-empty string.
        """
        existing = self._sets.get(type_name)
        if existing is None:
            raise ExtensionError(
                code=ErrorCode.NOT_FOUND,
                message=f"cannot alias {alias!r} to unregistered type",
                type_name=type_name,
            )
        if not isinstance(alias, str) or not alias:
            raise ExtensionError(
                code=ErrorCode.VALIDATION,
                message=f"alias must be a non-empty string, got {alias!r}",
                type_name=type_name,
            )
        self._store(alias, existing, "register_alias")

    def lookup(self, type_name: str) -> Optional[CapabilitySet]:
        """Return the set registered for ``type_name`` or ``None``."""
        return self._sets.get(type_name)

    def type_names(self) -> List[str]:
        return sorted(self._sets)

    def describe(self, type_name: str) -> Optional[CapabilitySetInfo]:
        capability_set = self._sets.get(type_name)
        if capability_set is None:
            return None
        methods = sorted(k for k, v in capability_set.items() if binds_to_anchor(v))
        fields = sorted(k for k, v in capability_set.items() if not binds_to_anchor(v))
        return CapabilitySetInfo(type_name=type_name, methods=methods, fields=fields)

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._sets

    def __len__(self) -> int:
        return len(self._sets)

    def __iter__(self) -> Iterator[str]:
        return iter(self.type_names())

    def __repr__(self) -> str:
        return f"CapabilityRegistry({self.type_names()!r})"


__all__ = ["Capability", "CapabilitySet", "CapabilityRegistry", "binds_to_anchor"]
