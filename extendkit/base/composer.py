"""Composition driver: the engine's public entry point.

``Composer(registry).compose(value)`` folds every capability set registered
along the value's type chain into nested views. The chain is walked root-most
first, so each more specific layer wraps the more general ones and wins name
conflicts (most-derived type wins). Every layer is anchored to the original
value.

Short-circuits:
- ``None`` and ``UNDEFINED`` are returned unchanged.
- An explicit ``type_name`` builds exactly one layer from that set, ignoring
  the value's lineage.
- ``NullObject`` values get one layer from the generic set.
- A value with no registered set along its chain is returned as-is.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

from ..config import EngineSettings, get_settings
from .boxing import is_object_like
from .chain import type_chain
from .constants import NULL_OBJECT_TYPE_NAME
from .dto import CompositionPlan
from .logging import LogContext, get_logger, log_event
from .predicates import is_nil
from .registry import CapabilityRegistry, CapabilitySet
from .type_identity import identify
from .view import build, is_view, unwrap


class Composer:
    """Binds a registry to the composition algorithm.

    Instances are callable, so a module can keep ``_ = Composer(registry)``
    and write ``_(value).capability()``.

    Attributes:
        registry: Capability sets consulted on every call.
        settings: Engine settings (generic type name, tracing).
        logger: Structured logger instance.
    """

    def __init__(self, registry: CapabilityRegistry, settings: Optional[EngineSettings] = None) -> None:
        self.registry = registry
        self.settings = settings if settings is not None else get_settings()
        self.logger = get_logger("extendkit.composer")

    def _layers(self, value: Any, type_name: Optional[str]) -> Tuple[CompositionPlan, List[Tuple[str, CapabilitySet]]]:
        value_type = identify(value)
        if is_nil(value):
            return CompositionPlan(value_type=value_type), []

        boxed = not is_object_like(value)
        if type_name is not None:
            capability_set = self.registry.lookup(type_name) or {}
            plan = CompositionPlan(value_type=value_type, layers=[type_name], explicit=True, boxed=boxed)
            return plan, [(type_name, capability_set)]

        if value_type == NULL_OBJECT_TYPE_NAME:
            generic = self.settings.generic_type_name
            capability_set = self.registry.lookup(generic) or {}
            plan = CompositionPlan(value_type=value_type, layers=[generic], boxed=boxed)
            return plan, [(generic, capability_set)]

        chain = type_chain(value)
        layers: List[Tuple[str, CapabilitySet]] = []
        for name in chain:
            capability_set = self.registry.lookup(name)
            if capability_set is not None:
                layers.append((name, capability_set))
        plan = CompositionPlan(
            value_type=value_type,
            chain=chain,
            layers=[name for name, _ in layers],
            boxed=boxed and bool(layers),
        )
        return plan, layers

    def plan(self, value: Any, type_name: Optional[str] = None) -> CompositionPlan:
        """Describe the composition of ``value`` without building views."""
        return self._layers(unwrap(value), type_name)[0]

    def compose(self, value: Any, type_name: Optional[str] = None) -> Any:
        """Return ``value`` extended by its applicable capability sets.

        Parameters:
            value: Any runtime value. A view is recomposed from its original.
            type_name: Registry key to apply instead of walking the lineage.

        Returns:
            The outermost view, or ``value`` itself when nothing applies.
        """
        if is_view(value):
            value = unwrap(value)
        if is_nil(value):
            return value

        plan, layers = self._layers(value, type_name)
        composite: Any = value
        for name, capability_set in layers:
            composite = build(composite, capability_set, value, type_name=name)

        if self.settings.trace_composition:
            log_event(
                self.logger,
                "compose.layers",
                LogContext(type_name=plan.value_type, operation="compose", layers=len(layers)),
                level=logging.DEBUG,
                chain=plan.chain,
                applied=plan.layers,
                explicit=plan.explicit,
                boxed=plan.boxed,
            )
        return composite

    __call__ = compose


def compose(
    value: Any,
    type_name: Optional[str] = None,
    *,
    registry: CapabilityRegistry,
    settings: Optional[EngineSettings] = None,
) -> Any:
    """Functional form of :meth:`Composer.compose`."""
    return Composer(registry, settings).compose(value, type_name)


__all__ = ["Composer", "compose"]
