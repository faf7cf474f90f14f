"""Pydantic DTOs describing registry contents and composition plans."""

from .capability_set_info import CapabilitySetInfo
from .composition_plan import CompositionPlan

__all__ = ["CapabilitySetInfo", "CompositionPlan"]
