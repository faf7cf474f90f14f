"""DTO summarizing one registered capability set.

Used for diagnostics and for comparing what two compositions expose without
touching the views themselves.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class CapabilitySetInfo(BaseModel):
    """Names contributed by a capability set registered under ``type_name``.

    Parameters
    ----------
    type_name:
        Registry key.
    methods:
        Sorted names whose values are bound to the anchor on read (callables
        and descriptors).
    fields:
        Sorted names returned as-is.
    """

    model_config = ConfigDict(frozen=True)

    type_name: str
    methods: List[str] = Field(default_factory=list)
    fields: List[str] = Field(default_factory=list)

    @property
    def names(self) -> List[str]:
        return sorted(self.methods + self.fields)


__all__ = ["CapabilitySetInfo"]
