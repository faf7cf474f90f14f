"""DTO describing how a value would be composed."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class CompositionPlan(BaseModel):
    """Result of ``Composer.plan``.

    Parameters
    ----------
    value_type:
        Identified type name of the value (``"null"``/``"undefined"`` for nil).
    chain:
        Ancestor type names, root-most first. Empty for nil values, explicit
        compositions and ``NullObject`` values.
    layers:
        Type names that contribute a layer, innermost first. The last entry
        wins name conflicts.
    explicit:
        Whether the plan was pinned to an explicit type name.
    boxed:
        Whether the innermost layer wraps a primitive box.
    """

    model_config = ConfigDict(frozen=True)

    value_type: str
    chain: List[str] = Field(default_factory=list)
    layers: List[str] = Field(default_factory=list)
    explicit: bool = False
    boxed: bool = False


__all__ = ["CompositionPlan"]
