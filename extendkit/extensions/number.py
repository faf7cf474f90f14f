"""Number capabilities, registered for ``int`` and aliased for ``float``."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Mapping, Optional

from ..base.registry import CapabilityRegistry


def pad_start(this: float, length: int, pad_str: str = "0") -> str:
    """Round half away from zero to an integer and left-pad the digits to ``length``."""
    if isinstance(this, float) and not math.isfinite(this):
        text = format(this, ".0f")
    else:
        text = f"{Decimal(this).to_integral_value(rounding=ROUND_HALF_UP):f}"
    missing = length - len(text)
    if missing <= 0 or not pad_str:
        return text
    return (pad_str * missing)[:missing] + text


def time_formatted(this: float) -> str:
    """Format seconds as ``[h:]mm:ss``.

    265.2 -> "4:25", 7285 -> "2:01:25".
    """
    hours = math.floor(this / 3600)
    minutes = math.floor((this % 3600) / 60)
    seconds = this % 60
    if this >= 3600:
        return f"{hours}:{pad_start(minutes, 2)}:{pad_start(seconds, 2)}"
    return f"{minutes}:{pad_start(seconds, 2)}"


def is_in(this: float, bounds: Optional[Mapping[str, Any]] = None) -> bool:
    """Whether the value lies in ``{"min": ..., "max": ...}`` (inclusive)."""
    bounds = bounds or {}
    low, high = bounds.get("min"), bounds.get("max")
    if low is None or high is None:
        return False
    return low <= this <= high


CAPABILITIES = {
    "pad_start": pad_start,
    "time_formatted": time_formatted,
    "is_in": is_in,
}


def register(registry: CapabilityRegistry) -> None:
    registry.register("int", CAPABILITIES)
    registry.register_alias("float", "int")


__all__ = ["CAPABILITIES", "register", "pad_start", "time_formatted", "is_in"]
