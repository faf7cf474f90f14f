"""Context carried by engine log events.

``LogContext`` holds the type name, operation and layer count of a
composition or registration event plus free-form ``extra`` metadata.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Shared fields of engine log events."""

    type_name: Optional[str] = None
    operation: Optional[str] = None
    layers: Optional[int] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Flatten ``extra`` into the named fields, dropping ``None`` values."""
        merged = {f.name: getattr(self, f.name) for f in fields(self) if f.name != "extra"}
        merged.update(self.extra)
        return {k: v for k, v in merged.items() if v is not None}


__all__ = ["LogContext"]
