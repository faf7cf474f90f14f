"""
Structured exception raised by registration and configuration.

Identification, chain walking, registry lookup and composition never raise
this; they are total over their inputs.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ExtensionError(Exception):
    """Represents a structured engine error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        type_name: Capability type name involved, when there is one.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    type_name: Optional[str] = None
    raw: Optional[Exception] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        prefix = f"[{self.code.value}]"
        if self.type_name:
            prefix += f" {self.type_name}:"
        return f"{prefix} {self.message}"


__all__ = ["ExtensionError"]
