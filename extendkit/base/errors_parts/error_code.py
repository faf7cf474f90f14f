"""
Normalized error codes for the composition engine and its capability sets.

Values are lowercase snake_case and double as the ``error_code`` field of
structured log events.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated failure categories."""

    VALIDATION = "validation"
    INVALID_REFERENCE = "invalid_reference"
    CONFIG = "config"
    NOT_FOUND = "not_found"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
