"""Errors parts package public surface.

Prefer importing from `extendkit.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .extension_error import ExtensionError

__all__ = ["ErrorCode", "ExtensionError"]
