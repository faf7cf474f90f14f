"""Engine error taxonomy public surface.

Re-exports the one-class-per-file implementations under
``extendkit.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.extension_error import ExtensionError

__all__ = ["ErrorCode", "ExtensionError"]
