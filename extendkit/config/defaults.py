"""extendkit.config.defaults
=========================

Central place for small, stable default values used by the engine. These can
be overridden through a config file, ``EXTENDKIT_*`` environment variables or
explicit overrides (see :func:`extendkit.config.get_settings`).

Only plain constants live here; no imports from other engine packages.
"""

from __future__ import annotations

# ---- Composition ----
# Capability set applied to values with no walkable lineage.
DEFAULT_GENERIC_TYPE_NAME = "object"
# Log a warning when a registration replaces an existing capability set.
DEFAULT_WARN_ON_OVERWRITE = True
# Emit a debug event describing the layers of every composition.
DEFAULT_TRACE_COMPOSITION = False

# ---- Logging ----
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_JSON_LOGS = True

# ---- Built-in extensions ----
# Names accepted by ``register_builtin_extensions``; all enabled by default.
BUILTIN_EXTENSION_NAMES = (
    "number",
    "string",
    "mapping",
    "sequence",
    "url",
    "element",
)

# ---- Sources ----
CONFIG_FILE_ENV = "EXTENDKIT_CONFIG_FILE"
ENV_PREFIX = "EXTENDKIT_"

__all__ = [
    "DEFAULT_GENERIC_TYPE_NAME",
    "DEFAULT_WARN_ON_OVERWRITE",
    "DEFAULT_TRACE_COMPOSITION",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_JSON_LOGS",
    "BUILTIN_EXTENSION_NAMES",
    "CONFIG_FILE_ENV",
    "ENV_PREFIX",
]
