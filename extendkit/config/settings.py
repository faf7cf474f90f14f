"""Validated engine settings model."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .defaults import (
    BUILTIN_EXTENSION_NAMES,
    DEFAULT_GENERIC_TYPE_NAME,
    DEFAULT_JSON_LOGS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TRACE_COMPOSITION,
    DEFAULT_WARN_ON_OVERWRITE,
)

_LEVEL_NAMES = {"DEBUG", "INFO", "WARN", "WARNING", "ERROR", "CRITICAL"}


class EngineSettings(BaseModel):
    """Runtime knobs of the composition engine.

    Parameters
    ----------
    generic_type_name:
        Registry key of the capability set applied to ``NullObject`` values.
    warn_on_overwrite:
        Whether re-registering a type name logs a warning.
    trace_composition:
        Whether each composition emits a ``compose.layers`` debug event.
    log_level / json_logs:
        Applied to the shared ``extendkit`` logger by ``apply_logging``.
    builtin_extensions:
        Built-in capability modules installed by ``default_registry``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    generic_type_name: str = Field(default=DEFAULT_GENERIC_TYPE_NAME, min_length=1)
    warn_on_overwrite: bool = DEFAULT_WARN_ON_OVERWRITE
    trace_composition: bool = DEFAULT_TRACE_COMPOSITION
    log_level: str = DEFAULT_LOG_LEVEL
    json_logs: bool = DEFAULT_JSON_LOGS
    builtin_extensions: List[str] = Field(default_factory=lambda: list(BUILTIN_EXTENSION_NAMES))

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(f"unknown log level: {value!r}")
        return level

    @field_validator("builtin_extensions", mode="before")
    @classmethod
    def _split_names(cls, value):
        if isinstance(value, str):
            value = [part.strip() for part in value.split(",") if part.strip()]
        return value

    @field_validator("builtin_extensions")
    @classmethod
    def _known_extensions(cls, value: List[str]) -> List[str]:
        unknown = [name for name in value if name not in BUILTIN_EXTENSION_NAMES]
        if unknown:
            raise ValueError(f"unknown built-in extensions: {unknown}")
        return value


__all__ = ["EngineSettings"]
