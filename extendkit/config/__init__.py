"""Unified configuration layer for the composition engine.

Sources are merged in a predictable order (later wins):
    1. Built-in defaults (``extendkit.config.defaults``)
    2. Optional external config file (JSON or YAML) named by
       ``EXTENDKIT_CONFIG_FILE``
    3. Environment variables ``EXTENDKIT_<FIELD>`` (e.g. ``EXTENDKIT_LOG_LEVEL``,
       ``EXTENDKIT_TRACE_COMPOSITION=1``)
    4. In-code overrides passed to :func:`get_settings`

The merged mapping is validated into :class:`EngineSettings`. Invalid input
raises ``ExtensionError(code=ErrorCode.CONFIG)``.

External config file example::

    generic_type_name: object
    trace_composition: true
    builtin_extensions: [number, string]

Public API
----------
* get_settings(overrides: dict | None = None) -> EngineSettings
* apply_logging(settings) -> logging.Logger
* reset_settings_cache() -> None
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from ..base.errors import ErrorCode, ExtensionError
from .defaults import CONFIG_FILE_ENV, ENV_PREFIX
from .settings import EngineSettings

_FILE_CACHE: Optional[Dict[str, Any]] = None
_FILE_CACHE_PATH: Optional[str] = None


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE, _FILE_CACHE_PATH
    path = os.getenv(CONFIG_FILE_ENV)
    if _FILE_CACHE is not None and _FILE_CACHE_PATH == path:
        return _FILE_CACHE
    data: Any = {}
    if path and Path(path).exists():
        text = Path(path).read_text(encoding="utf-8")
        try:
            data = json.loads(text)
        except ValueError:
            try:
                data = yaml.safe_load(text) or {}
            except yaml.YAMLError as exc:
                raise ExtensionError(
                    code=ErrorCode.CONFIG,
                    message=f"config file {path} is neither JSON nor YAML",
                    raw=exc,
                ) from exc
        if not isinstance(data, dict):
            raise ExtensionError(code=ErrorCode.CONFIG, message=f"config file {path} must hold a mapping")
    _FILE_CACHE, _FILE_CACHE_PATH = data, path
    return data


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field in EngineSettings.model_fields:
        val = os.getenv(f"{ENV_PREFIX}{field.upper()}")
        if val is not None:
            out[field] = val
    return out


def get_settings(overrides: Optional[Dict[str, Any]] = None) -> EngineSettings:
    """Return merged and validated engine settings.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    cfg: Dict[str, Any] = {}
    cfg |= _load_external_config()
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    try:
        return EngineSettings.model_validate(cfg)
    except ValidationError as exc:
        raise ExtensionError(code=ErrorCode.CONFIG, message=str(exc), raw=exc) from exc


def apply_logging(settings: EngineSettings) -> logging.Logger:
    """Push the logging fields of ``settings`` onto the shared logger."""
    from ..base.logging import configure_logger

    return configure_logger(level=settings.log_level, json_mode=settings.json_logs)


def reset_settings_cache() -> None:
    """Forget the parsed config file (tests and long-lived shells)."""
    global _FILE_CACHE, _FILE_CACHE_PATH
    _FILE_CACHE = None
    _FILE_CACHE_PATH = None


__all__ = [
    "EngineSettings",
    "get_settings",
    "apply_logging",
    "reset_settings_cache",
]
