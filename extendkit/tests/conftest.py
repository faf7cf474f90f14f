"""Pytest configuration for the extendkit test suite.

Every test starts from a clean configuration: ``EXTENDKIT_*`` variables are
removed, the parsed config file cache is dropped and the shared logger is back
at ``WARNING`` with JSON output, so settings always come from the built-in
defaults unless a test sets them.
"""

from __future__ import annotations

import os
from typing import Iterator

import pytest

from extendkit import CapabilityRegistry, Composer, default_registry
from extendkit.base.logging import configure_logger
from extendkit.config import EngineSettings, get_settings, reset_settings_cache


@pytest.fixture(autouse=True)
def clean_engine_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from ambient ``EXTENDKIT_*`` configuration."""
    for key in list(os.environ):
        if key.startswith("EXTENDKIT_"):
            monkeypatch.delenv(key, raising=False)
    reset_settings_cache()
    configure_logger(level="WARNING", file_path=None)
    yield
    reset_settings_cache()


@pytest.fixture()
def settings() -> EngineSettings:
    return get_settings()


@pytest.fixture()
def registry() -> CapabilityRegistry:
    """An empty registry."""
    return CapabilityRegistry()


@pytest.fixture()
def composer(registry: CapabilityRegistry, settings: EngineSettings) -> Composer:
    return Composer(registry, settings)


@pytest.fixture()
def builtin() -> Composer:
    """Composer over a registry holding every built-in extension."""
    return Composer(default_registry())
