"""Shared testing utilities for engine and extension tests.

Exports:
    - assert_true(condition: bool, message: str) -> None
    - log_lines(text: str) -> list[dict]
"""
from __future__ import annotations

import json
from typing import Any, Dict, List


def assert_true(condition: bool, message: str) -> None:
    """Raise AssertionError with the provided message if condition is False."""
    if not condition:
        raise AssertionError(message)


def log_lines(text: str) -> List[Dict[str, Any]]:
    """Parse captured stderr into JSON log payloads, skipping non-JSON lines."""
    out: List[Dict[str, Any]] = []
    for line in text.splitlines():
        line = line.strip()
        if not line.startswith("{"):
            continue
        out.append(json.loads(line))
    return out
