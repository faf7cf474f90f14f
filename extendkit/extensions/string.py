"""String capabilities, registered for ``str``.

Patterns are either plain strings (matched literally) or compiled
``re.Pattern`` objects.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Iterable, Optional, Sequence, Union

from ..base.markers import SELF
from ..base.registry import CapabilityRegistry

Pattern = Union[str, "re.Pattern[str]"]

_DURATION_FACTORS = {
    "ms": 0.001,
    "s": 1,
    "m": 60,
    "h": 3600,
    "d": 86_400,
    "wk": 604_800,
    "mo": 2_628_000,
    "y": 31_536_000,
}
_FILE_SIZE_FACTORS = {"b": 1, "kb": 1024, "mb": 1024**2, "gb": 1024**3, "tb": 1024**4}

_CLOCK_RE = re.compile(r"(?:(?P<hour>\d*):)?(?P<min>\d+):(?P<sec>\d\d)")
_AMOUNT_RE = re.compile(r"(?P<value>-?\d+)(?P<unit>(?:ms|s|m|h|d|wk|mo|y)?)$")
_FILE_SIZE_RE = re.compile(r"(?P<value>-?\d+(?:\.\d+)?)\s*(?P<unit>[KMGT]?B)", re.IGNORECASE)

_RELATIVE_DATE_PAIRS = (
    (re.compile(r"^in "), ""),
    ("about ", ""),
    (re.compile(r"^a "), "1 "),
    (re.compile(r" seconds?"), "s"),
    (re.compile(r" minutes?"), "m"),
    (re.compile(r" hours?"), "h"),
    (re.compile(r" days?"), "d"),
    (re.compile(r" weeks?"), "wk"),
    (re.compile(r" months?"), "mo"),
    (re.compile(r" years?"), "y"),
    (re.compile(r"(.+) ago$"), r"-\1"),
)


def _to_number(text: Optional[str]) -> Union[int, float, None]:
    if text is None:
        return None
    if text == "":
        return 0
    try:
        return int(text)
    except ValueError:
        return float(text)


def capitalized(this: str) -> str:
    """Upper-case the first character of every word."""
    return re.sub(r"\b.", lambda m: m.group(0).upper(), this)


def kebab_from_camel_case(this: str) -> str:
    return re.sub(r"([A-Z])", lambda m: "-" + m.group(1).lower(), this)


def is_in(this: str, array_like: Iterable[Any]) -> bool:
    return this in list(array_like)


def matches(this: str, regex: Pattern, force_ignore_case: bool = False) -> bool:
    """Whether ``regex`` is found anywhere in the string."""
    if isinstance(regex, str):
        regex = re.compile(regex)
    if force_ignore_case and not regex.flags & re.IGNORECASE:
        regex = re.compile(regex.pattern, regex.flags | re.IGNORECASE)
    return regex.search(this) is not None


def contains(this: str, search: Pattern, ignore_case: bool = False) -> bool:
    """Substring (or, for compiled patterns, regex) containment."""
    if isinstance(search, re.Pattern):
        return matches(this, search, ignore_case)
    if ignore_case:
        return search.lower() in this.lower()
    return search in this


def contains_one_of(this: str, search_array: Sequence[Pattern], ignore_case: bool = False) -> bool:
    return any(contains(this, search, ignore_case) for search in search_array)


def parse(
    this: str,
    regex: Pattern,
    transform: Optional[Callable[..., Any]] = None,
    fallback: Any = None,
) -> Any:
    """Search ``regex`` and return its groups, optionally transformed.

    - No match: ``fallback``, or the string itself when ``fallback`` is ``SELF``.
    - Named groups: a dict; ``transform`` is applied to each matched group.
    - Otherwise: ``[match, *groups]``, or ``transform(match, *groups)``.
    """
    if isinstance(regex, str):
        regex = re.compile(regex)
    match = regex.search(this)
    if match is None:
        return this if fallback is SELF else fallback

    named = match.groupdict()
    if named:
        if transform is None:
            return named
        return {k: (transform(v) if v is not None else None) for k, v in named.items()}
    parts = [match.group(0), *match.groups()]
    return transform(*parts) if transform is not None else parts


def parse_duration(this: str) -> Union[int, float, None]:
    """Parse a duration into seconds.

    Supports clock times (``00:19``, ``55:01``, ``1:00:55``), bare seconds
    (``3600``) and number-unit pairs (``3600s``, ``60m``, ``1h``).
    Mixed forms such as ``1:30h`` are not supported.
    """
    if not matches(this, r"\d"):
        return None

    if ":" in this:
        parts = parse(this, _CLOCK_RE, _to_number, {})
        if not parts:
            return None
        return (parts.get("hour") or 0) * 3600 + parts["min"] * 60 + parts["sec"]

    parts = parse(this, _AMOUNT_RE, fallback={})
    if not parts:
        return None
    value = _to_number(parts["value"])
    return value * _DURATION_FACTORS.get(parts["unit"], 1)


def replace_multiple(this: str, pairs: Iterable[Sequence[Any]]) -> str:
    """Apply ``(pattern[, replacement[, count]])`` pairs in order.

    Each pair replaces the first occurrence unless ``count`` says otherwise
    (``0`` means all). A missing replacement removes the match.
    """
    text = this
    for pattern, *rest in pairs:
        replacement = rest[0] if rest and rest[0] is not None else ""
        count = rest[1] if len(rest) > 1 else 1
        if isinstance(pattern, str) and not callable(replacement):
            text = text.replace(pattern, replacement, count if count > 0 else -1)
            continue
        if isinstance(pattern, str):
            pattern = re.compile(re.escape(pattern))
        text = pattern.sub(replacement, text, count=count)
    return text


def remove(this: str, pattern: Pattern) -> str:
    """Remove every occurrence of ``pattern``."""
    if isinstance(pattern, str):
        return this.replace(pattern, "")
    return pattern.sub("", this)


def parse_relative_date(this: str) -> Union[int, float, None]:
    """Seconds relative to now for phrases like ``in 5 minutes`` or ``2 days ago``."""
    return parse_duration(replace_multiple(this, _RELATIVE_DATE_PAIRS))


def parse_file_size(this: str) -> Optional[float]:
    """Bytes for sizes such as ``512 B`` or ``1.5 MB`` (binary multiples)."""
    match = _FILE_SIZE_RE.search(this)
    if match is None:
        return None
    factor = _FILE_SIZE_FACTORS.get(match.group("unit").lower(), 1)
    return float(match.group("value")) * factor


CAPABILITIES = {
    "capitalized": capitalized,
    "kebab_from_camel_case": kebab_from_camel_case,
    "is_in": is_in,
    "contains": contains,
    "contains_one_of": contains_one_of,
    "matches": matches,
    "parse": parse,
    "parse_duration": parse_duration,
    "parse_relative_date": parse_relative_date,
    "parse_file_size": parse_file_size,
    "replace_multiple": replace_multiple,
    "remove": remove,
}


def register(registry: CapabilityRegistry) -> None:
    registry.register("str", CAPABILITIES)


__all__ = ["CAPABILITIES", "register", *CAPABILITIES]
