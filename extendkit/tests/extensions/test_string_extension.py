"""String capabilities."""

from __future__ import annotations

import re

import pytest

from extendkit.base.markers import SELF
from extendkit.extensions import string as s


def test_capitalized_and_kebab():
    assert s.capitalized("hello big world") == "Hello Big World"  # nosec B101
    assert s.kebab_from_camel_case("fontSize") == "font-size"  # nosec B101
    assert s.kebab_from_camel_case("borderTopWidth") == "border-top-width"  # nosec B101


def test_membership_and_matching():
    assert s.is_in("b", ["a", "b"])  # nosec B101
    assert not s.is_in("c", ("a", "b"))  # nosec B101
    assert s.matches("ABC", re.compile("abc"), True)  # nosec B101
    assert not s.matches("ABC", "abc")  # nosec B101
    assert s.contains("FooBar123", "foo", True)  # nosec B101
    assert not s.contains("FooBar123", "foo")  # nosec B101
    assert s.contains("FooBar123", re.compile(r"\d+"))  # nosec B101
    assert s.contains_one_of("FooBar", ["baz", "Bar"])  # nosec B101
    assert not s.contains_one_of("FooBar", [])  # nosec B101


def test_parse_variants():
    assert s.parse("key=42", re.compile(r"(?P<k>\w+)=(?P<v>\d+)")) == {"k": "key", "v": "42"}  # nosec B101
    assert s.parse("v=42", r"(?P<v>\d+)", int) == {"v": 42}  # nosec B101
    assert s.parse("a1b2", r"(\d)\D(\d)") == ["1b2", "1", "2"]  # nosec B101
    assert s.parse("a1b2", r"(\d)\D(\d)", lambda m, a, b: int(a) + int(b)) == 3  # nosec B101
    assert s.parse("abc", r"\d+") is None  # nosec B101
    assert s.parse("abc", r"\d+", fallback=SELF) == "abc"  # nosec B101
    assert s.parse("abc", r"\d+", fallback=[]) == []  # nosec B101


@pytest.mark.parametrize(
    "text, seconds",
    [
        ("00:19", 19),
        ("55:01", 3301),
        ("1:00:55", 3655),
        ("3600", 3600),
        ("3600s", 3600),
        ("60m", 3600),
        ("1h", 3600),
        ("2d", 172_800),
        ("-5s", -5),
        ("soon", None),
    ],
)
def test_parse_duration(text, seconds):
    assert s.parse_duration(text) == seconds  # nosec B101


def test_parse_duration_milliseconds():
    assert s.parse_duration("90ms") == pytest.approx(0.09)  # nosec B101


@pytest.mark.parametrize(
    "text, seconds",
    [("in 5 minutes", 300), ("2 hours ago", -7200), ("a day ago", -86_400), ("about 3 weeks ago", -1_814_400)],
)
def test_parse_relative_date(text, seconds):
    assert s.parse_relative_date(text) == seconds  # nosec B101


def test_parse_file_size():
    assert s.parse_file_size("2 KB") == 2048.0  # nosec B101
    assert s.parse_file_size("1.5 MB") == 1.5 * 1024**2  # nosec B101
    assert s.parse_file_size("size: 10gb") == 10 * 1024**3  # nosec B101
    assert s.parse_file_size("512 B") == 512.0  # nosec B101
    assert s.parse_file_size("unknown") is None  # nosec B101


def test_replace_multiple_and_remove():
    assert s.replace_multiple("a-b-c", [("-", "+")]) == "a+b-c"  # nosec B101
    assert s.replace_multiple("a-b-c", [("-", "+", 0)]) == "a+b+c"  # nosec B101
    assert s.replace_multiple("a1b2", [(re.compile(r"\d"), "#", 0), ("a",)]) == "#b#"  # nosec B101
    assert s.replace_multiple("x", [("x", lambda m: m.group(0).upper())]) == "X"  # nosec B101
    assert s.remove("x-y-z", "-") == "xyz"  # nosec B101
    assert s.remove("a1b22", re.compile(r"\d")) == "ab"  # nosec B101


def test_composed_strings(builtin):
    view = builtin("hello world")
    assert view.capitalized() == "Hello World"  # nosec B101
    assert view.upper() == "HELLO WORLD"  # nosec B101
    assert builtin("1:30").parse_duration() == 90  # nosec B101
    assert builtin("x").parse(r"\d", fallback=SELF) == "x"  # nosec B101
    assert view + "!" == "hello world!"  # nosec B101


def test_composed_values_convert_like_the_original(builtin):
    assert int(builtin("42")) == 42  # nosec B101
    assert float(builtin("1.5")) == 1.5  # nosec B101
    assert "".join(reversed(builtin("abc"))) == "cba"  # nosec B101
    assert tuple(reversed(builtin((1, 2)))) == (2, 1)  # nosec B101
    assert bytes(builtin(3)) == bytes(3)  # nosec B101
