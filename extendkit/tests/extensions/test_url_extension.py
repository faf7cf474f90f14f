"""Parsed URL capabilities."""

from __future__ import annotations

from urllib.parse import urlparse, urlsplit

from extendkit.base.view import view_layers

URL = "https://example.com/videos/watch?v=abc&t=10&t=20&empty=#start=5&end=9"


def test_path_checks(builtin):
    view = builtin(urlparse(URL))
    assert view.path_starts_with("/videos")  # nosec B101
    assert not view.path_starts_with("/music")  # nosec B101
    assert view.path_matches(r"^/videos/\w+$")  # nosec B101


def test_query_params(builtin):
    view = builtin(urlparse(URL))
    assert view.search_param("t") == "10"  # nosec B101
    assert view.search_param("empty") == ""  # nosec B101
    assert view.search_param("missing") is None  # nosec B101
    assert view.search_params() == {"v": "abc", "t": "20", "empty": ""}  # nosec B101
    assert view.search_params(["v", "missing"]) == {"v": "abc", "missing": None}  # nosec B101


def test_fragment_items(builtin):
    view = builtin(urlparse(URL))
    assert view.fragment_items() == {"start": "5", "end": "9"}  # nosec B101
    assert view.fragment_item("end") == "9"  # nosec B101
    assert view.fragment_item("other") is None  # nosec B101


def test_native_fields_and_layers(builtin):
    view = builtin(urlparse(URL))
    assert view.netloc == "example.com"  # nosec B101
    assert view.geturl() == URL  # nosec B101
    assert view_layers(view) == ["ParseResult", "tuple"]  # nosec B101
    assert builtin(urlsplit(URL)).search_param("v") == "abc"  # nosec B101
