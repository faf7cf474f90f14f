"""Element tree-building capabilities."""

from __future__ import annotations

from xml.etree import ElementTree as ET

import pytest

from extendkit.base.logging import get_logger
from extendkit.base.markers import SELF, Explicit
from extendkit.extensions.element import create_element, parent_at, set_properties
from extendkit.tests.utils import assert_true, log_lines


def _tags(element):
    return [child.tag for child in element]


@pytest.fixture()
def root():
    return ET.Element("root")


def test_append_and_prepend(builtin, root):
    view = builtin(root)
    first = view.append_element("a", {"text": "first"})
    view.append_element("b")
    view.prepend_element("z")
    assert _tags(root) == ["z", "a", "b"]  # nosec B101
    assert first.text == "first"  # nosec B101


def test_insert_relative_to_children(builtin, root):
    view = builtin(root)
    a = view.append_element("a")
    b = view.append_element("b")
    view.insert_element({"before": b}, "m")
    view.insert_element({"after": a}, "n")
    view.insert_element({"after": b}, "end")
    view.insert_element({"before": Explicit(a)}, "start")
    assert _tags(root) == ["start", "a", "n", "m", "b", "end"]  # nosec B101


def test_insert_at_index(builtin, root):
    view = builtin(root)
    view.append_element("a")
    view.append_element("b")
    view.insert_element({"at_index": 1}, "mid")
    view.insert_element({"at_index": 0}, "head")
    view.insert_element({"at_index": 99}, "tail")
    assert _tags(root) == ["head", "a", "mid", "b", "tail"]  # nosec B101


def test_insert_sibling_through_self(builtin, root):
    a = builtin(root).append_element("a")
    builtin(root).append_element("b")
    builtin(a).insert_element({"after": SELF}, "after_a", parent=root)
    builtin(a).insert_element({"before": SELF}, "before_a", parent=root)
    assert _tags(root) == ["before_a", "a", "after_a", "b"]  # nosec B101


@pytest.mark.parametrize(
    "ref_element",
    [None, {}, {"sideways": None}],
)
def test_invalid_positions_report_and_return_none(builtin, root, capsys, ref_element):
    get_logger()
    assert builtin(root).insert_element(ref_element, "x") is None  # nosec B101
    assert len(root) == 0  # nosec B101
    events = log_lines(capsys.readouterr().err)
    assert_true(
        any(e.get("error_code") == "invalid_reference" for e in events),
        f"expected an invalid_reference event, got {events}",
    )


def test_self_without_parent_is_reported(builtin, root, capsys):
    get_logger()
    a = builtin(root).append_element("a")
    assert builtin(a).insert_element({"after": SELF}, "x") is None  # nosec B101
    (event,) = [e for e in log_lines(capsys.readouterr().err) if e.get("event") == "element.invalid_reference"]
    assert event["level"] == "ERROR"  # nosec B101
    assert event["operation"] == "insert_element"  # nosec B101


def test_foreign_reference_is_rejected(builtin, root):
    stranger = ET.Element("elsewhere")
    assert builtin(root).insert_element({"before": stranger}, "x") is None  # nosec B101
    assert len(root) == 0  # nosec B101


def test_children_callback_and_namespace(builtin):
    doc = ET.Element("{urn:x}doc")
    items = builtin(doc).append_element(
        "ul",
        {"class_list": ["menu"]},
        lambda add: [add("li", {"text": "1"}), add("li", {"text": "2"})],
    )
    assert items.tag == "{urn:x}ul"  # nosec B101
    assert [(li.tag, li.text) for li in items] == [("{urn:x}li", "1"), ("{urn:x}li", "2")]  # nosec B101
    assert items.get("class") == "menu"  # nosec B101


def test_set_properties():
    element = ET.Element("a", {"class": "base"})
    properties = {
        "attributes": {"href": "/x"},
        "class_list": ["base", "extra"],
        "style": {"fontSize": "12px", "color": "green !important"},
        "text": "hi",
        "data-id": 5,
    }
    set_properties(element, properties)
    assert element.get("href") == "/x"  # nosec B101
    assert element.get("class") == "base extra"  # nosec B101
    assert element.get("style") == "font-size: 12px; color: green !important"  # nosec B101
    assert element.text == "hi"  # nosec B101
    assert element.get("data-id") == "5"  # nosec B101
    assert "attributes" in properties  # nosec B101


def test_apply_style_merges(builtin):
    element = ET.Element("p", {"style": "margin: 0"})
    builtin(element).apply_style({"marginTop": 4, "margin": "1px"})
    assert element.get("style") == "margin: 1px; margin-top: 4"  # nosec B101


def test_queries(builtin, root):
    section = ET.SubElement(root, "section")
    title = ET.SubElement(section, "title")
    title.text = "Heading"
    view = builtin(root)
    assert view.text_at_selector("section/title") == "Heading"  # nosec B101
    assert view.text_at_selector("missing") is None  # nosec B101
    assert builtin(title).parent_at(root) is section  # nosec B101
    assert parent_at(title, root, 2) is root  # nosec B101
    assert parent_at(title, root, 3) is None  # nosec B101


def test_tree_create_element(builtin):
    tree = ET.ElementTree(ET.Element("{urn:y}doc"))
    created = builtin(tree).create_element("p", {"text": "body"})
    assert created.tag == "{urn:y}p" and created.text == "body"  # nosec B101
    assert create_element("{urn:z}q", namespace="{urn:y}").tag == "{urn:z}q"  # nosec B101
