"""Tree-building capabilities for ``xml.etree.ElementTree`` elements.

``insert_element`` takes its position as a one-entry mapping
``{"before" | "after" | "at_index": ref}``. ``ref`` is a child element, an
index (``at_index``), ``None`` (ends of the child list), ``Explicit(child)``
or ``SELF``. ``SELF`` inserts a *sibling* of the extended element, which needs
the element's parent passed as ``parent=`` because ElementTree elements do not
track their parents.

Invalid references are reported on the ``extendkit.extensions.element``
logger with ``error_code="invalid_reference"`` and the method returns
``None``.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Dict, Mapping, Optional
from xml.etree import ElementTree as ET

from ..base.errors import ErrorCode
from ..base.logging import LogContext, get_logger, log_event
from ..base.markers import SelfReference, resolve_reference
from ..base.registry import CapabilityRegistry
from .string import kebab_from_camel_case

logger = get_logger("extendkit.extensions.element")

_POSITIONS = ("before", "after", "at_index")
_ELEMENT_FIELDS = ("text", "tail", "tag")
_NAMESPACE_RE = re.compile(r"^\{[^}]*\}")

ChildrenFn = Callable[[Callable[..., Any]], Any]


def _report(operation: str, message: str, **fields: Any) -> None:
    log_event(
        logger,
        "element.invalid_reference",
        LogContext(type_name="Element", operation=operation),
        level=logging.ERROR,
        error_code=ErrorCode.INVALID_REFERENCE.value,
        message=message,
        **fields,
    )


def _namespace(tag: str) -> str:
    match = _NAMESPACE_RE.match(tag) if isinstance(tag, str) else None
    return match.group(0) if match else ""


def _parse_style(text: Optional[str]) -> Dict[str, str]:
    style: Dict[str, str] = {}
    for declaration in (text or "").split(";"):
        if ":" in declaration:
            key, value = declaration.split(":", 1)
            style[key.strip()] = value.strip()
    return style


def apply_style(this: ET.Element, style: Optional[Mapping[str, Any]] = None) -> None:
    """Merge declarations into the ``style`` attribute.

    camelCase keys become kebab-case; ``"green !important"`` keeps its priority.
    """
    current = _parse_style(this.get("style"))
    for key, raw in (style or {}).items():
        prop = kebab_from_camel_case(key) if re.search(r"[A-Z]", key) else key
        if isinstance(raw, str) and " !" in raw:
            value, priority = raw.split(" !", 1)
            current[prop] = f"{value} !{priority}"
        else:
            current[prop] = str(raw)
    this.set("style", "; ".join(f"{k}: {v}" for k, v in current.items()))


def set_properties(this: ET.Element, properties: Optional[Mapping[str, Any]] = None) -> None:
    """Apply a property mapping to the element.

    Recognized keys: ``attributes`` (mapping of attributes), ``class_list``
    (class names appended to ``class``), ``style`` (see ``apply_style``),
    ``text``/``tail``/``tag``. Everything else becomes an attribute.
    """
    remaining = dict(properties or {})
    attributes = remaining.pop("attributes", None)
    if isinstance(attributes, Mapping):
        for key, value in attributes.items():
            this.set(key, str(value))
    class_list = remaining.pop("class_list", None)
    if isinstance(class_list, (list, tuple)):
        classes = (this.get("class") or "").split()
        classes.extend(name for name in class_list if name not in classes)
        this.set("class", " ".join(classes))
    style = remaining.pop("style", None)
    if isinstance(style, Mapping):
        apply_style(this, style)
    for key, value in remaining.items():
        if key in _ELEMENT_FIELDS:
            setattr(this, key, value)
        else:
            this.set(key, str(value))


def create_element(
    tag: str,
    properties: Optional[Mapping[str, Any]] = None,
    namespace: str = "",
) -> ET.Element:
    """Create a detached element, prefixing ``namespace`` when ``tag`` has none."""
    if namespace and not _namespace(tag):
        tag = f"{namespace}{tag}"
    element = ET.Element(tag)
    if properties:
        set_properties(element, properties)
    return element


def insert_element(
    this: ET.Element,
    ref_element: Optional[Mapping[str, Any]],
    tag: str,
    properties: Optional[Mapping[str, Any]] = None,
    children_fn: Optional[ChildrenFn] = None,
    *,
    parent: Optional[ET.Element] = None,
) -> Optional[ET.Element]:
    """Create an element and insert it relative to ``ref_element``.

    ``children_fn`` receives an ``append_child(tag, properties=None,
    children_fn=None)`` callable that appends to the new element; children
    inherit its namespace.
    """
    entry = next(iter((ref_element or {}).items()), None)
    if entry is None or entry[0] not in _POSITIONS:
        _report("insert_element", "invalid reference element", ref=repr(ref_element))
        return None
    position, ref = entry

    if isinstance(ref, SelfReference):
        if parent is None:
            _report("insert_element", "SELF reference needs the parent element", position=position)
            return None
        sibling_position = "before" if position == "before" else "after"
        return insert_element(parent, {sibling_position: this}, tag, properties, children_fn)

    children = list(this)
    if position == "at_index":
        index = resolve_reference(ref, this)
        anchor = children[index] if isinstance(index, int) and -len(children) <= index < len(children) else None
        position = "before"
    else:
        anchor = resolve_reference(ref, this)
        if anchor is not None and not any(child is anchor for child in children):
            _report("insert_element", "reference element is not a child", position=position)
            return None

    namespace = _namespace(this.tag)
    new_element = create_element(tag, properties, namespace)

    if callable(children_fn):
        child_namespace = _namespace(new_element.tag)

        def append_child(child_tag: str, child_properties=None, grandchildren_fn=None):
            if child_namespace and not _namespace(child_tag):
                child_tag = f"{child_namespace}{child_tag}"
            return append_element(new_element, child_tag, child_properties, grandchildren_fn)

        children_fn(append_child)

    if position == "before" or anchor is None:
        next_element = anchor
    else:
        index = next(i for i, child in enumerate(children) if child is anchor)
        next_element = children[index + 1] if index + 1 < len(children) else None

    if next_element is None:
        this.append(new_element)
    else:
        this.insert(next(i for i, child in enumerate(list(this)) if child is next_element), new_element)
    return new_element


def append_element(
    this: ET.Element,
    tag: str,
    properties: Optional[Mapping[str, Any]] = None,
    children_fn: Optional[ChildrenFn] = None,
) -> Optional[ET.Element]:
    """Create an element and insert it as the last child."""
    last = this[-1] if len(this) else None
    return insert_element(this, {"after": last}, tag, properties, children_fn)


def prepend_element(
    this: ET.Element,
    tag: str,
    properties: Optional[Mapping[str, Any]] = None,
    children_fn: Optional[ChildrenFn] = None,
) -> Optional[ET.Element]:
    """Create an element and insert it as the first child."""
    first = this[0] if len(this) else None
    return insert_element(this, {"before": first}, tag, properties, children_fn)


def text_at_selector(this: ET.Element, selector: str) -> Optional[str]:
    found = this.find(selector)
    return found.text if found is not None else None


def parent_at(this: ET.Element, root: ET.Element, level: int = 1) -> Optional[ET.Element]:
    """Ancestor ``level`` steps up (at least one), searched from ``root``."""
    parents = {child: node for node in root.iter() for child in node}
    target: Optional[ET.Element] = this
    for _ in range(max(level, 1)):
        target = parents.get(target) if target is not None else None
    return target


def tree_create_element(
    this: ET.ElementTree,
    tag: str,
    properties: Optional[Mapping[str, Any]] = None,
) -> ET.Element:
    """Create a detached element in the namespace of the tree's root."""
    root = this.getroot()
    return create_element(tag, properties, _namespace(root.tag) if root is not None else "")


CAPABILITIES = {
    "apply_style": apply_style,
    "set_properties": set_properties,
    "insert_element": insert_element,
    "append_element": append_element,
    "prepend_element": prepend_element,
    "text_at_selector": text_at_selector,
    "parent_at": parent_at,
}

TREE_CAPABILITIES = {
    "create_element": tree_create_element,
}


def register(registry: CapabilityRegistry) -> None:
    registry.register("Element", CAPABILITIES)
    registry.register("ElementTree", TREE_CAPABILITIES)


__all__ = [
    "CAPABILITIES",
    "TREE_CAPABILITIES",
    "register",
    "create_element",
    *CAPABILITIES,
]
