"""Namespace-qualified element and attribute construction.

This module is the only place that talks to ``lxml.etree`` when creating
nodes. Higher level builders pass short prefixed names (``ac:link``,
``ri:page``) and arbitrary, possibly absent, content; everything is flattened
in order into a single element.

Key Components:
    element: Build a qualified element from flattened content
    attribute: Build a qualified attribute to pass as element content
    append_content: Flatten content into an existing element
"""

from dataclasses import dataclass
from typing import Any, Iterable

from lxml import etree

from confluence_storage.tree.namespaces import NAMESPACES, qualify


@dataclass(frozen=True)
class XMLAttribute:
    """Qualified attribute waiting to be attached to an element."""

    name: str
    value: str

    def __post_init__(self) -> None:
        """Validate attribute name."""
        if not self.name:
            raise ValueError("Attribute name cannot be empty")


def attribute(name: str, value: Any) -> XMLAttribute:
    """Build a new attribute using the storage format namespace prefixes."""
    return XMLAttribute(qualify(name), str(value))


def element(name: str, *content: Any) -> etree._Element:
    """Build a new element using the storage format namespace prefixes.

    Args:
        name: Prefixed element name, e.g. ``ac:structured-macro``
        *content: Attributes, child elements, text, CDATA blocks or nested
            iterables of those; ``None`` and empty strings are skipped

    Returns:
        New element owning all supplied children
    """
    node = etree.Element(qualify(name), nsmap=NAMESPACES)
    append_content(node, content)
    return node


def append_content(node: etree._Element, content: Iterable[Any]) -> None:
    """Flatten ``content`` into ``node`` preserving order.

    Raises:
        TypeError: If a CDATA block shares the element text with other text
            or follows a child element
    """
    for item in content:
        if item is None or (isinstance(item, str) and not item):
            continue

        if isinstance(item, XMLAttribute):
            node.set(item.name, item.value)
        elif etree.iselement(item):
            node.append(item)
        elif isinstance(item, etree.CDATA):
            if len(node) or node.text:
                raise TypeError("CDATA block must be the only text of an element")
            node.text = item
        elif isinstance(item, (list, tuple)) or _is_generator(item):
            append_content(node, item)
        else:
            _append_text(node, str(item))


def _append_text(node: etree._Element, text: str) -> None:
    """Append text after the last child, or to the element text."""
    if len(node):
        last = node[-1]
        last.tail = (last.tail or "") + text
    elif node.text and _has_cdata_text(node):
        raise TypeError("CDATA block must be the only text of an element")
    else:
        node.text = (node.text or "") + text


def _has_cdata_text(node: etree._Element) -> bool:
    # lxml reads CDATA back as plain text; only serialization tells them apart
    return b"<![CDATA[" in etree.tostring(node, with_tail=False)


def _is_generator(item: Any) -> bool:
    return hasattr(item, "__next__") and hasattr(item, "__iter__")
