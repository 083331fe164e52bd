"""Builders for Confluence storage format blocks.

Every builder is a pure function returning a new element. Callers compose
blocks bottom-up: build a body first, then pass it to a container macro.

Example:
    >>> info = build_info(build_body("Deployed to ", build_status("prod", StatusColor.GREEN, False)))
"""

from typing import Any, NamedTuple, Optional

from lxml import etree

from confluence_storage.document.constants import STATUS_COLOR_NAMES, StatusColor
from confluence_storage.tree import attribute, check_body, element


class LinkTarget(NamedTuple):
    """Page title and optional anchor a page link points to."""

    title: str
    anchor: Optional[str] = None


def _macro(name: str, *content: Any) -> etree._Element:
    return element(
        "ac:structured-macro",
        attribute("ac:name", name),
        *content)


def _parameter(name: str, value: str) -> etree._Element:
    return element(
        "ac:parameter",
        attribute("ac:name", name),
        value)


def build_status(title: str, color: StatusColor, outline: bool) -> etree._Element:
    """Build "Status" macro block.

    Args:
        title: Text shown inside the badge
        color: Badge color
        outline: Render an outlined (subtle) badge instead of a filled one
    """
    return _macro(
        "status",
        _parameter("subtle", "true" if outline else "false"),
        _parameter("colour", STATUS_COLOR_NAMES[color]),
        _parameter("title", title))


def build_toc() -> etree._Element:
    """Build "Table of Contents" macro block."""
    return _macro("toc")


def build_info(body: etree._Element) -> etree._Element:
    """Build "Info" macro block around a rich text body."""
    check_body(body)
    return _macro("info", body)


def build_section(body: etree._Element) -> etree._Element:
    """Build "Section" macro block around a rich text body."""
    check_body(body)
    return _macro("section", body)


def build_column(width: Optional[str], body: etree._Element) -> etree._Element:
    """Build "Column" macro block.

    Args:
        width: Column width such as ``"300px"``; no parameter is emitted when None
        body: Rich text body built with ``build_body()``
    """
    check_body(body)
    return _macro(
        "column",
        None if width is None else _parameter("width", width),
        body)


def build_image(image_url: str) -> etree._Element:
    """Build "Image" block pointing to an external URL."""
    return element(
        "ac:image",
        element("ri:url", attribute("ri:value", image_url)))


def build_user_link(user_key: str) -> etree._Element:
    """Build "User link" block."""
    return element(
        "ac:link",
        element("ri:user", attribute("ri:userkey", user_key)))


def _build_page_link(
    target: LinkTarget, link_body: Optional[etree._Element]
) -> etree._Element:
    return element(
        "ac:link",
        attribute("ac:anchor", target.anchor) if target.anchor else None,
        element("ri:page", attribute("ri:content-title", target.title)),
        link_body)


def _plain_text_link_body(link_text: str) -> etree._Element:
    return element("ac:plain-text-link-body", etree.CDATA(link_text))


def build_page_link(page_title: str) -> etree._Element:
    """Build "Page link" block showing the page title as link text."""
    return _build_page_link(LinkTarget(page_title), None)


def build_page_link_with_text(page_title: str, link_text: str) -> etree._Element:
    """Build "Page link" block with custom link text.

    The text is stored as CDATA, so markup characters appear literally.
    """
    return _build_page_link(
        LinkTarget(page_title), _plain_text_link_body(link_text))


def build_page_link_with_anchor(
    page_title: str, page_anchor: Optional[str], link_text: str
) -> etree._Element:
    """Build "Page link" block pointing to an anchor within the page.

    An empty or missing anchor emits no ``ac:anchor`` attribute at all.
    """
    return _build_page_link(
        LinkTarget(page_title, page_anchor), _plain_text_link_body(link_text))


def build_page_link_with_body(page_title: str, *link_body: Any) -> etree._Element:
    """Build "Page link" block with rich content, e.g. an image, as link text."""
    return _build_page_link(
        LinkTarget(page_title), element("ac:link-body", *link_body))


def build_body(*content: Any) -> etree._Element:
    """Build rich text body section accepted by container macros."""
    return element("ac:rich-text-body", *content)


def build_emoticon(emoticon: str) -> etree._Element:
    """Build emoticon symbol, see ``Emoticon`` for known names."""
    return element(
        "ac:emoticon",
        attribute("ac:name", emoticon))
