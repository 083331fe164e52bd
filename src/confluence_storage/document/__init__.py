"""Confluence storage format blocks and page documents.

Key Components:
    build_*: Pure builders for macro, link, image and emoticon blocks
    PageDocument: Container that renders blocks to storage format markup
    StatusColor, Emoticon, Style: Named parameter and style values
"""

from .blocks import (
    LinkTarget,
    build_body,
    build_column,
    build_emoticon,
    build_image,
    build_info,
    build_page_link,
    build_page_link_with_anchor,
    build_page_link_with_body,
    build_page_link_with_text,
    build_section,
    build_status,
    build_toc,
    build_user_link,
)
from .constants import STATUS_COLOR_NAMES, Emoticon, StatusColor, Style
from .page import PageDocument

__all__ = [
    "LinkTarget",
    "build_body",
    "build_column",
    "build_emoticon",
    "build_image",
    "build_info",
    "build_page_link",
    "build_page_link_with_anchor",
    "build_page_link_with_body",
    "build_page_link_with_text",
    "build_section",
    "build_status",
    "build_toc",
    "build_user_link",
    "STATUS_COLOR_NAMES",
    "Emoticon",
    "StatusColor",
    "Style",
    "PageDocument",
]
