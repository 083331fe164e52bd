"""Confluence Storage Builder.

Builds Confluence storage format page content from typed macro blocks:
status badges, tables of contents, info boxes, sections, columns, images,
user and page links, and emoticons.

Progressive API Disclosure:
- Level 1: Block builders - build_status(), build_toc(), build_info(), ...
- Level 2: Page documents - PageDocument.render() and PageDocument.from_storage()
- Level 3: Tree primitives - element(), attribute(), check_body()
"""

__version__ = "0.1.0"
__author__ = "Confluence Storage Builder Team"

# Level 1: Block builders and their parameter values
from .document import (
    Emoticon,
    StatusColor,
    Style,
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

# Level 2: Page documents
from .document import PageDocument

# Configuration and errors
from .shared import (
    ConfluenceStorageError,
    DocumentConfig,
    StorageFormatError,
    StructuralPreconditionViolation,
)

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Block builders
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
    "Emoticon",
    "StatusColor",
    "Style",

    # Level 2: Page documents
    "PageDocument",

    # Configuration and errors
    "DocumentConfig",
    "ConfluenceStorageError",
    "StorageFormatError",
    "StructuralPreconditionViolation",
]
