"""Tree primitives for the Confluence storage format.

Key Components:
    element: Namespace-qualified element construction with content flattening
    attribute: Namespace-qualified attribute construction
    qualify: Prefixed name to Clark notation conversion
    check_body: Rich text body precondition check
"""

from .builder import XMLAttribute, append_content, attribute, element
from .namespaces import (
    MACRO_NAMESPACE,
    MACRO_PREFIX,
    NAMESPACES,
    RESOURCE_NAMESPACE,
    RESOURCE_PREFIX,
    qualify,
)
from .validation import RICH_TEXT_BODY_TAG, check_body

__all__ = [
    "XMLAttribute",
    "append_content",
    "attribute",
    "element",
    "MACRO_NAMESPACE",
    "MACRO_PREFIX",
    "NAMESPACES",
    "RESOURCE_NAMESPACE",
    "RESOURCE_PREFIX",
    "qualify",
    "RICH_TEXT_BODY_TAG",
    "check_body",
]
