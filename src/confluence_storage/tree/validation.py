"""Structural checks applied to nodes before they are embedded in macros."""

from typing import Any, Optional

from confluence_storage.shared import StructuralPreconditionViolation, get_logger
from confluence_storage.tree.namespaces import qualify

RICH_TEXT_BODY_TAG = qualify("ac:rich-text-body")


def check_body(body: Any, correlation_id: Optional[str] = None) -> None:
    """Make sure the given node is a rich text body section.

    Raises:
        StructuralPreconditionViolation: If ``body`` is not an
            ``ac:rich-text-body`` element
    """
    tag = getattr(body, "tag", None)
    if tag == RICH_TEXT_BODY_TAG:
        return

    logger = get_logger(__name__, correlation_id, "body_validator")
    logger.warning(
        "Macro body rejected",
        extra={"expected_tag": RICH_TEXT_BODY_TAG, "actual_tag": str(tag)},
    )
    raise StructuralPreconditionViolation("Rich text body expected.")
