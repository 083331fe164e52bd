"""Namespace bindings of the Confluence storage format."""

from typing import Dict

MACRO_PREFIX = "ac"
MACRO_NAMESPACE = "http://atlassian.com/content"

RESOURCE_PREFIX = "ri"
RESOURCE_NAMESPACE = "http://atlassian.com/resource/identifier"

NAMESPACES: Dict[str, str] = {
    MACRO_PREFIX: MACRO_NAMESPACE,
    RESOURCE_PREFIX: RESOURCE_NAMESPACE,
}


def qualify(name: str) -> str:
    """Convert a prefixed name such as ``ac:link`` to Clark notation.

    Names without a prefix are returned unchanged.

    Raises:
        ValueError: If the prefix is not one of the storage format bindings
    """
    if ":" not in name:
        return name

    prefix, local_name = name.split(":", 1)
    try:
        uri = NAMESPACES[prefix]
    except KeyError:
        raise ValueError(f"Unknown namespace prefix: {prefix!r}") from None
    return f"{{{uri}}}{local_name}"
