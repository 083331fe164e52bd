"""Page document container for Confluence storage format content.

A page body in storage format is an XML fragment without namespace
declarations. ``PageDocument`` keeps that fragment under a wrapper root which
declares the ``ac`` and ``ri`` bindings, so that blocks built with
``confluence_storage.document.blocks`` serialize with the expected prefixes.
"""

import html
from typing import Any, List, Optional

from lxml import etree

from confluence_storage.shared import (
    DocumentConfig,
    StorageFormatError,
    get_logger,
)
from confluence_storage.tree import NAMESPACES, append_content, element, qualify

ROOT_ELEMENT = "ac:confluence"

_MACRO_TAG = qualify("ac:structured-macro")
_MACRO_NAME = qualify("ac:name")
_DECLARATIONS = [f' xmlns:{prefix}="{uri}"' for prefix, uri in NAMESPACES.items()]


class PageDocument:
    """Storage format page body built from block elements.

    Example:
        >>> document = PageDocument(build_toc(), build_info(build_body("Hello")))
        >>> document.render()
        '<ac:structured-macro ac:name="toc"/><ac:structured-macro ...'
    """

    def __init__(self, *content: Any, config: Optional[DocumentConfig] = None) -> None:
        """Initialize document.

        Args:
            *content: Initial blocks, text or nested iterables of those
            config: Document configuration, defaults to ``DocumentConfig()``
        """
        self.config = config or DocumentConfig()
        self.logger = get_logger(
            __name__, self.config.global_.correlation_id, "page_document"
        )
        self._root = element(ROOT_ELEMENT, *content)

    @property
    def root(self) -> etree._Element:
        """Wrapper element holding the document content."""
        return self._root

    def __len__(self) -> int:
        return len(self._root)

    def __str__(self) -> str:
        return self.render()

    def append(self, *content: Any) -> None:
        """Append blocks or text at the end of the document."""
        append_content(self._root, content)

    def find_macros(self, name: str) -> List[etree._Element]:
        """Find all macro blocks with given name, in document order."""
        return [
            macro for macro in self._root.iter(_MACRO_TAG)
            if macro.get(_MACRO_NAME) == name
        ]

    def render(self) -> str:
        """Serialize the document content to storage format markup.

        Returns:
            Markup without the wrapper element and namespace declarations
        """
        rendering = self.config.rendering

        # Pulls any declarations left on descendants up to the wrapper
        etree.cleanup_namespaces(
            self._root, top_nsmap=NAMESPACES, keep_ns_prefixes=list(NAMESPACES)
        )

        root = self._root
        if not rendering.keep_cdata:
            plain_parser = etree.XMLParser(strip_cdata=True)
            root = etree.fromstring(etree.tostring(root), plain_parser)

        if rendering.pretty_print:
            content = _render_pretty(root)
        elif len(root) == 0 and not root.text:
            content = ""
        else:
            markup = etree.tostring(root, encoding="unicode")
            content = markup[markup.index(">") + 1:markup.rindex("</")]

        self.logger.debug(
            "Rendered page document",
            extra={"blocks": len(root), "characters": len(content)},
        )
        return content

    @classmethod
    def from_storage(
        cls, markup: str, config: Optional[DocumentConfig] = None
    ) -> "PageDocument":
        """Parse existing storage format markup into a document.

        Args:
            markup: Page body as stored by Confluence
            config: Document configuration, defaults to ``DocumentConfig()``

        Raises:
            StorageFormatError: If the markup is not well-formed
        """
        document = cls(config=config)
        parsing = document.config.parsing

        parser = etree.XMLParser(
            recover=parsing.recover,
            remove_blank_text=parsing.remove_blank_text,
            resolve_entities=parsing.resolve_entities,
            huge_tree=parsing.huge_tree,
            strip_cdata=False,
            no_network=True,
        )
        declarations = " ".join(
            f'xmlns:{prefix}="{uri}"' for prefix, uri in NAMESPACES.items()
        )
        prefix, local_name = ROOT_ELEMENT.split(":", 1)
        wrapped = (
            f"<{prefix}:{local_name} {declarations}>{markup}</{prefix}:{local_name}>"
        )

        try:
            root = etree.fromstring(wrapped, parser)
        except etree.XMLSyntaxError as e:
            document.logger.error(
                "Failed to parse storage format markup",
                extra={"line": e.lineno, "column": e.offset},
                exc_info=False,
            )
            raise StorageFormatError(
                f"Invalid storage format markup: {e.msg}",
                line=e.lineno or 0,
                column=e.offset or 0,
            ) from e

        if root is None:
            raise StorageFormatError("Invalid storage format markup: nothing to recover")

        document._root = root
        document.logger.debug(
            "Parsed page document",
            extra={"blocks": len(root), "characters": len(markup)},
        )
        return document


def _render_pretty(root: etree._Element) -> str:
    """Indent each top-level block on its own, outside the wrapper.

    Text and CDATA content is never re-indented.
    """
    parts = [html.escape(root.text or "", quote=False)]
    last = len(root) - 1
    for index, child in enumerate(root):
        markup = etree.tostring(
            child, encoding="unicode", pretty_print=True, with_tail=False
        )
        start_tag_end = markup.index(">")
        start_tag = markup[:start_tag_end]
        for declaration in _DECLARATIONS:
            start_tag = start_tag.replace(declaration, "", 1)
        markup = start_tag + markup[start_tag_end:]

        # pretty_print ends every block with a newline; keep it only between blocks
        if child.tail or index == last:
            markup = markup.rstrip("\n")
        parts.append(markup)
        parts.append(html.escape(child.tail or "", quote=False))
    return "".join(parts)
