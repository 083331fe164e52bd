"""Tests for page document rendering and parsing."""

import logging

import pytest

from confluence_storage.document import (
    PageDocument,
    StatusColor,
    build_body,
    build_info,
    build_page_link_with_anchor,
    build_page_link_with_text,
    build_section,
    build_status,
    build_toc,
    build_user_link,
)
from confluence_storage.shared import DocumentConfig, StorageFormatError
from confluence_storage.tree import qualify


class TestRender:
    """Test storage format serialization."""

    def test_empty_document_renders_empty_string(self) -> None:
        """Test a document without content renders nothing."""
        assert PageDocument().render() == ""

    def test_status_renders_with_prefixes_and_no_declarations(self) -> None:
        """Test prefixes are used and namespace declarations stripped."""
        document = PageDocument(build_status("OK", StatusColor.GREEN, True))

        assert document.render() == (
            '<ac:structured-macro ac:name="status">'
            '<ac:parameter ac:name="subtle">true</ac:parameter>'
            '<ac:parameter ac:name="colour">Green</ac:parameter>'
            '<ac:parameter ac:name="title">OK</ac:parameter>'
            '</ac:structured-macro>'
        )

    def test_resource_prefix_is_rendered(self) -> None:
        """Test ri elements render with their prefix."""
        document = PageDocument(build_user_link("abc"))

        assert document.render() == '<ac:link><ri:user ri:userkey="abc"/></ac:link>'

    def test_text_and_blocks_are_rendered_in_order(self) -> None:
        """Test text around blocks is kept."""
        document = PageDocument("Before ", build_toc(), " after")

        assert document.render() == (
            'Before <ac:structured-macro ac:name="toc"/> after'
        )
        assert str(document) == document.render()

    def test_cdata_is_kept_by_default(self) -> None:
        """Test plain text link bodies keep their CDATA section."""
        document = PageDocument(build_page_link_with_text("Home", "<i>x</i>"))

        assert "<![CDATA[<i>x</i>]]>" in document.render()

    def test_cdata_is_escaped_when_disabled(self) -> None:
        """Test CDATA sections become escaped text on request."""
        config = DocumentConfig().override(rendering__keep_cdata=False)
        document = PageDocument(
            build_page_link_with_text("Home", "<i>x</i>"), config=config
        )

        markup = document.render()
        assert "CDATA" not in markup
        assert "&lt;i&gt;x&lt;/i&gt;" in markup

    def test_pretty_print_indents_nested_blocks(self) -> None:
        """Test readable preset produces indented lines."""
        document = PageDocument(
            build_info(build_body(build_toc())), config=DocumentConfig.readable()
        )

        lines = document.render().splitlines()
        assert lines[0] == '<ac:structured-macro ac:name="info">'
        assert lines[1] == "  <ac:rich-text-body>"

    def test_pretty_print_keeps_indented_text(self) -> None:
        """Test multi-line text survives a readable render and parse back."""
        document = PageDocument(
            build_info(build_body(build_status("a\n    b", StatusColor.YELLOW, False))),
            config=DocumentConfig.readable(),
        )

        parsed = PageDocument.from_storage(document.render())

        title = parsed.find_macros("status")[0][2]
        assert title.text == "a\n    b"

    def test_pretty_print_keeps_cdata_lines(self) -> None:
        """Test CDATA link text is not re-indented."""
        document = PageDocument(
            build_info(build_body(build_page_link_with_text("Home", "x\n    <y>"))),
            config=DocumentConfig.readable(),
        )

        markup = document.render()

        assert "<![CDATA[x\n    <y>]]>" in markup
        assert "xmlns" not in markup

    def test_pretty_print_separates_top_level_blocks(self) -> None:
        """Test top-level blocks go on their own lines and text is kept."""
        document = PageDocument(
            "Intro & ", build_toc(), build_toc(), " end",
            config=DocumentConfig.readable(),
        )

        assert document.render() == (
            'Intro &amp; <ac:structured-macro ac:name="toc"/>\n'
            '<ac:structured-macro ac:name="toc"/> end'
        )

    def test_append_adds_blocks(self) -> None:
        """Test blocks appended later are rendered."""
        document = PageDocument()
        document.append(build_toc(), None)

        assert len(document) == 1
        assert document.render() == '<ac:structured-macro ac:name="toc"/>'

    def test_render_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test rendering emits a debug record with correlation info."""
        config = DocumentConfig().override(global___correlation_id="page-7")
        document = PageDocument(build_toc(), config=config)

        with caplog.at_level(logging.DEBUG, logger="confluence_storage"):
            document.render()

        record = caplog.records[-1]
        assert record.message == "Rendered page document"
        assert record.correlation_id == "page-7"
        assert record.blocks == 1


class TestFromStorage:
    """Test parsing existing storage format markup."""

    def test_round_trip(self) -> None:
        """Test rendered markup parses back to the same markup."""
        original = PageDocument(
            "Intro ",
            build_toc(),
            build_section(build_body(
                build_info(build_body("Owner: ", build_user_link("u1"))),
                build_page_link_with_anchor("Home", "top", "<Back>"),
            )),
        )
        markup = original.render()

        parsed = PageDocument.from_storage(markup)

        assert parsed.render() == markup

    def test_find_macros_in_parsed_document(self) -> None:
        """Test nested macros are found in document order."""
        markup = PageDocument(
            build_status("A", StatusColor.RED, False),
            build_info(build_body(build_status("B", StatusColor.BLUE, False))),
        ).render()

        document = PageDocument.from_storage(markup)
        statuses = document.find_macros("status")

        assert len(statuses) == 2
        assert [macro[2].text for macro in statuses] == ["A", "B"]
        assert document.find_macros("toc") == []
        assert statuses[0].tag == qualify("ac:structured-macro")

    def test_malformed_markup_raises_error(self) -> None:
        """Test broken markup raises StorageFormatError."""
        with pytest.raises(StorageFormatError, match="Invalid storage format markup") as info:
            PageDocument.from_storage("<ac:link><ri:page></ac:link>")

        assert info.value.line >= 1

    def test_parse_error_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test parse failures are logged before raising."""
        with caplog.at_level(logging.ERROR, logger="confluence_storage"):
            with pytest.raises(StorageFormatError):
                PageDocument.from_storage("<p>")

        assert caplog.records[-1].message == "Failed to parse storage format markup"

    def test_lenient_config_recovers(self) -> None:
        """Test recovering parser keeps the well-formed part."""
        document = PageDocument.from_storage(
            "<p>text", config=DocumentConfig.lenient()
        )

        assert document.render().startswith("<p>text")

    def test_blank_text_removed_when_configured(self) -> None:
        """Test whitespace between blocks can be dropped."""
        markup = '<p>a</p>\n  <p>b</p>'
        config = DocumentConfig().override(parsing__remove_blank_text=True)

        assert PageDocument.from_storage(markup, config=config).render() == (
            "<p>a</p><p>b</p>"
        )
