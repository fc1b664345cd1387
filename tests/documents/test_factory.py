"""
Tests for DocumentFactory: registration and lookup by format key.
"""

import pytest

from car_configurator.documents import (
    Document,
    DocumentFactory,
    HtmlDocument,
    PdfDocument,
    UnknownDocumentFormatError,
)


class PlainTextDocument(Document):
    FORMAT_KEY = "txt"

    def save(self) -> bytes:
        return self.content.encode("utf-8")

    def render(self) -> str:
        return self.content


class TestDocumentFactory:
    """Tests for DocumentFactory."""

    def test_create_default_when_called_then_three_formats(self):
        assert DocumentFactory.create_default().supported_formats == ("html", "pdf", "word")

    @pytest.mark.parametrize("key", ["pdf", "PDF", "Pdf"])
    def test_create_document_when_key_any_case_then_found(self, key):
        doc = DocumentFactory.create_default().create_document(key, "Report")

        assert isinstance(doc, PdfDocument)
        assert doc.title == "Report"

    def test_create_document_when_unknown_then_raises_with_supported_list(self):
        factory = DocumentFactory.create_default()

        with pytest.raises(UnknownDocumentFormatError) as exc_info:
            factory.create_document("rtf", "Report")

        err = exc_info.value
        assert err.format_key == "rtf"
        assert err.supported_formats == ("html", "pdf", "word")
        assert str(err) == "Unknown document format: 'rtf'. Supported formats: html, pdf, word"

    def test_create_document_when_empty_factory_then_raises(self):
        with pytest.raises(UnknownDocumentFormatError, match="none"):
            DocumentFactory().create_document("pdf", "Report")

    def test_register_when_new_format_then_usable_without_other_changes(self):
        factory = DocumentFactory.create_default().register(PlainTextDocument)

        doc = factory.create_document("TXT", "Notes")
        doc.content = "hello"

        assert factory.supports_format("txt")
        assert doc.save() == b"hello"

    def test_register_when_explicit_key_then_overrides_format_key(self):
        factory = DocumentFactory().register(HtmlDocument, format_key="WEB")

        assert factory.supported_formats == ("web",)
        assert isinstance(factory.create_document("web", "Page"), HtmlDocument)

    def test_register_when_callable_provider_then_called_with_title(self):
        factory = DocumentFactory().register(lambda title: PdfDocument(title.upper()), "loud")

        assert factory.create_document("loud", "quiet").title == "QUIET"

    def test_register_when_none_then_raises(self):
        with pytest.raises(ValueError):
            DocumentFactory().register(None)

    def test_register_when_no_key_then_raises(self):
        with pytest.raises(ValueError, match="No format key"):
            DocumentFactory().register(lambda title: PdfDocument(title))

    def test_supports_format_when_none_then_false(self):
        assert not DocumentFactory.create_default().supports_format(None)
