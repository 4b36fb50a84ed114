import pytest

from doc_classifier.sources.exceptions import TextExtractionError
from doc_classifier.sources.pdfplumber_source import PdfPlumberSource
from doc_classifier.sources.plain_text_source import PlainTextSource
from doc_classifier.sources.pymupdf_source import PyMuPdfSource


class TestPlainTextSource:
    def test_decodes_utf8(self) -> None:
        assert PlainTextSource().extract("ゲートウェイ\nKP-GWBP\n".encode()) == "ゲートウェイ\nKP-GWBP"

    def test_strips_byte_order_mark(self) -> None:
        assert PlainTextSource().extract("\ufeff見積書".encode()) == "見積書"

    def test_raises_on_invalid_bytes(self) -> None:
        with pytest.raises(TextExtractionError):
            PlainTextSource().extract(b"\xff\xfe\xfa")


class TestPdfPlumberSource:
    def test_extract_returns_text(self, label_pdf_bytes: bytes) -> None:
        result = PdfPlumberSource().extract(label_pdf_bytes)
        assert "KP-GWBP" in result

    def test_extract_multi_page(self, multi_page_pdf_bytes: bytes) -> None:
        result = PdfPlumberSource().extract(multi_page_pdf_bytes)
        assert "Page one content" in result
        assert "Page two content" in result

    def test_extract_empty_pdf_returns_empty_string(self, empty_pdf_bytes: bytes) -> None:
        assert PdfPlumberSource().extract(empty_pdf_bytes) == ""

    def test_extract_raises_on_invalid_bytes(self) -> None:
        with pytest.raises(TextExtractionError):
            PdfPlumberSource().extract(b"not a pdf")


class TestPyMuPdfSource:
    def test_extract_returns_text(self, label_pdf_bytes: bytes) -> None:
        result = PyMuPdfSource().extract(label_pdf_bytes)
        assert "KP-GWBP" in result

    def test_extract_multi_page(self, multi_page_pdf_bytes: bytes) -> None:
        result = PyMuPdfSource().extract(multi_page_pdf_bytes)
        assert "Page one content" in result
        assert "Page two content" in result

    def test_extract_raises_on_invalid_bytes(self) -> None:
        with pytest.raises(TextExtractionError):
            PyMuPdfSource().extract(b"not a pdf")

    def test_extract_empty_pdf_returns_empty_string(self, empty_pdf_bytes: bytes) -> None:
        assert PyMuPdfSource().extract(empty_pdf_bytes) == ""
