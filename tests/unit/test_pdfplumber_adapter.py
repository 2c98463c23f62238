import pytest

from scanintake.pdf.exceptions import PdfExtractionError
from scanintake.pdf.pdfplumber_adapter import PdfPlumberAdapter


class TestPdfPlumberAdapter:
    def test_extract_returns_text(self, sample_pdf_bytes: bytes) -> None:
        adapter = PdfPlumberAdapter()
        result = adapter.extract(sample_pdf_bytes)
        assert result == "Hello PDF World"

    def test_extract_joins_words_on_page_with_single_spaces(
        self, subject_pdf_bytes: bytes
    ) -> None:
        adapter = PdfPlumberAdapter()
        result = adapter.extract(subject_pdf_bytes)
        assert "\n" not in result
        assert "Registrar Subject: Budget Report. Please" in result

    def test_extract_multi_page_in_order(self, multi_page_pdf_bytes: bytes) -> None:
        adapter = PdfPlumberAdapter()
        result = adapter.extract(multi_page_pdf_bytes)
        assert result == "Page one content\nPage two content"

    def test_extract_empty_pdf_returns_empty_string(self, empty_pdf_bytes: bytes) -> None:
        adapter = PdfPlumberAdapter()
        assert adapter.extract(empty_pdf_bytes) == ""

    def test_extract_raises_on_invalid_bytes(self) -> None:
        adapter = PdfPlumberAdapter()
        with pytest.raises(PdfExtractionError, match="pdfplumber"):
            adapter.extract(b"not a pdf")
