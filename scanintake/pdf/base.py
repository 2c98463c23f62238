from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for all PDF text-layer extraction adapters."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract the embedded text layer from PDF bytes.

        Words on a page are joined with single spaces and pages are joined
        with a line break, in page order.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            Extracted text, empty when the document has no text layer.

        Raises:
            PdfExtractionError: if extraction fails for any reason.
        """
