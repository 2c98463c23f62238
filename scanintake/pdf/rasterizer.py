import pymupdf

from scanintake.pdf.exceptions import PdfExtractionError

# PDF user space is 72 points per inch.
_POINTS_PER_INCH = 72


class PdfPageRasterizer:
    """Renders PDF pages to PNG images for OCR."""

    def __init__(self, dpi: int = 200) -> None:
        if dpi <= 0:
            raise ValueError(f"dpi must be positive, got {dpi}")
        self._dpi = dpi

    def render(self, pdf_bytes: bytes) -> list[bytes]:
        """Return one PNG image per page, in page order.

        Raises:
            PdfExtractionError: if the document cannot be opened or rendered.
        """
        zoom = self._dpi / _POINTS_PER_INCH
        matrix = pymupdf.Matrix(zoom, zoom)
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                return [page.get_pixmap(matrix=matrix).tobytes("png") for page in doc]
        except Exception as exc:
            raise PdfExtractionError(f"pdf page rendering failed: {exc}") from exc
