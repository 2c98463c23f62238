import io

import pytest
from PIL import Image

from scanintake.pdf.exceptions import PdfExtractionError
from scanintake.pdf.rasterizer import PdfPageRasterizer


class TestPdfPageRasterizer:
    def test_renders_one_png_per_page(self, multi_page_pdf_bytes: bytes) -> None:
        pages = PdfPageRasterizer(dpi=72).render(multi_page_pdf_bytes)
        assert len(pages) == 2
        assert all(page.startswith(b"\x89PNG") for page in pages)

    def test_dpi_scales_page_size(self, sample_pdf_bytes: bytes) -> None:
        # US letter is 612 x 792 points
        low = PdfPageRasterizer(dpi=72).render(sample_pdf_bytes)[0]
        high = PdfPageRasterizer(dpi=144).render(sample_pdf_bytes)[0]
        with Image.open(io.BytesIO(low)) as img:
            assert img.size == (612, 792)
        with Image.open(io.BytesIO(high)) as img:
            assert img.size == (1224, 1584)

    def test_raises_on_invalid_bytes(self) -> None:
        with pytest.raises(PdfExtractionError, match="rendering failed"):
            PdfPageRasterizer().render(b"not a pdf")

    def test_rejects_non_positive_dpi(self) -> None:
        with pytest.raises(ValueError, match="dpi"):
            PdfPageRasterizer(dpi=0)
