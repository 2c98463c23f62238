import io

import pytest
from PIL import Image
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


def _pdf(*pages: list[str]) -> bytes:
    """Render each page's lines top to bottom with reportlab."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for lines in pages:
        y = 720
        for line in lines:
            c.drawString(72, y, line)
            y -= 20
        c.showPage()
    c.save()
    return buf.getvalue()


def _image(size: tuple[int, int], fmt: str) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", size, color="white").save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    return _pdf(["Hello PDF World"])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    return _pdf(["Page one content"], ["Page two content"])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    return _pdf([])


@pytest.fixture()
def subject_pdf_bytes() -> bytes:
    """A memo whose subject line ends with a full stop."""
    return _pdf(
        [
            "Office of the Registrar",
            "Subject: Budget Report.",
            "Please find the figures attached",
        ]
    )


@pytest.fixture()
def no_subject_pdf_bytes() -> bytes:
    return _pdf(["Minutes of the weekly meeting", "Attendance was recorded"])


@pytest.fixture()
def landscape_jpeg_bytes() -> bytes:
    return _image((120, 80), "JPEG")


@pytest.fixture()
def portrait_png_bytes() -> bytes:
    return _image((60, 100), "PNG")
