import io
from dataclasses import dataclass

from PIL import Image, UnidentifiedImageError
from reportlab.lib.pagesizes import landscape, portrait
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from scanintake.intake.exceptions import ImageConversionError
from scanintake.intake.models import (
    PDF_CONTENT_TYPE,
    CapturedImage,
    DocumentSource,
    FormState,
    UploadedFile,
)

CAPTURED_IMAGE_FILENAME = "captured_image.pdf"


@dataclass(frozen=True)
class SubmissionPayload:
    """Multipart body for the upload endpoint."""

    filename: str
    content: bytes
    fields: dict[str, str]
    content_type: str = PDF_CONTENT_TYPE


def image_to_pdf(image_bytes: bytes) -> bytes:
    """Convert an encoded image to a single-page PDF of the same pixel size.

    The page is landscape when the image is wider than tall, else portrait.

    Raises:
        ImageConversionError: if the image cannot be decoded.
    """
    try:
        with Image.open(io.BytesIO(image_bytes)) as img:
            width, height = img.size
            rgb = img.convert("RGB")
    except (UnidentifiedImageError, OSError) as exc:
        raise ImageConversionError(f"Captured image could not be decoded: {exc}") from exc

    size = (float(width), float(height))
    pagesize = landscape(size) if width > height else portrait(size)

    buf = io.BytesIO()
    pdf = canvas.Canvas(buf, pagesize=pagesize)
    pdf.drawImage(ImageReader(rgb), 0, 0, width=width, height=height)
    pdf.showPage()
    pdf.save()
    return buf.getvalue()


def form_fields(state: FormState) -> dict[str, str]:
    """Scalar form fields under the names the upload endpoint expects."""
    return {
        "type": state.type.value,
        "department": state.department,
        "category": state.category,
        "subject": state.subject,
        "date": state.date,
        "diaryNo": state.diary_no,
        "from": state.sender,
        "disposal": state.disposal,
        "status": state.status.value if state.status is not None else "",
    }


def build_payload(state: FormState, source: DocumentSource) -> SubmissionPayload:
    """Attach the document and every scalar field in one payload.

    Uploaded files travel as-is, captured images are converted to PDF first.
    """
    if isinstance(source, UploadedFile):
        return SubmissionPayload(
            filename=source.filename,
            content=source.content,
            fields=form_fields(state),
        )
    if isinstance(source, CapturedImage):
        return SubmissionPayload(
            filename=CAPTURED_IMAGE_FILENAME,
            content=image_to_pdf(source.data),
            fields=form_fields(state),
        )
    raise TypeError(f"Unsupported document source: {type(source).__name__}")
