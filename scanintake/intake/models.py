from dataclasses import dataclass, field
from datetime import date
from enum import Enum

PDF_CONTENT_TYPE = "application/pdf"


class DocumentType(str, Enum):
    """Department filter offered by the type selector."""

    ALL = "all"
    UNI = "uni"
    ADMIN = "admin"


class FormStatus(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


@dataclass(frozen=True)
class Department:
    """Reference record from the department endpoint."""

    id: str
    name: str
    categories: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class UploadedFile:
    """A file chosen through the file input."""

    filename: str
    content_type: str
    content: bytes

    @property
    def is_pdf(self) -> bool:
        return self.content_type == PDF_CONTENT_TYPE


@dataclass(frozen=True)
class CapturedImage:
    """An encoded still frame frozen from the camera preview."""

    data: bytes


DocumentSource = UploadedFile | CapturedImage


def _today() -> str:
    return date.today().isoformat()


@dataclass
class FormState:
    """Field values of one intake form instance."""

    type: DocumentType = DocumentType.ALL
    department: str = ""
    category: str = ""
    subject: str = ""
    date: str = field(default_factory=_today)
    diary_no: str = ""
    sender: str = ""
    disposal: str = ""
    status: FormStatus | None = None


@dataclass(frozen=True)
class ExtractionOutcome:
    """Result of subject inference for one document source."""

    subject: str | None
    source: str = "none"  # "text_layer", "ocr" or "none"

    @property
    def found(self) -> bool:
        return self.subject is not None
