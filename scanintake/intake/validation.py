from datetime import date

from scanintake.intake.exceptions import InvalidFileTypeError, MissingFieldsError
from scanintake.intake.models import DocumentSource, FormState, UploadedFile

MISSING_FIELDS_MESSAGE = (
    "Please fill out all fields and either upload a file or capture an image."
)


def is_iso_date(value: str) -> bool:
    """True when value is a calendar date written as YYYY-MM-DD."""
    try:
        return date.fromisoformat(value).isoformat() == value
    except ValueError:
        return False


def ensure_pdf(uploaded: UploadedFile | None) -> UploadedFile:
    """Raise InvalidFileTypeError unless a file with a PDF content type was given."""
    if uploaded is None:
        raise InvalidFileTypeError("No file selected")
    if not uploaded.is_pdf:
        raise InvalidFileTypeError(
            f"Unsupported content type {uploaded.content_type!r} for {uploaded.filename}"
        )
    return uploaded


def missing_fields(state: FormState, source: DocumentSource | None) -> list[str]:
    """List the required fields that are empty, in form order.

    A date that is not an ISO calendar date counts as missing.
    """
    required: dict[str, object] = {
        "file": source,
        "department": state.department,
        "subject": state.subject.strip(),
        "date": is_iso_date(state.date),
        "diaryNo": state.diary_no,
        "from": state.sender,
        "disposal": state.disposal,
        "status": state.status,
    }
    return [name for name, value in required.items() if not value]


def validate_for_submission(
    state: FormState, source: DocumentSource | None
) -> DocumentSource:
    """Reject the submission as a whole if any required field is missing.

    Returns:
        The document source to attach.

    Raises:
        MissingFieldsError: carrying the names of every missing field.
    """
    missing = missing_fields(state, source)
    if missing or source is None:
        raise MissingFieldsError(MISSING_FIELDS_MESSAGE, missing)
    return source
