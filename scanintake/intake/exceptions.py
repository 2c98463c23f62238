class IntakeError(Exception):
    """Base exception for intake form errors."""


class InvalidFileTypeError(IntakeError):
    """Raised when an uploaded file is not a PDF."""


class MissingFieldsError(IntakeError):
    """Raised when a submission lacks one or more required fields."""

    def __init__(self, message: str, missing: list[str]) -> None:
        super().__init__(message)
        self.missing = missing


class CategoryNotAvailableError(IntakeError):
    """Raised when a category does not belong to the selected department."""


class CaptureNotActiveError(IntakeError):
    """Raised when a frame is captured while the preview is not running."""


class SubmissionInProgressError(IntakeError):
    """Raised when submit is called while another submission is running."""


class ImageConversionError(IntakeError):
    """Raised when a captured image cannot be converted to PDF."""
