from collections.abc import Callable

from scanintake.camera.base import BaseCamera
from scanintake.camera.exceptions import CameraError
from scanintake.client.api_client import IntakeApiClient
from scanintake.client.exceptions import ApiError
from scanintake.config.settings import Settings
from scanintake.extraction.extractor import SubjectExtractor, build_subject_extractor
from scanintake.intake.exceptions import (
    CaptureNotActiveError,
    CategoryNotAvailableError,
    ImageConversionError,
    InvalidFileTypeError,
    MissingFieldsError,
    SubmissionInProgressError,
)
from scanintake.intake.models import (
    CapturedImage,
    Department,
    DocumentSource,
    DocumentType,
    ExtractionOutcome,
    FormState,
    FormStatus,
    UploadedFile,
)
from scanintake.intake.notifier import BaseNotifier, LogNotifier
from scanintake.intake.packaging import build_payload
from scanintake.intake.validation import ensure_pdf, validate_for_submission
from scanintake.logging.logger import Log
from scanintake.ocr.exceptions import OcrError
from scanintake.pdf.exceptions import PdfExtractionError

INVALID_FILE_MESSAGE = "Please upload a valid PDF file."
NO_SUBJECT_IN_FILE_MESSAGE = "No subject found in the uploaded file."
NO_SUBJECT_IN_IMAGE_MESSAGE = "No subject found in the scanned image."
FILE_EXTRACTION_FAILED_MESSAGE = "Failed to extract text or subject from the file."
IMAGE_EXTRACTION_FAILED_MESSAGE = "Failed to extract text from the scanned image."
CAPTURE_FAILED_MESSAGE = "Failed to capture an image from the camera."


class IntakeFormController:
    """Drives one intake form from document acquisition to submission.

    Each public method is the reaction to a single user action. Problems the
    user can fix are reported through the notifier and the form stays usable.
    """

    def __init__(
        self,
        *,
        api_client: IntakeApiClient,
        subject_extractor: SubjectExtractor,
        notifier: BaseNotifier,
        on_close: Callable[[], None],
        document_type: DocumentType = DocumentType.ALL,
    ) -> None:
        self._api = api_client
        self._extractor = subject_extractor
        self._notifier = notifier
        self._on_close = on_close

        self.state = FormState(type=document_type)
        self.departments: list[Department] = []
        self.categories: list[str] = []
        self.file: UploadedFile | None = None
        self.captured_image: CapturedImage | None = None
        self.is_scanning = False
        self.busy = False

    @property
    def source(self) -> DocumentSource | None:
        return self.file or self.captured_image

    @property
    def can_submit(self) -> bool:
        return not self.busy and self.source is not None

    # Reference data

    def mount(self) -> None:
        """Load reference data for the initial document type."""
        self.load_departments()

    def load_departments(self) -> None:
        """Refresh the department list; keep the previous list on failure."""
        try:
            self.departments = self._api.list_departments(self.state.type)
        except ApiError as exc:
            Log.error(f"Failed to fetch departments: {exc}")
            return
        Log.info(
            f"Loaded {len(self.departments)} departments for type {self.state.type.value}"
        )

    def set_type(self, document_type: DocumentType) -> None:
        self.state.type = document_type
        self.load_departments()

    def select_department(self, department_id: str) -> None:
        """Select a department and reset the category choice to its categories."""
        self.state.department = department_id
        department = next((d for d in self.departments if d.id == department_id), None)
        self.categories = list(department.categories) if department is not None else []
        self.state.category = ""

    def select_category(self, category: str) -> None:
        if category and category not in self.categories:
            raise CategoryNotAvailableError(
                f"Category '{category}' is not offered by the selected department"
            )
        self.state.category = category

    # Scalar fields

    def set_subject(self, subject: str) -> None:
        self.state.subject = subject

    def set_date(self, value: str) -> None:
        self.state.date = value

    def set_diary_no(self, diary_no: str) -> None:
        self.state.diary_no = diary_no

    def set_sender(self, sender: str) -> None:
        self.state.sender = sender

    def set_disposal(self, disposal: str) -> None:
        self.state.disposal = disposal

    def set_status(self, status: FormStatus | None) -> None:
        self.state.status = status

    # Document acquisition

    def upload_file(self, uploaded: UploadedFile | None) -> bool:
        """Accept a PDF upload and try to fill the subject from it.

        Returns False when the file was rejected.
        """
        try:
            pdf = ensure_pdf(uploaded)
        except InvalidFileTypeError as exc:
            Log.warning(f"Rejected upload: {exc}")
            self._notifier.alert(INVALID_FILE_MESSAGE)
            return False

        self.file = pdf
        self.captured_image = None
        self.is_scanning = False
        Log.info(f"Accepted upload {pdf.filename} ({len(pdf.content)} bytes)")

        self._infer_subject(
            lambda: self._extractor.from_pdf(pdf.content),
            not_found_message=NO_SUBJECT_IN_FILE_MESSAGE,
            failure_message=FILE_EXTRACTION_FAILED_MESSAGE,
            errors=(PdfExtractionError, OcrError),
        )
        return True

    def start_scanning(self) -> None:
        """Start (or restart) the camera preview, discarding any captured frame."""
        self.is_scanning = True
        self.captured_image = None

    def capture(self, camera: BaseCamera) -> bool:
        """Freeze one frame as the document source and OCR it for a subject.

        Returns False when no frame was captured.
        """
        if not self.is_scanning:
            raise CaptureNotActiveError("Camera preview is not active")
        try:
            frame = camera.snapshot()
        except CameraError as exc:
            Log.error(f"Camera capture failed: {exc}")
            self._notifier.warn(CAPTURE_FAILED_MESSAGE)
            return False

        self.captured_image = CapturedImage(data=frame)
        self.file = None
        self.is_scanning = False
        Log.info(f"Captured frame ({len(frame)} bytes)")

        self._infer_subject(
            lambda: self._extractor.from_image(frame),
            not_found_message=NO_SUBJECT_IN_IMAGE_MESSAGE,
            failure_message=IMAGE_EXTRACTION_FAILED_MESSAGE,
            errors=(OcrError,),
        )
        return True

    def _infer_subject(
        self,
        extract: Callable[[], ExtractionOutcome],
        *,
        not_found_message: str,
        failure_message: str,
        errors: tuple[type[Exception], ...],
    ) -> None:
        self.busy = True
        try:
            outcome = extract()
        except errors as exc:
            Log.error(f"Error extracting subject: {exc}")
            self._notifier.warn(failure_message)
            return
        finally:
            self.busy = False

        if outcome.found:
            self.state.subject = outcome.subject
        else:
            self._notifier.warn(not_found_message)
            self.state.subject = ""

    # Submission

    def submit(self) -> bool:
        """Validate, package and upload the form.

        Returns True when the server accepted the submission; the close
        callback has been called exactly once in that case.

        Raises:
            SubmissionInProgressError: if a submission is already running.
        """
        if self.busy:
            raise SubmissionInProgressError("A submission is already in progress")

        try:
            source = validate_for_submission(self.state, self.source)
        except MissingFieldsError as exc:
            Log.warning(f"Submission blocked, missing fields: {', '.join(exc.missing)}")
            self._notifier.warn(str(exc))
            return False
        self.busy = True
        try:
            payload = build_payload(self.state, source)
            message = self._api.submit(payload)
        except (ApiError, ImageConversionError) as exc:
            Log.error(f"Upload error: {exc}")
            self._notifier.warn(f"An error occurred during upload: {exc}")
            return False
        finally:
            self.busy = False

        self._notifier.alert(message)
        self._on_close()
        return True

    def cancel(self) -> None:
        """Close the form without submitting."""
        Log.info("Intake form cancelled")
        self._on_close()


def build_controller(
    settings: Settings,
    api_client: IntakeApiClient,
    on_close: Callable[[], None],
    notifier: BaseNotifier | None = None,
    document_type: DocumentType | None = None,
) -> IntakeFormController:
    """Build an IntakeFormController with the configured adapters."""
    return IntakeFormController(
        api_client=api_client,
        subject_extractor=build_subject_extractor(settings),
        notifier=notifier or LogNotifier(),
        on_close=on_close,
        document_type=document_type or settings.default_document_type,
    )
