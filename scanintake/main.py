"""Command-line entry point for document intake."""

import mimetypes
from datetime import datetime
from pathlib import Path
from typing import Annotated, Optional

import typer

from scanintake.camera.image_file_camera import ImageFileCamera
from scanintake.client.api_client import IntakeApiClient
from scanintake.client.exceptions import ApiError
from scanintake.config.settings import Settings
from scanintake.extraction import build_subject_extractor
from scanintake.intake.controller import build_controller
from scanintake.intake.exceptions import CategoryNotAvailableError
from scanintake.intake.models import DocumentType, FormStatus, UploadedFile
from scanintake.logging.logger import Log
from scanintake.ocr.exceptions import OcrError
from scanintake.pdf.exceptions import PdfExtractionError

app = typer.Typer(
    name="scanintake",
    help="Upload or scan documents, infer their subject and submit them for intake.",
    no_args_is_help=True,
)


def _settings() -> Settings:
    settings = Settings()
    Log.configure(settings.log_level)
    return settings


def _api_client(settings: Settings) -> IntakeApiClient:
    return IntakeApiClient(
        base_url=settings.api_base_url,
        timeout_seconds=settings.api_timeout_seconds,
    )


def _read_upload(path: Path) -> UploadedFile:
    content_type, _ = mimetypes.guess_type(path.name)
    return UploadedFile(
        filename=path.name,
        content_type=content_type or "application/octet-stream",
        content=path.read_bytes(),
    )


@app.command()
def departments(
    document_type: Annotated[DocumentType, typer.Option("--type")] = DocumentType.ALL,
) -> None:
    """List departments and their categories."""
    settings = _settings()
    with _api_client(settings) as client:
        try:
            records = client.list_departments(document_type)
        except ApiError as exc:
            Log.error(f"Failed to fetch departments: {exc}")
            raise typer.Exit(code=1) from exc
    for dept in records:
        categories = ", ".join(dept.categories) or "-"
        typer.echo(f"{dept.id}\t{dept.name}\t{categories}")


@app.command()
def subject(
    path: Annotated[
        Path,
        typer.Argument(exists=True, dir_okay=False, help="PDF document or captured image"),
    ],
) -> None:
    """Print the subject inferred from a PDF or an image."""
    settings = _settings()
    extractor = build_subject_extractor(settings)
    data = path.read_bytes()
    try:
        if path.suffix.lower() == ".pdf":
            outcome = extractor.from_pdf(data)
        else:
            outcome = extractor.from_image(data)
    except (PdfExtractionError, OcrError) as exc:
        Log.error(f"Error extracting subject: {exc}")
        raise typer.Exit(code=1) from exc
    if outcome.subject is None:
        Log.warning(f"No subject found in {path.name}")
        raise typer.Exit(code=1)
    typer.echo(outcome.subject)


@app.command()
def submit(
    department: Annotated[str, typer.Option(help="Department id")],
    diary_no: Annotated[str, typer.Option("--diary-no")],
    sender: Annotated[str, typer.Option("--from")],
    disposal: Annotated[str, typer.Option()],
    status: Annotated[FormStatus, typer.Option()],
    file: Annotated[
        Optional[Path],
        typer.Option(exists=True, dir_okay=False, help="PDF to upload"),
    ] = None,
    image: Annotated[
        Optional[Path],
        typer.Option(exists=True, dir_okay=False, help="Image to use as the camera frame"),
    ] = None,
    document_type: Annotated[Optional[DocumentType], typer.Option("--type")] = None,
    category: Annotated[str, typer.Option()] = "",
    subject_override: Annotated[
        Optional[str], typer.Option("--subject", help="Use instead of the inferred subject")
    ] = None,
    date: Annotated[
        Optional[datetime],
        typer.Option(formats=["%Y-%m-%d"], help="ISO date, defaults to today"),
    ] = None,
) -> None:
    """Acquire a document, fill in the form and submit it."""
    if (file is None) == (image is None):
        raise typer.BadParameter("Pass exactly one of --file or --image")

    settings = _settings()
    closed: list[bool] = []
    with _api_client(settings) as client:
        controller = build_controller(
            settings,
            client,
            on_close=lambda: closed.append(True),
            document_type=document_type,
        )
        controller.mount()

        if file is not None:
            if not controller.upload_file(_read_upload(file)):
                raise typer.Exit(code=1)
        elif image is not None:
            controller.start_scanning()
            if not controller.capture(ImageFileCamera(image)):
                raise typer.Exit(code=1)

        controller.select_department(department)
        if category:
            try:
                controller.select_category(category)
            except CategoryNotAvailableError as exc:
                raise typer.BadParameter(str(exc), param_hint="--category") from exc
        if subject_override is not None:
            controller.set_subject(subject_override)
        if date is not None:
            controller.set_date(date.date().isoformat())
        controller.set_diary_no(diary_no)
        controller.set_sender(sender)
        controller.set_disposal(disposal)
        controller.set_status(status)

        if not controller.submit():
            raise typer.Exit(code=1)
    Log.info(f"Submission complete, form closed: {bool(closed)}")


def main() -> None:
    """Entry point for the scanintake CLI."""
    app()


if __name__ == "__main__":
    main()
