from scanintake.config.settings import Settings
from scanintake.extraction.pipeline import ExtractionContext, ExtractionStep
from scanintake.extraction.steps import (
    ExtractTextLayerStep,
    InferSubjectStep,
    OcrImageStep,
    OcrPdfPagesStep,
)
from scanintake.intake.models import ExtractionOutcome
from scanintake.ocr.base import BaseOcrEngine
from scanintake.ocr.factory import OcrEngineFactory
from scanintake.pdf.base import BasePdfExtractor
from scanintake.pdf.factory import PdfExtractorFactory
from scanintake.pdf.rasterizer import PdfPageRasterizer


class SubjectExtractor:
    """Infers a subject line from a PDF or a captured image.

    PDF: text layer -> subject, then (if enabled) page OCR -> subject.
    Image: OCR -> subject.

    Errors from the PDF and OCR adapters propagate to the caller.
    """

    def __init__(
        self,
        pdf_extractor: BasePdfExtractor,
        ocr_engine: BaseOcrEngine,
        rasterizer: PdfPageRasterizer | None = None,
        ocr_fallback_enabled: bool = False,
    ) -> None:
        self._pdf_steps: list[ExtractionStep] = [
            ExtractTextLayerStep(pdf_extractor),
            InferSubjectStep("text_layer"),
        ]
        if ocr_fallback_enabled:
            self._pdf_steps += [
                OcrPdfPagesStep(rasterizer or PdfPageRasterizer(), ocr_engine),
                InferSubjectStep("ocr"),
            ]
        self._image_steps: list[ExtractionStep] = [
            OcrImageStep(ocr_engine),
            InferSubjectStep("ocr"),
        ]

    def from_pdf(self, pdf_bytes: bytes) -> ExtractionOutcome:
        return self._run(self._pdf_steps, ExtractionContext(raw_bytes=pdf_bytes))

    def from_image(self, image_bytes: bytes) -> ExtractionOutcome:
        return self._run(self._image_steps, ExtractionContext(raw_bytes=image_bytes))

    @staticmethod
    def _run(steps: list[ExtractionStep], context: ExtractionContext) -> ExtractionOutcome:
        for step in steps:
            context = step.run(context)
        return ExtractionOutcome(subject=context.subject, source=context.source)


def build_subject_extractor(settings: Settings) -> SubjectExtractor:
    """Build a SubjectExtractor with the configured adapters."""
    return SubjectExtractor(
        pdf_extractor=PdfExtractorFactory.create(settings),
        ocr_engine=OcrEngineFactory.create(settings),
        rasterizer=PdfPageRasterizer(dpi=settings.ocr_render_dpi),
        ocr_fallback_enabled=settings.ocr_fallback_enabled,
    )
