from scanintake.extraction.pipeline import ExtractionContext, ExtractionStep
from scanintake.intake.subject import find_subject
from scanintake.logging.logger import Log
from scanintake.ocr.base import BaseOcrEngine
from scanintake.pdf.base import BasePdfExtractor
from scanintake.pdf.rasterizer import PdfPageRasterizer


class ExtractTextLayerStep(ExtractionStep):
    def __init__(self, pdf_extractor: BasePdfExtractor) -> None:
        self._pdf_extractor = pdf_extractor

    def run(self, context: ExtractionContext) -> ExtractionContext:
        context.extracted_text = self._pdf_extractor.extract(context.raw_bytes)
        Log.info(f"Extracted {len(context.extracted_text)} chars from text layer")
        return context


class InferSubjectStep(ExtractionStep):
    """Searches the current text for a subject line."""

    def __init__(self, source: str) -> None:
        self._source = source

    def run(self, context: ExtractionContext) -> ExtractionContext:
        if context.subject is not None:
            return context
        subject = find_subject(context.extracted_text)
        if subject is not None:
            context.subject = subject
            context.source = self._source
            Log.info(f"Subject found via {self._source}: {subject!r}")
        return context


class OcrImageStep(ExtractionStep):
    def __init__(self, ocr_engine: BaseOcrEngine) -> None:
        self._ocr_engine = ocr_engine

    def run(self, context: ExtractionContext) -> ExtractionContext:
        context.extracted_text = self._ocr_engine.recognize(context.raw_bytes)
        Log.info(f"OCR extracted {len(context.extracted_text)} chars from image")
        return context


class OcrPdfPagesStep(ExtractionStep):
    """Runs OCR over rendered pages when the text layer had no subject."""

    def __init__(self, rasterizer: PdfPageRasterizer, ocr_engine: BaseOcrEngine) -> None:
        self._rasterizer = rasterizer
        self._ocr_engine = ocr_engine

    def run(self, context: ExtractionContext) -> ExtractionContext:
        if context.subject is not None:
            return context
        Log.info("No subject in text layer, attempting OCR")
        pages = self._rasterizer.render(context.raw_bytes)
        context.extracted_text = "\n".join(
            self._ocr_engine.recognize(page) for page in pages
        )
        Log.info(
            f"OCR extracted {len(context.extracted_text)} chars from {len(pages)} pages"
        )
        return context
