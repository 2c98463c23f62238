import pymupdf

from scanintake.pdf.base import BasePdfExtractor
from scanintake.pdf.exceptions import PdfExtractionError

# Index of the word string in a PyMuPDF "words" tuple:
# (x0, y0, x1, y1, word, block_no, line_no, word_no)
_WORD_TEXT = 4


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts the text layer from PDF using PyMuPDF."""

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [
                    " ".join(word[_WORD_TEXT] for word in page.get_text("words"))
                    for page in doc
                ]
            return "\n".join(pages).strip()
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc
