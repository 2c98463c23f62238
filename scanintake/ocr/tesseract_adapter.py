import io

import pytesseract
from PIL import Image, UnidentifiedImageError

from scanintake.logging.logger import Log
from scanintake.ocr.base import BaseOcrEngine
from scanintake.ocr.exceptions import OcrError


class TesseractAdapter(BaseOcrEngine):
    """Recognizes text with the Tesseract engine through pytesseract."""

    def __init__(self, language: str = "eng") -> None:
        self._language = language

    def recognize(self, image_bytes: bytes) -> str:
        try:
            with Image.open(io.BytesIO(image_bytes)) as img:
                if img.mode not in ("RGB", "L"):
                    img = img.convert("RGB")
                text = pytesseract.image_to_string(img, lang=self._language)
        except UnidentifiedImageError as exc:
            raise OcrError(f"Unsupported image data: {exc}") from exc
        except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError) as exc:
            raise OcrError(f"tesseract recognition failed: {exc}") from exc
        except OSError as exc:
            raise OcrError(f"Failed to read image: {exc}") from exc
        Log.debug(f"OCR recognized {len(text)} chars ({self._language})")
        return text
