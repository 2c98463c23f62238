from abc import ABC, abstractmethod


class BaseOcrEngine(ABC):
    """Contract for all OCR adapters."""

    @abstractmethod
    def recognize(self, image_bytes: bytes) -> str:
        """Recognize text in an encoded image (PNG, JPEG, ...).

        Raises:
            OcrError: if the image cannot be decoded or the engine fails.
        """
