from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(slots=True)
class ExtractionContext:
    raw_bytes: bytes
    extracted_text: str = ""
    subject: str | None = None
    source: str = "none"


class ExtractionStep(ABC):
    @abstractmethod
    def run(self, context: ExtractionContext) -> ExtractionContext:
        raise NotImplementedError
