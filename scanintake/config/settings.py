from typing import Literal

from pydantic import PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

from scanintake.intake.models import DocumentType


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    api_base_url: str = "http://localhost:3000"
    api_timeout_seconds: int = 30

    pdf_engine: Literal["pdfplumber", "pymupdf"] = "pdfplumber"

    ocr_engine: Literal["tesseract"] = "tesseract"
    ocr_language: str = "eng"
    ocr_fallback_enabled: bool = False
    ocr_render_dpi: PositiveInt = 200

    default_document_type: DocumentType = DocumentType.ALL
