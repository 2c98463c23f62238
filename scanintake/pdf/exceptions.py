class PdfExtractionError(Exception):
    """Raised when a PDF cannot be parsed or rendered."""
