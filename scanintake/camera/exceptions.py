class CameraError(Exception):
    """Raised when a still frame cannot be captured."""
