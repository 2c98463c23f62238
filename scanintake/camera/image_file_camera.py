import io
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from scanintake.camera.base import BaseCamera
from scanintake.camera.exceptions import CameraError


class ImageFileCamera(BaseCamera):
    """Serves a still frame from an image on disk.

    Stands in for a live webcam when intake is driven from the command line.
    The frame is re-encoded as JPEG, the format a browser screenshot uses.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    def snapshot(self) -> bytes:
        if not self._path.exists():
            raise CameraError(f"Image not found: {self._path}")
        try:
            with Image.open(self._path) as img:
                buf = io.BytesIO()
                img.convert("RGB").save(buf, format="JPEG")
        except (UnidentifiedImageError, OSError) as exc:
            raise CameraError(f"Failed to capture frame from {self._path}: {exc}") from exc
        return buf.getvalue()
