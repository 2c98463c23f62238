from abc import ABC, abstractmethod


class BaseCamera(ABC):
    """Contract for still-frame capture devices."""

    @abstractmethod
    def snapshot(self) -> bytes:
        """Freeze the current preview and return it as an encoded image.

        Raises:
            CameraError: if no frame can be captured.
        """
