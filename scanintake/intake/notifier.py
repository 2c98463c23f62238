from abc import ABC, abstractmethod

from scanintake.logging.logger import Log


class BaseNotifier(ABC):
    """Delivers user-visible messages from the intake form."""

    @abstractmethod
    def alert(self, message: str) -> None:
        """Show an informational or confirmation message."""

    @abstractmethod
    def warn(self, message: str) -> None:
        """Show a non-blocking warning."""


class LogNotifier(BaseNotifier):
    """Writes user-visible messages to the application log."""

    def alert(self, message: str) -> None:
        Log.info(message)

    def warn(self, message: str) -> None:
        Log.warning(message)
