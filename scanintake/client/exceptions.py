class ApiError(Exception):
    """Base exception for backend API failures."""


class ApiNetworkError(ApiError):
    """Raised when the backend cannot be reached or times out."""


class ApiResponseError(ApiError):
    """Raised when the backend answers with a non-success status or bad body."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
