from types import TracebackType
from typing import Any

import httpx

from scanintake.client.exceptions import ApiError, ApiNetworkError, ApiResponseError
from scanintake.intake.models import Department, DocumentType
from scanintake.intake.packaging import SubmissionPayload
from scanintake.logging.logger import Log

DEPARTMENT_PATH = "/api/department"
UPLOAD_PATH = "/api/scanupload"


class IntakeApiClient:
    """Client for the department listing and scan upload endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: int = 30,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout_seconds,
            transport=transport,
        )

    def __enter__(self) -> "IntakeApiClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def list_departments(self, document_type: DocumentType) -> list[Department]:
        """Fetch departments filtered by document type, in server order.

        Raises:
            ApiNetworkError: on connection failures and timeouts.
            ApiResponseError: on a non-success status or malformed body.
        """
        response = self._send("GET", DEPARTMENT_PATH, params={"type": document_type.value})
        if response.is_error:
            raise ApiResponseError(
                f"Department listing failed with status {response.status_code}",
                status_code=response.status_code,
            )
        data = self._json(response)
        if not isinstance(data, list):
            raise ApiResponseError("Department listing must be a JSON array")
        return [self._parse_department(item) for item in data]

    def submit(self, payload: SubmissionPayload) -> str:
        """Upload the document with its form fields.

        Returns:
            The server's confirmation message.

        Raises:
            ApiNetworkError: on connection failures and timeouts.
            ApiResponseError: carrying the server's error message, or a generic
                status message when the body has none.
        """
        response = self._send(
            "POST",
            UPLOAD_PATH,
            data=payload.fields,
            files={"file": (payload.filename, payload.content, payload.content_type)},
        )
        if response.is_error:
            raise ApiResponseError(
                self._error_message(response),
                status_code=response.status_code,
            )
        data = self._json(response)
        message = data.get("message") if isinstance(data, dict) else None
        Log.info(f"Upload accepted with status {response.status_code}")
        return str(message) if message is not None else ""

    def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            return self._client.request(method, url, **kwargs)
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ApiNetworkError(f"Backend network error: {exc}") from exc
        except httpx.HTTPError as exc:
            raise ApiError(f"Backend request failed: {exc}") from exc

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise ApiResponseError(
                f"Invalid JSON response: {exc}", status_code=response.status_code
            ) from exc

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        generic = f"HTTP error! status: {response.status_code}"
        try:
            data = response.json()
        except ValueError:
            return generic
        if isinstance(data, dict) and data.get("error"):
            return str(data["error"])
        return generic

    @staticmethod
    def _parse_department(raw: Any) -> Department:
        if not isinstance(raw, dict) or "_id" not in raw:
            raise ApiResponseError(f"Malformed department record: {raw!r}")
        categories = raw.get("categories") or []
        return Department(
            id=str(raw["_id"]),
            name=str(raw.get("name", "")),
            categories=[str(c) for c in categories],
        )
