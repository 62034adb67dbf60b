"""API error model shared by the search and playback layers."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict

from tunequeue.logging import get_logger

NOT_FOUND_ID = "notFound"
UNKNOWN_ERROR_ID = "unknown"

_logger = get_logger(__name__)


class ApiResponseError(BaseModel):
    """Error payload returned by the upstream music API."""

    model_config = ConfigDict(frozen=True)

    id: str = UNKNOWN_ERROR_ID
    message: str | None = None


class ApiErrorException(RuntimeError):
    """Raised when the upstream API answered with an error payload.

    ``error_res`` names the user-facing message resource, when one exists.
    """

    http_status: int = status.HTTP_502_BAD_GATEWAY

    def __init__(
        self,
        error: ApiResponseError | None = None,
        error_res: str | None = None,
    ) -> None:
        self.error = error if error is not None else ApiResponseError()
        self.error_res = error_res
        super().__init__(
            f"API returned an error: id = {self.error.id}, message = {self.error.message}"
        )

    def __str__(self) -> str:
        return self.args[0]

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.error == other.error and self.error_res == other.error_res

    def __hash__(self) -> int:
        return hash((type(self), self.error, self.error_res))

    def as_response(self, *, request_path: str, method: str) -> JSONResponse:
        """Serialise the exception into the canonical error envelope."""

        error: dict[str, Any] = {"code": self.error.id, "message": str(self)}
        if self.error_res is not None:
            error["resource"] = self.error_res
        response = JSONResponse(
            status_code=self.http_status,
            content={"ok": False, "error": error},
        )
        _logger.log(
            _log_level_for_status(self.http_status),
            "API request failed",
            extra={
                "event": "api.error",
                "code": self.error.id,
                "status": self.http_status,
                "path": request_path,
                "method": method,
            },
        )
        return response


class ApiNotFoundError(ApiErrorException):
    """The upstream API reported that the requested resource does not exist."""

    http_status = status.HTTP_404_NOT_FOUND

    def __init__(self, error: ApiResponseError | None = None) -> None:
        super().__init__(
            error if error is not None else ApiResponseError(id=NOT_FOUND_ID),
            error_res="error_notFound",
        )


def _log_level_for_status(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code == status.HTTP_429_TOO_MANY_REQUESTS:
        return logging.WARNING
    return logging.INFO


def transform(exc: ApiErrorException) -> ApiErrorException:
    """Promote ``notFound`` errors to :class:`ApiNotFoundError`."""

    if exc.error.id == NOT_FOUND_ID and not isinstance(exc, ApiNotFoundError):
        return ApiNotFoundError(exc.error)
    return exc


def api_error(id: str = UNKNOWN_ERROR_ID, message: str | None = None) -> ApiErrorException:
    return ApiErrorException(ApiResponseError(id=id, message=message))


__all__ = [
    "ApiErrorException",
    "ApiNotFoundError",
    "ApiResponseError",
    "api_error",
    "transform",
]
