from typing import Any, Mapping, Optional


class AppError(Exception):
    """Base class for errors that map onto an HTTP response.

    Attributes:
        message: human-readable message, safe to return to the client
        details: optional mapping with extra context (field errors, validation info)
        code: machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Internal server error"
    default_code = "INTERNAL_SERVER_ERROR"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
        code: Optional[str] = None,
    ):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(AppError):
    """Raised when input data is invalid or a required field is missing (400)."""

    http_status = 400
    default_message = "Invalid input"
    default_code = "SERVICE_VALIDATION_ERROR"


class NotFoundError(AppError):
    """Raised when a requested resource was not found (404)."""

    http_status = 404
    default_message = "Not found"
    default_code = "NOT_FOUND"


class ConflictError(AppError):
    """Raised when a unique key is already taken (409)."""

    http_status = 409
    default_message = "Conflict"
    default_code = "CONFLICT"


class UpstreamServiceError(AppError):
    """Raised when storage or an external service fails while serving a request.

    The message is generic; the underlying cause is logged server-side only.
    """

    http_status = 500
    default_message = "Upstream service failure"
    default_code = "UPSTREAM_ERROR"


class ServiceUnavailableError(AppError):
    """Raised while the storage connection is not ready to serve requests (503)."""

    http_status = 503
    default_message = "Service is starting up, try again shortly"
    default_code = "SERVICE_UNAVAILABLE"


class StorageUnavailableError(AppError):
    """Raised when the storage connection cannot be established at startup."""

    default_message = "Could not connect to storage"
    default_code = "STORAGE_UNAVAILABLE"
