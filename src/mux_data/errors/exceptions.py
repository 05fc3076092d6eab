"""Structured exceptions for configuration, argument and API errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from mux_data.errors.models import ErrorDetail


class MuxError(Exception):
    """Base exception for everything raised by this package."""

    pass


class ConfigurationError(MuxError, ValueError):
    """Raised at construction time for malformed client configuration."""

    pass


class MissingParameterError(MuxError, ValueError):
    """Raised before any I/O when a required argument is missing.

    Attributes:
        parameter: Name of the missing argument or query parameter.
    """

    def __init__(self, message: str, parameter: str | None = None):
        super().__init__(message)
        self.parameter = parameter


class APIError(MuxError):
    """Base exception for non-2xx responses from the Mux API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
        error_detail: "ErrorDetail | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
        self.error_detail = error_detail


class ClientError(APIError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class ValidationError(ClientError):
    """422 Unprocessable Entity."""

    def __init__(self, message: str, messages: list[str] | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.messages = messages if messages is not None else []


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(APIError):
    """5xx server errors."""

    pass
