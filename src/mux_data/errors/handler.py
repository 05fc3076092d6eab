"""Error handling utilities for HTTP responses."""

import httpx

from mux_data.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)
from mux_data.errors.models import ErrorDetail

EXCEPTION_MAP: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: ValidationError,
    429: RateLimitError,
}


def exception_class_for(status_code: int) -> type[APIError]:
    """Map an HTTP status code to the exception class raised for it."""
    if status_code in EXCEPTION_MAP:
        return EXCEPTION_MAP[status_code]
    if 400 <= status_code < 500:
        return ClientError
    if 500 <= status_code < 600:
        return ServerError
    return APIError


def raise_for_status(response: httpx.Response) -> None:
    """Raise appropriate exception for HTTP error responses.

    Parses the Mux error envelope if present, otherwise falls back to the
    status code and the start of the response text.

    Args:
        response: HTTP response object

    Raises:
        APIError subclass based on status code
    """
    if response.is_success:
        return

    status_code = response.status_code
    error_detail = ErrorDetail.from_response(response)
    exc_class = exception_class_for(status_code)

    if error_detail:
        message = error_detail.to_exception_message(status_code)
    else:
        response_text = response.text[:200]
        message = f"HTTP {status_code}: {response_text}" if response_text else f"HTTP {status_code}"

    if exc_class is RateLimitError:
        retry_after = None
        if "retry-after" in response.headers:
            try:
                retry_after = int(response.headers["retry-after"])
            except (ValueError, TypeError):
                retry_after = None
        raise RateLimitError(
            message=message,
            retry_after=retry_after,
            status_code=status_code,
            response=response,
            error_detail=error_detail,
        )

    if exc_class is ValidationError:
        raise ValidationError(
            message=message,
            messages=error_detail.messages if error_detail else None,
            status_code=status_code,
            response=response,
            error_detail=error_detail,
        )

    raise exc_class(
        message=message,
        status_code=status_code,
        response=response,
        error_detail=error_detail,
    )
