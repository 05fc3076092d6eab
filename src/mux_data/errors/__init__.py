"""Error taxonomy and HTTP error mapping for the Mux Data client."""

from mux_data.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConfigurationError,
    ConflictError,
    ForbiddenError,
    MissingParameterError,
    MuxError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)
from mux_data.errors.handler import exception_class_for, raise_for_status
from mux_data.errors.models import ErrorDetail

__all__ = [
    "APIError",
    "BadRequestError",
    "ClientError",
    "ConfigurationError",
    "ConflictError",
    "ErrorDetail",
    "ForbiddenError",
    "MissingParameterError",
    "MuxError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "UnauthorizedError",
    "ValidationError",
    "exception_class_for",
    "raise_for_status",
]
