"""Tests for error handling utilities."""

import pytest
from httpx import Response

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
from mux_data.errors.handler import exception_class_for, raise_for_status


@pytest.mark.unit
def test_raise_for_status_success_response():
    """Test raise_for_status doesn't raise for successful responses."""
    response = Response(status_code=200)

    # Should not raise
    raise_for_status(response)


@pytest.mark.unit
def test_raise_for_status_400_bad_request():
    """Test raise_for_status raises BadRequestError for 400."""
    response = Response(
        status_code=400,
        headers={"content-type": "text/plain"},
        text="Bad request",
    )

    with pytest.raises(BadRequestError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.status_code == 400
    assert exc_info.value.response == response
    assert "400" in str(exc_info.value)
    assert exc_info.value.error_detail is None


@pytest.mark.unit
@pytest.mark.parametrize(
    ("status_code", "exc_class"),
    [
        (401, UnauthorizedError),
        (403, ForbiddenError),
        (404, NotFoundError),
        (409, ConflictError),
        (418, ClientError),
        (500, ServerError),
        (503, ServerError),
    ],
)
def test_raise_for_status_maps_status_codes(status_code, exc_class):
    """Test each status code raises its mapped exception class."""
    response = Response(status_code=status_code, text="nope")

    with pytest.raises(exc_class) as exc_info:
        raise_for_status(response)

    assert exc_info.value.status_code == status_code


@pytest.mark.unit
def test_exception_class_for_unmapped_status():
    """Test statuses outside 4xx/5xx fall back to APIError."""
    assert exception_class_for(302) is APIError


@pytest.mark.unit
def test_raise_for_status_uses_mux_error_envelope():
    """Test the Mux error body becomes the exception message."""
    response = Response(
        status_code=400,
        json={"error": {"type": "invalid_parameters", "messages": ["Unknown metric 'foo'"]}},
    )

    with pytest.raises(BadRequestError) as exc_info:
        raise_for_status(response)

    assert str(exc_info.value) == "HTTP 400 (invalid_parameters): Unknown metric 'foo'"
    assert exc_info.value.error_detail.type == "invalid_parameters"


@pytest.mark.unit
def test_raise_for_status_422_validation():
    """Test raise_for_status raises ValidationError with the error messages."""
    response = Response(
        status_code=422,
        json={"error": {"type": "invalid_parameters", "messages": ["timeframe is invalid", "limit is too large"]}},
    )

    with pytest.raises(ValidationError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.status_code == 422
    assert exc_info.value.messages == ["timeframe is invalid", "limit is too large"]


@pytest.mark.unit
def test_raise_for_status_422_without_envelope():
    """Test ValidationError messages default to an empty list."""
    response = Response(status_code=422, text="Unprocessable")

    with pytest.raises(ValidationError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.messages == []


@pytest.mark.unit
def test_raise_for_status_429_rate_limit():
    """Test raise_for_status raises RateLimitError for 429."""
    response = Response(
        status_code=429,
        headers={"retry-after": "60"},
        text="Too many requests",
    )

    with pytest.raises(RateLimitError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.status_code == 429
    assert exc_info.value.retry_after == 60


@pytest.mark.unit
def test_raise_for_status_429_invalid_retry_after():
    """Test an unparseable Retry-After header leaves retry_after unset."""
    response = Response(
        status_code=429,
        headers={"retry-after": "Wed, 21 Oct 2015 07:28:00 GMT"},
        text="Too many requests",
    )

    with pytest.raises(RateLimitError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.retry_after is None


@pytest.mark.unit
def test_raise_for_status_empty_body_message():
    """Test the message is just the status when the body is empty."""
    response = Response(status_code=500)

    with pytest.raises(ServerError) as exc_info:
        raise_for_status(response)

    assert str(exc_info.value) == "HTTP 500"


@pytest.mark.unit
def test_raise_for_status_truncates_long_bodies():
    """Test long plain-text bodies are truncated in the message."""
    response = Response(status_code=500, text="x" * 1000)

    with pytest.raises(ServerError) as exc_info:
        raise_for_status(response)

    assert len(str(exc_info.value)) == len("HTTP 500: ") + 200
