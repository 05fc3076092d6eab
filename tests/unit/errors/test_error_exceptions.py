"""Tests for the exception hierarchy."""

import pytest

from mux_data.errors import (
    APIError,
    ClientError,
    ConfigurationError,
    MissingParameterError,
    MuxError,
    NotFoundError,
    RateLimitError,
    ServerError,
    ValidationError,
)


class TestHierarchy:
    def test_everything_is_a_mux_error(self):
        for exc_class in (ConfigurationError, MissingParameterError, APIError, NotFoundError, ServerError):
            assert issubclass(exc_class, MuxError)

    def test_programmer_errors_are_value_errors(self):
        assert issubclass(ConfigurationError, ValueError)
        assert issubclass(MissingParameterError, ValueError)

    def test_client_errors_are_api_errors(self):
        assert issubclass(NotFoundError, ClientError)
        assert issubclass(ClientError, APIError)
        assert not issubclass(ServerError, ClientError)


class TestAttributes:
    def test_missing_parameter_error_carries_parameter(self):
        with pytest.raises(MissingParameterError) as exc_info:
            raise MissingParameterError("A metric Id is required", parameter="metric_id")

        assert exc_info.value.parameter == "metric_id"
        assert str(exc_info.value) == "A metric Id is required"

    def test_api_error_defaults(self):
        error = APIError("boom")

        assert error.status_code is None
        assert error.response is None
        assert error.error_detail is None

    def test_rate_limit_error_retry_after(self):
        error = RateLimitError("slow down", retry_after=30, status_code=429)

        assert error.retry_after == 30
        assert error.status_code == 429

    def test_validation_error_messages_default(self):
        assert ValidationError("bad").messages == []
