"""Tests for Mux error body parsing."""

import pytest
from httpx import Response

from mux_data.errors.models import ErrorDetail


@pytest.mark.unit
def test_from_response_parses_envelope():
    response = Response(400, json={"error": {"type": "invalid_parameters", "messages": ["a", "b"]}})

    detail = ErrorDetail.from_response(response)

    assert detail == ErrorDetail(type="invalid_parameters", messages=["a", "b"])


@pytest.mark.unit
def test_from_response_accepts_single_message_string():
    response = Response(404, json={"error": {"type": "not_found", "messages": "Not found"}})

    detail = ErrorDetail.from_response(response)

    assert detail.messages == ["Not found"]


@pytest.mark.unit
def test_from_response_missing_messages():
    response = Response(500, json={"error": {"type": "internal"}})

    detail = ErrorDetail.from_response(response)

    assert detail.type == "internal"
    assert detail.messages == []


@pytest.mark.unit
@pytest.mark.parametrize(
    "response",
    [
        Response(500, text="<html>oops</html>"),
        Response(500, json=["not", "a", "dict"]),
        Response(500, json={"data": []}),
        Response(500, json={"error": "flat string"}),
        Response(500),
    ],
)
def test_from_response_returns_none_for_other_bodies(response):
    assert ErrorDetail.from_response(response) is None


@pytest.mark.unit
def test_to_exception_message():
    detail = ErrorDetail(type="not_found", messages=["View not found", "Check the id"])

    assert detail.to_exception_message(404) == "HTTP 404 (not_found): View not found; Check the id"


@pytest.mark.unit
def test_to_exception_message_without_type_or_messages():
    assert ErrorDetail().to_exception_message(500) == "HTTP 500"
