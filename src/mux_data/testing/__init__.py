"""Testing utilities for code built on the Mux Data client.

Example:
    ```python
    from mux_data import Data
    from mux_data.testing import StubRouter, create_json_response

    router = StubRouter()
    router.stub("GET", "/data/v1/video-views", create_json_response({"data": []}))

    async with Data("id", "secret", transport=router.transport) as data:
        await data.video_views.list()

    assert router.calls[0].url.path == "/data/v1/video-views"
    ```
"""

from typing import Any

import httpx

from mux_data.auth import TOKEN_ID_ENV_VAR, TOKEN_SECRET_ENV_VAR


def create_json_response(data: Any, status_code: int = 200, headers: dict[str, str] | None = None) -> httpx.Response:
    """Build a JSON response."""
    return httpx.Response(status_code, json=data, headers=headers)


def create_error_response(
    status_code: int,
    messages: list[str] | None = None,
    error_type: str = "invalid_parameters",
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    """Build a response carrying the Mux error envelope."""
    body = {"error": {"type": error_type, "messages": messages or []}}
    return httpx.Response(status_code, json=body, headers=headers)


def mock_credentials(token_id: str = "test-token-id", token_secret: str = "test-token-secret") -> dict[str, str]:
    """Environment mapping holding a credential pair."""
    return {TOKEN_ID_ENV_VAR: token_id, TOKEN_SECRET_ENV_VAR: token_secret}


class StubRouter:
    """Route table served through ``httpx.MockTransport``.

    Unmatched requests get a 404 with the Mux error envelope. Every request
    seen is appended to ``calls``.
    """

    def __init__(self) -> None:
        self._routes: dict[tuple[str, str], httpx.Response] = {}
        self.calls: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def stub(self, method: str, path: str, response: httpx.Response) -> None:
        self._routes[(method.upper(), path)] = response

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        stubbed = self._routes.get((request.method, request.url.path))
        if stubbed is None:
            return create_error_response(404, [f"No stub for {request.method} {request.url.path}"], "not_found")
        return httpx.Response(stubbed.status_code, headers=stubbed.headers, content=stubbed.content)


__all__ = [
    "StubRouter",
    "create_error_response",
    "create_json_response",
    "mock_credentials",
]
