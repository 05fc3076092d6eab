"""Request/response observation hooks.

Listeners are plain callables invoked synchronously, in registration order,
once per request and once per response. For a single call the request
listeners always run before its response listeners.

Example:
    ```python
    seen = []
    client = BaseClient(on_request=seen.append, on_response=lambda event: print(event.status))
    ```
"""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from mux_data.auth import Credentials


@dataclass(frozen=True)
class RequestEvent:
    """Outgoing request descriptor."""

    method: str
    url: str  # path relative to base_url
    base_url: str
    auth: Credentials
    params: list[tuple[str, str]] = field(default_factory=list)


@dataclass(frozen=True)
class ResponseEvent:
    """Resolved response: status and parsed body."""

    status: int
    data: Any
    request: RequestEvent


RequestListener = Callable[[RequestEvent], Any]
ResponseListener = Callable[[ResponseEvent], Any]


def _as_list(listeners: Any) -> list:
    if listeners is None:
        return []
    if callable(listeners):
        return [listeners]
    return list(listeners)


class ClientHooks:
    """Two ordered listener lists, one per channel."""

    def __init__(
        self,
        on_request: RequestListener | Iterable[RequestListener] | None = None,
        on_response: ResponseListener | Iterable[ResponseListener] | None = None,
    ):
        self._request_listeners: list[RequestListener] = _as_list(on_request)
        self._response_listeners: list[ResponseListener] = _as_list(on_response)

    @property
    def request_listeners(self) -> Sequence[RequestListener]:
        return tuple(self._request_listeners)

    @property
    def response_listeners(self) -> Sequence[ResponseListener]:
        return tuple(self._response_listeners)

    def add_request_listener(self, listener: RequestListener) -> None:
        self._request_listeners.append(listener)

    def add_response_listener(self, listener: ResponseListener) -> None:
        self._response_listeners.append(listener)

    def emit_request(self, event: RequestEvent) -> None:
        # Snapshot so a listener registering another listener doesn't extend this dispatch
        for listener in list(self._request_listeners):
            listener(event)

    def emit_response(self, event: ResponseEvent) -> None:
        for listener in list(self._response_listeners):
            listener(event)
