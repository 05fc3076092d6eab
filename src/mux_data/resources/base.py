"""Base class for endpoint wrappers."""

from collections.abc import Awaitable, Mapping
from typing import TYPE_CHECKING, Any

from mux_data.errors import MissingParameterError

if TYPE_CHECKING:
    from mux_data.client import BaseClient

JSON = dict[str, Any]


class Resource:
    """Holds a non-owning reference to a ``BaseClient``.

    Methods validate their arguments synchronously and return the pending
    request, so a missing argument raises before any I/O is scheduled.
    """

    path: str = ""

    def __init__(self, client: "BaseClient"):
        self._client = client

    @property
    def client(self) -> "BaseClient":
        return self._client

    def _get(self, path: str, params: Mapping[str, Any] | None = None) -> Awaitable[JSON]:
        return self._client.get(path, params=params)

    @staticmethod
    def _require(value: Any, message: str, parameter: str) -> None:
        if not value:
            raise MissingParameterError(message, parameter=parameter)

    @staticmethod
    def _require_param(params: Mapping[str, Any] | None, key: str, message: str) -> None:
        if not params or not params.get(key):
            raise MissingParameterError(message, parameter=key)
