"""Mux Data Errors API."""

from collections.abc import Awaitable

from mux_data.resources.base import JSON, Resource
from mux_data.types import ErrorsParams


class Errors(Resource):
    """Playback errors.

    Example:
        ```python
        await data.errors.list({"filters": ["operating_system:windows"]})
        ```

    See https://docs.mux.com/api-reference/data#operation/list-errors
    """

    path = "/data/v1/errors"

    def list(self, params: ErrorsParams | None = None) -> Awaitable[JSON]:
        """List playback errors, optionally filtered and scoped to a timeframe."""
        return self._get(self.path, params)
