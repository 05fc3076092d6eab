"""Mux Data Exports API."""

from collections.abc import Awaitable

from mux_data.resources.base import JSON, Resource


class Exports(Resource):
    path = "/data/v1/exports/views"

    def list(self) -> Awaitable[JSON]:
        """List the daily video view export files available for download."""
        return self._get(self.path)
