"""Mux Data Dimensions API."""

from collections.abc import Awaitable

from mux_data.resources.base import JSON, Resource
from mux_data.types import DimensionValuesParams


class Dimensions(Resource):
    path = "/data/v1/dimensions"

    def list(self) -> Awaitable[JSON]:
        """List the dimensions available for filtering and breakdowns."""
        return self._get(self.path)

    def values(self, dimension_id: str, params: DimensionValuesParams | None = None) -> Awaitable[JSON]:
        """List the values seen for one dimension, with view counts."""
        self._require(dimension_id, "A dimension Id is required to list dimension values.", "dimension_id")
        return self._get(f"{self.path}/{dimension_id}", params)
