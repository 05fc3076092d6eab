"""Mux Data Incidents API."""

from collections.abc import Awaitable

from mux_data.resources.base import JSON, Resource
from mux_data.types import IncidentsQueryParams, ListParams


class Incidents(Resource):
    """Alert incidents raised by Mux Data.

    See https://docs.mux.com/api-reference/data#tag/Incidents
    """

    path = "/data/v1/incidents"

    def list(self, params: IncidentsQueryParams | None = None) -> Awaitable[JSON]:
        return self._get(self.path, params)

    def get(self, incident_id: str) -> Awaitable[JSON]:
        self._require(incident_id, "An incident Id is required for incident details.", "incident_id")
        return self._get(f"{self.path}/{incident_id}")

    def related(self, incident_id: str, params: ListParams | None = None) -> Awaitable[JSON]:
        """Incidents related to the given incident."""
        self._require(incident_id, "An incident Id is required for related incidents.", "incident_id")
        return self._get(f"{self.path}/{incident_id}/related", params)
