"""Mux Data Metrics API."""

from collections.abc import Awaitable

from mux_data.resources.base import JSON, Resource
from mux_data.types import MetricsBreakdownParams, MetricsComparisonParams, MetricsQueryParams


class Metrics(Resource):
    """Historical metric values, breakdowns and insights.

    See https://docs.mux.com/api-reference/data#tag/Metrics
    """

    path = "/data/v1/metrics"

    def list(self, params: MetricsQueryParams | None = None) -> Awaitable[JSON]:
        """Overall values for every metric."""
        return self._get(self.path, params)

    def breakdown(self, metric_id: str, params: MetricsBreakdownParams | None = None) -> Awaitable[JSON]:
        """Metric values broken down by a dimension."""
        self._require(metric_id, "A metric Id is required for a metric breakdown.", "metric_id")
        return self._get(f"{self.path}/{metric_id}/breakdown", params)

    def comparison(self, params: MetricsComparisonParams | None = None) -> Awaitable[JSON]:
        """Compare every metric for one dimension value against the overall values."""
        self._require_param(params, "value", "The value query parameter is required for comparing metrics.")
        return self._get(f"{self.path}/comparison", params)

    def insights(self, metric_id: str, params: MetricsQueryParams | None = None) -> Awaitable[JSON]:
        self._require(metric_id, "A metric Id is required for metric insights.", "metric_id")
        return self._get(f"{self.path}/{metric_id}/insights", params)

    def overall(self, metric_id: str, params: MetricsQueryParams | None = None) -> Awaitable[JSON]:
        self._require(metric_id, "A metric Id is required for overall metric values.", "metric_id")
        return self._get(f"{self.path}/{metric_id}/overall", params)

    def timeseries(self, metric_id: str, params: MetricsQueryParams | None = None) -> Awaitable[JSON]:
        self._require(metric_id, "A metric Id is required for a metric timeseries.", "metric_id")
        return self._get(f"{self.path}/{metric_id}/timeseries", params)
