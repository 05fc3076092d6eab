"""Mux Data Real-Time API."""

from collections.abc import Awaitable

from mux_data.resources.base import JSON, Resource
from mux_data.types import (
    RealTimeBreakdownQueryParams,
    RealTimeHistogramQueryParams,
    RealTimeTimeseriesParams,
)


class RealTime(Resource):
    """Real-time dimensions, metrics, breakdowns and timeseries.

    Example:
        ```python
        await data.real_time.breakdown(
            "current-concurrent-viewers",
            {"dimension": "asn", "timestamp": 1547853000, "filters": ["country:US"]},
        )
        ```
    """

    path = "/data/v1/realtime"

    def dimensions(self) -> Awaitable[JSON]:
        """List available real-time dimensions."""
        return self._get(f"{self.path}/dimensions")

    def metrics(self) -> Awaitable[JSON]:
        """List available real-time metrics."""
        return self._get(f"{self.path}/metrics")

    def breakdown(self, metric_id: str, params: RealTimeBreakdownQueryParams | None = None) -> Awaitable[JSON]:
        """Breakdown of one metric by a dimension, with concurrent viewers and negative impact.

        Raises:
            MissingParameterError: If metric_id or the ``dimension`` param is missing.
        """
        self._require(metric_id, "A metric Id is required for real-time breakdown information", "metric_id")
        self._require_param(
            params, "dimension", "The dimension query parameter is required for real-time breakdown information"
        )
        return self._get(f"{self.path}/metrics/{metric_id}/breakdown", params)

    def histogram_timeseries(
        self, metric_id: str, params: RealTimeHistogramQueryParams | None = None
    ) -> Awaitable[JSON]:
        """Histogram timeseries for one metric."""
        self._require(
            metric_id, "A metric Id is required for real-time histogram timeseries information", "metric_id"
        )
        return self._get(f"{self.path}/metrics/{metric_id}/histogram-timeseries", params)

    def timeseries(self, metric_id: str, params: RealTimeTimeseriesParams | None = None) -> Awaitable[JSON]:
        """Timeseries for one metric along with concurrent viewers."""
        self._require(metric_id, "A metric Id is required for real-time timeseries information.", "metric_id")
        return self._get(f"{self.path}/metrics/{metric_id}/timeseries", params)
