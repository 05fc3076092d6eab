"""Composed Mux Data client."""

from typing import Any

from mux_data.client import BaseClient
from mux_data.resources import Dimensions, Errors, Exports, Incidents, Metrics, RealTime, VideoViews


class Data(BaseClient):
    """Every Mux Data resource behind one credentialed transport.

    Example:
        ```python
        async with Data("token-id", "token-secret") as data:
            views = await data.video_views.list({"timeframe": ["7:days"]})
            breakdown = await data.real_time.breakdown("current-concurrent-viewers", {"dimension": "asn"})
        ```
    """

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.video_views = VideoViews(self)
        self.errors = Errors(self)
        self.real_time = RealTime(self)
        self.metrics = Metrics(self)
        self.dimensions = Dimensions(self)
        self.incidents = Incidents(self)
        self.exports = Exports(self)
