"""Mux Data Video Views API."""

from collections.abc import Awaitable

from mux_data.resources.base import JSON, Resource
from mux_data.types import VideoViewsQueryParams


class VideoViews(Resource):
    """Individual video views.

    See https://docs.mux.com/api-reference/data#tag/Video-Views
    """

    path = "/data/v1/video-views"

    def list(self, params: VideoViewsQueryParams | None = None) -> Awaitable[JSON]:
        """List video views for the property within a timeframe.

        Results are ordered by ``view_end`` according to ``order_direction``.

        Example:
            ```python
            await data.video_views.list({"viewer_id": "ABCD1234", "timeframe": ["7:days"]})
            ```
        """
        return self._get(self.path, params)

    def get(self, video_view_id: str) -> Awaitable[JSON]:
        """Get the details of a single video view.

        Raises:
            MissingParameterError: If video_view_id is empty.
        """
        self._require(video_view_id, "A video view Id is required for video view details.", "video_view_id")
        return self._get(f"{self.path}/{video_view_id}")
