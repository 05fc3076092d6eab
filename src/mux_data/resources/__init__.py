"""Endpoint wrappers for the Mux Data API."""

from mux_data.resources.base import Resource
from mux_data.resources.dimensions import Dimensions
from mux_data.resources.errors import Errors
from mux_data.resources.exports import Exports
from mux_data.resources.incidents import Incidents
from mux_data.resources.metrics import Metrics
from mux_data.resources.real_time import RealTime
from mux_data.resources.video_views import VideoViews

__all__ = [
    "Dimensions",
    "Errors",
    "Exports",
    "Incidents",
    "Metrics",
    "RealTime",
    "Resource",
    "VideoViews",
]
