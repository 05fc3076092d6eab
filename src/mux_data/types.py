"""Query parameter shapes for Mux Data endpoints.

Every key is optional on the wire; required ones are checked by the
resource method that needs them. List values are sent array style.
"""

from typing import Literal, TypedDict

OrderDirection = Literal["asc", "desc"]
Timeframe = list[str | int]


class ListParams(TypedDict, total=False):
    limit: int
    page: int


class FilteredParams(TypedDict, total=False):
    filters: list[str]
    metric_filters: list[str]
    timeframe: Timeframe


class VideoViewsQueryParams(ListParams, FilteredParams, total=False):
    viewer_id: str
    error_id: int
    order_direction: OrderDirection


class ErrorsParams(FilteredParams, total=False):
    pass


class RealTimeBreakdownQueryParams(TypedDict, total=False):
    dimension: str
    timestamp: int
    filters: list[str]
    order_by: Literal["negative_impact", "value", "views", "field"]
    order_direction: OrderDirection


class RealTimeHistogramQueryParams(TypedDict, total=False):
    filters: list[str]


class RealTimeTimeseriesParams(TypedDict, total=False):
    filters: list[str]


class MetricsQueryParams(FilteredParams, total=False):
    measurement: Literal["95th", "median", "avg", "count", "sum"]
    group_by: str  # timeseries interval or breakdown dimension
    order_direction: OrderDirection


class MetricsBreakdownParams(ListParams, MetricsQueryParams, total=False):
    order_by: Literal["negative_impact", "value", "views", "field"]


class MetricsComparisonParams(FilteredParams, total=False):
    dimension: str
    value: str


class IncidentsQueryParams(ListParams, total=False):
    order_by: Literal["negative_impact", "value", "views", "field"]
    order_direction: OrderDirection
    status: Literal["open", "closed", "expired"]
    severity: Literal["warning", "alert"]


class DimensionValuesParams(ListParams, FilteredParams, total=False):
    pass
