"""Query string encoding for Mux Data endpoints.

The Data API expects list-valued filters in array style, e.g.
``filters[]=operating_system:windows&filters[]=country:US``.
"""

from collections.abc import Mapping
from typing import Any

QueryParams = list[tuple[str, str]]


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_params(params: Mapping[str, Any] | None) -> QueryParams:
    """Flatten a parameter mapping into ordered query pairs.

    None values are dropped. Lists and tuples become repeated ``key[]``
    pairs unless the key already ends in ``[]``.

    Args:
        params: Query parameters as passed to a resource method.

    Returns:
        List of (key, value) pairs suitable for ``httpx`` ``params=``.
    """
    if not params:
        return []

    pairs: QueryParams = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            array_key = key if key.endswith("[]") else f"{key}[]"
            pairs.extend((array_key, _encode_value(item)) for item in value if item is not None)
        else:
            pairs.append((key, _encode_value(value)))
    return pairs
