"""Mux Data - asynchronous Python client for the Mux Data API.

Example:
    ```python
    from mux_data import Data

    # Credentials fall back to MUX_TOKEN_ID / MUX_TOKEN_SECRET
    async with Data(platform={"name": "My App", "version": "1.0.0"}) as data:
        views = await data.video_views.list({"filters": ["operating_system:windows"]})
        view = await data.video_views.get(views["data"][0]["id"])
    ```
"""

from mux_data._version import __version__
from mux_data.auth import Credentials, resolve_credentials
from mux_data.client import BaseClient
from mux_data.config import DEFAULT_BASE_URL, PlatformInfo
from mux_data.data import Data
from mux_data.errors import APIError, ConfigurationError, MissingParameterError, MuxError
from mux_data.hooks import RequestEvent, ResponseEvent

__all__ = [
    "DEFAULT_BASE_URL",
    "APIError",
    "BaseClient",
    "ConfigurationError",
    "Credentials",
    "Data",
    "MissingParameterError",
    "MuxError",
    "PlatformInfo",
    "RequestEvent",
    "ResponseEvent",
    "__version__",
    "resolve_credentials",
]
