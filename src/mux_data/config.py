"""Client defaults and platform metadata."""

from collections.abc import Mapping
from dataclasses import dataclass

from mux_data._version import __version__
from mux_data.errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.mux.com"
DEFAULT_TIMEOUT = 30.0

SOURCE_PLATFORM_HEADER = "x-source-platform"
PLATFORM_SEPARATOR = " | "
# Rendered in place of a missing platform version
MISSING_VERSION = "undefined"


@dataclass(frozen=True)
class PlatformInfo:
    """Identifies the application embedding this client.

    Sent as ``x-source-platform: "<name> | <version>"``. Neither field may
    contain a pipe since both are joined into one header value.

    Raises:
        ConfigurationError: If name or version contains "|".
    """

    name: str | None = None
    version: str | None = None

    def __post_init__(self) -> None:
        if self.name is not None and "|" in self.name:
            raise ConfigurationError('Platform name cannot contain a "|" value.')
        if self.version is not None and "|" in self.version:
            raise ConfigurationError('Platform version cannot contain a "|" value.')

    @classmethod
    def coerce(cls, value: "PlatformInfo | Mapping[str, str | None] | None") -> "PlatformInfo | None":
        """Accept a PlatformInfo, a ``{"name", "version"}`` mapping, or None."""
        if value is None or isinstance(value, PlatformInfo):
            return value
        return cls(name=value.get("name"), version=value.get("version"))

    @property
    def header_value(self) -> str | None:
        if not self.name:
            return None
        version = self.version if self.version is not None else MISSING_VERSION
        return f"{self.name}{PLATFORM_SEPARATOR}{version}"


def build_headers(platform: PlatformInfo | None = None) -> dict[str, str]:
    """Build the default headers sent with every request."""
    headers = {
        "User-Agent": f"Mux Python{PLATFORM_SEPARATOR}{__version__}",
        "Accept": "application/json",
    }
    if platform is not None and platform.header_value is not None:
        headers[SOURCE_PLATFORM_HEADER] = platform.header_value
    return headers
