"""Credentialed HTTP facade shared by every Mux Data resource."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

import httpx

from mux_data.auth import CredentialResolver, Credentials, resolve_credentials
from mux_data.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, PlatformInfo, build_headers
from mux_data.errors import raise_for_status
from mux_data.hooks import ClientHooks, RequestEvent, RequestListener, ResponseEvent, ResponseListener
from mux_data.params import encode_params

logger = logging.getLogger(__name__)


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class BaseClient:
    """Owns one configured ``httpx.AsyncClient`` and its credentials.

    Credentials and platform metadata are resolved once, at construction,
    and never change afterwards. Missing credentials are not an error here:
    requests are then sent without Basic auth and fail at the HTTP layer.

    Args:
        token_id: Access token id. Falls back to MUX_TOKEN_ID.
        token_secret: Access token secret. Falls back to MUX_TOKEN_SECRET.
        platform: ``PlatformInfo`` or ``{"name": ..., "version": ...}`` used
            for the ``x-source-platform`` header.
        environ: Environment snapshot used instead of ``os.environ``.
        resolver: Preconfigured ``CredentialResolver``, e.g. one that reads a
            .env file. Takes the place of ``environ``.
        credentials: Already-resolved credentials, used verbatim. Cannot be
            combined with token_id, token_secret, environ or resolver.
        base_url: API root, defaults to the production endpoint.
        timeout: Request timeout in seconds.
        on_request: Listener(s) called with a ``RequestEvent`` before dispatch.
        on_response: Listener(s) called with a ``ResponseEvent`` on resolution.
        transport: Optional ``httpx`` transport, e.g. ``httpx.MockTransport``.

    Raises:
        ConfigurationError: If the platform name or version contains "|".
        TypeError: If credentials is combined with another credential source.

    Example:
        ```python
        async with BaseClient(platform={"name": "My App", "version": "2.1.0"}) as client:
            views = await client.get("/data/v1/video-views", params={"timeframe": ["7:days"]})
        ```
    """

    def __init__(
        self,
        token_id: str | None = None,
        token_secret: str | None = None,
        *,
        platform: PlatformInfo | Mapping[str, str | None] | None = None,
        environ: Mapping[str, str] | None = None,
        resolver: CredentialResolver | None = None,
        credentials: Credentials | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        on_request: RequestListener | Iterable[RequestListener] | None = None,
        on_response: ResponseListener | Iterable[ResponseListener] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._platform = PlatformInfo.coerce(platform)
        if credentials is None:
            credentials = resolve_credentials(token_id, token_secret, environ=environ, resolver=resolver)
        elif any(source is not None for source in (token_id, token_secret, environ, resolver)):
            raise TypeError("credentials cannot be combined with token_id, token_secret, environ or resolver")
        self._credentials = credentials
        self._base_url = base_url.rstrip("/")
        self._path_prefix = httpx.URL(self._base_url).path.rstrip("/")
        self.hooks = ClientHooks(on_request=on_request, on_response=on_response)

        auth = None
        if not credentials.is_empty:
            auth = httpx.BasicAuth(credentials.token_id or "", credentials.token_secret or "")
        else:
            logger.debug("No Mux credentials resolved; requests will be sent unauthenticated")

        self._http = httpx.AsyncClient(
            base_url=self._base_url,
            auth=auth,
            headers=build_headers(self._platform),
            timeout=timeout,
            transport=transport,
            event_hooks={"request": [self._on_request], "response": [self._on_response]},
        )

    @classmethod
    def from_existing(cls, other: "BaseClient", **kwargs: Any) -> "BaseClient":
        """Create a client sharing another client's resolved credentials."""
        return cls(credentials=other.credentials, **kwargs)

    @classmethod
    def from_options(cls, options: Mapping[str, Any], **kwargs: Any) -> "BaseClient":
        """Create a client from ``{"token_id", "token_secret", "platform"}``."""
        return cls(
            options.get("token_id"),
            options.get("token_secret"),
            platform=options.get("platform"),
            **kwargs,
        )

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    @property
    def token_id(self) -> str | None:
        return self._credentials.token_id

    @property
    def token_secret(self) -> str | None:
        return self._credentials.token_secret

    @property
    def platform(self) -> PlatformInfo | None:
        return self._platform

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def http(self) -> httpx.AsyncClient:
        return self._http

    def _relative_path(self, path: str) -> str:
        if self._path_prefix and (path == self._path_prefix or path.startswith(f"{self._path_prefix}/")):
            return path[len(self._path_prefix) :] or "/"
        return path

    def _request_event(self, request: httpx.Request) -> RequestEvent:
        return RequestEvent(
            method=request.method,
            url=self._relative_path(request.url.path),
            base_url=self._base_url,
            auth=self._credentials,
            params=list(request.url.params.multi_items()),
        )

    async def _on_request(self, request: httpx.Request) -> None:
        logger.debug(f"Request {request.method} {request.url}")
        self.hooks.emit_request(self._request_event(request))

    async def _on_response(self, response: httpx.Response) -> None:
        await response.aread()
        logger.debug(f"Response {response.status_code} for {response.request.method} {response.request.url}")
        self.hooks.emit_response(
            ResponseEvent(
                status=response.status_code,
                data=_decode_body(response),
                request=self._request_event(response.request),
            )
        )

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Raises:
            APIError: Subclass matching a non-2xx status.
            httpx.HTTPError: Network-level failures, unmodified.
        """
        response = await self._http.request(method, path, params=encode_params(params) or None, json=json)
        raise_for_status(response)
        return _decode_body(response)

    async def get(self, path: str, *, params: Mapping[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, *, json: Any = None, params: Mapping[str, Any] | None = None) -> Any:
        return await self.request("POST", path, params=params, json=json)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "BaseClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
