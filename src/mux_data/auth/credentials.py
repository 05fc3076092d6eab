"""Credential resolution for the Mux Data client.

Mux authenticates with an access token pair (token id, token secret) sent
as HTTP Basic credentials. Each half is resolved independently.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment snapshot (``os.environ`` unless one is injected)
3. .env file (python-dotenv), only when enabled
4. Default value

Example:
    ```python
    from mux_data.auth import resolve_credentials

    # Explicit values always win
    credentials = resolve_credentials("token-id", "token-secret")

    # Fall back to MUX_TOKEN_ID / MUX_TOKEN_SECRET
    credentials = resolve_credentials()

    # Tests can pass a synthetic environment instead of mutating os.environ
    credentials = resolve_credentials(environ={"MUX_TOKEN_ID": "id", "MUX_TOKEN_SECRET": "secret"})
    ```

Security Considerations:
    - Credentials are never logged in full (masked with ***)
    - Only source information is logged (env var name, .env path)
    - Loading a .env file never writes to the process environment
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

TOKEN_ID_ENV_VAR = "MUX_TOKEN_ID"
TOKEN_SECRET_ENV_VAR = "MUX_TOKEN_SECRET"


@dataclass(frozen=True)
class Credentials:
    """Resolved access token pair.

    Either half may be None; a client built from empty credentials sends
    unauthenticated requests and lets the API reject them.
    """

    token_id: str | None = None
    token_secret: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.token_id is None and self.token_secret is None

    def __repr__(self) -> str:
        secret = "***" if self.token_secret is not None else None
        return f"Credentials(token_id={self.token_id!r}, token_secret={secret!r})"


class CredentialResolver:
    """Resolve single credential values from multiple sources.

    Attributes:
        environ: The environment mapping consulted for env var lookups.
        dotenv_path: Path of the .env file, or None to let python-dotenv search.

    Example:
        ```python
        resolver = CredentialResolver(environ={"MUX_TOKEN_ID": "abc"})
        token_id = resolver.resolve(env_var_name="MUX_TOKEN_ID")
        ```
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        dotenv_path: str | None = None,
        load_dotenv: bool = False,
    ):
        """Initialize credential resolver.

        Args:
            environ: Environment snapshot to read from. Defaults to os.environ,
                read at resolution time.
            dotenv_path: Path to .env file. If None, python-dotenv searches
                parent directories.
            load_dotenv: Whether to consult a .env file after the environment.
                Default is False.
        """
        self.environ = environ
        self.dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv
        self._dotenv: dict[str, str] = {}

        if self._load_dotenv_enabled:
            self._load_dotenv()

    def _load_dotenv(self) -> None:
        values = dotenv_values(dotenv_path=self.dotenv_path)
        self._dotenv = {key: value for key, value in values.items() if value is not None}
        logger.debug(f"Loaded {len(self._dotenv)} value(s) from .env for credential resolution")

    def _environ(self) -> Mapping[str, str]:
        return os.environ if self.environ is None else self.environ

    @staticmethod
    def _mask_credential(value: str | None) -> str:
        if value is None:
            return "None"
        return "***"

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Resolve a credential from multiple sources.

        Args:
            value: Explicitly provided value (highest priority).
            env_var_name: Environment variable name to check.
            default: Default value if not found elsewhere.
            mask_in_logs: If True (default), masks credential values in
                log messages.

        Returns:
            Resolved credential value, or None if not found.
        """
        result = None
        source = None
        environ = self._environ()

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in environ:
            result = environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif env_var_name and env_var_name in self._dotenv:
            result = self._dotenv[env_var_name]
            source = f".env value '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = self._mask_credential(result) if mask_in_logs else result
            logger.debug(f"Resolved credential from {source}: {shown}")
        elif env_var_name:
            logger.debug(f"No value found for '{env_var_name}'")

        return result


def resolve_credentials(
    token_id: str | None = None,
    token_secret: str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    resolver: CredentialResolver | None = None,
) -> Credentials:
    """Resolve the Mux access token pair.

    Explicit arguments win; anything missing falls back to MUX_TOKEN_ID and
    MUX_TOKEN_SECRET. Nothing is required: unresolved halves come back as None.

    Args:
        token_id: Explicit access token id.
        token_secret: Explicit access token secret.
        environ: Environment snapshot, ignored when ``resolver`` is given.
        resolver: Preconfigured resolver, e.g. one that reads a .env file.

    Returns:
        The resolved Credentials.
    """
    if resolver is None:
        resolver = CredentialResolver(environ=environ)

    return Credentials(
        token_id=resolver.resolve(value=token_id, env_var_name=TOKEN_ID_ENV_VAR, mask_in_logs=False),
        token_secret=resolver.resolve(value=token_secret, env_var_name=TOKEN_SECRET_ENV_VAR),
    )
