"""Authentication components for the Mux Data client.

Example:
    ```python
    from mux_data.auth import resolve_credentials

    credentials = resolve_credentials()  # MUX_TOKEN_ID / MUX_TOKEN_SECRET
    ```
"""

from mux_data.auth.credentials import (
    TOKEN_ID_ENV_VAR,
    TOKEN_SECRET_ENV_VAR,
    CredentialResolver,
    Credentials,
    resolve_credentials,
)

__all__ = [
    "TOKEN_ID_ENV_VAR",
    "TOKEN_SECRET_ENV_VAR",
    "CredentialResolver",
    "Credentials",
    "resolve_credentials",
]
