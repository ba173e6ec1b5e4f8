"""Authentication components for the Maximo client.

- ``authorize``: the login exchange producing a ``Session``
- ``AuthorizationScheme``: how credentials are presented
- ``CredentialResolver``: settings from explicit values, env vars and .env

Example:
    ```python
    from maximo_client.auth import CredentialResolver

    resolver = CredentialResolver()
    host = resolver.resolve(env_var_name="MAXIMO_HOST", required=True, secret=False)
    ```
"""

from maximo_client.auth.credentials import CredentialResolver
from maximo_client.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
    UnsupportedAuthorizationSchemeError,
)
from maximo_client.auth.schemes import AuthorizationScheme, credential_headers
from maximo_client.auth.session import Session, SessionPolicy, authorize

__all__ = [
    "AuthorizationScheme",
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "Session",
    "SessionPolicy",
    "UnsupportedAuthorizationSchemeError",
    "authorize",
    "credential_headers",
]
