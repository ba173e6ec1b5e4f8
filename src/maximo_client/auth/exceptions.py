"""Exceptions for credential resolution and client configuration.

These are configuration errors raised before any request is made. Failed
exchanges with the server raise ``maximo_client.errors.MaximoClientError``.

Example:
    ```python
    from maximo_client.auth.exceptions import CredentialNotFoundError

    if not password:
        raise CredentialNotFoundError("Password not found", env_var_name="MAXIMO_PASSWORD")
    ```
"""


class CredentialError(Exception):
    """Base exception for credential and configuration errors."""

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required credential cannot be resolved.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """Raised when a credential file cannot be read."""

    pass


class UnsupportedAuthorizationSchemeError(CredentialError):
    """Raised for authorization schemes the client cannot perform.

    Attributes:
        scheme: The rejected scheme.
    """

    def __init__(self, message: str, scheme: str | None = None):
        super().__init__(message)
        self.scheme = scheme
