"""Maximo authorization schemes and their login headers."""

import base64
from enum import Enum

from maximo_client.auth.exceptions import UnsupportedAuthorizationSchemeError


class AuthorizationScheme(str, Enum):
    """How the login exchange presents credentials.

    Only ``MAX_AUTH`` (native Maximo authentication) is implemented. ``BASIC``
    and ``FORM`` depend on how the application server is set up and are
    rejected by ``ensure_supported``.
    """

    MAX_AUTH = "MAX_AUTH"
    BASIC = "BASIC"
    FORM = "FORM"


SUPPORTED_SCHEMES: frozenset[AuthorizationScheme] = frozenset([AuthorizationScheme.MAX_AUTH])


def parse_scheme(value: "AuthorizationScheme | str") -> AuthorizationScheme:
    """Coerce a scheme name to AuthorizationScheme.

    Raises:
        ValueError: If the name is not a known scheme.
    """
    if isinstance(value, AuthorizationScheme):
        return value
    try:
        return AuthorizationScheme(value.strip().upper())
    except ValueError:
        known = ", ".join(s.value for s in AuthorizationScheme)
        raise ValueError(f"Unknown authorization scheme {value!r} (expected one of: {known})") from None


def ensure_supported(scheme: AuthorizationScheme) -> None:
    """Raise UnsupportedAuthorizationSchemeError unless the scheme is implemented."""
    if scheme not in SUPPORTED_SCHEMES:
        raise UnsupportedAuthorizationSchemeError(
            f"Authorization scheme {scheme.value} is not supported; use {AuthorizationScheme.MAX_AUTH.value}",
            scheme=scheme.value,
        )


def encode_credentials(user: str, password: str) -> str:
    """Base64-encode ``user:password``."""
    return base64.b64encode(f"{user}:{password}".encode()).decode("ascii")


def credential_headers(scheme: AuthorizationScheme, user: str, password: str) -> dict[str, str]:
    """Build the headers that carry credentials on the login request.

    Args:
        scheme: Authorization scheme to use
        user: Maximo user name
        password: Maximo password

    Returns:
        Header mapping for the login request

    Raises:
        UnsupportedAuthorizationSchemeError: For BASIC and FORM.
    """
    ensure_supported(scheme)
    return {"maxauth": encode_credentials(user, password)}
