"""Connection settings for the Maximo client."""

from dataclasses import dataclass
from enum import Enum

from maximo_client.auth.credentials import CredentialResolver
from maximo_client.auth.schemes import AuthorizationScheme, ensure_supported, parse_scheme

DEFAULT_PROTOCOL = "http"
DEFAULT_PORT = 9080
DEFAULT_TIMEOUT = 60.0

_TRUE_VALUES = frozenset(["1", "true", "yes", "on"])
_FALSE_VALUES = frozenset(["0", "false", "no", "off"])


@dataclass(frozen=True)
class MaximoOptions:
    """Immutable connection settings.

    Args:
        host: Maximo host name
        user: Maximo user name
        password: Maximo password
        protocol: ``http`` or ``https``
        port: Server port
        authorization_scheme: How the login presents credentials
        lean: Request lean (compact) JSON responses
        timeout: Request timeout in seconds, passed to httpx; None disables it
        verify: TLS verification (bool or CA bundle path)

    Example:
        ```python
        options = MaximoOptions(host="maximo.example.com", user="wilson", password="wilson")
        options.base_url  # "http://maximo.example.com:9080"
        ```
    """

    host: str
    user: str
    password: str
    protocol: str = DEFAULT_PROTOCOL
    port: int = DEFAULT_PORT
    authorization_scheme: AuthorizationScheme = AuthorizationScheme.MAX_AUTH
    lean: bool = True
    timeout: float | None = DEFAULT_TIMEOUT
    verify: bool | str = True

    def __post_init__(self) -> None:
        if not self.host:
            raise ValueError("host is required")
        if not self.user:
            raise ValueError("user is required")
        if self.password is None:
            raise ValueError("password is required")
        if self.protocol not in ("http", "https"):
            raise ValueError(f"protocol must be 'http' or 'https', got {self.protocol!r}")

        # frozen: normalize through object.__setattr__
        object.__setattr__(self, "authorization_scheme", parse_scheme(self.authorization_scheme))
        ensure_supported(self.authorization_scheme)

    @property
    def base_url(self) -> str:
        return f"{self.protocol}://{self.host}:{self.port}"

    @property
    def lean_param(self) -> int:
        """Value of the ``lean`` query parameter."""
        return 1 if self.lean else 0

    def __repr__(self) -> str:
        return (
            f"MaximoOptions(host={self.host!r}, user={self.user!r}, password='***', "
            f"protocol={self.protocol!r}, port={self.port}, "
            f"authorization_scheme={self.authorization_scheme.value!r}, lean={self.lean}, "
            f"timeout={self.timeout}, verify={self.verify!r})"
        )

    @classmethod
    def from_env(
        cls,
        resolver: CredentialResolver | None = None,
        **overrides,
    ) -> "MaximoOptions":
        """Build options from MAXIMO_* environment variables and .env.

        Explicit keyword overrides win over the environment. Recognized
        variables: MAXIMO_HOST, MAXIMO_USER, MAXIMO_PASSWORD (or
        MAXIMO_PASSWORD_FILE), MAXIMO_PROTOCOL, MAXIMO_PORT,
        MAXIMO_AUTH_SCHEME, MAXIMO_LEAN, MAXIMO_TIMEOUT.

        Raises:
            CredentialNotFoundError: If host, user or password is missing.
            CredentialFileError: If MAXIMO_PASSWORD_FILE cannot be read.
            ValueError: If a numeric or boolean setting is malformed.
        """
        resolver = resolver or CredentialResolver()

        def setting(name: str, env_var_name: str, default: str | None = None) -> str | None:
            value = overrides.get(name)
            if isinstance(value, Enum):
                value = value.value
            return resolver.resolve(
                value=str(value) if value is not None else None,
                env_var_name=env_var_name,
                default=default,
                secret=False,
            )

        host = resolver.resolve(value=overrides.get("host"), env_var_name="MAXIMO_HOST", required=True, secret=False)
        user = resolver.resolve(value=overrides.get("user"), env_var_name="MAXIMO_USER", required=True, secret=False)
        password = resolver.resolve(value=overrides.get("password"), env_var_name="MAXIMO_PASSWORD")
        if password is None:
            password = resolver.resolve_from_file(env_var_name="MAXIMO_PASSWORD_FILE", required=True)

        timeout = overrides["timeout"] if "timeout" in overrides else _parse_timeout(
            setting("timeout", "MAXIMO_TIMEOUT", str(DEFAULT_TIMEOUT))
        )

        return cls(
            host=host,
            user=user,
            password=password,
            protocol=setting("protocol", "MAXIMO_PROTOCOL", DEFAULT_PROTOCOL).lower(),
            port=_parse_int(setting("port", "MAXIMO_PORT", str(DEFAULT_PORT)), "MAXIMO_PORT"),
            authorization_scheme=setting("authorization_scheme", "MAXIMO_AUTH_SCHEME", AuthorizationScheme.MAX_AUTH.value),
            lean=_parse_bool(setting("lean", "MAXIMO_LEAN", "true"), "MAXIMO_LEAN"),
            timeout=timeout,
            verify=overrides.get("verify", True),
        )


def _parse_int(value: str, name: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def _parse_bool(value: str, name: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def _parse_timeout(value: str) -> float | None:
    if value.strip().lower() in ("", "none", "0"):
        return None
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"MAXIMO_TIMEOUT must be a number of seconds, got {value!r}") from None
