"""Login exchange and session values.

A ``Session`` is the authorized context produced by one login: the session
cookie issued by Maximo plus the base URL it belongs to. Requests carry it as
an explicit ``Cookie`` header; nothing else about the login is remembered.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

from maximo_client.auth.schemes import credential_headers
from maximo_client.errors import MaximoClientError, Stage, raise_for_stage

if TYPE_CHECKING:
    from maximo_client.config import MaximoOptions

logger = logging.getLogger(__name__)

LOGIN_PATH = "/maximo/oslc/login"


@dataclass(frozen=True)
class Session:
    """Authorized context bound to one session cookie."""

    token: str  # "JSESSIONID=..."
    base_url: str

    def headers(self) -> dict[str, str]:
        return {"Cookie": self.token}

    def __repr__(self) -> str:
        return f"Session(token='***', base_url={self.base_url!r})"


@dataclass(frozen=True)
class SessionPolicy:
    """Whether sessions acquired on demand are kept for later operations.

    With ``reuse=False`` every operation logs in again unless a session was
    stored by ``MaximoClient.initialize_reusable_session``.
    """

    reuse: bool = False


def extract_session_token(response: httpx.Response) -> str | None:
    """Return the ``name=value`` pair of the first Set-Cookie header."""
    cookies = response.headers.get_list("set-cookie")
    if not cookies:
        return None
    token = cookies[0].split(";", 1)[0].strip()
    if "=" not in token or not token.split("=", 1)[1]:
        return None
    return token


async def authorize(options: "MaximoOptions", http: httpx.AsyncClient) -> Session:
    """Log in once and return the resulting session.

    Args:
        options: Connection settings and credentials
        http: Client used to send the login request

    Returns:
        Session carrying the server-issued cookie

    Raises:
        MaximoClientError: If the login fails, no response is received, or the
            response carries no session cookie.
    """
    url = f"{options.base_url}{LOGIN_PATH}"
    headers = credential_headers(options.authorization_scheme, options.user, options.password)

    # The login itself must not ride on a cookie from an earlier exchange
    http.cookies.clear()

    logger.debug(f"Logging in to {url} as {options.user}")
    try:
        response = await http.get(url, headers=headers)
    except httpx.TransportError as e:
        raise MaximoClientError.from_transport_error(e, Stage.AUTHORIZE) from e

    raise_for_stage(response, Stage.AUTHORIZE)

    token = extract_session_token(response)
    if token is None:
        raise MaximoClientError(
            status=response.status_code,
            status_text="No session cookie in login response",
            body=response.text or None,
            stage=Stage.AUTHORIZE,
            response=response,
        )

    logger.info(f"Authorized {options.user} against {options.base_url}")
    return Session(token=token, base_url=options.base_url)
