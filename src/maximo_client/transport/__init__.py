"""Transport layers for the Maximo client.

Transport layers wrap httpx's AsyncHTTPTransport and can be composed with any
other ``httpx.AsyncBaseTransport``.

Modules:
    error_logging: Exchange timing and failed-response logging

Example:
    ```python
    from maximo_client.transport import create_transport

    transport = create_transport(verify=False)
    ```
"""

import httpx

from maximo_client.transport.error_logging import ErrorLoggingTransport


def create_transport(
    *,
    wrapped_transport: httpx.AsyncBaseTransport | None = None,
    verify: bool | str = True,
) -> ErrorLoggingTransport:
    """Build the default transport stack.

    Args:
        wrapped_transport: Innermost transport; defaults to a pooled
            ``httpx.AsyncHTTPTransport``
        verify: TLS verification for the default transport

    Returns:
        ErrorLoggingTransport around the innermost transport
    """
    if wrapped_transport is None:
        wrapped_transport = httpx.AsyncHTTPTransport(verify=verify)
    return ErrorLoggingTransport(wrapped_transport=wrapped_transport)


__all__ = ["ErrorLoggingTransport", "create_transport"]
