"""Logging transport for Maximo exchanges.

Wraps another transport and logs each exchange: a DEBUG line with the elapsed
time for every request, and a WARNING line with a truncated body for 4xx/5xx
responses. Headers are never logged, so credentials and session cookies stay
out of the logs.

```python
from maximo_client.transport import ErrorLoggingTransport
import httpx

transport = ErrorLoggingTransport(wrapped_transport=httpx.AsyncHTTPTransport())

async with httpx.AsyncClient(transport=transport) as client:
    response = await client.get("http://maximo:9080/maximo/oslc/os/mxwo")
```
"""

import logging
import time

import httpx

logger = logging.getLogger(__name__)


class ErrorLoggingTransport(httpx.AsyncHTTPTransport):
    """Transport that logs exchanges and failed responses.

    Args:
        wrapped_transport: The underlying transport to wrap
        max_body_length: Characters of an error body to include (default: 500)
    """

    def __init__(
        self,
        *,
        wrapped_transport: httpx.AsyncBaseTransport,
        max_body_length: int = 500,
    ) -> None:
        self._wrapped_transport = wrapped_transport
        self.max_body_length = max_body_length

    async def __aenter__(self):
        """Enter async context, delegating to wrapped transport."""
        await self._wrapped_transport.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context, delegating to wrapped transport."""
        return await self._wrapped_transport.__aexit__(exc_type, exc_val, exc_tb)

    async def aclose(self) -> None:
        await self._wrapped_transport.aclose()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        """Send the request and log the outcome.

        Args:
            request: The HTTP request to send

        Returns:
            HTTP response from the wrapped transport
        """
        t0 = time.perf_counter()
        try:
            response = await self._wrapped_transport.handle_async_request(request)
        except httpx.TransportError as e:
            logger.warning(f"Request {request.method} {request.url} failed without a response: {e!r}")
            raise

        elapsed_ms = round((time.perf_counter() - t0) * 1000.0, 1)
        logger.debug(f"{request.method} {request.url} -> {response.status_code} in {elapsed_ms}ms")

        if response.status_code >= 400:
            await response.aread()
            logger.warning(
                f"Request {request.method} {request.url} failed with {response.status_code}: "
                f"{self._snippet(response)}"
            )

        return response

    def _snippet(self, response: httpx.Response) -> str:
        text = response.text
        if len(text) > self.max_body_length:
            return text[: self.max_body_length] + "..."
        return text
