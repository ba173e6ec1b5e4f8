"""Testing utilities for code built on the Maximo client.

Modules:
    server: ``FakeMaximo``, an in-memory OSLC server for ``httpx.MockTransport``

Example:
    ```python
    from maximo_client import MaximoClient
    from maximo_client.testing import FakeMaximo


    async def test_lists_work_orders():
        server = FakeMaximo()
        server.add("mxwo", {"wonum": "1001"})
        async with MaximoClient(server.options(), transport=server.transport()) as client:
            assert [wo["wonum"] for wo in await client.get_resources("mxwo")] == ["1001"]
    ```
"""

from maximo_client.testing.server import FakeMaximo, maximo_error

__all__ = ["FakeMaximo", "maximo_error"]
