"""Maximo Client - asynchronous client for the Maximo OSLC REST API.

- Login through native Maximo authentication (``maxauth``)
- Opt-in session reuse, single login per client
- Resource listing with ``oslc.select`` / ``oslc.where``, fetch, create and update
- One error type, ``MaximoClientError``, for every failed exchange

Example:
    ```python
    from maximo_client import MaximoClient, MaximoOptions, Projection

    options = MaximoOptions.from_env()  # MAXIMO_HOST, MAXIMO_USER, MAXIMO_PASSWORD, ...

    async with MaximoClient(options) as client:
        await client.initialize_reusable_session()
        assets = await client.get_resources("mxasset", Projection(["assetnum", "status"]))
    ```
"""

__version__ = "0.1.0"

from maximo_client.auth import AuthorizationScheme, Session, SessionPolicy
from maximo_client.client import MaximoClient
from maximo_client.config import MaximoOptions
from maximo_client.errors import MaximoClientError, MaximoErrorDetail, Stage
from maximo_client.request import Filter, Projection

__all__ = [
    "AuthorizationScheme",
    "Filter",
    "MaximoClient",
    "MaximoClientError",
    "MaximoErrorDetail",
    "MaximoOptions",
    "Projection",
    "Session",
    "SessionPolicy",
    "Stage",
    "__version__",
]
