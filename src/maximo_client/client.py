"""Asynchronous client for the Maximo OSLC REST API."""

import asyncio
import logging
from collections.abc import Sequence
from typing import Any

import httpx

from maximo_client.auth.session import Session, SessionPolicy, authorize
from maximo_client.config import MaximoOptions
from maximo_client.errors import MaximoClientError, Stage, decode_object, raise_for_stage
from maximo_client.request import (
    Query,
    RequestSpec,
    build_create_request,
    build_get_request,
    build_list_request,
    build_update_request,
    coerce_query,
    same_origin,
)
from maximo_client.transport import create_transport

logger = logging.getLogger(__name__)


class MaximoClient:
    """Read and write Maximo resources over OSLC.

    Unless ``initialize_reusable_session()`` is called or the policy sets
    ``reuse=True``, every operation performs its own login.

    Args:
        options: Connection settings and credentials
        policy: Session reuse policy (default: no reuse)
        transport: Innermost httpx transport; defaults to a pooled
            ``httpx.AsyncHTTPTransport``

    Example:
        ```python
        options = MaximoOptions(host="maximo.example.com", user="wilson", password="wilson")

        async with MaximoClient(options) as client:
            await client.initialize_reusable_session()
            orders = await client.get_resources("mxwo", ["wonum", "status"], 'status="APPR"')
            order = await client.get_resource(orders[0]["href"])
            await client.update_resource(orders[0]["href"], {"description": "Pump"}, merge=True)
        ```
    """

    def __init__(
        self,
        options: MaximoOptions,
        *,
        policy: SessionPolicy | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._options = options
        self._policy = policy or SessionPolicy()
        self._session: Session | None = None
        self._session_lock = asyncio.Lock()
        self._http = httpx.AsyncClient(
            transport=create_transport(wrapped_transport=transport, verify=options.verify),
            timeout=options.timeout,
        )

    @property
    def options(self) -> MaximoOptions:
        return self._options

    @property
    def policy(self) -> SessionPolicy:
        return self._policy

    @property
    def session(self) -> Session | None:
        """The stored session, if any."""
        return self._session

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._http.aclose()

    async def __aenter__(self) -> "MaximoClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    # ---------------- sessions ----------------

    async def initialize_reusable_session(self) -> None:
        """Log in now and keep the session for every later operation."""
        async with self._session_lock:
            self._session = await authorize(self._options, self._http)

    async def _authorized(self) -> Session:
        if self._session is not None:
            return self._session

        if not self._policy.reuse:
            return await authorize(self._options, self._http)

        # Single-flight: concurrent first calls share one login
        async with self._session_lock:
            if self._session is None:
                self._session = await authorize(self._options, self._http)
            return self._session

    async def _send(self, spec: RequestSpec, stage: Stage) -> httpx.Response:
        # Sessions are bound to base_url; the cookie never leaves that server
        if not same_origin(spec.url, self._options.base_url):
            raise ValueError(f"{spec.url} is not on {self._options.base_url}")

        session = await self._authorized()
        headers = {**spec.headers, **session.headers()}
        try:
            response = await self._http.request(
                spec.method,
                spec.url,
                params=spec.params,
                headers=headers,
                json=spec.json,
            )
        except httpx.TransportError as e:
            raise MaximoClientError.from_transport_error(e, stage) from e

        raise_for_stage(response, stage)
        return response

    # ---------------- resources ----------------

    async def get_resources(
        self,
        resource_name: str,
        query: Query | str | Sequence[str] | None = None,
        where: str | None = None,
    ) -> list[dict[str, Any]]:
        """Retrieve the members of a resource collection.

        Args:
            resource_name: Object structure name, e.g. ``mxwo``
            query: ``Filter``/``Projection``, a where clause, or a list of
                field names
            where: Where clause to go with a list of field names

        Returns:
            The ``member`` entries (``rdfs:member`` when lean is off) in server order

        Raises:
            MaximoClientError: If the request fails or the body is not a JSON object.
            ValueError: If the resource name is empty.
        """
        spec = build_list_request(
            self._options.base_url,
            resource_name,
            coerce_query(query, where),
            lean=self._options.lean_param,
        )
        logger.debug(f"Listing {resource_name} with {spec.params}")
        response = await self._send(spec, Stage.GET_RESOURCES)
        members_key = "member" if self._options.lean else "rdfs:member"
        return decode_object(response, Stage.GET_RESOURCES).get(members_key) or []

    async def get_resource(self, resource_uri: str, fields: Sequence[str] | None = None) -> dict[str, Any]:
        """Retrieve a single resource by URI.

        Args:
            resource_uri: Absolute resource URI, e.g. the ``href`` of a listed member
            fields: Fields to return (``oslc.select``)

        Raises:
            MaximoClientError: If the request fails or the body is not a JSON object.
            ValueError: If the URI is not on the configured server.
        """
        spec = build_get_request(resource_uri, fields, lean=self._options.lean_param)
        response = await self._send(spec, Stage.GET_RESOURCE)
        return decode_object(response, Stage.GET_RESOURCE)

    async def create_resource(self, resource_name: str, payload: dict[str, Any]) -> httpx.Response:
        """Create a resource. The URI of the new resource is in the Location header."""
        spec = build_create_request(
            self._options.base_url, resource_name, payload, lean=self._options.lean_param
        )
        response = await self._send(spec, Stage.CREATE_RESOURCE)
        logger.info(f"Created {resource_name} at {response.headers.get('location')}")
        return response

    async def update_resource(
        self, resource_uri: str, payload: dict[str, Any], merge: bool = False
    ) -> httpx.Response:
        """Update a resource.

        Args:
            resource_uri: URI of the resource to update
            payload: Fields to update
            merge: Send ``patchtype: MERGE`` so omitted child objects are kept
        """
        spec = build_update_request(resource_uri, payload, merge=merge, lean=self._options.lean_param)
        response = await self._send(spec, Stage.UPDATE_RESOURCE)
        logger.info(f"Updated {resource_uri}")
        return response
