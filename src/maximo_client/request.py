"""Translation of resource operations into OSLC HTTP requests.

Query variants:

- ``Filter(where)``: ``oslc.where`` only
- ``Projection(fields, where=None)``: ``oslc.select`` and optionally ``oslc.where``

Example:
    ```python
    spec = build_list_request(
        "http://maximo:9080", "mxwo", Projection(["wonum", "status"], where='status="APPR"'), lean=1
    )
    spec.params  # {"oslc.select": "wonum,status", "oslc.where": 'status="APPR"', "lean": 1}
    ```
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

import httpx

OS_PATH = "/maximo/oslc/os"
JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class Filter:
    """Select records with an OSLC predicate, e.g. ``status="APPR"``."""

    where: str


@dataclass(frozen=True)
class Projection:
    """Limit returned fields, optionally filtering records as well."""

    fields: tuple[str, ...]
    where: str | None = None

    def __init__(self, fields: Sequence[str], where: str | None = None):
        object.__setattr__(self, "fields", tuple(fields))
        object.__setattr__(self, "where", where)

    @property
    def select(self) -> str | None:
        return _select(self.fields)


Query = Filter | Projection


@dataclass
class RequestSpec:
    """A concrete HTTP request ready to hand to httpx."""

    method: str
    url: str
    params: dict[str, Any] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    json: Any = None


def coerce_query(query: "Query | str | Sequence[str] | None" = None, where: str | None = None) -> Query | None:
    """Normalize the accepted call shapes of a collection query.

    - ``Filter`` / ``Projection``: used as is (``where`` must not be given too)
    - ``str``: a where clause
    - sequence of field names: a projection, with ``where`` as its filter
    - ``None``: ``Filter(where)`` if ``where`` is given, else no query

    Raises:
        TypeError: If ``query`` has an unsupported type.
        ValueError: If ``where`` is combined with a query that fixes its own.
    """
    if isinstance(query, (Filter, Projection)):
        if where is not None:
            raise ValueError("where cannot be combined with a Filter or Projection; set it on the query")
        return query
    if isinstance(query, str):
        if where is not None:
            raise ValueError("where given twice: a string query is already the where clause")
        return Filter(query)
    if query is None:
        return Filter(where) if where is not None else None
    if isinstance(query, Sequence):
        return Projection(query, where=where)
    raise TypeError(f"query must be a Filter, Projection, str or sequence of field names, not {type(query).__name__}")


def _select(fields: Sequence[str] | None) -> str | None:
    return ",".join(fields) if fields else None


def _params(lean: int, **params: Any) -> dict[str, Any]:
    p = {name.replace("_", "."): value for name, value in params.items() if value is not None}
    p["lean"] = lean
    return p


def same_origin(url: str, base_url: str) -> bool:
    """Whether ``url`` has the scheme, host and port of ``base_url``."""
    a, b = httpx.URL(url), httpx.URL(base_url)
    return (a.scheme, a.host, a.port) == (b.scheme, b.host, b.port)


def resource_collection_url(base_url: str, resource_name: str) -> str:
    if not resource_name:
        raise ValueError("resource_name is required")
    return f"{base_url}{OS_PATH}/{resource_name}"


def build_list_request(base_url: str, resource_name: str, query: Query | None, *, lean: int) -> RequestSpec:
    """GET a resource collection with optional projection and filter."""
    select = where = None
    if isinstance(query, Projection):
        select, where = query.select, query.where
    elif isinstance(query, Filter):
        where = query.where

    return RequestSpec(
        method="GET",
        url=resource_collection_url(base_url, resource_name),
        params=_params(lean, oslc_select=select, oslc_where=where),
    )


def build_get_request(resource_uri: str, fields: Sequence[str] | None, *, lean: int) -> RequestSpec:
    """GET one resource by URI. Single resources cannot be filtered."""
    if not resource_uri:
        raise ValueError("resource_uri is required")
    return RequestSpec(
        method="GET",
        url=resource_uri,
        params=_params(lean, oslc_select=_select(fields)),
    )


def build_create_request(base_url: str, resource_name: str, payload: Any, *, lean: int) -> RequestSpec:
    return RequestSpec(
        method="POST",
        url=resource_collection_url(base_url, resource_name),
        params=_params(lean),
        headers={"Content-Type": JSON_CONTENT_TYPE},
        json=payload,
    )


def build_update_request(resource_uri: str, payload: Any, *, merge: bool = False, lean: int) -> RequestSpec:
    """POST an update with PATCH semantics.

    Without ``patchtype: MERGE`` Maximo replaces child objects that are
    omitted from the payload; with it they are merged.
    """
    if not resource_uri:
        raise ValueError("resource_uri is required")
    headers = {
        "Content-Type": JSON_CONTENT_TYPE,
        "x-method-override": "PATCH",
    }
    if merge:
        headers["patchtype"] = "MERGE"
    return RequestSpec(
        method="POST",
        url=resource_uri,
        params=_params(lean),
        headers=headers,
        json=payload,
    )
