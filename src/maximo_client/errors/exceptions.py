"""Structured exceptions for Maximo OSLC errors."""

from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx

    from maximo_client.errors.models import MaximoErrorDetail


class Stage(str, Enum):
    """Operation boundary at which a request failed."""

    AUTHORIZE = "failed to authorize the given user"
    GET_RESOURCES = "failed to get the resources"
    GET_RESOURCE = "failed to get the resource"
    CREATE_RESOURCE = "failed to create the resource"
    UPDATE_RESOURCE = "failed to update the resource"
    TRANSPORT = "failed to reach the server"


class MaximoClientError(Exception):
    """Failure of a single exchange with the Maximo server.

    Every operation of the client raises this one type. Callers branch on
    ``status`` (401, 404, ...) and ``stage``.

    Attributes:
        status: HTTP status code, or None when no response was received.
        status_text: HTTP reason phrase, or the transport error text.
        body: Decoded JSON body, raw text, or None.
        stage: The failing stage.
        operation: The operation that was running. Equals ``stage`` except for
            transport failures, where ``stage`` is ``Stage.TRANSPORT``.
        response: The failed response, if one was received.
        detail: Parsed Maximo error envelope, if the body carried one.
    """

    def __init__(
        self,
        status: int | None,
        status_text: str | None,
        body: Any = None,
        stage: Stage = Stage.TRANSPORT,
        *,
        operation: Stage | None = None,
        response: "httpx.Response | None" = None,
        detail: "MaximoErrorDetail | None" = None,
    ):
        message = stage.value
        if operation is not None and operation is not stage:
            message = f"{message} ({operation.value})"
        if detail is not None:
            message = f"{message}: {detail.to_exception_message()}"
        elif status is not None:
            message = f"{message}: HTTP {status} {status_text or ''}".rstrip()
        elif status_text:
            message = f"{message}: {status_text}"
        super().__init__(message)
        self.status = status
        self.status_text = status_text
        self.body = body
        self.stage = stage
        self.operation = operation if operation is not None else stage
        self.response = response
        self.detail = detail

    @property
    def description(self) -> str:
        """Human-readable description of the failing stage."""
        return self.stage.value

    @classmethod
    def from_transport_error(cls, exc: Exception, operation: Stage) -> "MaximoClientError":
        """Wrap an exception raised before any response was received."""
        return cls(
            status=None,
            status_text=str(exc) or type(exc).__name__,
            body=None,
            stage=Stage.TRANSPORT,
            operation=operation,
        )
