"""Error handling utilities for Maximo HTTP responses."""

from typing import Any

import httpx

from maximo_client.errors.exceptions import MaximoClientError, Stage
from maximo_client.errors.models import MaximoErrorDetail


def decode_body(response: httpx.Response) -> Any:
    """Decode a response body as JSON, falling back to text.

    Args:
        response: HTTP response object

    Returns:
        Decoded JSON value, the body text, or None for an empty body
    """
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def raise_for_stage(response: httpx.Response, stage: Stage) -> None:
    """Raise MaximoClientError for a non-success response.

    Args:
        response: HTTP response object
        stage: Stage to tag the error with

    Raises:
        MaximoClientError: If the response status is not 2xx
    """
    if response.is_success:
        return

    raise MaximoClientError(
        status=response.status_code,
        status_text=response.reason_phrase,
        body=decode_body(response),
        stage=stage,
        response=response,
        detail=MaximoErrorDetail.from_response(response),
    )


def decode_object(response: httpx.Response, stage: Stage) -> dict[str, Any]:
    """Decode a success body that must be a JSON object.

    A login page or proxy answering 200 with HTML is a failed exchange too.

    Raises:
        MaximoClientError: If the body is not a JSON object
    """
    try:
        data = response.json()
    except ValueError:
        data = None
    if not isinstance(data, dict):
        raise MaximoClientError(
            status=response.status_code,
            status_text=response.reason_phrase,
            body=decode_body(response),
            stage=stage,
            response=response,
        )
    return data
