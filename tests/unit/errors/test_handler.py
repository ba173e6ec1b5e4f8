"""Tests for error handling utilities."""

import pytest
from httpx import Response

from maximo_client.errors.exceptions import MaximoClientError, Stage
from maximo_client.errors.handler import decode_body, decode_object, raise_for_stage


@pytest.mark.unit
@pytest.mark.parametrize("status_code", [200, 201, 204])
def test_raise_for_stage_success_response(status_code):
    """Test raise_for_stage doesn't raise for successful responses."""
    raise_for_stage(Response(status_code=status_code), Stage.GET_RESOURCES)


@pytest.mark.unit
@pytest.mark.parametrize(
    "stage",
    [Stage.AUTHORIZE, Stage.GET_RESOURCES, Stage.GET_RESOURCE, Stage.CREATE_RESOURCE, Stage.UPDATE_RESOURCE],
)
def test_raise_for_stage_tags_stage(stage):
    """Test the error carries the stage it was raised for."""
    response = Response(status_code=401, json={"Error": {"message": "BMXAA0021E - bad login"}})

    with pytest.raises(MaximoClientError) as exc_info:
        raise_for_stage(response, stage)

    assert exc_info.value.stage is stage
    assert exc_info.value.description == stage.value


@pytest.mark.unit
def test_raise_for_stage_json_body():
    """Test status, status text and decoded body are taken from the response."""
    body = {"Error": {"reasonCode": "BMXAA8727E", "message": "BMXAA8727E - not found", "statusCode": "404"}}
    response = Response(status_code=404, json=body)

    with pytest.raises(MaximoClientError) as exc_info:
        raise_for_stage(response, Stage.GET_RESOURCE)

    error = exc_info.value
    assert error.status == 404
    assert error.status_text == "Not Found"
    assert error.body == body
    assert error.response is response
    assert error.detail is not None
    assert error.detail.reason_code == "BMXAA8727E"
    assert "BMXAA8727E - not found" in str(error)


@pytest.mark.unit
def test_raise_for_stage_text_body():
    """Test plain text bodies are kept as text."""
    response = Response(status_code=500, headers={"content-type": "text/plain"}, text="Internal Server Error")

    with pytest.raises(MaximoClientError) as exc_info:
        raise_for_stage(response, Stage.CREATE_RESOURCE)

    assert exc_info.value.body == "Internal Server Error"
    assert exc_info.value.detail is None
    assert "HTTP 500" in str(exc_info.value)


@pytest.mark.unit
def test_raise_for_stage_redirect_is_failure():
    """Test redirects (e.g. to a login page) are failures."""
    response = Response(status_code=302, headers={"location": "/maximo/webclient/login/login.jsp"})

    with pytest.raises(MaximoClientError) as exc_info:
        raise_for_stage(response, Stage.AUTHORIZE)

    assert exc_info.value.status == 302
    assert exc_info.value.body is None


@pytest.mark.unit
def test_decode_body_empty():
    """Test empty bodies decode to None."""
    assert decode_body(Response(status_code=204)) is None


@pytest.mark.unit
def test_decode_body_json_and_text():
    """Test JSON is decoded and other content falls back to text."""
    assert decode_body(Response(status_code=200, json={"a": 1})) == {"a": 1}
    assert decode_body(Response(status_code=200, text="not json")) == "not json"


@pytest.mark.unit
def test_decode_object():
    """Test a JSON object body is returned as is."""
    assert decode_object(Response(status_code=200, json={"member": []}), Stage.GET_RESOURCES) == {"member": []}


@pytest.mark.unit
@pytest.mark.parametrize(
    ("response", "body"),
    [
        (
            Response(status_code=200, headers={"content-type": "text/html"}, text="<html>login</html>"),
            "<html>login</html>",
        ),
        (Response(status_code=200, json=[1, 2]), [1, 2]),
        (Response(status_code=200), None),
    ],
    ids=["html", "json-array", "empty"],
)
def test_decode_object_rejects_other_bodies(response, body):
    """Test bodies that are not JSON objects raise MaximoClientError."""
    with pytest.raises(MaximoClientError) as exc_info:
        decode_object(response, Stage.GET_RESOURCE)

    error = exc_info.value
    assert error.stage is Stage.GET_RESOURCE
    assert error.status == 200
    assert error.status_text == "OK"
    assert error.body == body
    assert error.response is response
