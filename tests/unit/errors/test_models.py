"""Tests for the Maximo error envelope model."""

import pytest
from httpx import Response

from maximo_client.errors.models import MaximoErrorDetail


@pytest.mark.unit
def test_parse_lean_error():
    """Test parsing the lean error envelope."""
    response = Response(
        status_code=400,
        json={
            "Error": {
                "reasonCode": "BMXAA4153E",
                "message": "BMXAA4153E - Value FOO is not valid for status.",
                "statusCode": "400",
                "errorattrname": "status",
                "errorobjpath": "workorder",
            }
        },
    )

    detail = MaximoErrorDetail.from_response(response)

    assert detail is not None
    assert detail.reason_code == "BMXAA4153E"
    assert detail.message == "BMXAA4153E - Value FOO is not valid for status."
    assert detail.status_code == "400"
    assert detail.attribute == "status"
    assert detail.object_path == "workorder"
    assert detail.extensions is None


@pytest.mark.unit
def test_parse_non_lean_error():
    """Test parsing the oslc-prefixed envelope returned when lean is off."""
    response = Response(
        status_code=404,
        json={
            "oslc:Error": {
                "oslc:message": "BMXAA8727E - The OSLC resource was not found.",
                "spi:reasonCode": "BMXAA8727E",
                "oslc:statusCode": 404,
            }
        },
    )

    detail = MaximoErrorDetail.from_response(response)

    assert detail is not None
    assert detail.message == "BMXAA8727E - The OSLC resource was not found."
    assert detail.status_code == "404"
    assert detail.extensions == {"spi:reasonCode": "BMXAA8727E"}


@pytest.mark.unit
def test_parse_lowercase_envelope_with_extensions():
    """Test parsing a lower-case envelope with extra members."""
    detail = MaximoErrorDetail.from_body(
        {"error": {"message": "Not allowed", "statusCode": 403, "correlationid": "abc-123"}}
    )

    assert detail is not None
    assert detail.message == "Not allowed"
    assert detail.extensions == {"correlationid": "abc-123"}


@pytest.mark.unit
def test_non_maximo_json_returns_none():
    """Test JSON without an error envelope is not parsed."""
    response = Response(status_code=500, json={"member": []})

    assert MaximoErrorDetail.from_response(response) is None


@pytest.mark.unit
def test_envelope_without_known_fields_returns_none():
    """Test an envelope with no recognizable members is not parsed."""
    assert MaximoErrorDetail.from_body({"Error": {"foo": "bar"}}) is None


@pytest.mark.unit
def test_plain_text_returns_none():
    """Test plain text bodies are not parsed."""
    response = Response(status_code=502, headers={"content-type": "text/html"}, text="<html>Bad Gateway</html>")

    assert MaximoErrorDetail.from_response(response) is None


@pytest.mark.unit
def test_non_dict_body_returns_none():
    """Test JSON arrays are not parsed."""
    assert MaximoErrorDetail.from_body(["Error"]) is None


@pytest.mark.unit
def test_message_adds_missing_reason_code():
    """Test the reason code is prefixed when the message lacks it."""
    detail = MaximoErrorDetail(message="Value is not valid", reason_code="BMXAA4153E", attribute="status")

    assert detail.to_exception_message() == "BMXAA4153E - Value is not valid | attribute=status"


@pytest.mark.unit
def test_message_keeps_leading_reason_code():
    """Test the message is not prefixed twice."""
    detail = MaximoErrorDetail(message="BMXAA4153E - Value is not valid", reason_code="BMXAA4153E")

    assert detail.to_exception_message() == "BMXAA4153E - Value is not valid"


@pytest.mark.unit
def test_message_reason_code_only():
    """Test a reason code alone is enough for a message."""
    assert MaximoErrorDetail(reason_code="BMXAA0021E").to_exception_message() == "BMXAA0021E"


@pytest.mark.unit
def test_message_empty():
    """Test the fallback message."""
    assert MaximoErrorDetail().to_exception_message() == "Unknown Maximo error"
