"""Pytest configuration and shared fixtures for maximo-client tests."""

import os

import pytest

from maximo_client import MaximoClient
from maximo_client.testing import FakeMaximo


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Clear MAXIMO_* variables so settings from the shell don't leak into tests."""
    for key in list(os.environ.keys()):
        if key.startswith("MAXIMO_"):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def server() -> FakeMaximo:
    """In-memory Maximo with a few work orders."""
    server = FakeMaximo(host="h", user="u", password="p")
    server.add(
        "mxwo",
        {"wonum": "1001", "status": "APPR", "siteid": "BEDFORD", "description": "Inspect pump"},
        {"wonum": "1002", "status": "WAPPR", "siteid": "BEDFORD", "description": "Replace belt"},
        {"wonum": "1003", "status": "APPR", "siteid": "NASHUA", "description": "Lubricate bearing"},
    )
    return server


@pytest.fixture
async def client(server):
    """Client wired to the in-memory server, default session policy."""
    async with MaximoClient(server.options(), transport=server.transport()) as client:
        yield client
