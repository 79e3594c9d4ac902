"""
Shared test configuration and fixtures for identity resolution tests.

Provides DID document payloads and a mocked aiohttp session whose GET
responses can be configured per test.
"""

import json
import pytest
from unittest.mock import AsyncMock
from aiohttp import ClientSession, ClientResponse


@pytest.fixture
def plc_document_payload():
    """A did:plc document as served by the PLC directory."""
    return {
        "@context": [
            "https://www.w3.org/ns/did/v1",
            "https://w3id.org/security/multikey/v1",
            "https://w3id.org/security/suites/secp256k1-2019/v1",
        ],
        "id": "did:plc:6vxtya3serxcwvcdk5e7psvv",
        "alsoKnownAs": ["at://alice.test"],
        "verificationMethod": [
            {
                "id": "did:plc:6vxtya3serxcwvcdk5e7psvv#atproto",
                "type": "Multikey",
                "controller": "did:plc:6vxtya3serxcwvcdk5e7psvv",
                "publicKeyMultibase": "zQ3shXjHeiBuRCKmM36cuYnm7YEMzhGnCmCyW92sRJ9pribSF",
            }
        ],
        "service": [
            {
                "id": "#atproto_pds",
                "type": "AtprotoPersonalDataServer",
                "serviceEndpoint": "https://pds.example.com",
            }
        ],
    }


@pytest.fixture
def web_document_payload():
    """The minimal did:web document for nat.vg."""
    return {
        "@context": [],
        "id": "did:web:nat.vg",
        "alsoKnownAs": ["at://nat.vg"],
        "verificationMethod": [],
        "service": [],
    }


@pytest.fixture
def mock_response():
    """Mocked aiohttp response with an empty body."""
    response = AsyncMock(spec=ClientResponse)
    response.status = 200
    response.read.return_value = b""
    return response


@pytest.fixture
def mock_session(mock_response):
    """Mocked aiohttp session whose GET yields ``mock_response``."""
    session = AsyncMock(spec=ClientSession)
    session.get.return_value.__aenter__.return_value = mock_response
    return session


@pytest.fixture
def respond_with(mock_response):
    """Set the body the mocked session returns, JSON-encoding non-bytes values."""

    def _respond_with(body):
        if not isinstance(body, bytes):
            body = json.dumps(body).encode("utf-8")
        mock_response.read.return_value = body
        return mock_response

    return _respond_with
