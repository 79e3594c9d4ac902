"""
Unit tests for handle resolution in social.athost.identity.handle

Tests cover handle extraction, subject resolution, and propagation of
fetch failures.
"""

import pytest
from unittest.mock import patch
from aiohttp import ClientConnectionError

from social.athost.identity.did import DID
from social.athost.identity.document import DIDDocument
from social.athost.identity.errors import DecodeError, MissingHandle, NetworkError
from social.athost.identity.handle import (
    ResolvedSubject,
    handle_from_document,
    resolve_handle,
    resolve_subject,
)


class TestHandleFromDocument:
    """Test suite for handle_from_document."""

    def test_first_alias(self, web_document_payload):
        """Test the first alsoKnownAs entry is returned."""
        document = DIDDocument.model_validate(web_document_payload)
        assert handle_from_document(DID.parse("did:web:nat.vg"), document) == "at://nat.vg"

    def test_empty_aliases(self, web_document_payload):
        """Test an empty alsoKnownAs raises MissingHandle."""
        web_document_payload["alsoKnownAs"] = []
        document = DIDDocument.model_validate(web_document_payload)

        with pytest.raises(MissingHandle) as excinfo:
            handle_from_document(DID.parse("did:web:nat.vg"), document)
        assert excinfo.value.did == "did:web:nat.vg"


class TestResolveHandle:
    """Test suite for resolve_handle."""

    @pytest.mark.asyncio
    async def test_resolve_handle(self, mock_session, respond_with, plc_document_payload):
        """Test a handle is resolved from the fetched document."""
        respond_with(plc_document_payload)

        handle = await resolve_handle(
            mock_session, DID.parse("did:plc:6vxtya3serxcwvcdk5e7psvv")
        )

        assert handle == "at://alice.test"

    @pytest.mark.asyncio
    async def test_resolve_handle_web(self, mock_session, respond_with, web_document_payload):
        """Test decoding then resolving the nat.vg document."""
        respond_with(
            b'{"@context":[],"id":"did:web:nat.vg","alsoKnownAs":["at://nat.vg"],'
            b'"verificationMethod":[],"service":[]}'
        )

        handle = await resolve_handle(mock_session, DID.parse("did:web:nat.vg"))

        assert handle == "at://nat.vg"

    @pytest.mark.asyncio
    async def test_resolve_handle_missing(
        self, mock_session, respond_with, plc_document_payload
    ):
        """Test an empty alias list raises MissingHandle."""
        plc_document_payload["alsoKnownAs"] = []
        respond_with(plc_document_payload)

        with pytest.raises(MissingHandle):
            await resolve_handle(
                mock_session, DID.parse("did:plc:6vxtya3serxcwvcdk5e7psvv")
            )

    @pytest.mark.asyncio
    async def test_resolve_handle_network_error(self, mock_session):
        """Test transport failures propagate as NetworkError."""
        mock_session.get.side_effect = ClientConnectionError("Connection refused")

        with pytest.raises(NetworkError):
            await resolve_handle(mock_session, DID.parse("did:web:nat.vg"))

    @pytest.mark.asyncio
    async def test_resolve_handle_decode_error(self, mock_session, respond_with):
        """Test decode failures propagate as DecodeError."""
        respond_with(b"not json")

        with pytest.raises(DecodeError):
            await resolve_handle(mock_session, DID.parse("did:web:nat.vg"))

    @pytest.mark.asyncio
    @patch("social.athost.identity.handle.fetch_document")
    async def test_resolve_handle_passes_options(
        self, mock_fetch, web_document_payload
    ):
        """Test the PLC hostname and id verification are passed to the fetch."""
        mock_fetch.return_value = DIDDocument.model_validate(web_document_payload)
        did = DID.parse("did:web:nat.vg")

        await resolve_handle("session", did, "plc.example.com", True)

        mock_fetch.assert_awaited_once_with("session", did, "plc.example.com", True)


class TestResolveSubject:
    """Test suite for resolve_subject."""

    @pytest.mark.asyncio
    async def test_resolve_subject(self, mock_session, respond_with, plc_document_payload):
        """Test the DID, handle, and PDS are resolved together."""
        respond_with(plc_document_payload)

        resolved = await resolve_subject(
            mock_session, DID.parse("did:plc:6vxtya3serxcwvcdk5e7psvv")
        )

        assert resolved == ResolvedSubject(
            did="did:plc:6vxtya3serxcwvcdk5e7psvv",
            handle="at://alice.test",
            pds="https://pds.example.com",
        )
        mock_session.get.assert_called_once()

    @pytest.mark.asyncio
    async def test_resolve_subject_without_pds(
        self, mock_session, respond_with, web_document_payload
    ):
        """Test a document without a PDS service resolves with pds None."""
        respond_with(web_document_payload)

        resolved = await resolve_subject(mock_session, DID.parse("did:web:nat.vg"))

        assert resolved.handle == "at://nat.vg"
        assert resolved.pds is None
