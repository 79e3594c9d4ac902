"""Handle resolution for DIDs.

Resolves a DID to the primary handle listed in its DID document, and to a
:class:`ResolvedSubject` summarising the DID, handle and PDS location.
"""

from typing import Optional

from aiohttp import ClientSession
from pydantic import BaseModel

from social.athost.identity.did import DID
from social.athost.identity.document import DIDDocument
from social.athost.identity.errors import MissingHandle
from social.athost.identity.fetch import fetch_document
from social.athost.identity.methods import DEFAULT_PLC_HOSTNAME


class ResolvedSubject(BaseModel):
    """Resolved AT Protocol subject.

    Contains the DID, its primary handle, and the PDS endpoint when the
    document advertises one.
    """

    did: str
    handle: str
    pds: Optional[str] = None


def handle_from_document(did: DID, document: DIDDocument) -> str:
    """Return the primary handle of a DID document.

    Raises:
        MissingHandle: If ``alsoKnownAs`` is empty
    """
    handle = document.handle()
    if handle is None:
        raise MissingHandle(did.canonical_string())
    return handle


async def resolve_handle(
    session: ClientSession,
    did: DID,
    plc_hostname: str = DEFAULT_PLC_HOSTNAME,
    verify_id: bool = False,
) -> str:
    """Resolve a DID to its primary handle.

    Args:
        session: HTTP client session
        did: DID to resolve
        plc_hostname: PLC directory hostname used for did:plc DIDs
        verify_id: Reject documents whose ``id`` is not the requested DID

    Returns:
        The first ``alsoKnownAs`` entry, verbatim (e.g. ``at://alice.test``)

    Raises:
        MissingHandle: If the document lists no aliases
        NetworkError: If the document could not be fetched
        DecodeError: If the document could not be decoded
    """
    document = await fetch_document(session, did, plc_hostname, verify_id)
    return handle_from_document(did, document)


async def resolve_subject(
    session: ClientSession,
    did: DID,
    plc_hostname: str = DEFAULT_PLC_HOSTNAME,
    verify_id: bool = False,
) -> ResolvedSubject:
    """Resolve a DID to its handle and PDS endpoint with a single fetch."""
    document = await fetch_document(session, did, plc_hostname, verify_id)
    return ResolvedSubject(
        did=did.canonical_string(),
        handle=handle_from_document(did, document),
        pds=document.pds_endpoint(),
    )
