"""DID document retrieval.

Builds the method-specific document URL for a DID, fetches it with the
caller's aiohttp session and decodes the body into a :class:`DIDDocument`.
Each call makes exactly one request; there is no caching and no retrying.
"""

import asyncio
import logging

from aiohttp import ClientError, ClientSession
from pydantic import ValidationError

from social.athost.identity.did import DID
from social.athost.identity.document import DIDDocument
from social.athost.identity.errors import DecodeError, DocumentMismatch, NetworkError
from social.athost.identity.methods import DEFAULT_PLC_HOSTNAME, METHODS

logger = logging.getLogger(__name__)


def document_url(did: DID, plc_hostname: str = DEFAULT_PLC_HOSTNAME) -> str:
    """Build the URL the DID document for a DID is served from.

    Args:
        did: DID to locate
        plc_hostname: PLC directory hostname used for did:plc DIDs

    Returns:
        ``https://<domain>/.well-known/did.json`` for did:web,
        ``https://<plc_hostname>/<did>`` for did:plc
    """
    return METHODS[did.method.value].build_url(did, plc_hostname)


async def fetch_document(
    session: ClientSession,
    did: DID,
    plc_hostname: str = DEFAULT_PLC_HOSTNAME,
    verify_id: bool = False,
) -> DIDDocument:
    """Fetch and decode the DID document of a DID.

    The response status is not inspected: any body that decodes into a DID
    document is accepted.

    Args:
        session: HTTP client session, carrying any timeout the caller wants
        did: DID to resolve
        plc_hostname: PLC directory hostname used for did:plc DIDs
        verify_id: Reject documents whose ``id`` is not the requested DID

    Returns:
        The decoded DID document

    Raises:
        NetworkError: If the request fails at the transport level
        DecodeError: If the body is not a valid DID document
        DocumentMismatch: If ``verify_id`` is set and the document names another DID
    """
    url = document_url(did, plc_hostname)
    logger.debug("Fetching DID document for %s from %s", did, url)

    try:
        async with session.get(url) as resp:
            body = await resp.read()
    except (ClientError, asyncio.TimeoutError) as e:
        raise NetworkError(url, str(e) or type(e).__name__) from e

    try:
        document = DIDDocument.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(url, f"{e.error_count()} validation error(s)") from e

    if verify_id and document.id != did.canonical_string():
        raise DocumentMismatch(url, did.canonical_string(), document.id)

    return document
