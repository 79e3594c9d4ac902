"""
Identity Resolution

This package resolves AT Protocol decentralized identifiers (DIDs) to their
DID documents and handles.

Key Components:
- methods.py: Identifier grammars and document locations per DID method
- did.py: The validated DID value type
- document.py: DID document models
- fetch.py: Document retrieval over HTTP
- handle.py: Handle resolution
- errors.py: Error taxonomy
- __main__.py: CLI interface for resolution

Resolution Types:
1. did:plc resolution via the PLC directory (https://plc.directory/<did>)
2. did:web resolution via well-known endpoints (https://<domain>/.well-known/did.json)

The resolution flow follows these steps:
1. Parse and validate the DID string
2. Build the document URL for the DID method
3. Fetch and decode the DID document
4. Return the first alsoKnownAs entry as the handle
"""

from social.athost.identity.did import DID
from social.athost.identity.document import DIDDocument, Service, VerificationMethod
from social.athost.identity.errors import (
    DecodeError,
    DIDError,
    DIDSyntaxError,
    DocumentMismatch,
    InvalidIdentifier,
    MissingHandle,
    NetworkError,
    UnsupportedMethod,
)
from social.athost.identity.fetch import document_url, fetch_document
from social.athost.identity.handle import (
    ResolvedSubject,
    handle_from_document,
    resolve_handle,
    resolve_subject,
)
from social.athost.identity.methods import METHODS, DIDMethod, MethodRule

__all__ = [
    "DID",
    "DIDDocument",
    "DIDError",
    "DIDMethod",
    "DIDSyntaxError",
    "DecodeError",
    "DocumentMismatch",
    "InvalidIdentifier",
    "METHODS",
    "MethodRule",
    "MissingHandle",
    "NetworkError",
    "ResolvedSubject",
    "Service",
    "UnsupportedMethod",
    "VerificationMethod",
    "document_url",
    "fetch_document",
    "handle_from_document",
    "resolve_handle",
    "resolve_subject",
]
