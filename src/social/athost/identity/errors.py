"""Error taxonomy for DID parsing and resolution.

Every failure raised by this package derives from :class:`DIDError`. Parsing
errors also derive from :class:`ValueError` so that they surface as pydantic
validation errors when a :class:`~social.athost.identity.did.DID` is built
directly from its fields.
"""

from typing import Optional


class DIDError(Exception):
    """Base class for all identity resolution errors."""


class DIDSyntaxError(DIDError, ValueError):
    """The string is not of the form ``did:<method>:<identifier>``."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid DID syntax: {value!r}")


class UnsupportedMethod(DIDError, ValueError):
    """The DID method is not one of the registered methods."""

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"Unsupported DID method: {method!r}")


class InvalidIdentifier(DIDError, ValueError):
    """The identifier does not match the grammar of its method."""

    def __init__(self, method: str, identifier: str):
        self.method = method
        self.identifier = identifier
        super().__init__(f"Invalid identifier for did:{method}: {identifier!r}")


class NetworkError(DIDError):
    """The transport failed while fetching a DID document."""

    def __init__(self, url: str, reason: Optional[str] = None):
        self.url = url
        message = f"Failed to fetch {url}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DecodeError(DIDError):
    """The response body is not a well-formed DID document."""

    def __init__(self, url: str, reason: Optional[str] = None):
        self.url = url
        message = f"Invalid DID document from {url}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DocumentMismatch(DecodeError):
    """The document ``id`` does not name the DID that was requested."""

    def __init__(self, url: str, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(url, f"document id {actual!r} does not match {expected!r}")


class MissingHandle(DIDError):
    """The DID document has no ``alsoKnownAs`` entry."""

    def __init__(self, did: str):
        self.did = did
        super().__init__(f"No handle in DID document for {did}")
