"""The DID value type.

A :class:`DID` is an immutable ``(method, identifier)`` pair whose identifier
has been checked against its method's grammar. Instances are created with
:meth:`DID.parse` or directly from their fields; both paths validate.
"""

import re
from typing import Final, Pattern

from pydantic import BaseModel, ConfigDict, model_validator

from social.athost.identity.errors import DIDSyntaxError, UnsupportedMethod
from social.athost.identity.methods import DIDMethod, lookup_method, validate_identifier

DID_SYNTAX: Final[Pattern[str]] = re.compile(
    r"did:([a-z]+):([A-Za-z0-9_.:%-]*[A-Za-z0-9_.%-])"
)

AT_URI_PREFIX: Final[str] = "at://"


class DID(BaseModel):
    """A validated decentralized identifier."""

    model_config = ConfigDict(frozen=True)

    method: DIDMethod
    identifier: str

    @model_validator(mode="after")
    def check_identifier(self) -> "DID":
        validate_identifier(self.method, self.identifier)
        return self

    @classmethod
    def parse(cls, value: str) -> "DID":
        """Parse a ``did:<method>:<identifier>`` string.

        Args:
            value: DID string to parse

        Returns:
            The parsed DID

        Raises:
            DIDSyntaxError: If the string is not shaped like a DID
            UnsupportedMethod: If the method is not registered
            InvalidIdentifier: If the identifier fails the method's grammar
        """
        if not isinstance(value, str):
            raise DIDSyntaxError(value)
        match = DID_SYNTAX.fullmatch(value)
        if match is None:
            raise DIDSyntaxError(value)

        method_name, identifier = match.groups()
        rule = lookup_method(method_name)
        if rule is None:
            raise UnsupportedMethod(method_name)

        validate_identifier(rule.method, identifier)
        return cls(method=rule.method, identifier=identifier)

    def canonical_string(self) -> str:
        return f"did:{self.method.value}:{self.identifier}"

    def protocol_uri(self) -> str:
        """Return the ``at://`` URI naming this DID."""
        return AT_URI_PREFIX + self.canonical_string()

    def __str__(self) -> str:
        return self.canonical_string()
