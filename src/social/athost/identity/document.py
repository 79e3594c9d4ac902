"""DID document models.

Field names follow Python conventions; the JSON names used on the wire are
declared as aliases. Unknown fields are ignored and every top-level field is
required.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

PDS_SERVICE_TYPE = "AtprotoPersonalDataServer"
ATPROTO_KEY_FRAGMENT = "#atproto"


class VerificationMethod(BaseModel):
    """Public key entry of a DID document."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    type: str
    controller: str
    public_key_multibase: str = Field(alias="publicKeyMultibase")


class Service(BaseModel):
    """Service endpoint entry of a DID document."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    type: str
    service_endpoint: str = Field(alias="serviceEndpoint")


class DIDDocument(BaseModel):
    """Decoded DID document.

    Lists the aliases, public keys, and service endpoints published for a DID.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    context: List[str] = Field(alias="@context")
    id: str
    also_known_as: List[str] = Field(alias="alsoKnownAs")
    verification_method: List[VerificationMethod] = Field(alias="verificationMethod")
    service: List[Service]

    def handle(self) -> Optional[str]:
        """Return the first alias of the document, if it has any.

        The first entry is taken positionally; it is not checked to be an
        ``at://`` handle URI.
        """
        return next(iter(self.also_known_as), None)

    def pds_endpoint(self) -> Optional[str]:
        """Return the endpoint of the first Personal Data Server service."""
        pds = next(filter(lambda s: s.type == PDS_SERVICE_TYPE, self.service), None)
        if pds is None:
            return None
        return pds.service_endpoint

    def signing_key(self) -> Optional[str]:
        """Return the multibase key of the ``#atproto`` verification method."""
        for method in self.verification_method:
            if method.id.endswith(ATPROTO_KEY_FRAGMENT):
                return method.public_key_multibase
        return None
