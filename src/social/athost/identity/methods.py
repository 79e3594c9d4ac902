"""Per-method identifier grammars and document locations.

Each supported DID method is described by a :class:`MethodRule` holding the
compiled identifier pattern and the function that builds the URL its DID
document is served from. Rules live in the read-only :data:`METHODS` table,
keyed by method name; parsing and fetching look methods up there instead of
branching on them.
"""

import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Final, Mapping, Optional, Pattern

from social.athost.identity.errors import InvalidIdentifier

if TYPE_CHECKING:
    from social.athost.identity.did import DID


DEFAULT_PLC_HOSTNAME: Final[str] = "plc.directory"


class DIDMethod(str, Enum):
    """Supported DID methods, valued by their name in the DID string."""

    web = "web"
    plc = "plc"


@dataclass(frozen=True)
class MethodRule:
    """Identifier grammar and document URL builder for one DID method."""

    method: DIDMethod
    pattern: Pattern[str]
    build_url: Callable[["DID", str], str]

    def matches(self, identifier: str) -> bool:
        return self.pattern.fullmatch(identifier) is not None


# Two or more DNS labels, no empty label and no leading or trailing hyphen.
_DNS_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?"
WEB_IDENTIFIER: Final[Pattern[str]] = re.compile(
    rf"{_DNS_LABEL}(?:\.{_DNS_LABEL})+"
)
PLC_IDENTIFIER: Final[Pattern[str]] = re.compile(r"[a-z0-9]+")


def web_document_url(did: "DID", plc_hostname: str) -> str:
    return f"https://{did.identifier}/.well-known/did.json"


def plc_document_url(did: "DID", plc_hostname: str) -> str:
    return f"https://{plc_hostname}/{did.canonical_string()}"


METHODS: Final[Mapping[str, MethodRule]] = MappingProxyType(
    {
        DIDMethod.web.value: MethodRule(
            DIDMethod.web, WEB_IDENTIFIER, web_document_url
        ),
        DIDMethod.plc.value: MethodRule(
            DIDMethod.plc, PLC_IDENTIFIER, plc_document_url
        ),
    }
)


def lookup_method(name: str) -> Optional[MethodRule]:
    """Return the rule registered for a method name, if any."""
    return METHODS.get(name)


def validate_identifier(method: DIDMethod, identifier: str) -> str:
    """Check an identifier against its method's grammar.

    Args:
        method: DID method the identifier belongs to
        identifier: Method-specific identifier, without the ``did:<method>:`` prefix

    Returns:
        The identifier, unchanged

    Raises:
        InvalidIdentifier: If the identifier is empty or does not match
    """
    rule = METHODS[DIDMethod(method).value]
    if not identifier or not rule.matches(identifier):
        raise InvalidIdentifier(rule.method.value, identifier)
    return identifier
