"""
Configuration for the identity resolution tools.

Settings are loaded from environment variables with pydantic-settings, with
defaults that resolve against the public PLC directory.
"""

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings

from social.athost.identity.methods import DEFAULT_PLC_HOSTNAME


class Settings(BaseSettings):
    """
    Settings for DID resolution.

    Each field maps to the upper-cased environment variable of the same
    name, for example PLC_HOSTNAME or HTTP_TIMEOUT.
    """

    debug: bool = False
    """
    Enable debug logging.
    Set with DEBUG=true environment variable.
    """

    plc_hostname: str = DEFAULT_PLC_HOSTNAME
    """
    Hostname for the PLC directory service for did:plc resolution.
    Set with PLC_HOSTNAME environment variable.
    """

    http_timeout: float = 10.0
    """
    Total timeout in seconds applied to the HTTP session used for fetching
    DID documents.
    Set with HTTP_TIMEOUT environment variable.
    """

    verify_document_id: bool = False
    """
    Reject fetched DID documents whose id is not the requested DID.
    Set with VERIFY_DOCUMENT_ID environment variable.
    """

    sentry_dsn: Optional[str] = None
    """
    Sentry DSN for error reporting. Optional, no error reporting if not set.
    Set with SENTRY_DSN environment variable.
    """

    @field_validator("plc_hostname", mode="before")
    @classmethod
    def normalize_plc_hostname(cls, v) -> str:
        if isinstance(v, str):
            v = v.strip().removeprefix("https://").rstrip("/")
            if not v:
                raise ValueError("plc_hostname must not be empty")
        return v

    @field_validator("http_timeout")
    @classmethod
    def positive_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("http_timeout must be positive")
        return v
