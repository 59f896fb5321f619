"""
Error kinds raised by the OID registry and the custom OID loader.
"""
from typing import Optional


class OidError(Exception):
    """Base class for certoids errors."""


class OidParseError(OidError):
    """Raised when a reference is neither a registered name nor a valid dotted OID."""
    def __init__(self, message: str, ref: object = None) -> None:
        super().__init__(message)
        self.ref = ref


class OidRegistrationError(OidError, ValueError):
    """Raised when the registry rejects a definition."""


class ParseError(OidError):
    """Raised when a custom OID mapping document is unreadable or malformed."""
    def __init__(self, message: str, path: str, oid: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path
        self.oid = oid


class RegistrationError(OidError, ValueError):
    """Raised when validated custom OIDs cannot be committed to the registry."""
    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path
