"""simplejwt exception hierarchy.

Keep this module small and dependency-free: it is imported by every other
module and by tests.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    MALFORMED = "MALFORMED"
    BAD_SIGNATURE = "BAD_SIGNATURE"
    EXPIRED = "EXPIRED"
    WEAK_SECRET = "WEAK_SECRET"
    INVALID_CLAIM = "INVALID_CLAIM"
    NOT_READY = "NOT_READY"
    CONFIG = "CONFIG"


class SimpleJWTError(Exception):
    """Base exception for all simplejwt errors."""

    kind: ErrorKind = ErrorKind.MALFORMED

    def __init__(self, message: str, *, kind: ErrorKind | None = None) -> None:
        super().__init__(message)
        if kind is not None:
            self.kind = kind


class DecodeError(SimpleJWTError):
    """Raised when a token segment is not valid base64url or JSON."""

    kind = ErrorKind.MALFORMED


class EncodeError(SimpleJWTError):
    """Raised when a header or payload value cannot be serialized to JSON."""

    kind = ErrorKind.INVALID_CLAIM


class SignatureError(SimpleJWTError):
    """Raised when a recomputed signature does not match the token's."""

    kind = ErrorKind.BAD_SIGNATURE


class ExpiredError(SimpleJWTError):
    """Raised when a token's `exp` claim is not in the future."""

    kind = ErrorKind.EXPIRED


class ValidationError(SimpleJWTError):
    """Raised for rejected input; `kind` says which rule failed."""


class SimpleJWTConfigError(SimpleJWTError):
    """Raised for invalid user configuration."""

    kind = ErrorKind.CONFIG
