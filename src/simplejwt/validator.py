"""Structural, temporal and cryptographic checks for tokens.

The single-purpose checks (`structure`, `expiration`, `secret`, ...) return
booleans so the builder can use them as guards. `validate` runs them in order
against an inbound token and raises a typed `SimpleJWTError` for the first
failure.
"""

from __future__ import annotations

import hmac
import logging
import re
import time
from collections.abc import Callable

from simplejwt.errors import (
    DecodeError,
    ErrorKind,
    ExpiredError,
    SignatureError,
    SimpleJWTConfigError,
    SimpleJWTError,
    ValidationError,
)
from simplejwt.jwt import Jwt
from simplejwt.parser import ParsedToken, parse
from simplejwt.signer import ALGORITHMS, Signer

logger = logging.getLogger("simplejwt.validator")

SECRET_SPECIAL_CHARS = "*&!@%^#$"
SECRET_MIN_LENGTH = 12

_SECRET_RE = re.compile(
    r"^(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])(?=.*[" + re.escape(SECRET_SPECIAL_CHARS) + r"])"
    r".{" + str(SECRET_MIN_LENGTH) + r",}$",
    re.DOTALL,
)


def is_timestamp(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class Validator:
    def __init__(
        self,
        *,
        clock: Callable[[], float] = time.time,
        leeway: int = 0,
        enforce_not_before: bool = False,
    ) -> None:
        if leeway < 0:
            raise SimpleJWTConfigError("leeway must be >= 0")
        self._clock = clock
        self.leeway = leeway
        self.enforce_not_before = enforce_not_before

    def now(self) -> int:
        return int(self._clock())

    def structure(self, token: str) -> bool:
        """Return True if `token` is three decodable, non-empty segments."""

        try:
            parse(token)
        except DecodeError:
            return False
        return True

    def expiration(self, timestamp: int) -> bool:
        """Return True iff `timestamp` is strictly in the future."""

        return timestamp > self.now()

    def not_before(self, timestamp: int) -> bool:
        """Return True iff `timestamp` has been reached."""

        return timestamp <= self.now()

    def secret(self, secret: str) -> bool:
        if not isinstance(secret, str):
            return False
        return _SECRET_RE.match(secret) is not None

    def signature(self, computed: str, provided: str) -> bool:
        """Compare two base64url signatures in constant time."""

        if not isinstance(computed, str) or not isinstance(provided, str):
            return False
        return hmac.compare_digest(computed.encode("utf-8"), provided.encode("utf-8"))

    def validate(self, jwt: Jwt) -> ParsedToken:
        """Fully validate `jwt`, returning its decoded parts on success."""

        try:
            return self._validate(jwt.token, jwt.secret)
        except SimpleJWTError as e:
            logger.debug("token rejected: %s (%s)", e.kind.value, e)
            raise

    def validate_token(self, token: str, secret: str) -> ParsedToken:
        return self.validate(Jwt(token, secret))

    def _validate(self, token: str, secret: str) -> ParsedToken:
        if not isinstance(secret, str) or not secret:
            raise ValidationError("no secret set", kind=ErrorKind.NOT_READY)

        parsed = parse(token)

        alg = parsed.algorithm
        if alg not in ALGORITHMS:
            raise SignatureError(f"unsupported token algorithm: {alg!r}")
        if not Signer(alg).verify(parsed.signing_input, parsed.signature, secret):
            raise SignatureError("signature mismatch")

        exp = parsed.payload.get("exp")
        if exp is not None:
            if not is_timestamp(exp):
                raise ValidationError(
                    "exp claim must be an integer timestamp", kind=ErrorKind.INVALID_CLAIM
                )
            if not self.expiration(exp + self.leeway):
                raise ExpiredError("token has expired")

        nbf = parsed.payload.get("nbf")
        if self.enforce_not_before and nbf is not None:
            if not is_timestamp(nbf):
                raise ValidationError(
                    "nbf claim must be an integer timestamp", kind=ErrorKind.INVALID_CLAIM
                )
            if not self.not_before(nbf - self.leeway):
                raise ValidationError("token not yet valid", kind=ErrorKind.INVALID_CLAIM)

        return parsed
