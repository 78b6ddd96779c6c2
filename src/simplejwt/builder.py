"""Fluent construction of signed tokens.

Setters validate their own input eagerly and return the builder, so claims
can be chained::

    jwt = (
        Builder()
        .set_secret("Hello123$$Abc!!4538")
        .set_issuer("example.com")
        .set_expiration(int(time.time()) + 300)
        .build()
    )
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from simplejwt.codec import b64url_encode, json_encode
from simplejwt.errors import ErrorKind, ValidationError
from simplejwt.jwt import Jwt
from simplejwt.signer import Signer
from simplejwt.validator import (
    SECRET_MIN_LENGTH,
    SECRET_SPECIAL_CHARS,
    Validator,
    is_timestamp,
)

logger = logging.getLogger("simplejwt.builder")


def _is_audience(value: object) -> bool:
    if isinstance(value, str):
        return True
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return all(isinstance(v, str) for v in value)
    return False


class Builder:
    def __init__(
        self,
        token_type: str = "JWT",
        validator: Validator | None = None,
        signer: Signer | None = None,
    ) -> None:
        self._type = token_type
        self._validator = validator if validator is not None else Validator()
        self._signer = signer if signer is not None else Signer()
        self._header: dict[str, Any] = {}
        self._payload: dict[str, Any] = {}
        self._secret = ""

    # Header

    def set_content_type(self, content_type: str) -> Builder:
        self._header["cty"] = content_type
        return self

    def set_header_claim(self, key: str, value: Any) -> Builder:
        self._header[key] = value
        return self

    def get_header(self) -> dict[str, Any]:
        """Return custom header claims followed by `alg` and `typ`."""

        header = {k: v for k, v in self._header.items() if k not in ("alg", "typ")}
        header["alg"] = self._signer.get_algorithm()
        header["typ"] = self._type
        return header

    # Secret

    def set_secret(self, secret: str) -> Builder:
        if not self._validator.secret(secret):
            raise ValidationError(
                "weak secret: it must be at least "
                f"{SECRET_MIN_LENGTH} characters long, contain lower and upper case "
                f"letters, a number and one of {SECRET_SPECIAL_CHARS}",
                kind=ErrorKind.WEAK_SECRET,
            )
        self._secret = secret
        return self

    # Payload

    def set_issuer(self, issuer: str) -> Builder:
        self._payload["iss"] = issuer
        return self

    def set_subject(self, subject: str) -> Builder:
        self._payload["sub"] = subject
        return self

    def set_audience(self, audience: str | Sequence[str]) -> Builder:
        if not _is_audience(audience):
            raise ValidationError(
                "invalid audience: expected a string or a list of strings",
                kind=ErrorKind.INVALID_CLAIM,
            )
        self._payload["aud"] = audience if isinstance(audience, str) else list(audience)
        return self

    def set_expiration(self, timestamp: int) -> Builder:
        if not is_timestamp(timestamp):
            raise ValidationError(
                "invalid expiration: expected an integer unix timestamp",
                kind=ErrorKind.INVALID_CLAIM,
            )
        if not self._validator.expiration(timestamp):
            raise ValidationError(
                "already expired: the expiration timestamp is not in the future",
                kind=ErrorKind.EXPIRED,
            )
        self._payload["exp"] = timestamp
        return self

    def set_not_before(self, not_before: int) -> Builder:
        self._payload["nbf"] = not_before
        return self

    def set_issued_at(self, issued_at: int) -> Builder:
        self._payload["iat"] = issued_at
        return self

    def set_jwt_id(self, jwt_id: str) -> Builder:
        self._payload["jti"] = jwt_id
        return self

    def set_private_claim(self, key: str, value: Any) -> Builder:
        self._payload[key] = value
        return self

    def get_payload(self) -> dict[str, Any]:
        return dict(self._payload)

    # Output

    def build(self) -> Jwt:
        if not self._secret:
            raise ValidationError("no secret set", kind=ErrorKind.NOT_READY)

        header_json = json_encode(self.get_header())
        payload_json = json_encode(self.get_payload())
        signature = self._signer.signature(header_json, payload_json, self._secret)

        token = ".".join(
            [
                b64url_encode(header_json.encode("utf-8")),
                b64url_encode(payload_json.encode("utf-8")),
                signature,
            ]
        )
        logger.debug("built %s token with %d payload claims", self._type, len(self._payload))
        return Jwt(token, self._secret)

    def reset(self) -> Builder:
        """Clear header, payload and secret so the builder can be reused."""

        self._header = {}
        self._payload = {}
        self._secret = ""
        return self
