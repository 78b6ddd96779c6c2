"""Split an inbound token string and decode its segments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pydantic

from simplejwt.claims import Claims
from simplejwt.codec import b64url_decode, json_decode
from simplejwt.errors import DecodeError, ErrorKind, ValidationError


@dataclass(frozen=True, slots=True)
class ParsedToken:
    header: dict[str, Any]
    payload: dict[str, Any]
    signature: str
    signing_input: str

    @property
    def algorithm(self) -> str | None:
        alg = self.header.get("alg")
        return alg if isinstance(alg, str) else None

    @property
    def token_type(self) -> str | None:
        return self.header.get("typ")

    @property
    def content_type(self) -> str | None:
        return self.header.get("cty")

    @property
    def issuer(self) -> str | None:
        return self.payload.get("iss")

    @property
    def subject(self) -> str | None:
        return self.payload.get("sub")

    @property
    def audience(self) -> str | list[str] | None:
        return self.payload.get("aud")

    @property
    def expiration(self) -> int | None:
        return self.payload.get("exp")

    @property
    def not_before(self) -> int | None:
        return self.payload.get("nbf")

    @property
    def issued_at(self) -> int | None:
        return self.payload.get("iat")

    @property
    def jwt_id(self) -> str | None:
        return self.payload.get("jti")

    @property
    def token(self) -> str:
        return f"{self.signing_input}.{self.signature}"

    def claims(self) -> Claims:
        """Validate registered claim types and return a typed model."""

        try:
            return Claims.model_validate(self.payload)
        except pydantic.ValidationError as e:
            raise ValidationError(
                f"invalid registered claim: {e.errors()[0]['loc']}",
                kind=ErrorKind.INVALID_CLAIM,
            ) from e


def split_token(token: str) -> tuple[str, str, str]:
    if not isinstance(token, str):
        raise DecodeError("token must be a str")
    parts = token.split(".")
    if len(parts) != 3:
        raise DecodeError(f"token must have 3 segments, got {len(parts)}")
    if any(not p for p in parts):
        raise DecodeError("token segments must be non-empty")
    return parts[0], parts[1], parts[2]


def parse(token: str) -> ParsedToken:
    """Decode `token` into header, payload and signature.

    Raises `DecodeError` for a wrong segment count, bad base64url in any
    segment, or a header/payload that is not a JSON object. The signature is
    not checked here; see `Validator.validate`.
    """

    header_b64, payload_b64, signature = split_token(token)

    header = json_decode(b64url_decode(header_b64))
    payload = json_decode(b64url_decode(payload_b64))
    b64url_decode(signature)

    return ParsedToken(
        header=header,
        payload=payload,
        signature=signature,
        signing_input=f"{header_b64}.{payload_b64}",
    )
