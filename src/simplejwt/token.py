"""Module-level helpers for the common create/validate round trip.

Each helper builds fresh collaborators, so nothing here holds state between
calls. Pass a `SimpleJWTConfig` to use non-default algorithms or validation
policy.
"""

from __future__ import annotations

import time
from collections.abc import Mapping
from typing import Any

from simplejwt.builder import Builder
from simplejwt.config import SimpleJWTConfig, default_config
from simplejwt.errors import SimpleJWTError
from simplejwt.jwt import Jwt
from simplejwt.parser import ParsedToken
from simplejwt.signer import Signer
from simplejwt.validator import Validator

_REGISTERED_SETTERS = {
    "iss": "set_issuer",
    "sub": "set_subject",
    "aud": "set_audience",
    "exp": "set_expiration",
    "nbf": "set_not_before",
    "iat": "set_issued_at",
    "jti": "set_jwt_id",
}


def validator(config: SimpleJWTConfig | None = None) -> Validator:
    cfg = config or default_config()
    return Validator(
        leeway=cfg.validation.leeway,
        enforce_not_before=cfg.validation.enforce_not_before,
    )


def builder(config: SimpleJWTConfig | None = None) -> Builder:
    cfg = config or default_config()
    return Builder(cfg.token.type, validator(cfg), Signer(cfg.token.algorithm))


def create(
    user_id: str | int,
    secret: str,
    expiration: int,
    issuer: str,
    *,
    config: SimpleJWTConfig | None = None,
) -> str:
    """Create a token carrying `user_id`, `iss`, `exp` and `iat` claims."""

    return (
        builder(config)
        .set_secret(secret)
        .set_private_claim("user_id", user_id)
        .set_issuer(issuer)
        .set_expiration(expiration)
        .set_issued_at(int(time.time()))
        .build()
        .token
    )


def create_from_payload(
    payload: Mapping[str, Any],
    secret: str,
    *,
    config: SimpleJWTConfig | None = None,
) -> str:
    """Create a token from a claims mapping.

    Registered claims go through their builder setters and are validated
    (`exp` must be in the future, `aud` must be a string or list of strings);
    any other key becomes a private claim.
    """

    b = builder(config).set_secret(secret)
    for key, value in payload.items():
        setter = _REGISTERED_SETTERS.get(key)
        if setter is None:
            b.set_private_claim(key, value)
        else:
            getattr(b, setter)(value)
    return b.build().token


def parser(token: str, secret: str, *, config: SimpleJWTConfig | None = None) -> ParsedToken:
    """Validate `token` and return its decoded parts."""

    return validator(config).validate(Jwt(token, secret))


def validate(token: str, secret: str, *, config: SimpleJWTConfig | None = None) -> bool:
    """Return True if `token` is well formed, correctly signed and unexpired."""

    try:
        parser(token, secret, config=config)
    except SimpleJWTError:
        return False
    return True


def get_header(token: str, secret: str, *, config: SimpleJWTConfig | None = None) -> dict[str, Any]:
    return parser(token, secret, config=config).header


def get_payload(
    token: str, secret: str, *, config: SimpleJWTConfig | None = None
) -> dict[str, Any]:
    return parser(token, secret, config=config).payload
