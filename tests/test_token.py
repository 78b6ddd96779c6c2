from __future__ import annotations

import time
from pathlib import Path

import pytest

from simplejwt import token
from simplejwt.codec import b64url_encode
from simplejwt.config import load_config
from simplejwt.errors import ErrorKind, ExpiredError, SignatureError, ValidationError
from simplejwt.parser import parse

SECRET = "Hello123$$Abc!!4538"


def test_create_and_validate() -> None:
    t = token.create(42, SECRET, int(time.time()) + 300, "example.com")
    assert token.validate(t, SECRET) is True
    assert token.validate(t, "Other123$$Abc!!4538") is False
    assert token.validate("garbage", SECRET) is False


def test_create_sets_expected_claims() -> None:
    exp = int(time.time()) + 300
    t = token.create(42, SECRET, exp, "example.com")
    payload = token.get_payload(t, SECRET)
    assert payload["user_id"] == 42
    assert payload["iss"] == "example.com"
    assert payload["exp"] == exp
    assert isinstance(payload["iat"], int)
    assert token.get_header(t, SECRET) == {"alg": "HS256", "typ": "JWT"}


def test_create_rejects_weak_secret_and_past_expiration() -> None:
    with pytest.raises(ValidationError) as ei:
        token.create(1, "weak", int(time.time()) + 300, "example.com")
    assert ei.value.kind is ErrorKind.WEAK_SECRET

    with pytest.raises(ValidationError) as ei:
        token.create(1, SECRET, int(time.time()) - 300, "example.com")
    assert ei.value.kind is ErrorKind.EXPIRED


def test_create_from_payload_routes_registered_claims() -> None:
    exp = int(time.time()) + 300
    t = token.create_from_payload(
        {"sub": "user-1", "aud": ["a", "b"], "exp": exp, "role": "admin"}, SECRET
    )
    assert token.get_payload(t, SECRET) == {
        "sub": "user-1",
        "aud": ["a", "b"],
        "exp": exp,
        "role": "admin",
    }


def test_create_from_payload_validates_registered_claims() -> None:
    with pytest.raises(ValidationError) as ei:
        token.create_from_payload({"aud": 42}, SECRET)
    assert ei.value.kind is ErrorKind.INVALID_CLAIM

    with pytest.raises(ValidationError) as ei:
        token.create_from_payload({"exp": 1}, SECRET)
    assert ei.value.kind is ErrorKind.EXPIRED


def test_get_payload_raises_on_invalid_token() -> None:
    t = token.create_from_payload({"sub": "user-1"}, SECRET)
    with pytest.raises(SignatureError):
        token.get_payload(t, "Other123$$Abc!!4538")


def test_parser_returns_parsed_token() -> None:
    t = token.create_from_payload({"sub": "user-1"}, SECRET)
    assert token.parser(t, SECRET).subject == "user-1"


def test_config_drives_algorithm_type_and_policy(tmp_path: Path) -> None:
    (tmp_path / "simplejwt.toml").write_text(
        "\n".join(
            [
                "version = 1",
                "",
                "[token]",
                'type = "at+jwt"',
                'algorithm = "HS512"',
                "",
                "[validation]",
                "enforce_not_before = true",
                "",
            ]
        ),
        encoding="utf-8",
    )
    cfg = load_config(root=tmp_path)

    t = token.create_from_payload({"sub": "user-1"}, SECRET, config=cfg)
    assert parse(t).header == {"alg": "HS512", "typ": "at+jwt"}
    assert token.validate(t, SECRET, config=cfg) is True

    future = token.create_from_payload({"nbf": int(time.time()) + 600}, SECRET, config=cfg)
    assert token.validate(future, SECRET) is True
    assert token.validate(future, SECRET, config=cfg) is False


def test_expired_token_is_rejected() -> None:
    v = token.validator()
    b = token.builder().set_secret(SECRET).set_private_claim("exp", int(time.time()) - 1)
    t = b.build().token
    with pytest.raises(ExpiredError):
        v.validate_token(t, SECRET)
    assert token.validate(t, SECRET) is False


def test_validate_returns_false_for_hostile_payloads() -> None:
    header = "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
    for payload in (b'{"a":' + b"9" * 5000 + b"}", b"[" * 100_000):
        t = f"{header}.{b64url_encode(payload)}.c2ln"
        assert token.validate(t, SECRET) is False


def test_validate_returns_false_for_missing_secret() -> None:
    t = token.create_from_payload({"sub": "user-1"}, SECRET)
    assert token.validate(t, None) is False  # type: ignore[arg-type]
    assert token.validate(t, "") is False
