from __future__ import annotations

import simplejwt


def test_core_classes_are_exported() -> None:
    for name in ("Builder", "Validator", "Signer", "Jwt", "ParsedToken", "Claims"):
        assert hasattr(simplejwt, name)
    assert callable(simplejwt.parse)
    assert callable(simplejwt.token.create)


def test_exceptions_are_exported() -> None:
    from simplejwt import (  # noqa: PLC0415
        DecodeError,
        EncodeError,
        ExpiredError,
        SignatureError,
        SimpleJWTConfigError,
        SimpleJWTError,
        ValidationError,
    )

    for exc in (
        SimpleJWTError,
        DecodeError,
        EncodeError,
        SignatureError,
        ExpiredError,
        ValidationError,
        SimpleJWTConfigError,
    ):
        assert issubclass(exc, Exception)


def test_version_is_a_string() -> None:
    assert isinstance(simplejwt.__version__, str)
