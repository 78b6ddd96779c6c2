import pytest

from simplejwt.errors import (
    DecodeError,
    EncodeError,
    ErrorKind,
    ExpiredError,
    SignatureError,
    SimpleJWTConfigError,
    SimpleJWTError,
    ValidationError,
)


def test_all_errors_are_subclasses_of_simplejwt_error() -> None:
    assert issubclass(DecodeError, SimpleJWTError)
    assert issubclass(EncodeError, SimpleJWTError)
    assert issubclass(SignatureError, SimpleJWTError)
    assert issubclass(ExpiredError, SimpleJWTError)
    assert issubclass(ValidationError, SimpleJWTError)
    assert issubclass(SimpleJWTConfigError, SimpleJWTError)


def test_error_message_is_preserved() -> None:
    err = DecodeError("boom")
    assert str(err) == "boom"


def test_default_kinds() -> None:
    assert DecodeError("x").kind is ErrorKind.MALFORMED
    assert EncodeError("x").kind is ErrorKind.INVALID_CLAIM
    assert SignatureError("x").kind is ErrorKind.BAD_SIGNATURE
    assert ExpiredError("x").kind is ErrorKind.EXPIRED
    assert SimpleJWTConfigError("x").kind is ErrorKind.CONFIG


def test_kind_can_be_set_per_raise() -> None:
    err = ValidationError("weak secret", kind=ErrorKind.WEAK_SECRET)
    assert err.kind is ErrorKind.WEAK_SECRET
    # The class default is untouched.
    assert ValidationError("other").kind is ErrorKind.MALFORMED


def test_can_catch_any_simplejwt_error() -> None:
    def raise_one() -> None:
        raise SignatureError("nope")

    with pytest.raises(SimpleJWTError):
        raise_one()
