from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from simplejwt import token
from simplejwt.builder import Builder
from simplejwt.claims import Claims
from simplejwt.config import SimpleJWTConfig, default_config, load_config
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
from simplejwt.jwt import Jwt
from simplejwt.parser import ParsedToken, parse
from simplejwt.signer import Signer
from simplejwt.validator import Validator


def _package_version() -> str:
    try:
        return version("simplejwt")
    except PackageNotFoundError:
        # Running from a source checkout, or otherwise not installed.
        return "0.0.0"


__version__ = _package_version()

__all__ = [
    "__version__",
    "Builder",
    "Claims",
    "DecodeError",
    "EncodeError",
    "ErrorKind",
    "ExpiredError",
    "Jwt",
    "ParsedToken",
    "SignatureError",
    "Signer",
    "SimpleJWTConfig",
    "SimpleJWTConfigError",
    "SimpleJWTError",
    "ValidationError",
    "Validator",
    "default_config",
    "load_config",
    "parse",
    "token",
]
