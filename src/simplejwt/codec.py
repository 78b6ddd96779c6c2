"""Base64url and JSON helpers shared by the signer, builder and parser."""

from __future__ import annotations

import base64
import binascii
import json
import re
from collections.abc import Mapping
from typing import Any

from simplejwt.errors import DecodeError, EncodeError

_B64URL_RE = re.compile(r"^[A-Za-z0-9_-]*$")


def b64url_encode(data: bytes) -> str:
    """Encode bytes with the URL-safe alphabet and strip `=` padding."""

    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(data: str) -> bytes:
    """Decode unpadded base64url text.

    Padding characters are rejected, as are characters outside the URL-safe
    alphabet and lengths no encoder can produce.
    """

    if not isinstance(data, str) or not _B64URL_RE.match(data):
        raise DecodeError("invalid base64url characters")
    if len(data) % 4 == 1:
        raise DecodeError("invalid base64url length")

    try:
        return base64.urlsafe_b64decode(data + "=" * (-len(data) % 4))
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"invalid base64url: {e}") from e


def json_encode(data: Mapping[str, Any]) -> str:
    """Serialize a claims mapping to compact JSON, preserving key order."""

    try:
        return json.dumps(dict(data), separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as e:
        raise EncodeError(f"claims are not JSON serializable: {e}") from e


def json_decode(data: str | bytes) -> dict[str, Any]:
    """Parse JSON text that must hold an object."""

    try:
        text = data.decode("utf-8") if isinstance(data, bytes) else data
        out = json.loads(text)
    except UnicodeDecodeError as e:
        raise DecodeError("segment is not valid UTF-8") from e
    except (ValueError, RecursionError) as e:
        raise DecodeError(f"segment is not valid JSON: {e}") from e

    if not isinstance(out, dict):
        raise DecodeError("segment must decode to a JSON object")
    return out
