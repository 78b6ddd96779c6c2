from __future__ import annotations

import hashlib
import hmac
from collections.abc import Callable

from simplejwt.codec import b64url_encode
from simplejwt.errors import SimpleJWTConfigError

ALGORITHMS: dict[str, Callable[..., object]] = {
    "HS256": hashlib.sha256,
    "HS384": hashlib.sha384,
    "HS512": hashlib.sha512,
}

DEFAULT_ALGORITHM = "HS256"


class Signer:
    """HMAC signer for the `header.payload` signing input."""

    def __init__(self, algorithm: str = DEFAULT_ALGORITHM) -> None:
        if algorithm not in ALGORITHMS:
            supported = ", ".join(sorted(ALGORITHMS))
            raise SimpleJWTConfigError(
                f"Unsupported algorithm {algorithm!r} (expected one of: {supported})."
            )
        self._algorithm = algorithm
        self._digestmod = ALGORITHMS[algorithm]

    def get_algorithm(self) -> str:
        return self._algorithm

    def sign(self, signing_input: str, secret: str) -> str:
        """Return the base64url MAC of already-encoded `header.payload` text."""

        mac = hmac.new(
            secret.encode("utf-8"),
            signing_input.encode("ascii"),
            self._digestmod,
        ).digest()
        return b64url_encode(mac)

    def signature(self, header_json: str, payload_json: str, secret: str) -> str:
        """Sign JSON header/payload text exactly as `Builder.build` encodes it."""

        signing_input = (
            b64url_encode(header_json.encode("utf-8"))
            + "."
            + b64url_encode(payload_json.encode("utf-8"))
        )
        return self.sign(signing_input, secret)

    def verify(self, signing_input: str, signature: str, secret: str) -> bool:
        return hmac.compare_digest(
            self.sign(signing_input, secret).encode("ascii"),
            signature.encode("utf-8"),
        )
