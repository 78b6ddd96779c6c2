"""Typed view over the registered payload claims."""

from __future__ import annotations

import pydantic
from pydantic import StrictInt, StrictStr


class Claims(pydantic.BaseModel):
    """Decoded token payload.

    Registered claims are typed; private claims are kept as extra fields and
    are available through `model_extra`.
    """

    model_config = pydantic.ConfigDict(extra="allow", frozen=True)

    iss: StrictStr | None = None  # issuer
    sub: StrictStr | None = None  # subject
    aud: StrictStr | list[StrictStr] | None = None  # audience
    exp: StrictInt | None = None  # expiry (unix timestamp)
    nbf: StrictInt | None = None  # not before (unix timestamp)
    iat: StrictInt | None = None  # issued at (unix timestamp)
    jti: StrictStr | None = None  # token id

    def private_claims(self) -> dict[str, object]:
        return dict(self.model_extra or {})
