from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Jwt:
    """A token string paired with the secret that signs it."""

    token: str
    secret: str = field(repr=False)

    def get_token(self) -> str:
        return self.token

    def get_secret(self) -> str:
        return self.secret

    def __str__(self) -> str:
        return self.token
