from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ClientConfiguration:
    client_id: str
    client_secret: str
    authorization_url: str
    token_url: str
    redirect_uri: str
    scopes: str

    def __repr__(self) -> str:
        return (
            f"ClientConfiguration(client_id={self.client_id!r}, "
            f"authorization_url={self.authorization_url!r}, "
            f"token_url={self.token_url!r}, redirect_uri={self.redirect_uri!r}, "
            f"scopes={self.scopes!r})"
        )
