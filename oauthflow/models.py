from __future__ import annotations

from dataclasses import dataclass

from oauthflow.errors import MalformedResponseError


def _parse_expires_in(value: object) -> int:
    # Some providers send expires_in as a numeric string or a whole float.
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            raise MalformedResponseError("Token response expires_in must be a number.")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedResponseError("Token response missing expires_in.")
    if value < 0:
        raise MalformedResponseError("Token response expires_in must not be negative.")
    return value


@dataclass
class PendingAuthorization:
    state: str
    pending: bool
    created_at: float


@dataclass(frozen=True)
class TokenResult:
    access_token: str
    token_type: str
    refresh_token: str | None
    expires_in: int

    @classmethod
    def from_payload(cls, payload: object) -> "TokenResult":
        if not isinstance(payload, dict):
            raise MalformedResponseError("Token response must be a JSON object.")

        access_token = payload.get("access_token")
        token_type = payload.get("token_type")
        refresh_token = payload.get("refresh_token")
        expires_in = payload.get("expires_in")

        if not isinstance(access_token, str) or not access_token:
            raise MalformedResponseError("Token response missing access_token.")
        if not isinstance(token_type, str) or not token_type:
            raise MalformedResponseError("Token response missing token_type.")
        if refresh_token is not None and not isinstance(refresh_token, str):
            raise MalformedResponseError("Token response refresh_token must be a string.")
        expires_in = _parse_expires_in(expires_in)

        return cls(
            access_token=access_token,
            token_type=token_type,
            refresh_token=refresh_token or None,
            expires_in=expires_in,
        )

    def to_dict(self) -> dict:
        payload = {
            "access_token": self.access_token,
            "token_type": self.token_type,
            "expires_in": self.expires_in,
        }
        if self.refresh_token is not None:
            payload["refresh_token"] = self.refresh_token
        return payload
