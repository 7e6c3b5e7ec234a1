from __future__ import annotations

import httpx

from oauthflow.config import ClientConfiguration
from oauthflow.constants import DEFAULT_HTTP_TIMEOUT_SECONDS, LOGGER
from oauthflow.errors import (
    ExchangeRejectedError,
    InvalidInputError,
    MalformedResponseError,
    TransportError,
)
from oauthflow.http import build_http_client
from oauthflow.models import TokenResult


def _rejection_reason(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict) and isinstance(payload.get("error"), str):
        description = payload.get("error_description")
        if isinstance(description, str) and description:
            return f"{payload['error']}: {description}"
        return payload["error"]

    text = response.text.strip()
    return text or response.reason_phrase


class TokenExchangeClient:
    def __init__(
        self,
        config: ClientConfiguration,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
    ) -> None:
        self.config = config
        self.timeout = timeout
        self._client = client

    async def exchange_code(self, code: str) -> TokenResult:
        return await self._token_request(
            {
                "client_id": self.config.client_id,
                "client_secret": self.config.client_secret,
                "scope": self.config.scopes,
                "code": code,
                "redirect_uri": self.config.redirect_uri,
                "grant_type": "authorization_code",
            }
        )

    async def refresh(self, refresh_token: str) -> TokenResult:
        if not refresh_token:
            raise InvalidInputError("Invalid refresh token")

        return await self._token_request(
            {
                "client_id": self.config.client_id,
                "client_secret": self.config.client_secret,
                "scope": self.config.scopes,
                "refresh_token": refresh_token,
                "redirect_uri": self.config.redirect_uri,
                "grant_type": "refresh_token",
            }
        )

    async def _token_request(self, payload: dict[str, str]) -> TokenResult:
        grant_type = payload["grant_type"]
        own_client = self._client is None
        http_client = self._client or build_http_client(timeout=self.timeout)

        try:
            response = await http_client.post(
                self.config.token_url,
                data=payload,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except httpx.TimeoutException as error:
            LOGGER.warning("Token request timed out grant_type=%s", grant_type)
            raise TransportError(
                f"Token endpoint timed out after {self.timeout:g}s ({type(error).__name__}).",
                timed_out=True,
            ) from error
        except httpx.RequestError as error:
            LOGGER.warning(
                "Token request failed grant_type=%s error=%s", grant_type, type(error).__name__
            )
            raise TransportError(f"Could not reach token endpoint: {error}") from error
        finally:
            if own_client:
                await http_client.aclose()

        if not response.is_success:
            reason = _rejection_reason(response)
            LOGGER.warning(
                "Token request rejected grant_type=%s status=%s reason=%s",
                grant_type,
                response.status_code,
                reason,
            )
            raise ExchangeRejectedError(reason, upstream_status=response.status_code)

        try:
            body = response.json()
        except ValueError as error:
            raise MalformedResponseError("Token endpoint returned invalid JSON.") from error

        token = TokenResult.from_payload(body)
        LOGGER.info(
            "Token request succeeded grant_type=%s token_type=%s expires_in=%s",
            grant_type,
            token.token_type,
            token.expires_in,
        )
        return token
