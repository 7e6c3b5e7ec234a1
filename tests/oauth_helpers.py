from __future__ import annotations

from starlette.testclient import TestClient

from oauthflow.config import ClientConfiguration
from oauthflow.errors import ExchangeError, InvalidInputError
from oauthflow.flow import OAuthFlowController
from oauthflow.models import TokenResult
from oauthflow.pending_requests import PendingRequestStore
from server import create_app

AUTHORIZATION_URL = "https://login.example.com/oauth2/authorize"
TOKEN_URL = "https://login.example.com/oauth2/token"
REDIRECT_URI = "http://localhost:8000/oauth/callback"


def _client_config(**overrides) -> ClientConfiguration:
    values = {
        "client_id": "client-123",
        "client_secret": "secret-456",
        "authorization_url": AUTHORIZATION_URL,
        "token_url": TOKEN_URL,
        "redirect_uri": REDIRECT_URI,
        "scopes": "openid offline_access",
    }
    values.update(overrides)
    return ClientConfiguration(**values)


class StubExchangeClient:
    def __init__(self, *, error: ExchangeError | None = None) -> None:
        self.error = error
        self.codes: list[str] = []
        self.refresh_tokens: list[str] = []

    async def exchange_code(self, code: str) -> TokenResult:
        self.codes.append(code)
        if self.error is not None:
            raise self.error
        return TokenResult(
            access_token="access-1",
            token_type="bearer",
            refresh_token="refresh-1",
            expires_in=3600,
        )

    async def refresh(self, refresh_token: str) -> TokenResult:
        if not refresh_token:
            raise InvalidInputError("Invalid refresh token")
        self.refresh_tokens.append(refresh_token)
        if self.error is not None:
            raise self.error
        return TokenResult(
            access_token="access-2",
            token_type="bearer",
            refresh_token="refresh-2",
            expires_in=3600,
        )


def _build_flow(*, error: ExchangeError | None = None, store: PendingRequestStore | None = None):
    exchange_client = StubExchangeClient(error=error)
    flow = OAuthFlowController(
        _client_config(),
        store=store,
        exchange_client=exchange_client,
    )
    return flow, exchange_client


def _build_app(*, error: ExchangeError | None = None):
    exchange_client = StubExchangeClient(error=error)
    app = create_app(_client_config(), exchange_client=exchange_client)
    return app.state.flow, TestClient(app), exchange_client
