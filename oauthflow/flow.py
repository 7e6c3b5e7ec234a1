from __future__ import annotations

import uuid

from oauthflow.config import ClientConfiguration
from oauthflow.constants import LOGGER
from oauthflow.errors import ExchangeError, InvalidInputError
from oauthflow.models import TokenResult
from oauthflow.pending_requests import PendingRequestStore
from oauthflow.token_exchange import TokenExchangeClient
from oauthflow.urls import build_authorization_url


def parse_state(state: str | None) -> str:
    """Return the canonical form of a state token or raise ``InvalidInputError``."""
    if not state:
        raise InvalidInputError("Invalid authorization request key")
    try:
        return str(uuid.UUID(state))
    except ValueError as error:
        raise InvalidInputError("Invalid authorization request key") from error


class OAuthFlowController:
    def __init__(
        self,
        config: ClientConfiguration,
        *,
        store: PendingRequestStore | None = None,
        exchange_client: TokenExchangeClient | None = None,
    ) -> None:
        self.config = config
        self.store = store if store is not None else PendingRequestStore()
        self.exchange_client = (
            exchange_client if exchange_client is not None else TokenExchangeClient(config)
        )

    def begin_authorization(self) -> str:
        state = self.store.begin()
        LOGGER.info("Authorization request started pending=%s", len(self.store))
        return build_authorization_url(self.config, state)

    async def handle_callback(
        self,
        code: str | None,
        state: str | None,
        scope: str | None = None,
    ) -> TokenResult:
        # Code is checked first so an empty code never consumes the state.
        if not code:
            raise InvalidInputError("Invalid auth code")
        canonical_state = parse_state(state)

        try:
            self.store.consume(canonical_state)
        except ExchangeError as error:
            LOGGER.warning("Authorization callback rejected error=%s", error.code)
            raise

        if scope:
            LOGGER.info("Authorization callback granted scope=%s", scope)
        return await self.exchange_client.exchange_code(code)

    async def refresh_token(self, refresh_token: str | None) -> TokenResult:
        return await self.exchange_client.refresh(refresh_token or "")
