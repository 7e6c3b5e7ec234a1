from __future__ import annotations

import uvicorn
from starlette.applications import Starlette

from oauthflow.config import ClientConfiguration
from oauthflow.flow import OAuthFlowController
from oauthflow.pending_requests import PendingRequestStore
from oauthflow.token_exchange import TokenExchangeClient
from oauthweb.constants import LOGGER
from oauthweb.env import (
    get_bind_address,
    get_http_timeout,
    get_state_ttl,
    load_client_configuration,
    load_env,
    setup_logging,
)
from oauthweb.routes import OAuthRoutes


def create_app(
    config: ClientConfiguration | None = None,
    *,
    store: PendingRequestStore | None = None,
    exchange_client: TokenExchangeClient | None = None,
) -> Starlette:
    if config is None:
        load_env()
        setup_logging()
        config = load_client_configuration()

    if store is None:
        store = PendingRequestStore(ttl_seconds=get_state_ttl())
    if exchange_client is None:
        exchange_client = TokenExchangeClient(config, timeout=get_http_timeout())

    flow = OAuthFlowController(config, store=store, exchange_client=exchange_client)
    app = Starlette(routes=OAuthRoutes(flow).routes())
    app.state.flow = flow
    LOGGER.info(
        "OAuth client ready client_id=%s token_url=%s",
        config.client_id,
        config.token_url,
    )
    return app


def main() -> None:
    host, port = get_bind_address()
    app = create_app()
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
