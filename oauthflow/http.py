from __future__ import annotations

import httpx

from oauthflow.constants import DEFAULT_HTTP_TIMEOUT_SECONDS, LOGGER


async def log_request(request: httpx.Request) -> None:
    # Form bodies carry the client secret and codes; only the request line is logged.
    LOGGER.debug("Token endpoint request %s %s", request.method, request.url)


async def log_response(response: httpx.Response) -> None:
    LOGGER.debug(
        "Token endpoint response %s %s -> %s",
        response.request.method,
        response.request.url,
        response.status_code,
    )


def build_http_client(
    *,
    timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=timeout,
        transport=transport,
        event_hooks={
            "request": [log_request],
            "response": [log_response],
        },
    )
