from __future__ import annotations

from starlette.requests import Request
from starlette.responses import JSONResponse, RedirectResponse, Response
from starlette.routing import Route

from oauthflow.errors import ExchangeError
from oauthflow.flow import OAuthFlowController

from .constants import APP_VERSION, LOGGER

AUTHORIZE_PATH = "/oauth/authorize"
CALLBACK_PATH = "/oauth/callback"
REFRESH_PATH = "/oauth/refresh"


class OAuthRoutes:
    def __init__(self, flow: OAuthFlowController) -> None:
        self.flow = flow

    def routes(self) -> list[Route]:
        return [
            Route("/", self._handle_index, methods=["GET"]),
            Route("/health", self._handle_health, methods=["GET"]),
            Route(AUTHORIZE_PATH, self._handle_authorize, methods=["GET"]),
            Route(CALLBACK_PATH, self._handle_callback, methods=["GET"]),
            Route(REFRESH_PATH, self._handle_refresh, methods=["POST"]),
        ]

    # -- handlers --------------------------------------------------------------

    async def _handle_index(self, request: Request) -> Response:
        del request
        config = self.flow.config
        return JSONResponse(
            {
                "client_id": config.client_id,
                "redirect_uri": config.redirect_uri,
                "scope": config.scopes,
                "authorize_path": AUTHORIZE_PATH,
            }
        )

    async def _handle_health(self, request: Request) -> Response:
        del request
        return JSONResponse({"status": "ok", "version": APP_VERSION})

    async def _handle_authorize(self, request: Request) -> Response:
        del request
        return RedirectResponse(url=self.flow.begin_authorization(), status_code=302)

    async def _handle_callback(self, request: Request) -> Response:
        provider_error = request.query_params.get("error")
        if provider_error:
            LOGGER.warning("Authorization server returned error=%s", provider_error)
            description = request.query_params.get("error_description") or provider_error
            return self._error("authorization_denied", description, 400)

        try:
            token = await self.flow.handle_callback(
                code=request.query_params.get("code"),
                state=request.query_params.get("state"),
                scope=request.query_params.get("scope"),
            )
        except ExchangeError as error:
            return self._error(error.code, error.reason, error.status_code)

        return JSONResponse(token.to_dict())

    async def _handle_refresh(self, request: Request) -> Response:
        form = await request.form()
        refresh_token = form.get("refresh_token") or request.query_params.get("refresh_token")

        try:
            token = await self.flow.refresh_token(str(refresh_token or ""))
        except ExchangeError as error:
            return self._error(error.code, error.reason, error.status_code)

        return JSONResponse(token.to_dict())

    # -- helpers ---------------------------------------------------------------

    def _error(self, code: str, description: str, status_code: int) -> Response:
        return JSONResponse(
            {"error": code, "error_description": description},
            status_code=status_code,
        )
