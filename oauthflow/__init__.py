from oauthflow.config import ClientConfiguration
from oauthflow.errors import (
    ExchangeError,
    ExchangeRejectedError,
    InvalidInputError,
    MalformedResponseError,
    StateReplayError,
    TransportError,
    UnknownStateError,
)
from oauthflow.flow import OAuthFlowController
from oauthflow.models import PendingAuthorization, TokenResult
from oauthflow.pending_requests import PendingRequestStore
from oauthflow.token_exchange import TokenExchangeClient
from oauthflow.urls import build_authorization_url

__version__ = "0.1.0"

__all__ = [
    "ClientConfiguration",
    "ExchangeError",
    "ExchangeRejectedError",
    "InvalidInputError",
    "MalformedResponseError",
    "OAuthFlowController",
    "PendingAuthorization",
    "PendingRequestStore",
    "StateReplayError",
    "TokenExchangeClient",
    "TokenResult",
    "TransportError",
    "UnknownStateError",
    "build_authorization_url",
]
