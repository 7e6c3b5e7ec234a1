import pytest

from tests.oauth_helpers import _client_config


@pytest.fixture
def client_config():
    return _client_config()


@pytest.fixture
def oauth_env(monkeypatch) -> None:
    monkeypatch.setenv("OAUTH_CLIENT_ID", "env-client")
    monkeypatch.setenv("OAUTH_CLIENT_SECRET", "env-secret")
    monkeypatch.setenv("OAUTH_AUTHORIZATION_URL", "https://login.example.com/oauth2/authorize")
    monkeypatch.setenv("OAUTH_TOKEN_URL", "https://login.example.com/oauth2/token")
    monkeypatch.setenv("OAUTH_REDIRECT_URI", "http://localhost:8000/oauth/callback")
    for key in ("OAUTH_SCOPES", "OAUTH_HTTP_TIMEOUT", "OAUTH_STATE_TTL", "APP_HOST", "APP_PORT"):
        monkeypatch.delenv(key, raising=False)
