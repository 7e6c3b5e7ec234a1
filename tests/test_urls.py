import urllib.parse

from oauthflow.urls import append_query_params, build_authorization_url
from tests.oauth_helpers import AUTHORIZATION_URL, REDIRECT_URI, _client_config


def _query_pairs(url: str) -> list[tuple[str, str]]:
    return urllib.parse.parse_qsl(urllib.parse.urlparse(url).query, keep_blank_values=True)


def test_build_authorization_url_contains_required_params() -> None:
    url = build_authorization_url(_client_config(), "state-123")

    query = urllib.parse.parse_qs(urllib.parse.urlparse(url).query)

    assert url.startswith(AUTHORIZATION_URL)
    assert query["client_id"] == ["client-123"]
    assert query["response_type"] == ["code"]
    assert query["response_mode"] == ["query"]
    assert query["state"] == ["state-123"]
    assert query["scope"] == ["openid offline_access"]
    assert query["redirect_uri"] == [REDIRECT_URI]


def test_build_authorization_url_preserves_existing_query() -> None:
    config = _client_config(authorization_url="https://auth.example/authorize?foo=bar")

    url = build_authorization_url(config, "S")

    pairs = _query_pairs(url)
    names = [name for name, _ in pairs]
    assert ("foo", "bar") in pairs
    assert ("state", "S") in pairs
    assert sorted(names) == sorted(
        ["foo", "client_id", "response_type", "response_mode", "state", "scope", "redirect_uri"]
    )
    assert urllib.parse.urlparse(url).netloc == "auth.example"
    assert urllib.parse.urlparse(url).path == "/authorize"


def test_build_authorization_url_overwrites_same_named_params() -> None:
    config = _client_config(
        authorization_url="https://auth.example/authorize?client_id=stale&response_type=token"
    )

    url = build_authorization_url(config, "S")

    pairs = _query_pairs(url)
    assert [value for name, value in pairs if name == "client_id"] == ["client-123"]
    assert [value for name, value in pairs if name == "response_type"] == ["code"]


def test_build_authorization_url_does_not_leak_secret() -> None:
    url = build_authorization_url(_client_config(), "S")

    assert "secret-456" not in url
    assert "client_secret" not in url


def test_append_query_params_keeps_blank_values() -> None:
    url = append_query_params("https://a.example/cb?empty=&x=1", {"y": "2"})

    assert _query_pairs(url) == [("empty", ""), ("x", "1"), ("y", "2")]
