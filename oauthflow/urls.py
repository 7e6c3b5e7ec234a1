from __future__ import annotations

import urllib.parse

from oauthflow.config import ClientConfiguration


def append_query_params(url: str, params: dict[str, str]) -> str:
    parsed = urllib.parse.urlparse(url)
    existing = urllib.parse.parse_qs(parsed.query, keep_blank_values=True)
    for key, value in params.items():
        existing[key] = [value]

    new_query = urllib.parse.urlencode(existing, doseq=True)
    return urllib.parse.urlunparse(parsed._replace(query=new_query))


def build_authorization_url(config: ClientConfiguration, state: str) -> str:
    return append_query_params(
        config.authorization_url,
        {
            "client_id": config.client_id,
            "response_type": "code",
            "response_mode": "query",
            "state": state,
            "scope": config.scopes,
            "redirect_uri": config.redirect_uri,
        },
    )
