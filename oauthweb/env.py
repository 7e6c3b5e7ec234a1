from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

from oauthflow.config import ClientConfiguration
from oauthflow.constants import (
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    DEFAULT_STATE_TTL_SECONDS,
)
from oauthflow.constants import LOGGER as FLOW_LOGGER

from .constants import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_SCOPES, LOGGER

REQUIRED_ENV = (
    "OAUTH_CLIENT_ID",
    "OAUTH_CLIENT_SECRET",
    "OAUTH_AUTHORIZATION_URL",
    "OAUTH_TOKEN_URL",
    "OAUTH_REDIRECT_URI",
)
URL_ENV = (
    "OAUTH_AUTHORIZATION_URL",
    "OAUTH_TOKEN_URL",
    "OAUTH_REDIRECT_URI",
)

_HTTP_URL = TypeAdapter(AnyHttpUrl)


def is_truthy(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_env_int(key: str, default: int) -> int:
    raw = os.getenv(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{key} must be an integer value.")


def _get_env_float(key: str, default: float) -> float:
    raw = os.getenv(key, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise RuntimeError(f"{key} must be a number.")
    if value <= 0:
        raise RuntimeError(f"{key} must be greater than zero.")
    return value


def load_env() -> None:
    env_path = Path(__file__).resolve().parent.parent / ".env"
    if not env_path.exists():
        return
    load_dotenv(env_path, override=True)


def validate_env() -> None:
    missing = [key for key in REQUIRED_ENV if not os.getenv(key, "").strip()]
    if missing:
        raise RuntimeError(f"Missing required environment variables: {', '.join(missing)}")

    for key in URL_ENV:
        try:
            _HTTP_URL.validate_python(os.getenv(key, "").strip())
        except ValidationError as error:
            raise RuntimeError(
                f"{key} must be a valid http(s) URL (for example: "
                "https://login.example.com/oauth2/authorize)."
            ) from error

    _get_env_float("OAUTH_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT_SECONDS)
    if _get_env_int("OAUTH_STATE_TTL", DEFAULT_STATE_TTL_SECONDS) < 0:
        raise RuntimeError("OAUTH_STATE_TTL must not be negative.")


def load_client_configuration() -> ClientConfiguration:
    validate_env()
    return ClientConfiguration(
        client_id=os.getenv("OAUTH_CLIENT_ID", "").strip(),
        client_secret=os.getenv("OAUTH_CLIENT_SECRET", "").strip(),
        authorization_url=os.getenv("OAUTH_AUTHORIZATION_URL", "").strip(),
        token_url=os.getenv("OAUTH_TOKEN_URL", "").strip(),
        redirect_uri=os.getenv("OAUTH_REDIRECT_URI", "").strip(),
        scopes=" ".join(os.getenv("OAUTH_SCOPES", DEFAULT_SCOPES).split()),
    )


def get_http_timeout() -> float:
    return _get_env_float("OAUTH_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT_SECONDS)


def get_state_ttl() -> int | None:
    ttl = _get_env_int("OAUTH_STATE_TTL", DEFAULT_STATE_TTL_SECONDS)
    return ttl or None


def setup_logging() -> bool:
    debug_enabled = is_truthy(os.getenv("OAUTH_DEBUG", "1"))
    if debug_enabled:
        logging.basicConfig(level=logging.INFO)
        LOGGER.setLevel(logging.INFO)
        FLOW_LOGGER.setLevel(logging.INFO)
    return debug_enabled


def get_bind_address() -> tuple[str, int]:
    host = os.getenv("APP_HOST", "").strip() or DEFAULT_HOST
    return host, _get_env_int("APP_PORT", DEFAULT_PORT)
