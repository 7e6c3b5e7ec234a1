from __future__ import annotations

import logging

LOGGER = logging.getLogger("oauthweb")
APP_VERSION = "0.1.0"

DEFAULT_SCOPES = "openid offline_access"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
