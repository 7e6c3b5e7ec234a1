from __future__ import annotations

import logging

LOGGER = logging.getLogger("oauthflow")

DEFAULT_HTTP_TIMEOUT_SECONDS = 10.0
DEFAULT_STATE_TTL_SECONDS = 600
