from __future__ import annotations

import logging
from pathlib import Path

LOGGER = logging.getLogger("multipass")
APP_VERSION = "0.1.0"

KEY_SIZE = 16
DIGEST_SIZE = 32
IV_SIZE = 16
BLOCK_SIZE = 16
SIGNATURE_SIZE = 32
MIN_TOKEN_BYTES = IV_SIZE + BLOCK_SIZE + SIGNATURE_SIZE

LOGIN_PATH_TEMPLATE = "/account/login/multipass/{token}"

ENV_SECRET = "MULTIPASS_SECRET"
ENV_STORE_URL = "MULTIPASS_STORE_URL"
ENV_DEBUG = "MULTIPASS_DEBUG"
ENV_FILE = Path(__file__).resolve().parent.parent / ".env"
