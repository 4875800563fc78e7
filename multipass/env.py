from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from .constants import ENV_DEBUG, ENV_FILE, ENV_SECRET, ENV_STORE_URL, LOGGER
from .errors import ConfigurationError
from .urls import parse_store_url


def is_truthy(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def load_env(env_path: Path = ENV_FILE) -> bool:
    if not env_path.exists():
        return False
    return load_dotenv(env_path, override=True)


def validate_env() -> None:
    required = (ENV_SECRET, ENV_STORE_URL)
    missing = [key for key in required if not os.getenv(key, "").strip()]
    if missing:
        raise ConfigurationError(
            f"Missing required environment variables: {', '.join(missing)}"
        )

    try:
        parse_store_url(os.getenv(ENV_STORE_URL, ""))
    except ConfigurationError as exc:
        raise ConfigurationError(
            f"{ENV_STORE_URL} must be an absolute URL (for example: "
            "https://your-store.myshopify.com)."
        ) from exc


def setup_logging() -> bool:
    debug_enabled = is_truthy(os.getenv(ENV_DEBUG))
    if debug_enabled:
        logging.basicConfig(level=logging.INFO)
        LOGGER.setLevel(logging.INFO)
    return debug_enabled
