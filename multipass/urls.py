from __future__ import annotations

import urllib.parse

from .constants import LOGIN_PATH_TEMPLATE
from .errors import ConfigurationError, UrlConstructionError


def _is_absolute(parsed: urllib.parse.ParseResult) -> bool:
    return bool(parsed.scheme and parsed.netloc)


def parse_store_url(url: str) -> str:
    if not isinstance(url, str) or not url.strip():
        raise ConfigurationError("Invalid store URL: expected a non-empty string.")

    url = url.strip()
    try:
        parsed = urllib.parse.urlparse(url)
        # Accessing the port validates it.
        parsed.port
    except ValueError as exc:
        raise ConfigurationError("Invalid store URL: must be a valid URL string.") from exc
    if not _is_absolute(parsed):
        raise ConfigurationError("Invalid store URL: must be a valid URL string.")
    return url


def build_login_url(store_url: str, token: str) -> str:
    if not isinstance(token, str) or not token:
        raise UrlConstructionError("Invalid token generated: expected a non-empty string.")

    path = LOGIN_PATH_TEMPLATE.format(token=urllib.parse.quote(token, safe=""))
    try:
        base = urllib.parse.urlparse(store_url)
        # Rebuilt by hand: urljoin ignores bases whose scheme is not in uses_relative.
        login_url = urllib.parse.urlunparse(
            base._replace(path=path, params="", query="", fragment="")
        )
        parsed = urllib.parse.urlparse(login_url)
    except ValueError as exc:
        raise UrlConstructionError(f"Failed to construct login URL: {exc}") from exc
    if not _is_absolute(parsed):
        raise UrlConstructionError(
            f"Failed to construct login URL: {login_url!r} is not absolute."
        )
    return login_url
